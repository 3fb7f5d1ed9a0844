import logging

from macaddress.config import config

log = logging.getLogger("macaddress")


def init_log() -> None:
    """Route this package's records, such as rejected parses logged at DEBUG,
    to stderr and to `config.log_file` when set. Safe to call again after
    changing `config`; handlers from a previous call are replaced.
    """
    formatter = logging.Formatter("[%(asctime)s] %(name)s %(levelname)s: %(message)s")
    handlers: list[logging.Handler] = [logging.StreamHandler()] + (
        [logging.FileHandler(config.log_file)] if config.log_file is not None else []
    )
    for handler in log.handlers[:]:
        log.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        log.addHandler(handler)
    log.setLevel(config.log_level)
