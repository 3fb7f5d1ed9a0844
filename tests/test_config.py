import logging

import pytest

from macaddress.config import Config, config
from macaddress.exceptions import ParseError
from macaddress.log import init_log
from macaddress.types.mac_address import parse


def test_defaults():
    settings = Config(_env_file=None)
    assert settings.strip_whitespace is False
    assert settings.log_level == "INFO"
    assert settings.log_file is None


def test_from_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MACADDRESS_STRIP_WHITESPACE", "true")
    monkeypatch.setenv("MACADDRESS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("MACADDRESS_LOG_FILE", "logs/macaddress.log")
    settings = Config(_env_file=None)
    assert settings.strip_whitespace is True
    assert settings.log_level == "DEBUG"
    assert settings.log_file == (tmp_path / "logs/macaddress.log").resolve()


def test_relative_log_file_follows_working_directory(tmp_path, monkeypatch):
    monkeypatch.setenv("MACADDRESS_LOG_FILE", "app.log")
    for directory in (tmp_path / "a", tmp_path / "b"):
        directory.mkdir()
        monkeypatch.chdir(directory)
        assert Config(_env_file=None).log_file == (directory / "app.log").resolve()


def test_env_file_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.delenv("MACADDRESS_STRIP_WHITESPACE", raising=False)
    monkeypatch.delenv("MACADDRESS_LOG_FILE", raising=False)
    (tmp_path / "macaddress.env").write_text(
        "MACADDRESS_STRIP_WHITESPACE=true\nMACADDRESS_LOG_FILE=macaddress.log\n"
    )
    monkeypatch.chdir(tmp_path)
    settings = Config()
    assert settings.strip_whitespace is True
    assert settings.log_file == (tmp_path / "macaddress.log").resolve()


def test_init_log(tmp_path, monkeypatch):
    log_file = tmp_path / "macaddress.log"
    monkeypatch.setattr(config, "log_file", log_file)
    monkeypatch.setattr(config, "log_level", "DEBUG")

    package_log = logging.getLogger("macaddress")
    try:
        init_log()
        init_log()
        assert package_log.level == logging.DEBUG
        assert len(package_log.handlers) == 2
        with pytest.raises(ParseError):
            parse("12:34:56")
        for handler in package_log.handlers:
            handler.flush()
        assert (
            "macaddress.parser DEBUG: rejected MAC address '12:34:56'"
            in log_file.read_text()
        )
    finally:
        for handler in package_log.handlers[:]:
            package_log.removeHandler(handler)
            handler.close()
        package_log.setLevel(logging.NOTSET)
