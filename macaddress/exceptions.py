from enum import Enum

from pydantic.dataclasses import dataclass


class MacAddressException(Exception):
    pass


class ParseErrorKind(str, Enum):
    empty = "empty"
    invalid_length = "invalid_length"
    invalid_group_count = "invalid_group_count"
    invalid_group_length = "invalid_group_length"
    invalid_character = "invalid_character"
    mixed_separators = "mixed_separators"


@dataclass
class ParseError(MacAddressException, ValueError):
    """Raised when text cannot be parsed as a MAC address.

    `position` is the offset into `value` of the offending character or
    group, when the failure can be pinned to one.
    """

    kind: ParseErrorKind
    msg: str
    value: str
    position: int | None = None

    def __str__(self) -> str:
        return self.msg
