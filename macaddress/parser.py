"""
Text notations accepted for EUI-48 addresses.

| format         | example             | grammar                          |
|----------------|---------------------|----------------------------------|
| `canonical`    | `01:02:03:0A:0B:0F` | 6 groups of 2 hex digits, `:`    |
| `hex_string`   | `01-02-03-0A-0B-0F` | 6 groups of 2 hex digits, `-`    |
| `dot_notation` | `0102.030A.0B0F`    | 3 groups of 4 hex digits, `.`    |
| `hexadecimal`  | `0x0102030A0B0F`    | optional `0x`, 12 hex digits     |

Digits are case insensitive. Anything else, whitespace included, is rejected.
"""

import logging
from typing import NamedTuple

from macaddress.config import config
from macaddress.exceptions import ParseError, ParseErrorKind
from macaddress.types.mac_address_format import MacAddressFormat

log = logging.getLogger(__name__)

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
HEX_PREFIXES = ("0x", "0X")
HEXADECIMAL_DIGITS = 12


class GroupGrammar(NamedTuple):
    separator: str
    group_count: int
    group_width: int


GROUP_GRAMMARS: dict[MacAddressFormat, GroupGrammar] = {
    MacAddressFormat.canonical: GroupGrammar(":", 6, 2),
    MacAddressFormat.hex_string: GroupGrammar("-", 6, 2),
    MacAddressFormat.dot_notation: GroupGrammar(".", 3, 4),
}

SEPARATORS: dict[str, MacAddressFormat] = {
    grammar.separator: fmt for fmt, grammar in GROUP_GRAMMARS.items()
}


def detect_format(text: str) -> MacAddressFormat:
    """Pick the notation of `text` from the separators it contains.

    Raises `ParseError` when more than one kind of separator is present.
    """
    _check_type(text)
    return _detect_format(text, 0, len(text))


def parse_octets(text: str, strip: bool | None = None) -> bytes:
    """Parse `text` in any supported notation into its 6 octets.

    `strip` trims surrounding whitespace first; it defaults to
    `config.strip_whitespace`. Errors always refer to `text` as given.
    """
    _check_type(text)
    if strip is None:
        strip = config.strip_whitespace
    start, end = 0, len(text)
    if strip:
        start = len(text) - len(text.lstrip())
        end = start + len(text.strip())
    try:
        return _parse(text, start, end)
    except ParseError as exc:
        log.debug(f"rejected MAC address {text!r}: {exc.msg}")
        raise


def _check_type(text: str) -> None:
    if not isinstance(text, str):
        raise TypeError(f"MAC address must be a str, not {type(text).__name__}")


def _detect_format(text: str, start: int, end: int) -> MacAddressFormat:
    body = text[start:end]
    separators = sorted({c for c in body if c in SEPARATORS}, key=body.index)
    if len(separators) > 1:
        raise ParseError(
            ParseErrorKind.mixed_separators,
            f"Mixed separators; found {' and '.join(repr(s) for s in separators)}",
            text,
            start + body.index(separators[1]),
        )
    if not separators:
        return MacAddressFormat.hexadecimal
    return SEPARATORS[separators[0]]


def _parse(text: str, start: int, end: int) -> bytes:
    if start == end:
        raise ParseError(ParseErrorKind.empty, "Empty MAC address", text)

    digits_start = start
    if text.startswith(HEX_PREFIXES, start, end):
        digits_start += len(HEX_PREFIXES[0])
    _check_characters(text, digits_start, end)

    fmt = _detect_format(text, start, end)
    if fmt is MacAddressFormat.hexadecimal:
        return _parse_hexadecimal(text, digits_start, end)
    if digits_start != start:
        raise ParseError(
            ParseErrorKind.invalid_character,
            f"Invalid character; found {text[start + 1]!r} at offset {start + 1}, "
            f"the 0x prefix is only allowed on bare hexadecimal",
            text,
            start + 1,
        )
    return _parse_groups(text, start, end, GROUP_GRAMMARS[fmt])


def _check_characters(text: str, start: int, end: int) -> None:
    for idx in range(start, end):
        c = text[idx]
        if c not in HEX_DIGITS and c not in SEPARATORS:
            raise ParseError(
                ParseErrorKind.invalid_character,
                f"Invalid character; found {c!r} at offset {idx}",
                text,
                idx,
            )


def _parse_hexadecimal(text: str, start: int, end: int) -> bytes:
    digits = text[start:end]
    if len(digits) != HEXADECIMAL_DIGITS:
        raise ParseError(
            ParseErrorKind.invalid_length,
            f"Invalid length; expecting {HEXADECIMAL_DIGITS} hex digits, "
            f"found {len(digits)}",
            text,
        )
    return bytes.fromhex(digits)


def _parse_groups(text: str, start: int, end: int, grammar: GroupGrammar) -> bytes:
    groups = text[start:end].split(grammar.separator)
    if len(groups) != grammar.group_count:
        raise ParseError(
            ParseErrorKind.invalid_group_count,
            f"Invalid group count; expecting {grammar.group_count} groups "
            f"separated by {grammar.separator!r}, found {len(groups)}",
            text,
        )
    position = start
    for number, group in enumerate(groups, start=1):
        if len(group) != grammar.group_width:
            raise ParseError(
                ParseErrorKind.invalid_group_length,
                f"Invalid group length; expecting {grammar.group_width} hex "
                f"digits in group {number}, found {len(group)}",
                text,
                position,
            )
        position += len(group) + len(grammar.separator)
    return bytes.fromhex("".join(groups))
