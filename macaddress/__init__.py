"""Represent, parse and format IEEE EUI-48 media access control addresses."""

from macaddress.exceptions import MacAddressException, ParseError, ParseErrorKind
from macaddress.log import init_log
from macaddress.parser import detect_format
from macaddress.types.mac_address import EUI48_LEN, MacAddress, parse
from macaddress.types.mac_address_format import MacAddressFormat

__all__ = [
    "EUI48_LEN",
    "MacAddress",
    "MacAddressException",
    "MacAddressFormat",
    "ParseError",
    "ParseErrorKind",
    "detect_format",
    "init_log",
    "parse",
]
