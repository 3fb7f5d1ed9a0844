from __future__ import annotations

from typing import Any, Iterable

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from macaddress.parser import parse_octets
from macaddress.types.mac_address_format import MacAddressFormat

EUI48_LEN = 6


class MacAddress(bytes):
    """An IEEE EUI-48 (MAC-48) address.

    The value is its 6 octets in network order, so equality, hashing and
    ordering are those of the underlying bytes: two addresses are equal iff
    their octets are, and they sort with octet 0 most significant.

    `MacAddress(text)` parses any supported notation, `MacAddress(octets)`
    wraps 6 raw octets and `MacAddress()` is the all-zero address. `str()`
    renders the canonical notation, uppercase.
    """

    __slots__ = ()

    def __new__(cls, value: str | bytes | Iterable[int] | None = None) -> MacAddress:
        if value is None:
            return cls.zero()
        if isinstance(value, str):
            return bytes.__new__(cls, parse_octets(value))
        return bytes.__new__(cls, cls.validate(value))

    @staticmethod
    def validate(octets: bytes | Iterable[int]) -> bytes:
        if isinstance(octets, (str, int)):
            raise TypeError(
                f"MAC address octets must be bytes or an iterable of ints, "
                f"not {type(octets).__name__}"
            )
        octets = bytes(octets)
        if len(octets) != EUI48_LEN:
            raise ValueError(
                f"MAC address must be exactly {EUI48_LEN} bytes long, "
                f"found {len(octets)}"
            )
        return octets

    @classmethod
    def from_octets(cls, octets: bytes | Iterable[int]) -> MacAddress:
        return bytes.__new__(cls, cls.validate(octets))

    @classmethod
    def parse(cls, text: str, strip: bool | None = None) -> MacAddress:
        return bytes.__new__(cls, parse_octets(text, strip))

    @classmethod
    def zero(cls) -> MacAddress:
        """Returns '00:00:00:00:00:00'."""
        return bytes.__new__(cls, bytes(EUI48_LEN))

    @classmethod
    def broadcast(cls) -> MacAddress:
        """Returns 'FF:FF:FF:FF:FF:FF', the broadcast address."""
        return bytes.__new__(cls, b"\xff" * EUI48_LEN)

    @property
    def octets(self) -> tuple[int, ...]:
        return tuple(self)

    def is_zero(self) -> bool:
        return not any(self)

    def is_broadcast(self) -> bool:
        return all(octet == 0xFF for octet in self)

    def to_bytes(self) -> bytes:
        return bytes(self)

    def to_canonical(self) -> str:
        """Returns the format '12:34:56:AB:CD:EF'."""
        return self.hex(":").upper()

    def to_hex_string(self) -> str:
        """Returns the format '12-34-56-AB-CD-EF'."""
        return self.hex("-").upper()

    def to_dot_string(self) -> str:
        """Returns the format '1234.56AB.CDEF'."""
        return self.hex(".", 2).upper()

    def to_hexadecimal(self) -> str:
        """Returns the format '0x123456ABCDEF'."""
        return "0x" + self.hex().upper()

    def to_string(self, fmt: MacAddressFormat = MacAddressFormat.canonical) -> str:
        formatters = {
            MacAddressFormat.canonical: self.to_canonical,
            MacAddressFormat.hex_string: self.to_hex_string,
            MacAddressFormat.dot_notation: self.to_dot_string,
            MacAddressFormat.hexadecimal: self.to_hexadecimal,
        }
        return formatters[MacAddressFormat(fmt)]()

    def __str__(self) -> str:
        return self.to_canonical()

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        try:
            fmt = MacAddressFormat(format_spec)
        except ValueError:
            raise ValueError(
                f"Invalid format specifier '{format_spec}' for {type(self).__name__}"
            ) from None
        return self.to_string(fmt)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate_field,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "format": "mac-address",
            "examples": ["01:02:03:0A:0B:0F"],
        }

    @classmethod
    def _validate_field(cls, value: Any) -> MacAddress:
        if isinstance(value, cls):
            return value
        if isinstance(value, (str, bytes, bytearray)):
            return cls(value)
        raise ValueError(
            f"Value must be a MAC address string or {EUI48_LEN} bytes, "
            f"not {type(value).__name__}"
        )


def parse(text: str, strip: bool | None = None) -> MacAddress:
    return MacAddress.parse(text, strip)
