from typing import Any

import sqlalchemy as sa
from sqlalchemy.engine import Dialect

from macaddress.types.mac_address import EUI48_LEN, MacAddress


class MacAddressType(sa.types.TypeDecorator):
    """Stores a `MacAddress` as its 6 raw octets.

    Bound values may be `MacAddress` instances or any accepted text notation.
    Binary comparison keeps SQL ordering identical to `MacAddress` ordering.
    """

    impl = sa.LargeBinary
    cache_ok = True

    def __init__(self) -> None:
        super().__init__(length=EUI48_LEN)

    @property
    def python_type(self) -> type[MacAddress]:
        return MacAddress

    def process_bind_param(self, value: Any, dialect: Dialect) -> bytes | None:
        if value is None:
            return None
        return MacAddress(value).to_bytes()

    def process_result_value(
        self, value: bytes | None, dialect: Dialect
    ) -> MacAddress | None:
        if value is None:
            return None
        return MacAddress(value)
