from typing import AsyncGenerator

import pytest_asyncio
import sqlalchemy as sa
from sqlalchemy import orm
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from macaddress.data import MacAddressType
from macaddress.types.mac_address import MacAddress

pytest_plugins = ("pytest_asyncio",)

node_macs = [MacAddress(f"{i:012X}") for i in range(1, 10)]
device_macs = [
    MacAddress("00:1A:2B:3C:4D:5E"),
    MacAddress("FF:FF:FF:FF:FF:FF"),
    MacAddress("00:00:00:00:00:01"),
    MacAddress("0A:00:00:00:00:00"),
    MacAddress("00:1A:2B:3C:4D:5F"),
]


class SqlAlchemyBase(orm.DeclarativeBase):
    pass


class Device(SqlAlchemyBase):
    __tablename__ = "devices"

    id: orm.Mapped[int] = orm.mapped_column(primary_key=True)
    name: orm.Mapped[str]
    mac: orm.Mapped[MacAddress] = orm.mapped_column(MacAddressType(), unique=True)


@pytest_asyncio.fixture
async def test_db() -> AsyncGenerator[AsyncSession, None]:
    engine = create_async_engine(
        sa.make_url("sqlite+aiosqlite:///:memory:"), echo=False
    )
    async with engine.begin() as conn:
        await conn.run_sync(SqlAlchemyBase.metadata.create_all)

    factory = orm.sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        session.add_all(
            [Device(name=f"device{i}", mac=mac) for i, mac in enumerate(device_macs)]
        )
        await session.commit()
        yield session

    await engine.dispose()
