from typing import Generator

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from db.models import Base
from db.repositories import ItemRepository
from domain.assets import AssetPrice, PriceTable
from services.oracle import DummyPriceOracle
from tests.constants import CW20_CONTRACT, NATIVE_DENOM, REFERENCE_DENOM

engine: Engine = create_engine(
    "sqlite:///:memory:", connect_args={"check_same_thread": False}, poolclass=StaticPool
)
session_factory = sessionmaker(engine)


@pytest.fixture(scope="function")
def test_session() -> Generator[Session, None, None]:
    with session_factory() as session:
        yield session


@pytest.fixture(scope="function", autouse=True)
def reset_db() -> Generator[None, None, None]:
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture(scope="function")
def asset_prices() -> list[AssetPrice]:
    return [
        AssetPrice(denom=NATIVE_DENOM, price=137_000_000),
        AssetPrice(denom=REFERENCE_DENOM, price=30_000_000),
        # not a real contract
        AssetPrice(denom=CW20_CONTRACT, price=1_000),
    ]


@pytest.fixture(scope="function")
def price_table(asset_prices: list[AssetPrice]) -> PriceTable:
    return PriceTable(asset_prices=asset_prices)


@pytest.fixture(scope="function")
def item_repository(test_session: Session) -> ItemRepository:
    return ItemRepository(test_session)


@pytest.fixture(scope="function")
def oracle(item_repository: ItemRepository) -> DummyPriceOracle:
    return DummyPriceOracle(item_repository)
