from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from typing import Protocol, TypeVar

from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from config import AppSettings, config
from db.repositories import ItemRepository
from domain.assets import PriceTable
from domain.messages import (
    InstantiateMsg,
    QueryMsg,
    ReverseSimulationQuery,
    SimulationQuery,
    Token1ForToken2PriceQuery,
    Token2ForToken1PriceQuery,
    decode_execute_msg,
    decode_query_msg,
    from_binary,
    to_binary,
)
from domain.simulation import reverse_simulate, simulate
from domain.triangulation import DEFAULT_ANCHORS, Anchors, token1_for_token2_price, token2_for_token1_price

logger = logging.getLogger(__name__)

CONTRACT_NAME = "crates.io:dummyprice"
try:
    CONTRACT_VERSION = version("dummy-price-oracle")
except PackageNotFoundError:
    # Running from a source checkout that was never installed.
    CONTRACT_VERSION = "0.0.0"

STATE_KEY = "state"
CONTRACT_INFO_KEY = "contract_info"

M = TypeVar("M", bound=BaseModel)


class StateStore(Protocol):
    def save(self, key: str, value: BaseModel) -> None: ...

    def may_load(self, key: str, model_type: type[M]) -> M | None: ...

    def load(self, key: str, model_type: type[M]) -> M: ...


class ContractVersion(BaseModel):
    contract: str
    version: str


class Attribute(BaseModel):
    key: str
    value: str


class Response(BaseModel):
    """Outcome of a state-changing entry point. The oracle never emits messages."""

    attributes: list[Attribute] = Field(default_factory=list)
    messages: list[dict[str, object]] = Field(default_factory=list)

    def add_attribute(self, key: str, value: str) -> Response:
        self.attributes.append(Attribute(key=key, value=value))
        return self


class DummyPriceOracle:
    """Read-only DEX stand-in answering swap quotes from a fixed price table.

    The price table is loaded from ``store`` on every query and handed to the
    pure functions in ``domain``; nothing is cached between calls.
    """

    def __init__(self, store: StateStore, *, anchors: Anchors = DEFAULT_ANCHORS) -> None:
        self.store = store
        self.anchors = anchors

    def instantiate(self, sender: str, msg: InstantiateMsg) -> Response:
        # Entries are stored verbatim: no uniqueness or positivity checks.
        self.store.save(CONTRACT_INFO_KEY, ContractVersion(contract=CONTRACT_NAME, version=CONTRACT_VERSION))
        self.store.save(STATE_KEY, PriceTable(asset_prices=msg.asset_prices))
        logger.info("Instantiated %s with %d asset prices, owner=%s", CONTRACT_NAME, len(msg.asset_prices), sender)
        return Response().add_attribute("method", "instantiate").add_attribute("owner", sender)

    def instantiate_raw(self, sender: str, data: bytes | str) -> Response:
        return self.instantiate(sender, from_binary(InstantiateMsg, data))

    def execute(self, sender: str, data: bytes | str) -> Response:
        logger.warning("Rejecting execute message from %s", sender)
        decode_execute_msg(data)

    def price_table(self) -> PriceTable:
        return self.store.load(STATE_KEY, PriceTable)

    def contract_version(self) -> ContractVersion:
        return self.store.load(CONTRACT_INFO_KEY, ContractVersion)

    def query(self, msg: QueryMsg) -> bytes:
        table = self.price_table()
        logger.debug("Dispatching query %s", msg.TAG)
        if isinstance(msg, SimulationQuery):
            return to_binary(simulate(table, msg.offer_asset))
        if isinstance(msg, ReverseSimulationQuery):
            return to_binary(reverse_simulate(table, msg.ask_asset))
        if isinstance(msg, Token1ForToken2PriceQuery):
            return to_binary(token1_for_token2_price(table, msg.token1_amount, self.anchors))
        if isinstance(msg, Token2ForToken1PriceQuery):
            return to_binary(token2_for_token1_price(table, msg.token2_amount, self.anchors))
        raise TypeError(f"Unsupported query message: {type(msg).__name__}")

    def query_raw(self, data: bytes | str) -> bytes:
        return self.query(decode_query_msg(data))


def build_oracle(session: Session, settings: AppSettings | None = None) -> DummyPriceOracle:
    settings = settings or config()
    return DummyPriceOracle(ItemRepository(session), anchors=settings.anchors())


__all__ = [
    "CONTRACT_INFO_KEY",
    "CONTRACT_NAME",
    "CONTRACT_VERSION",
    "STATE_KEY",
    "Attribute",
    "ContractVersion",
    "DummyPriceOracle",
    "Response",
    "StateStore",
    "build_oracle",
]
