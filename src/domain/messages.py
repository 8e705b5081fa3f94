"""JSON wire codec for instantiate, execute and query messages."""

from __future__ import annotations

import json
from typing import NoReturn, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from .assets import Asset, AssetPrice
from .base_types import WIRE_CONTEXT, TaggedVariant
from .errors import MessageDecodeError
from .uint128 import Uint128

T = TypeVar("T")


class InstantiateMsg(BaseModel):
    asset_prices: list[AssetPrice]


class SimulationQuery(TaggedVariant):
    TAG = "simulation"

    offer_asset: Asset


class ReverseSimulationQuery(TaggedVariant):
    TAG = "reverse_simulation"

    ask_asset: Asset


class Token1ForToken2PriceQuery(TaggedVariant):
    TAG = "token1_for_token2_price"

    token1_amount: Uint128


class Token2ForToken1PriceQuery(TaggedVariant):
    TAG = "token2_for_token1_price"

    token2_amount: Uint128


QueryMsg = Union[SimulationQuery, ReverseSimulationQuery, Token1ForToken2PriceQuery, Token2ForToken1PriceQuery]

_QUERY_MSG_ADAPTER: TypeAdapter[QueryMsg] = TypeAdapter(QueryMsg)


def from_binary(model_type: type[T], data: bytes | str) -> T:
    try:
        return TypeAdapter(model_type).validate_json(data, context=WIRE_CONTEXT)
    except ValidationError as exc:
        raise MessageDecodeError(f"Error parsing into type {model_type.__name__}: {exc}") from exc


def to_binary(value: BaseModel) -> bytes:
    return value.model_dump_json().encode("utf-8")


def decode_query_msg(data: bytes | str) -> QueryMsg:
    try:
        return _QUERY_MSG_ADAPTER.validate_json(data, context=WIRE_CONTEXT)
    except ValidationError as exc:
        raise MessageDecodeError(f"Error parsing into type QueryMsg: {exc}") from exc


def decode_execute_msg(data: bytes | str) -> NoReturn:
    """There are no execute messages; every payload is rejected at decode time."""
    try:
        payload = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MessageDecodeError(f"Error parsing into type ExecuteMsg: {exc}") from exc
    variant = next(iter(payload), None) if isinstance(payload, dict) else payload
    raise MessageDecodeError(f"Error parsing into type ExecuteMsg: unknown variant `{variant}`, there are no variants")


__all__ = [
    "InstantiateMsg",
    "QueryMsg",
    "ReverseSimulationQuery",
    "SimulationQuery",
    "Token1ForToken2PriceQuery",
    "Token2ForToken1PriceQuery",
    "decode_execute_msg",
    "decode_query_msg",
    "from_binary",
    "to_binary",
]
