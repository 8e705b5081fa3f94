from __future__ import annotations

from typing import Union

from pydantic import BaseModel

from .base_types import TaggedVariant
from .errors import UnrecognizedAsset
from .uint128 import Uint128


class NativeToken(TaggedVariant):
    TAG = "native_token"

    denom: str


class Token(TaggedVariant):
    """CW20 token addressed by its contract."""

    TAG = "token"

    contract_addr: str


AssetInfo = Union[NativeToken, Token]


class Asset(BaseModel):
    info: AssetInfo
    amount: Uint128


class AssetPrice(BaseModel):
    # Quoted in the DEX base asset; the oracle itself is unaware of which one that is.
    denom: str
    price: Uint128


def resolve(info: AssetInfo) -> str:
    """Collapse either descriptor variant to the identifier used for price lookup."""
    if isinstance(info, NativeToken):
        return info.denom
    return info.contract_addr


class PriceTable(BaseModel):
    """Ordered price entries, written once at instantiation.

    Duplicate identifiers are allowed; lookups only ever see the first one.
    """

    asset_prices: list[AssetPrice]

    def lookup(self, identifier: str) -> AssetPrice | None:
        for entry in self.asset_prices:
            if entry.denom == identifier:
                return entry
        return None

    def price_of(self, info: AssetInfo) -> int:
        identifier = resolve(info)
        entry = self.lookup(identifier)
        if entry is None:
            raise UnrecognizedAsset(identifier)
        return entry.price


__all__ = [
    "Asset",
    "AssetInfo",
    "AssetPrice",
    "NativeToken",
    "PriceTable",
    "Token",
    "resolve",
]
