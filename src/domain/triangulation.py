from __future__ import annotations

from pydantic import BaseModel

from .assets import Asset, NativeToken, PriceTable, resolve
from .errors import AnchorPriceMissing, InvalidSwapAsset
from .simulation import PRICE_SCALE
from .uint128 import Uint128, checked_div, checked_mul

NATIVE_ANCHOR_DENOM = "ujunox"
REFERENCE_ANCHOR_DENOM = "ibc/EAC38D55372F38F1AFD68DF7FE9EF762DCF69F26520643CF3F9D292A738D8034"


class Anchors(BaseModel):
    """The two legs of a triangulated quote: token1 (native) and token2 (reference)."""

    native: str = NATIVE_ANCHOR_DENOM
    reference: str = REFERENCE_ANCHOR_DENOM


DEFAULT_ANCHORS = Anchors()


class Token1ForToken2Response(BaseModel):
    token2_amount: Uint128


class Token2ForToken1Response(BaseModel):
    token1_amount: Uint128


def _anchor_price(table: PriceTable, identifier: str) -> int:
    entry = table.lookup(identifier)
    if entry is None:
        raise AnchorPriceMissing(identifier)
    return entry.price


def triangulate(table: PriceTable, known_asset: Asset, anchors: Anchors = DEFAULT_ANCHORS) -> int:
    """Price ``known_asset`` in the opposite anchor by chaining both anchor prices.

    Each step truncates on its own; the order (mul, mul, div, div) is part of
    the result and must not be folded into a single ratio.
    """
    reference_price = _anchor_price(table, anchors.reference)
    native_price = _anchor_price(table, anchors.native)

    identifier = resolve(known_asset.info)
    if identifier == anchors.native:
        known_price, counter_price = native_price, reference_price
    elif identifier == anchors.reference:
        known_price, counter_price = reference_price, native_price
    else:
        raise InvalidSwapAsset(identifier)

    dex_amount = checked_mul(known_asset.amount, known_price)
    scaled = checked_mul(dex_amount, PRICE_SCALE)
    return checked_div(checked_div(scaled, counter_price), PRICE_SCALE)


def token1_for_token2_price(
    table: PriceTable, token1_amount: int, anchors: Anchors = DEFAULT_ANCHORS
) -> Token1ForToken2Response:
    known = Asset(info=NativeToken(denom=anchors.native), amount=token1_amount)
    return Token1ForToken2Response(token2_amount=triangulate(table, known, anchors))


def token2_for_token1_price(
    table: PriceTable, token2_amount: int, anchors: Anchors = DEFAULT_ANCHORS
) -> Token2ForToken1Response:
    known = Asset(info=NativeToken(denom=anchors.reference), amount=token2_amount)
    return Token2ForToken1Response(token1_amount=triangulate(table, known, anchors))


__all__ = [
    "DEFAULT_ANCHORS",
    "NATIVE_ANCHOR_DENOM",
    "REFERENCE_ANCHOR_DENOM",
    "Anchors",
    "Token1ForToken2Response",
    "Token2ForToken1Response",
    "token1_for_token2_price",
    "token2_for_token1_price",
    "triangulate",
]
