from __future__ import annotations

from pydantic import BaseModel

from .assets import Asset, PriceTable
from .uint128 import Uint128, checked_div, checked_mul, saturating_sub

# Subunits per whole unit of the quote currency.
PRICE_SCALE = 1_000_000
# Flat 1% commission.
COMMISSION_DIVISOR = 100
# Mock spread, independent of price and amount.
SPREAD_AMOUNT = 100


class SimulationResponse(BaseModel):
    commission_amount: Uint128
    return_amount: Uint128
    spread_amount: Uint128


class ReverseSimulationResponse(BaseModel):
    commission_amount: Uint128
    offer_amount: Uint128
    spread_amount: Uint128


def simulate(table: PriceTable, offer_asset: Asset) -> SimulationResponse:
    """Quote what selling ``offer_asset`` would return."""
    price = table.price_of(offer_asset.info)
    base_amount = checked_mul(price, offer_asset.amount) // PRICE_SCALE
    commission_amount = base_amount // COMMISSION_DIVISOR
    return SimulationResponse(
        commission_amount=commission_amount,
        return_amount=saturating_sub(base_amount, commission_amount),
        spread_amount=SPREAD_AMOUNT,
    )


def reverse_simulate(table: PriceTable, ask_asset: Asset) -> ReverseSimulationResponse:
    """Quote the offer needed to receive ``ask_asset``.

    The scaled price is divided by the asked amount, so this is not the
    inverse of :func:`simulate`.
    """
    price = table.price_of(ask_asset.info)
    target_amount = checked_div(checked_mul(price, PRICE_SCALE), ask_asset.amount)
    commission_amount = target_amount // COMMISSION_DIVISOR
    return ReverseSimulationResponse(
        commission_amount=commission_amount,
        offer_amount=saturating_sub(target_amount, commission_amount),
        spread_amount=SPREAD_AMOUNT,
    )


__all__ = [
    "COMMISSION_DIVISOR",
    "PRICE_SCALE",
    "SPREAD_AMOUNT",
    "ReverseSimulationResponse",
    "SimulationResponse",
    "reverse_simulate",
    "simulate",
]
