from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, PlainSerializer

from .errors import ArithmeticOverflow, DivideByZero

UINT128_MAX = 2**128 - 1


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("booleans are not amounts")
    return value


def _check_range(value: int) -> int:
    if not 0 <= value <= UINT128_MAX:
        raise ValueError(f"{value} is outside the unsigned 128-bit range")
    return value


# Wire form is a decimal string; integers are accepted on input as well.
Uint128 = Annotated[
    int,
    BeforeValidator(_reject_bool),
    AfterValidator(_check_range),
    PlainSerializer(str, return_type=str, when_used="json"),
]


def checked_mul(left: int, right: int) -> int:
    product = left * right
    if product > UINT128_MAX:
        raise ArithmeticOverflow(operation="Mul", left=left, right=right)
    return product


def checked_div(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise DivideByZero(dividend)
    return dividend // divisor


def saturating_sub(left: int, right: int) -> int:
    return max(left - right, 0)


__all__ = ["UINT128_MAX", "Uint128", "checked_div", "checked_mul", "saturating_sub"]
