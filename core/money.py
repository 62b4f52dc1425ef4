# core/money.py
# Decimal helpers shared by every pricing stage.

from __future__ import annotations

import math
from contextlib import contextmanager
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Iterator, Union

DecimalLike = Union[Decimal, int, float, str]

D = Decimal

ZERO = D("0")
ONE = D("1")
MILLIMETERS_PER_METER = D("1000")
PERCENTAGE_DIVISOR = D("100")

ROUND_SCALE = 2

# significant digits for intermediate math; the default 28 drops cents above ~1e26
PRICING_PRECISION = 60


class PricingInputError(ValueError):
    """A monetary field is not a decimal number, or an amount does not fit a float."""


def to_decimal(value: DecimalLike | None) -> Decimal:
    """Decimal / int / float / numeric string -> Decimal. None -> 0."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise PricingInputError(f"Expected a number, got {value!r}")
    if isinstance(value, int):
        return D(value)
    if isinstance(value, float):
        # repr keeps 0.1 as 0.1 instead of its binary expansion
        return D(repr(value))
    if isinstance(value, str):
        try:
            return D(value.strip())
        except InvalidOperation:
            raise PricingInputError(f"Invalid decimal value: {value!r}") from None
    raise PricingInputError(f"Unsupported numeric type: {type(value).__name__}")


def non_negative(value: DecimalLike | None) -> Decimal:
    """Negative, NaN and infinite values become 0."""
    d = to_decimal(value)
    if not d.is_finite() or d < 0:
        return ZERO
    return d


@contextmanager
def pricing_context() -> Iterator[None]:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, PRICING_PRECISION)
        yield


def round_half_up(value: Decimal, scale: int = ROUND_SCALE) -> Decimal:
    exp = D(1).scaleb(-scale)
    if not value.is_finite():
        return value
    # quantize needs every digit of the result to fit in the context precision
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + scale + 2)
        return value.quantize(exp, rounding=ROUND_HALF_UP)


def to_number(value: Decimal, scale: int = ROUND_SCALE) -> float:
    """Final step only: rounded Decimal -> plain float for results."""
    number = float(round_half_up(value, scale))
    if not math.isfinite(number):
        raise PricingInputError(f"Amount out of range: {value:.6E}")
    return number


def mm_to_meters(value_mm: Decimal) -> Decimal:
    return value_mm / MILLIMETERS_PER_METER


def surcharge_multiplier(percentage: DecimalLike | None) -> Decimal:
    """1 + pct/100; anything that is not a positive number means no surcharge."""
    pct = non_negative(percentage)
    return ONE + pct / PERCENTAGE_DIVISOR
