# core/cart.py
# Fast glass-only re-pricing for cart edits (no services, no adjustments).

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from .money import DecimalLike, non_negative, pricing_context, surcharge_multiplier, to_decimal
from .rules import normalize_geometry


def calculate_item_price(
    width_mm: DecimalLike,
    height_mm: DecimalLike,
    price_per_m2: DecimalLike,
    quantity: Optional[int] = None,
    color_surcharge_percentage: Optional[DecimalLike] = None,
) -> Decimal:
    """
    area (m²) * price per m² * quantity, optionally * (1 + surcharge%/100).

    The value is returned unrounded; display rounding belongs to the caller.
    """
    with pricing_context():
        geo = normalize_geometry(width_mm, height_mm)
        qty = to_decimal(1 if quantity is None else quantity)

        subtotal = geo.area_m2 * non_negative(price_per_m2) * qty

        if color_surcharge_percentage is not None:
            subtotal *= surcharge_multiplier(color_surcharge_percentage)

    return subtotal
