# core/rules.py
# Geometry rules: mm -> m, area, perimeter, and the billing quantity per unit.

from __future__ import annotations

from decimal import Decimal
from typing import Callable, NamedTuple

from .models import ServiceUnit
from .money import D, ONE, DecimalLike, mm_to_meters, non_negative, round_half_up

SQMM_PER_SQM = D("1000000")
MEASURED_QUANTITY_SCALE = 2


class Geometry(NamedTuple):
    width_mm: Decimal
    height_mm: Decimal
    width_m: Decimal
    height_m: Decimal
    area_m2: Decimal
    perimeter_m: Decimal


def normalize_geometry(width_mm: DecimalLike | None, height_mm: DecimalLike | None) -> Geometry:
    """Clamp raw millimeters to >= 0 and derive meters, area and perimeter."""
    w_mm = non_negative(width_mm)
    h_mm = non_negative(height_mm)
    w_m = mm_to_meters(w_mm)
    h_m = mm_to_meters(h_mm)
    return Geometry(
        width_mm=w_mm,
        height_mm=h_mm,
        width_m=w_m,
        height_m=h_m,
        area_m2=w_m * h_m,
        perimeter_m=2 * (w_m + h_m),
    )


def _fixed(geometry: Geometry) -> Decimal:
    return ONE


def _area(geometry: Geometry) -> Decimal:
    return round_half_up(geometry.area_m2, MEASURED_QUANTITY_SCALE)


def _perimeter(geometry: Geometry) -> Decimal:
    return round_half_up(geometry.perimeter_m, MEASURED_QUANTITY_SCALE)


UNIT_QUANTITY: dict[str, Callable[[Geometry], Decimal]] = {
    "unit": _fixed,
    "sqm": _area,
    "ml": _perimeter,
}


def unit_quantity(unit: ServiceUnit, geometry: Geometry) -> Decimal:
    """Billing quantity for one unit basis: 1, m² or linear meters."""
    return UNIT_QUANTITY[unit](geometry)


def billable_glass_area(
    geometry: Geometry,
    discount_width_mm: DecimalLike | None = 0,
    discount_height_mm: DecimalLike | None = 0,
) -> Decimal:
    """Glass area in m² after the profile eats into each side."""
    eff_w = max(geometry.width_mm - non_negative(discount_width_mm), D(0))
    eff_h = max(geometry.height_mm - non_negative(discount_height_mm), D(0))
    return eff_w * eff_h / SQMM_PER_SQM
