from decimal import Decimal

import pytest

from core.rules import billable_glass_area, normalize_geometry, unit_quantity


def test_normalize_geometry_derives_meters_area_perimeter():
    geo = normalize_geometry(2000, 1000)
    assert geo.width_m == Decimal("2")
    assert geo.height_m == Decimal("1")
    assert geo.area_m2 == Decimal("2")
    assert geo.perimeter_m == Decimal("6")


@pytest.mark.parametrize("bad", [-500, float("nan"), float("-inf"), None])
def test_normalize_geometry_clamps_invalid_dimensions(bad):
    geo = normalize_geometry(bad, 800)
    assert geo.width_mm == 0
    assert geo.area_m2 == 0
    assert geo.perimeter_m == Decimal("1.6")


def test_zero_dimensions_are_valid():
    geo = normalize_geometry(0, 0)
    assert geo.area_m2 == 0
    assert geo.perimeter_m == 0


def test_unit_quantity_by_unit():
    geo = normalize_geometry(1000, 500)
    assert unit_quantity("unit", geo) == 1
    assert unit_quantity("sqm", geo) == Decimal("0.5")
    assert unit_quantity("ml", geo) == Decimal("3")


def test_measured_quantities_round_to_two_decimals():
    # 1.234 m x 1.111 m = 1.370974 m2, perimeter 4.69 m
    geo = normalize_geometry(1234, 1111)
    assert unit_quantity("sqm", geo) == Decimal("1.37")
    assert unit_quantity("ml", geo) == Decimal("4.69")


def test_billable_glass_area_with_profile_discounts():
    geo = normalize_geometry(1000, 1200)
    assert billable_glass_area(geo, 40, 40) == Decimal("1.1136")
    assert billable_glass_area(geo, 0, 0) == Decimal("1.2")
    assert billable_glass_area(geo, 20, 50) == Decimal("1.127")


def test_billable_glass_area_never_negative():
    geo = normalize_geometry(100, 100)
    assert billable_glass_area(geo, 200, 40) == 0
    assert billable_glass_area(geo, -40, -40) == Decimal("0.01")
