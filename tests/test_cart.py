from decimal import Decimal

import pytest

from core.cart import calculate_item_price
from core.money import PricingInputError


def test_one_square_meter():
    assert calculate_item_price(width_mm=1000, height_mm=1000, price_per_m2=100) == Decimal("100")


def test_quantity_multiplies():
    assert calculate_item_price(width_mm=1000, height_mm=1000, price_per_m2=100, quantity=2) == Decimal("200")


def test_color_surcharge():
    price = calculate_item_price(
        width_mm=1000, height_mm=1000, price_per_m2=100, color_surcharge_percentage=10
    )
    assert price == Decimal("110")


def test_none_surcharge_is_ignored():
    price = calculate_item_price(
        width_mm=1000, height_mm=1000, price_per_m2=100, color_surcharge_percentage=None
    )
    assert price == Decimal("100")


def test_result_is_unrounded_decimal():
    # 0.333 m x 0.333 m = 0.110889 m2
    price = calculate_item_price(width_mm=333, height_mm=333, price_per_m2=Decimal("45.5"))
    assert isinstance(price, Decimal)
    assert price == Decimal("5.0454495")


def test_string_price_per_m2():
    assert calculate_item_price(width_mm=1500, height_mm=2000, price_per_m2="80.50") == Decimal("241.5")


def test_negative_dimension_gives_zero():
    assert calculate_item_price(width_mm=-1000, height_mm=1000, price_per_m2=100) == 0


def test_malformed_price_raises():
    with pytest.raises(PricingInputError):
        calculate_item_price(width_mm=1000, height_mm=1000, price_per_m2="n/a")


@pytest.mark.parametrize("pct", [-10, "NaN"])
def test_negative_or_nan_surcharge_applies_no_multiplier(pct):
    price = calculate_item_price(width_mm=1000, height_mm=1000, price_per_m2=100, color_surcharge_percentage=pct)
    assert price == Decimal("100")


def test_huge_dimensions_keep_full_precision():
    # 1e27 m x 1e27 m x 100
    assert calculate_item_price(width_mm=1e30, height_mm=1e30, price_per_m2=100) == Decimal("1E+56")
