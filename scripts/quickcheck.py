"""Quick runtime checks for the pricing engine.
Run: python -m scripts.quickcheck
Exits with code 0 on success, non-zero on failure.
"""
from decimal import Decimal

from core.calculator import calculate_price_item
from core.cart import calculate_item_price
from core.models import Adjustment, PriceCalculationInput, PricingModel


def main():
    req = PriceCalculationInput(
        width_mm=1000,
        height_mm=800,
        model=PricingModel(
            base_price=100000,
            cost_per_mm_width=50,
            cost_per_mm_height=40,
            accessory_price=25000,
        ),
        include_accessory=True,
    )

    res = calculate_price_item(req)

    assert res.dim_price == 182000
    assert res.acc_price == 25000
    assert res.subtotal == 207000

    discounted = calculate_price_item(
        req.model_copy(
            update={
                "include_accessory": False,
                "adjustments": [Adjustment(concept="Discount", unit="unit", sign="negative", value=20000)],
            }
        )
    )
    assert discounted.subtotal == 162000

    assert calculate_item_price(width_mm=1000, height_mm=1000, price_per_m2=100) == Decimal("100")

    print("Quickcheck OK")


if __name__ == '__main__':
    main()
