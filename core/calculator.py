from __future__ import annotations

from decimal import Decimal

from .models import (
    Adjustment,
    AdjustmentResult,
    GlassPricing,
    PriceCalculationInput,
    PriceCalculationResult,
    PricingModel,
    ServiceCharge,
    ServiceResult,
)
from .money import (
    ONE,
    ZERO,
    non_negative,
    pricing_context,
    round_half_up,
    surcharge_multiplier,
    to_number,
)
from .rules import Geometry, billable_glass_area, normalize_geometry, unit_quantity

OVERRIDE_QUANTITY_SCALE = 2
FIXED_QUANTITY_SCALE = 4


def _profile_cost(model: PricingModel, geo: Geometry) -> Decimal:
    # base + width * cost/mm + height * cost/mm
    base = non_negative(model.base_price)
    width_cost = non_negative(model.cost_per_mm_width) * geo.width_mm
    height_cost = non_negative(model.cost_per_mm_height) * geo.height_mm
    return base + width_cost + height_cost


def _glass_cost(glass: GlassPricing | None, geo: Geometry) -> Decimal:
    if glass is None:
        return ZERO
    price = non_negative(glass.price_per_sqm)
    if price == 0:
        return ZERO
    area = billable_glass_area(geo, glass.discount_width_mm, glass.discount_height_mm)
    return round_half_up(price * area)


def _accessory_cost(model: PricingModel, include_accessory: bool, multiplier: Decimal) -> Decimal:
    if not include_accessory:
        return ZERO
    return round_half_up(non_negative(model.accessory_price) * multiplier)


def service_quantity(service: ServiceCharge, geo: Geometry) -> Decimal:
    """Quantity billed for one service; quantity_override always wins."""
    if service.quantity_override is not None:
        scale = FIXED_QUANTITY_SCALE if service.unit == "unit" else OVERRIDE_QUANTITY_SCALE
        quantity = round_half_up(non_negative(service.quantity_override), scale)
    else:
        quantity = unit_quantity(service.unit, geo)

    minimum = non_negative(service.minimum_billing_unit)
    if minimum > 0 and quantity < minimum:
        quantity = minimum
    return quantity


def price_service(service: ServiceCharge, geo: Geometry) -> tuple[Decimal, ServiceResult]:
    quantity = service_quantity(service, geo)
    amount = round_half_up(quantity * non_negative(service.rate))
    return amount, ServiceResult(
        service_id=service.service_id,
        unit=service.unit,
        quantity=to_number(quantity),
        amount=to_number(amount),
    )


def price_adjustment(adjustment: Adjustment, geo: Geometry) -> tuple[Decimal, AdjustmentResult]:
    quantity = unit_quantity(adjustment.unit, geo)
    magnitude = round_half_up(quantity * non_negative(adjustment.value))
    amount = -magnitude if adjustment.sign == "negative" else magnitude
    return amount, AdjustmentResult(concept=adjustment.concept, amount=to_number(amount))


def calculate_price_item(req: PriceCalculationInput) -> PriceCalculationResult:
    with pricing_context():
        return _price_item(req)


def _price_item(req: PriceCalculationInput) -> PriceCalculationResult:
    geo = normalize_geometry(req.width_mm, req.height_mm)
    multiplier = surcharge_multiplier(req.color_surcharge_percentage)

    # Dimensions (+ color surcharge on profile, glass is never surcharged)
    profile = _profile_cost(req.model, geo)
    profile_with_color = profile * multiplier
    dim_price = round_half_up(profile_with_color + _glass_cost(req.glass, geo))

    acc_price = _accessory_cost(req.model, req.include_accessory, multiplier)

    services: list[ServiceResult] = []
    services_total = ZERO
    for service in req.services:
        amount, row = price_service(service, geo)
        services_total += amount
        services.append(row)

    adjustments: list[AdjustmentResult] = []
    adjustments_total = ZERO
    for adjustment in req.adjustments:
        amount, row = price_adjustment(adjustment, geo)
        adjustments_total += amount
        adjustments.append(row)

    # every term is already at 2 dp, the sum needs no extra rounding
    subtotal = dim_price + acc_price + services_total + adjustments_total

    surcharge_pct = None
    surcharge_amount = None
    if multiplier != ONE:
        surcharge_pct = req.color_surcharge_percentage
        surcharge_amount = to_number(profile_with_color - profile)

    return PriceCalculationResult(
        dim_price=to_number(dim_price),
        acc_price=to_number(acc_price),
        services=services,
        adjustments=adjustments,
        subtotal=to_number(subtotal),
        color_surcharge_percentage=surcharge_pct,
        color_surcharge_amount=surcharge_amount,
    )
