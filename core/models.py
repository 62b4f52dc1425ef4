from __future__ import annotations

from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .money import DecimalLike

ServiceType = Literal["fixed", "area", "perimeter"]  # informational only
ServiceUnit = Literal["unit", "sqm", "ml"]
AdjustmentSign = Literal["positive", "negative"]


class _Schema(BaseModel):
    # snake_case in Python, camelCase on the wire
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LineItemGeometry(_Schema):
    width_mm: float = 0
    height_mm: float = 0


class PricingModel(_Schema):
    base_price: DecimalLike = 0
    cost_per_mm_width: DecimalLike = 0
    cost_per_mm_height: DecimalLike = 0
    accessory_price: Optional[DecimalLike] = None


class GlassPricing(_Schema):
    price_per_sqm: DecimalLike
    # mm the frame profile covers on each axis (not billed as glass)
    discount_width_mm: float = 0
    discount_height_mm: float = 0


class ServiceCharge(_Schema):
    service_id: str
    type: ServiceType = "fixed"
    unit: ServiceUnit
    rate: DecimalLike
    quantity_override: Optional[float] = None
    minimum_billing_unit: Optional[float] = None


class Adjustment(_Schema):
    concept: str
    unit: ServiceUnit
    sign: AdjustmentSign
    value: DecimalLike


class PriceCalculationInput(_Schema):
    width_mm: float = 0
    height_mm: float = 0
    model: PricingModel

    include_accessory: bool = False

    services: list[ServiceCharge] = Field(default_factory=list)
    adjustments: list[Adjustment] = Field(default_factory=list)

    # optional extras: glass by area and a color surcharge (0-100 %)
    glass: Optional[GlassPricing] = None
    color_surcharge_percentage: Optional[float] = None

    @property
    def geometry(self) -> LineItemGeometry:
        return LineItemGeometry(width_mm=self.width_mm, height_mm=self.height_mm)


class ServiceResult(_Schema):
    model_config = ConfigDict(frozen=True)

    service_id: str
    unit: ServiceUnit
    quantity: float
    amount: float


class AdjustmentResult(_Schema):
    model_config = ConfigDict(frozen=True)

    concept: str
    amount: float


class PriceCalculationResult(_Schema):
    model_config = ConfigDict(frozen=True)

    dim_price: float
    acc_price: float
    services: list[ServiceResult] = []
    adjustments: list[AdjustmentResult] = []
    subtotal: float

    # only set when a positive color surcharge was applied
    color_surcharge_percentage: Optional[float] = None
    color_surcharge_amount: Optional[float] = None


class CartItemPriceRequest(_Schema):
    width_mm: float
    height_mm: float
    price_per_m2: DecimalLike
    quantity: Optional[int] = Field(default=None, ge=1)
    color_surcharge_percentage: Optional[float] = None


class CartItemPriceResult(_Schema):
    subtotal: Decimal
    rounded_subtotal: float
