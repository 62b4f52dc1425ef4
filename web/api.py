from __future__ import annotations

import logging

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from core.calculator import calculate_price_item
from core.cart import calculate_item_price
from core.models import (
    CartItemPriceRequest,
    CartItemPriceResult,
    PriceCalculationInput,
    PriceCalculationResult,
)
from core.money import to_number
from web.config import settings

logger = logging.getLogger("glass_quote")

app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post(
    "/price-item",
    response_model=PriceCalculationResult,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
def price_item(req: PriceCalculationInput = Body(...)) -> PriceCalculationResult:
    """
    Full line-item price: dimensions, accessory, services and adjustments.
    Catalog lookups happen upstream; the body already carries resolved prices.
    """
    try:
        result = calculate_price_item(req)
    except ValueError as e:
        logger.warning("price-item rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        "priced item %sx%s mm: subtotal=%s services=%d adjustments=%d",
        req.width_mm,
        req.height_mm,
        result.subtotal,
        len(result.services),
        len(result.adjustments),
    )
    return result


@app.post("/cart/item-price", response_model=CartItemPriceResult, response_model_by_alias=True)
def cart_item_price(req: CartItemPriceRequest = Body(...)) -> CartItemPriceResult:
    """Glass-only cart re-pricing; exact decimal plus a 2-decimal display value."""
    try:
        subtotal = calculate_item_price(
            width_mm=req.width_mm,
            height_mm=req.height_mm,
            price_per_m2=req.price_per_m2,
            quantity=req.quantity,
            color_surcharge_percentage=req.color_surcharge_percentage,
        )
        rounded = to_number(subtotal)
    except ValueError as e:
        logger.warning("cart item-price rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return CartItemPriceResult(subtotal=subtotal, rounded_subtotal=rounded)
