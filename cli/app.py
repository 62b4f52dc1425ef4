# cli/app.py
# CLI = a terminal pricer for one window/door. The core does not know it exists.

from __future__ import annotations

from typing import Optional, Sequence

from core.calculator import calculate_price_item
from core.models import (
    Adjustment,
    PriceCalculationInput,
    PriceCalculationResult,
    PricingModel,
    ServiceCharge,
)

UNITS = ("unit", "sqm", "ml")
UNIT_TO_TYPE = {"unit": "fixed", "sqm": "area", "ml": "perimeter"}
SIGNS = ("positive", "negative")


# ---------- INPUT HELPERS ----------

def ask_float(prompt: str, *, min_value: float | None = None) -> float:
    """Keep asking until the user types a number."""
    while True:
        raw = input(prompt).strip().replace(",", ".")
        try:
            value = float(raw)
        except ValueError:
            print("❌ Enter a number (example: 12.5)")
            continue
        if min_value is not None and value < min_value:
            print(f"❌ Value must be >= {min_value}")
            continue
        return value


def ask_float_default(prompt: str, default: float, *, min_value: float | None = None) -> float:
    """Number with a default: Enter -> default."""
    while True:
        raw = input(f"{prompt} [{default}]: ").strip()
        if raw == "":
            value = float(default)
        else:
            try:
                value = float(raw.replace(",", "."))
            except ValueError:
                print("❌ Enter a number or press Enter")
                continue

        if min_value is not None and value < min_value:
            print(f"❌ Value must be >= {min_value}")
            continue
        return value


def ask_optional_float(prompt: str) -> Optional[float]:
    raw = input(f"{prompt} (Enter to skip): ").strip()
    if raw == "":
        return None
    try:
        return float(raw.replace(",", "."))
    except ValueError:
        print("❌ Not a number, skipped")
        return None


def ask_yes_no(prompt: str) -> bool:
    while True:
        raw = input(prompt + " (y/n): ").strip().lower()
        if raw in ("y", "yes"):
            return True
        if raw in ("n", "no"):
            return False
        print("❌ Enter y or n")


def ask_choice(prompt: str, options: Sequence[str]) -> str:
    while True:
        raw = input(f"{prompt} ({'/'.join(options)}): ").strip().lower()
        if raw in options:
            return raw
        print(f"❌ Choose one of: {', '.join(options)}")


def money(x: float) -> str:
    return f"${x:,.2f}"


# ---------- COLLECTING LINES ----------

def ask_services() -> list[ServiceCharge]:
    services: list[ServiceCharge] = []
    while ask_yes_no("Add a service?"):
        service_id = input("Service id/name: ").strip() or f"service-{len(services) + 1}"
        unit = ask_choice("Billing unit", UNITS)
        rate = ask_float("Rate per unit: ", min_value=0)
        override = ask_optional_float("Quantity override")
        services.append(
            ServiceCharge(
                service_id=service_id,
                type=UNIT_TO_TYPE[unit],
                unit=unit,
                rate=rate,
                quantity_override=override,
            )
        )
    return services


def ask_adjustments() -> list[Adjustment]:
    adjustments: list[Adjustment] = []
    while ask_yes_no("Add a surcharge/discount?"):
        concept = input("Concept: ").strip() or "Adjustment"
        sign = ask_choice("Sign", SIGNS)
        unit = ask_choice("Billing unit", UNITS)
        value = ask_float("Value per unit: ", min_value=0)
        adjustments.append(Adjustment(concept=concept, unit=unit, sign=sign, value=value))
    return adjustments


def format_breakdown(result: PriceCalculationResult) -> list[str]:
    lines = [
        "--- Breakdown ---",
        f"Dimensions:            {money(result.dim_price)}",
        f"Accessory:             {money(result.acc_price)}",
    ]
    if result.color_surcharge_amount is not None:
        lines.append(
            f"  incl. color +{result.color_surcharge_percentage:g}%: {money(result.color_surcharge_amount)}"
        )
    for s in result.services:
        lines.append(f"Service {s.service_id} ({s.quantity:g} {s.unit}): {money(s.amount)}")
    for a in result.adjustments:
        lines.append(f"{a.concept}: {money(a.amount)}")
    lines.append(f"SUBTOTAL:              {money(result.subtotal)}")
    lines.append("-----------------")
    return lines


# ---------- MAIN CLI FLOW ----------

def run_cli() -> None:
    print("\n=== Glass Quote Pricer (CLI) ===\n")

    width = ask_float("Width (mm): ", min_value=0)
    height = ask_float("Height (mm): ", min_value=0)

    print("\nModel prices:")
    base_price = ask_float_default("Base price", 0.0, min_value=0)
    cost_w = ask_float_default("Cost per mm of width", 0.0, min_value=0)
    cost_h = ask_float_default("Cost per mm of height", 0.0, min_value=0)

    accessory_price = None
    include_accessory = ask_yes_no("Include accessory?")
    if include_accessory:
        accessory_price = ask_float("Accessory price: ", min_value=0)

    color_pct = ask_optional_float("Color surcharge %")

    req = PriceCalculationInput(
        width_mm=width,
        height_mm=height,
        model=PricingModel(
            base_price=base_price,
            cost_per_mm_width=cost_w,
            cost_per_mm_height=cost_h,
            accessory_price=accessory_price,
        ),
        include_accessory=include_accessory,
        color_surcharge_percentage=color_pct,
        services=ask_services(),
        adjustments=ask_adjustments(),
    )

    result = calculate_price_item(req)

    print()
    for line in format_breakdown(result):
        print(line)
    print()


if __name__ == "__main__":
    run_cli()
