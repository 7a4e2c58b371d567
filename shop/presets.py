"""Builders for the shop's fixed pizza combinations."""
from __future__ import annotations

from typing import Dict, Optional

from preset_catalog import load_preset_catalog
from shop.items import ExtraCheese, PricedItem, StuffedCrust, Topping, ToppingGroup

PRESETS = load_preset_catalog()


def build_preset(key: str, catalog: Optional[Dict[str, Dict]] = None) -> ToppingGroup:
    """Return a freshly built pizza for ``key``; raises ``KeyError`` if unknown."""
    source = PRESETS if catalog is None else catalog
    if key not in source:
        raise KeyError(f"Unknown pizza preset: {key!r}")

    entry = source[key]
    pizza = ToppingGroup(str(entry["display_name"]))
    for topping in entry["toppings"]:
        pizza.add(Topping(float(topping["price"]), str(topping["name"])))
    return pizza


def with_extra_cheese(item: PricedItem, cost: Optional[float] = None) -> ExtraCheese:
    return ExtraCheese(item) if cost is None else ExtraCheese(item, cost)


def with_stuffed_crust(item: PricedItem, cost: Optional[float] = None) -> StuffedCrust:
    return StuffedCrust(item) if cost is None else StuffedCrust(item, cost)
