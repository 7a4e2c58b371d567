from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List

from config import PRESETS_FILE

PRESET_ID_RE = re.compile(r"^[a-z][a-z0-9_]*$")


@dataclass(frozen=True)
class PresetDefinition:
    key: str
    display_name: str
    toppings: tuple[tuple[str, float], ...]

    def to_runtime_dict(self) -> Dict[str, str | List[Dict[str, str | float]]]:
        return {
            "display_name": self.display_name,
            "toppings": [{"name": name, "price": price} for name, price in self.toppings],
        }


_BASE_TOPPINGS: tuple[tuple[str, float], ...] = (
    ("Dough", 10.00),
    ("Tomato Sauce", 5.00),
    ("Cheese", 15.00),
)

_VEGETABLE_TOPPINGS: tuple[tuple[str, float], ...] = (
    ("Mushrooms", 12.00),
    ("Green Peppers", 10.00),
    ("Onions", 8.00),
)

DEFAULT_PRESETS: Dict[str, PresetDefinition] = {
    "pepperoni": PresetDefinition(
        key="pepperoni",
        display_name="Pepperoni Pizza",
        toppings=_BASE_TOPPINGS + (("Pepperoni", 20.00),),
    ),
    "vegetarian": PresetDefinition(
        key="vegetarian",
        display_name="Vegetarian Pizza",
        toppings=_BASE_TOPPINGS + _VEGETABLE_TOPPINGS,
    ),
    "meat_lovers": PresetDefinition(
        key="meat_lovers",
        display_name="Meat Lovers Pizza",
        toppings=_BASE_TOPPINGS + (("Pepperoni", 20.00), ("Beef Sausage", 25.00), ("Salami", 22.00)),
    ),
    "vegetarian_deluxe": PresetDefinition(
        key="vegetarian_deluxe",
        display_name="Vegetarian Deluxe Pizza",
        toppings=_BASE_TOPPINGS + _VEGETABLE_TOPPINGS + (("Feta Cheese", 18.00), ("Olives", 15.00)),
    ),
}


def _is_valid_preset_id(value: str) -> bool:
    return bool(PRESET_ID_RE.fullmatch(value))


def _is_non_negative_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and math.isfinite(value) and value >= 0


def _parse_topping(entry: Any) -> tuple[str, float] | None:
    if not isinstance(entry, dict):
        return None
    name = entry.get("name")
    price = entry.get("price")
    if not isinstance(name, str) or not name.strip():
        return None
    if not _is_non_negative_number(price):
        return None
    return name.strip(), float(price)


def _parse_preset_entry(key: str, entry: Dict[str, Any]) -> PresetDefinition | None:
    if not _is_valid_preset_id(key):
        return None

    display_name = entry.get("display_name")
    toppings = entry.get("toppings")

    if not isinstance(display_name, str) or not display_name.strip():
        return None
    if not isinstance(toppings, list) or not toppings:
        return None

    parsed_toppings = [_parse_topping(topping) for topping in toppings]
    if any(topping is None for topping in parsed_toppings):
        return None

    return PresetDefinition(
        key=key,
        display_name=display_name.strip(),
        toppings=tuple(parsed_toppings),
    )


def _ordered_runtime_catalog(presets: Iterable[PresetDefinition]) -> Dict[str, Dict[str, str | List[Dict[str, str | float]]]]:
    ordered = sorted(presets, key=lambda preset: (len(preset.toppings), preset.key))
    return {preset.key: preset.to_runtime_dict() for preset in ordered}


def load_preset_catalog(path: Path = PRESETS_FILE) -> Dict[str, Dict[str, str | List[Dict[str, str | float]]]]:
    defaults = _ordered_runtime_catalog(DEFAULT_PRESETS.values())
    if not path.exists():
        return defaults

    try:
        raw = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError):
        return defaults

    if not isinstance(raw, dict):
        return defaults

    presets: Dict[str, PresetDefinition] = {}
    for key, entry in raw.items():
        if not isinstance(key, str) or not isinstance(entry, dict):
            continue
        preset = _parse_preset_entry(key, entry)
        if preset is None:
            continue
        presets[key] = preset

    if not presets:
        return defaults

    return _ordered_runtime_catalog(presets.values())
