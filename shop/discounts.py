"""Discount policies applied to an order's pre-discount total."""
from __future__ import annotations

from dataclasses import dataclass

from config import (
    BULK,
    BULK_DISCOUNT_MIN_ITEMS,
    DISCOUNT_LABELS,
    DISCOUNT_MULTIPLIERS,
    FAMILY,
    REGULAR,
)


@dataclass(frozen=True)
class DiscountPolicy:
    """A stateless total multiplier paired with its display label."""

    kind: str
    multiplier: float
    display_label: str

    def apply(self, total: float) -> float:
        return total * self.multiplier

    def label(self) -> str:
        return self.display_label


def make_discount(kind: str) -> DiscountPolicy:
    if kind not in DISCOUNT_MULTIPLIERS:
        raise ValueError(f"Unknown discount kind: {kind!r}")
    return DiscountPolicy(kind=kind, multiplier=DISCOUNT_MULTIPLIERS[kind], display_label=DISCOUNT_LABELS[kind])


def regular_price() -> DiscountPolicy:
    return make_discount(REGULAR)


def bulk_discount() -> DiscountPolicy:
    return make_discount(BULK)


def family_discount() -> DiscountPolicy:
    return make_discount(FAMILY)


def recommended_discount(item_count: int) -> DiscountPolicy:
    """Bulk pricing once an order reaches ``BULK_DISCOUNT_MIN_ITEMS`` pizzas."""
    if item_count >= BULK_DISCOUNT_MIN_ITEMS:
        return bulk_discount()
    return regular_price()


def discount_kinds() -> list[str]:
    return list(DISCOUNT_MULTIPLIERS)
