"""The order aggregate: items, the active discount and the fulfilment phase."""
from __future__ import annotations

import random
from typing import List, Optional, Tuple

from config import EVENT_LOG_LIMIT, STARTED
from shop.discounts import DiscountPolicy, regular_price
from shop.items import PricedItem, format_rand
from shop.phases import handle_phase


class Order:
    """A customer order.

    Totals are recomputed from the items on every call.  :meth:`process` only
    moves the phase; items and discount are untouched until :meth:`clear`.
    Randomness for the PREPARING step comes from ``rng`` (or a
    ``random.Random`` seeded with ``seed``) so outcomes are repeatable.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self._items: List[PricedItem] = []
        self._discount: DiscountPolicy = regular_price()
        self._phase: str = STARTED
        self.event_log: List[str] = []

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def items(self) -> Tuple[PricedItem, ...]:
        return tuple(self._items)

    @property
    def discount(self) -> DiscountPolicy:
        return self._discount

    @property
    def phase(self) -> str:
        return self._phase

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    def add_item(self, item: PricedItem) -> None:
        self._items.append(item)
        self._log_event(f"Added {item.name()}")

    def set_discount(self, policy: DiscountPolicy) -> None:
        self._discount = policy
        self._log_event(f"Discount set: {policy.label()}")

    def subtotal(self) -> float:
        return sum((item.price() for item in self._items), 0.0)

    def calculate_total(self) -> float:
        return self._discount.apply(self.subtotal())

    def item_count(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Fulfilment
    # ------------------------------------------------------------------

    def process(self) -> str:
        next_phase, messages = handle_phase(self._phase, self.rng)
        for message in messages:
            self._log_event(message)
        if next_phase != self._phase:
            self._phase = next_phase
            self._log_event(f"Order state changed to: {next_phase}")
        return self._phase

    def status(self) -> str:
        return self._phase

    def clear(self) -> None:
        self._items = []
        self._discount = regular_price()
        self._phase = STARTED
        self._log_event("Order cleared")

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def summary(self) -> str:
        lines = [
            "=== Order Summary ===",
            f"Number of pizzas: {self.item_count()}",
            f"Total cost: {format_rand(self.calculate_total())}",
            f"Discount applied: {self._discount.label()}",
            f"Order status: {self.status()}",
        ]
        if self._items:
            lines.append("Pizzas in order:")
            for index, item in enumerate(self._items, start=1):
                lines.append(f"  {index}. {item.name()} - {format_rand(item.price())}")
        return "\n".join(lines)

    def _log_event(self, message: str) -> None:
        self.event_log.append(message)
        self.event_log = self.event_log[-EVENT_LOG_LIMIT:]
