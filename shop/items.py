"""Priced menu items: toppings, topping groups and cost decorators.

Every item answers ``price()`` and ``name()``.  A :class:`ToppingGroup` is the
composite (a pizza is simply the root group of its toppings) and a
:class:`PizzaDecorator` wraps exactly one other item, adding a surcharge and a
name suffix.  Decorators nest to any depth.
"""
from __future__ import annotations

from typing import List, Tuple

from config import (
    EXTRA_CHEESE_COST,
    EXTRA_CHEESE_PHRASE,
    STUFFED_CRUST_COST,
    STUFFED_CRUST_PHRASE,
)


def format_rand(value: float) -> str:
    """Render a price the way the shop's tickets show it (``R62``, ``R99.5``)."""
    return f"R{value:g}"


class PricedItem:
    """Common capability shared by leaves, groups and decorators."""

    def price(self) -> float:
        raise NotImplementedError

    def name(self) -> str:
        raise NotImplementedError

    def representation(self) -> str:
        return f"Pizza: {self.name()} - {format_rand(self.price())}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name()!r}, {self.price()!r})"


class Topping(PricedItem):
    """A single fixed-price ingredient."""

    def __init__(self, price: float, name: str) -> None:
        self._price = price
        self._name = name

    def price(self) -> float:
        return self._price

    def name(self) -> str:
        return self._name


class ToppingGroup(PricedItem):
    """An ordered group of items priced as the sum of its children.

    The total is accumulated when a child is added, using the child's price at
    that moment.  Changes made later inside an already-added subtree are not
    reflected in this group's total.
    """

    def __init__(self, group_name: str) -> None:
        self.group_name = group_name
        self._children: List[PricedItem] = []
        self._total: float = 0.0

    def add(self, child: PricedItem) -> None:
        self._children.append(child)
        self._total += child.price()

    @property
    def children(self) -> Tuple[PricedItem, ...]:
        return tuple(self._children)

    def price(self) -> float:
        return self._total

    def name(self) -> str:
        return f"{self.group_name} ({', '.join(child.name() for child in self._children)})"


class PizzaDecorator(PricedItem):
    """Wraps one item, adding ``extra_cost`` and appending ``phrase`` to its name."""

    phrase: str = ""

    def __init__(self, inner: PricedItem, extra_cost: float) -> None:
        self._inner = inner
        self.extra_cost = extra_cost

    @property
    def inner(self) -> PricedItem:
        return self._inner

    def price(self) -> float:
        return self._inner.price() + self.extra_cost

    def name(self) -> str:
        return f"{self._inner.name()} with {self.phrase}"


class ExtraCheese(PizzaDecorator):
    phrase = EXTRA_CHEESE_PHRASE

    def __init__(self, inner: PricedItem, extra_cost: float = EXTRA_CHEESE_COST) -> None:
        super().__init__(inner, extra_cost)


class StuffedCrust(PizzaDecorator):
    phrase = STUFFED_CRUST_PHRASE

    def __init__(self, inner: PricedItem, extra_cost: float = STUFFED_CRUST_COST) -> None:
        super().__init__(inner, extra_cost)
