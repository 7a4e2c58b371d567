"""Menus that broadcast a text notification to listeners when items change.

Menus only hold references to already-built items; the order and pricing code
never calls into them.
"""
from __future__ import annotations

from typing import Callable, List, Tuple

from shop.items import PricedItem

Listener = Callable[[str], None]


class Customer:
    """Listener that records notifications addressed to a named customer."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.inbox: List[str] = []

    def update(self, message: str) -> None:
        self.inbox.append(f"Customer {self.name} notified: {message}")


class Website:
    """Listener that keeps the website's feed of menu updates."""

    def __init__(self) -> None:
        self.feed: List[str] = []

    def update(self, message: str) -> None:
        self.feed.append(f"Website updated: {message}")


class Menu:
    def __init__(self, title: str, added_template: str, removed_template: str) -> None:
        self.title = title
        self.added_template = added_template
        self.removed_template = removed_template
        self._listeners: List[Listener] = []
        self._items: List[PricedItem] = []

    @property
    def items(self) -> Tuple[PricedItem, ...]:
        return tuple(self._items)

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def add_item(self, item: PricedItem) -> None:
        self._items.append(item)
        self.notify(self.added_template.format(name=item.name()))

    def remove_item(self, item: PricedItem) -> bool:
        for index, existing in enumerate(self._items):
            if existing is item:
                del self._items[index]
                self.notify(self.removed_template.format(name=item.name()))
                return True
        return False

    def notify(self, message: str) -> None:
        for listener in list(self._listeners):
            listener(message)


def pizza_menu() -> Menu:
    return Menu("Pizza Menu", "New pizza added to menu: {name}", "Pizza removed from menu: {name}")


def specials_menu() -> Menu:
    return Menu("Specials", "New special added: {name}", "Special removed: {name}")
