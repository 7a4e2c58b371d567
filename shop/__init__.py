"""Pizza shop package.

Public API:
    from shop import Order, Topping, ToppingGroup, ExtraCheese, StuffedCrust, make_discount
"""
from shop.discounts import DiscountPolicy, make_discount, recommended_discount
from shop.items import ExtraCheese, PizzaDecorator, PricedItem, StuffedCrust, Topping, ToppingGroup
from shop.menu import Customer, Menu, Website, pizza_menu, specials_menu
from shop.order import Order
from shop.presets import build_preset, with_extra_cheese, with_stuffed_crust

__all__ = [
    "Customer",
    "DiscountPolicy",
    "ExtraCheese",
    "Menu",
    "Order",
    "PizzaDecorator",
    "PricedItem",
    "StuffedCrust",
    "Topping",
    "ToppingGroup",
    "Website",
    "build_preset",
    "make_discount",
    "pizza_menu",
    "recommended_discount",
    "specials_menu",
    "with_extra_cheese",
    "with_stuffed_crust",
]
