from __future__ import annotations
import argparse
import sys
from typing import List, Optional, Tuple

try:
    import pygame  # type: ignore
except Exception:
    pygame = None

from config import BOARD_H, BOARD_MARGIN, BOARD_W, DEFAULT_PROCESS_STEPS, PENDING, PREPARING, READY, STARTED
from shop import Order, build_preset, make_discount, recommended_discount, with_extra_cheese, with_stuffed_crust
from shop.discounts import discount_kinds
from shop.items import format_rand
from shop.presets import PRESETS


def build_demo_order(seed: Optional[int] = None) -> Order:
    order = Order(seed=seed)
    order.add_item(build_preset("pepperoni"))
    order.add_item(build_preset("vegetarian"))
    order.add_item(with_extra_cheese(build_preset("meat_lovers")))
    order.add_item(with_stuffed_crust(build_preset("vegetarian_deluxe")))
    return order


def choose_discount(order: Order, kind: str) -> None:
    if kind == "auto":
        order.set_discount(recommended_discount(order.item_count()))
    else:
        order.set_discount(make_discount(kind))


def run_headless(steps: int, seed: Optional[int], discount: str) -> Order:
    order = build_demo_order(seed)
    choose_discount(order, discount)

    step = 0
    while order.status() != READY and step < steps:
        step += 1
        print(f"Step {step}: {order.process()}")

    print(order.summary())
    print("Kitchen log:")
    for event in order.event_log:
        print(f"  {event}")
    return order


class OrderBoardUI:
    def __init__(self, order: Order):
        if pygame is None:
            raise RuntimeError("pygame is required for graphical mode. Relaunch with --headless.")
        pygame.init()
        if not pygame.display.get_init():
            raise RuntimeError("Display subsystem is unavailable. Relaunch with --headless.")
        try:
            self.screen = pygame.display.set_mode((BOARD_W, BOARD_H))
        except pygame.error as exc:
            raise RuntimeError(f"Could not open the order board ({exc}). Relaunch with --headless.") from exc
        pygame.display.set_caption("Romeo's Pizza Shop")
        self.order = order
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("arial", 22)
        self.small = pygame.font.SysFont("arial", 17)
        self.running = True
        self.extra_cheese = False
        self.stuffed_crust = False
        self.preset_keys: List[str] = list(PRESETS)
        self.discount_kinds: List[str] = discount_kinds()

        self.palette = {
            "bg": (12, 15, 24),
            "panel": (20, 25, 38),
            "panel_border": (46, 56, 80),
            "text": (230, 236, 248),
            "muted": (161, 177, 205),
        }

    def _add_preset(self, key: str) -> None:
        pizza = build_preset(key)
        # Upgrades apply to the next pizza only; orders are append-only.
        if self.extra_cheese:
            pizza = with_extra_cheese(pizza)
        if self.stuffed_crust:
            pizza = with_stuffed_crust(pizza)
        self.order.add_item(pizza)
        self.extra_cheese = False
        self.stuffed_crust = False

    def _cycle_discount(self) -> None:
        current = self.discount_kinds.index(self.order.discount.kind)
        self.order.set_discount(make_discount(self.discount_kinds[(current + 1) % len(self.discount_kinds)]))

    def handle_input(self) -> None:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                self.running = False
            if ev.type != pygame.KEYDOWN:
                continue
            preset_keys = {pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2, pygame.K_4: 3}
            if ev.key in preset_keys and preset_keys[ev.key] < len(self.preset_keys):
                self._add_preset(self.preset_keys[preset_keys[ev.key]])
            elif ev.key == pygame.K_c:
                self.extra_cheese = not self.extra_cheese
            elif ev.key == pygame.K_s:
                self.stuffed_crust = not self.stuffed_crust
            elif ev.key == pygame.K_d:
                self._cycle_discount()
            elif ev.key == pygame.K_p:
                self.order.process()
            elif ev.key == pygame.K_x:
                self.order.clear()
            elif ev.key == pygame.K_ESCAPE:
                self.running = False

    def _status_color(self, status: str) -> Tuple[int, int, int]:
        colors = {
            STARTED: (101, 189, 255),
            PENDING: (242, 186, 88),
            PREPARING: (232, 102, 61),
            READY: (106, 212, 148),
        }
        return colors[status]

    def draw(self) -> None:
        self.screen.fill(self.palette["bg"])
        y = BOARD_MARGIN

        status = self.order.status()
        badge = pygame.Rect(BOARD_MARGIN, y, 240, 40)
        pygame.draw.rect(self.screen, self._status_color(status), badge, border_radius=10)
        self.screen.blit(self.font.render(status, True, (12, 15, 24)), (badge.x + 12, badge.y + 8))
        total = f"Total: {format_rand(self.order.calculate_total())}  |  {self.order.discount.label()}"
        self.screen.blit(self.font.render(total, True, self.palette["text"]), (badge.right + 20, y + 8))
        y = badge.bottom + 16

        for index, item in enumerate(self.order.items, start=1):
            line = f"{index}. {item.name()} - {format_rand(item.price())}"
            self.screen.blit(self.small.render(line, True, self.palette["text"]), (BOARD_MARGIN, y))
            y += 22

        panel_h = 24 * 7
        panel = pygame.Rect(0, BOARD_H - panel_h, BOARD_W, panel_h)
        pygame.draw.rect(self.screen, self.palette["panel"], panel)
        pygame.draw.line(self.screen, self.palette["panel_border"], panel.topleft, panel.topright, 2)
        upgrades = f"next: cheese={int(self.extra_cheese)} crust={int(self.stuffed_crust)}"
        help_text = f"1-4 add preset | C extra cheese | S stuffed crust | D discount | P process | X clear | {upgrades}"
        self.screen.blit(self.small.render(help_text, True, self.palette["muted"]), (BOARD_MARGIN, panel.y + 8))
        for offset, event in enumerate(self.order.event_log[-5:]):
            self.screen.blit(
                self.small.render(event, True, (255, 236, 160)),
                (BOARD_MARGIN, panel.y + 34 + offset * 24),
            )

        pygame.display.flip()

    def run(self) -> None:
        while self.running:
            self.clock.tick(30)
            self.handle_input()
            self.draw()
        pygame.quit()


def main() -> None:
    parser = argparse.ArgumentParser(description="Romeo's Pizza Shop order board")
    parser.add_argument("--headless", action="store_true", help="run the demo order without graphics")
    parser.add_argument("--seed", type=int, default=None, help="seed for the kitchen's random issues")
    parser.add_argument("--steps", type=int, default=DEFAULT_PROCESS_STEPS, help="max processing steps in headless mode")
    parser.add_argument(
        "--discount",
        choices=["auto", *discount_kinds()],
        default="auto",
        help="discount policy for the headless demo order",
    )
    args = parser.parse_args()

    if args.headless:
        run_headless(args.steps, args.seed, args.discount)
        return

    try:
        board = OrderBoardUI(Order(seed=args.seed))
    except RuntimeError as exc:
        print(f"Startup error: {exc}", file=sys.stderr)
        raise SystemExit(1)
    board.run()


if __name__ == "__main__":
    main()
