"""Centralised configuration constants for the pizza shop."""
from __future__ import annotations

from pathlib import Path

# ---------------------------------------------------------------------------
# File paths
# ---------------------------------------------------------------------------
PRESETS_FILE: Path = Path("data/presets.json")

# ---------------------------------------------------------------------------
# Decorator surcharges (Rand)
# ---------------------------------------------------------------------------
EXTRA_CHEESE_COST: float = 12.00
STUFFED_CRUST_COST: float = 20.00

EXTRA_CHEESE_PHRASE: str = "Extra Cheese"
STUFFED_CRUST_PHRASE: str = "Stuffed Crust"

# ---------------------------------------------------------------------------
# Discount policies (kind → multiplier / display label)
# ---------------------------------------------------------------------------
REGULAR: str = "regular"
BULK: str = "bulk"
FAMILY: str = "family"

DISCOUNT_MULTIPLIERS: dict[str, float] = {
    REGULAR: 1.0,
    BULK: 0.9,
    FAMILY: 0.85,
}

DISCOUNT_LABELS: dict[str, str] = {
    REGULAR: "Regular Price (0% discount)",
    BULK: "Bulk Discount (10% discount)",
    FAMILY: "Family Discount (15% discount)",
}

BULK_DISCOUNT_MIN_ITEMS: int = 5       # order size at which bulk pricing is recommended

# ---------------------------------------------------------------------------
# Order phases
# ---------------------------------------------------------------------------
STARTED: str = "ORDER STARTED"
PENDING: str = "PENDING"
PREPARING: str = "PREPARING"
READY: str = "READY"

PHASE_ORDER: list[str] = [STARTED, PENDING, PREPARING, READY]

PHASE_MESSAGES: dict[str, str] = {
    STARTED: "Order has been received and is starting...",
    PENDING: "Order is pending (e.g., awaiting kitchen availability)...",
    PREPARING: "Pizza is being prepared...",
    READY: "ORDER IS READY FOR PICKUP! :)",
}

PREPARATION_ISSUE_MESSAGE: str = "*** Issue discovered! Moving back to PENDING. ***"
PREPARATION_DONE_MESSAGE: str = "Preparation complete! Moving to READY."

# ---------------------------------------------------------------------------
# Simulation tuning
# ---------------------------------------------------------------------------
PREPARATION_ISSUE_PERCENT: float = 20.0  # chance (out of 100) that PREPARING rolls back
EVENT_LOG_LIMIT: int = 12                # entries kept in an order's event log
DEFAULT_PROCESS_STEPS: int = 10          # headless harness process() budget

# ---------------------------------------------------------------------------
# Order board display
# ---------------------------------------------------------------------------
BOARD_W: int = 960
BOARD_H: int = 640
BOARD_MARGIN: int = 18
