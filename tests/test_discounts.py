from __future__ import annotations

import pytest

from config import BULK, BULK_DISCOUNT_MIN_ITEMS, FAMILY, REGULAR
from shop.discounts import (
    bulk_discount,
    discount_kinds,
    family_discount,
    make_discount,
    recommended_discount,
    regular_price,
)


def test_discount_exactness_on_hundred():
    assert regular_price().apply(100) == 100
    assert bulk_discount().apply(100) == 90
    assert family_discount().apply(100) == 85


def test_labels():
    assert regular_price().label() == "Regular Price (0% discount)"
    assert bulk_discount().label() == "Bulk Discount (10% discount)"
    assert family_discount().label() == "Family Discount (15% discount)"


def test_apply_is_plain_multiplication():
    assert bulk_discount().apply(33.3) == 33.3 * 0.9
    assert family_discount().apply(0) == 0


def test_make_discount_by_kind():
    for kind in (REGULAR, BULK, FAMILY):
        assert make_discount(kind).kind == kind
    assert discount_kinds() == [REGULAR, BULK, FAMILY]


def test_make_discount_rejects_unknown_kind():
    with pytest.raises(ValueError, match="seniors"):
        make_discount("seniors")


def test_policies_are_immutable_values():
    policy = bulk_discount()
    assert policy == make_discount(BULK)
    with pytest.raises(AttributeError):
        policy.multiplier = 0.5  # type: ignore[misc]


def test_recommended_discount_threshold():
    assert recommended_discount(BULK_DISCOUNT_MIN_ITEMS - 1).kind == REGULAR
    assert recommended_discount(BULK_DISCOUNT_MIN_ITEMS).kind == BULK
    assert recommended_discount(0).kind == REGULAR
