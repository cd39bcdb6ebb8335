"""Tests for the availability filter."""
from collections import Counter

import pytest

from inventory.filters import apply_filter, parse_filter
from inventory.models import AvailabilityFilter, BookRecord

CATALOG = (
    BookRecord("A", "x", "Fiction", 1.0, True),
    BookRecord("B", "x", "Fiction", 2.0, False),
    BookRecord("C", "x", "Sci-Fi", 3.0, True),
    BookRecord("D", "x", "History", 4.0, False),
    BookRecord("A", "x", "Fiction", 1.0, True),
)


def test_all_returns_catalog_in_order():
    assert apply_filter(CATALOG, "All") == CATALOG


def test_in_stock():
    assert [b.title for b in apply_filter(CATALOG, "In Stock")] == ["A", "C", "A"]


def test_out_of_stock():
    assert [b.title for b in apply_filter(CATALOG, AvailabilityFilter.OUT_OF_STOCK)] == ["B", "D"]


@pytest.mark.parametrize("value", list(AvailabilityFilter))
def test_filter_is_idempotent(value):
    once = apply_filter(CATALOG, value)

    assert apply_filter(once, value) == once


def test_in_and_out_partition_catalog():
    in_stock = apply_filter(CATALOG, "In Stock")
    out_of_stock = apply_filter(CATALOG, "Out of Stock")

    assert len(in_stock) + len(out_of_stock) == len(CATALOG)
    assert Counter(in_stock + out_of_stock) == Counter(CATALOG)
    assert all(b.availability for b in in_stock)
    assert not any(b.availability for b in out_of_stock)


def test_filter_does_not_mutate_catalog():
    catalog = list(CATALOG)

    apply_filter(catalog, "In Stock")

    assert catalog == list(CATALOG)


def test_unknown_filter_rejected():
    with pytest.raises(ValueError, match="Unknown availability filter"):
        parse_filter("Backordered")
