"""Tests for catalog aggregation."""
from inventory.models import BookRecord, InventorySummary
from inventory.summary import summarize


def make_book(genre="Fiction", availability=True, title="Book"):
    return BookRecord(title=title, author="Author", genre=genre, price=10.0, availability=availability)


def test_summarize_counts_by_availability_and_genre():
    catalog = [
        make_book("Fiction", True),
        make_book("Fiction", False),
        make_book("Sci-Fi", True),
    ]

    summary = summarize(catalog)

    assert summary.by_availability == {True: 2, False: 1}
    assert summary.by_genre == {"Fiction": 2, "Sci-Fi": 1}
    assert summary.in_stock == 2
    assert summary.out_of_stock == 1


def test_summarize_sums_match_catalog_length():
    catalog = [make_book(genre, i % 3 == 0) for i, genre in enumerate(["A", "B", "C", "A", "B"] * 4)]

    summary = summarize(catalog)

    assert sum(summary.by_availability.values()) == len(catalog)
    assert sum(summary.by_genre.values()) == len(catalog)


def test_summarize_empty_catalog():
    summary = summarize([])

    assert summary == InventorySummary()
    assert summary.in_stock == 0
    assert summary.out_of_stock == 0
    assert summary.total == 0


def test_genres_are_not_normalized():
    summary = summarize([make_book("Fiction"), make_book("fiction"), make_book("Fiction ")])

    assert summary.by_genre == {"Fiction": 1, "fiction": 1, "Fiction ": 1}


def test_availability_counts_uses_string_keys():
    summary = summarize([make_book(availability=False), make_book(availability=True)])

    assert summary.availability_counts() == {"false": 1, "true": 1}
