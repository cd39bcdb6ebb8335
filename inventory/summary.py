"""Aggregate catalog counts for the summary list and charts."""
from collections import Counter
from typing import Iterable

from inventory.models import BookRecord, InventorySummary


def summarize(catalog: Iterable[BookRecord]) -> InventorySummary:
    """
    Count records by availability and by genre.

    Always a full rescan of the catalog it is given. Genres are grouped on
    their exact string, no case or whitespace folding.

    Args:
        catalog: Every record loaded so far

    Returns:
        InventorySummary whose mappings each sum to len(catalog)
    """
    by_availability: Counter = Counter()
    by_genre: Counter = Counter()

    for book in catalog:
        by_availability[book.availability] += 1
        by_genre[book.genre] += 1

    return InventorySummary(
        by_availability=dict(by_availability),
        by_genre=dict(by_genre)
    )
