"""Chart.js style datasets built from the inventory summary."""
from itertools import cycle, islice
from typing import Dict, Any, List

from inventory.models import IN_STOCK, OUT_OF_STOCK, InventorySummary

GENRE_COLORS = ["#FF6384", "#36A2EB", "#FFCE56", "#4BC0C0", "#9966FF", "#FF9F40"]
STATUS_COLORS = ["#36A2EB", "#FF6384"]


def _genre_colors(count: int) -> List[str]:
    return list(islice(cycle(GENRE_COLORS), count))


def bar_chart_data(summary: InventorySummary) -> Dict[str, Any]:
    """Books per genre, one bar per genre in first-seen order."""
    labels = list(summary.by_genre.keys())
    return {
        "labels": labels,
        "datasets": [
            {
                "label": "Books by Genre",
                "data": [summary.by_genre[genre] for genre in labels],
                "backgroundColor": _genre_colors(len(labels)),
            }
        ],
    }


def pie_chart_data(summary: InventorySummary) -> Dict[str, Any]:
    """In stock versus out of stock split."""
    return {
        "labels": [IN_STOCK, OUT_OF_STOCK],
        "datasets": [
            {
                "label": "Inventory Status",
                "data": [summary.in_stock, summary.out_of_stock],
                "backgroundColor": list(STATUS_COLORS),
            }
        ],
    }
