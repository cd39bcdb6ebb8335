"""Render the dashboard for a terminal."""
import json
from typing import Any, Dict, Iterable, List

from tabulate import tabulate

from inventory.charts import bar_chart_data, pie_chart_data
from inventory.models import BookRecord, DashboardState, InventorySummary

TABLE_HEADERS = ["Title", "Author", "Genre", "Price", "Availability"]
BAR_WIDTH = 40


def _truncate(text: str, width: int) -> str:
    return text[:width] + "..." if len(text) > width else text


def table_rows(books: Iterable[BookRecord]) -> List[List[Any]]:
    return [
        [
            _truncate(book.title, 50),
            _truncate(book.author, 30),
            book.genre,
            f"{book.price:.2f}",
            book.availability_label
        ]
        for book in books
    ]


def render_table(books: Iterable[BookRecord]) -> str:
    """Inventory table, one row per (filtered) book."""
    return tabulate(table_rows(books), headers=TABLE_HEADERS, tablefmt="grid", disable_numparse=True)


def render_counts(summary: InventorySummary) -> str:
    """Inventory count summary list, in the order availabilities were first seen."""
    lines = [
        f"- {'In Stock' if key else 'Out of Stock'}: {count}"
        for key, count in summary.by_availability.items()
    ]
    return "\n".join(lines)


def _bars(labels: List[str], data: List[int]) -> str:
    peak = max(data, default=0)
    rows = []
    for label, value in zip(labels, data):
        length = round(BAR_WIDTH * value / peak) if peak else 0
        rows.append([label, "#" * length, value])
    return tabulate(rows, tablefmt="plain")


def render_charts(summary: InventorySummary) -> str:
    """Text rendering of both charts."""
    bar = bar_chart_data(summary)
    pie = pie_chart_data(summary)
    sections = [
        "Inventory Availability by Genre",
        _bars(bar["labels"], bar["datasets"][0]["data"]),
        "",
        "Inventory Status",
        _bars(pie["labels"], pie["datasets"][0]["data"]),
    ]
    return "\n".join(sections)


def render_status(state: DashboardState) -> str:
    pagination = state.pagination
    status = (
        f"Page {pagination.current_page}/{pagination.total_pages} "
        f"[{pagination.phase.value}] - showing {len(state.filtered)} of {len(state.catalog)} "
        f"(filter: {state.availability_filter.value})"
    )
    if state.last_error:
        status += f"\nLast fetch failed: {state.last_error} (scroll to retry)"
    return status


def render_dashboard(state: DashboardState) -> str:
    """Full dashboard: charts, counts, table, status and loading indicator."""
    parts = [
        "=" * 50,
        "INVENTORY MANAGEMENT",
        "=" * 50,
        render_charts(state.summary),
        "",
        "Inventory Count Summary",
        render_counts(state.summary),
        "",
        render_table(state.filtered),
        render_status(state),
    ]
    if state.loading:
        parts.append("Loading...")
    return "\n".join(parts)


def dashboard_dict(state: DashboardState) -> Dict[str, Any]:
    """Everything the dashboard shows, as JSON-ready data."""
    pagination = state.pagination
    return {
        "filter": state.availability_filter.value,
        "books": [
            {
                "title": book.title,
                "author": book.author,
                "genre": book.genre,
                "price": book.price,
                "availability": book.availability
            }
            for book in state.filtered
        ],
        "summary": {
            "byAvailability": state.summary.availability_counts(),
            "byGenre": dict(state.summary.by_genre),
        },
        "charts": {
            "bar": bar_chart_data(state.summary),
            "pie": pie_chart_data(state.summary),
        },
        "pagination": {
            "currentPage": pagination.current_page,
            "totalPages": pagination.total_pages,
            "phase": pagination.phase.value,
        },
        "loading": state.loading,
        "lastError": state.last_error,
    }


def render_json(state: DashboardState) -> str:
    return json.dumps(dashboard_dict(state), indent=2)
