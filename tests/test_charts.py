"""Tests for chart datasets."""
from inventory.charts import GENRE_COLORS, bar_chart_data, pie_chart_data
from inventory.models import InventorySummary


def test_bar_chart_data():
    summary = InventorySummary(by_availability={True: 2, False: 1}, by_genre={"Fiction": 2, "Sci-Fi": 1})

    data = bar_chart_data(summary)

    assert data["labels"] == ["Fiction", "Sci-Fi"]
    dataset = data["datasets"][0]
    assert dataset["label"] == "Books by Genre"
    assert dataset["data"] == [2, 1]
    assert dataset["backgroundColor"] == ["#FF6384", "#36A2EB"]


def test_bar_chart_colors_cycle_past_palette():
    genres = {f"g{i}": 1 for i in range(8)}

    colors = bar_chart_data(InventorySummary(by_genre=genres))["datasets"][0]["backgroundColor"]

    assert len(colors) == 8
    assert colors[6:] == GENRE_COLORS[:2]


def test_pie_chart_data():
    summary = InventorySummary(by_availability={False: 4, True: 7})

    data = pie_chart_data(summary)

    assert data["labels"] == ["In Stock", "Out of Stock"]
    assert data["datasets"][0]["label"] == "Inventory Status"
    assert data["datasets"][0]["data"] == [7, 4]
    assert data["datasets"][0]["backgroundColor"] == ["#36A2EB", "#FF6384"]


def test_pie_chart_data_empty_summary():
    data = pie_chart_data(InventorySummary())

    assert data["datasets"][0]["data"] == [0, 0]
