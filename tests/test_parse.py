"""Tests for parsing functions."""
import pytest

from inventory.errors import MalformedPayloadError
from inventory.models import BookRecord
from inventory.parse import parse_book_record, parse_books_page


def test_parse_book_record_complete():
    """Test parsing a book with all fields present."""
    item = {
        "title": "Dune",
        "author": "Frank Herbert",
        "genre": "Sci-Fi",
        "price": 9.99,
        "availability": True
    }

    book = parse_book_record(item)

    assert book == BookRecord("Dune", "Frank Herbert", "Sci-Fi", 9.99, True)
    assert book.availability_label == "In Stock"


def test_parse_book_record_integer_price():
    item = {"title": "A", "author": "B", "genre": "C", "price": 12, "availability": False}

    book = parse_book_record(item)

    assert book.price == 12
    assert book.availability_label == "Out of Stock"


def test_parse_book_record_missing_field():
    """Test that a book without availability is rejected."""
    item = {"title": "A", "author": "B", "genre": "C", "price": 1.0}

    with pytest.raises(MalformedPayloadError, match="availability"):
        parse_book_record(item, page=3)


def test_parse_book_record_wrong_types():
    base = {"title": "A", "author": "B", "genre": "C", "price": 1.0, "availability": True}

    with pytest.raises(MalformedPayloadError):
        parse_book_record({**base, "price": "1.00"})
    with pytest.raises(MalformedPayloadError):
        parse_book_record({**base, "price": True})
    with pytest.raises(MalformedPayloadError):
        parse_book_record({**base, "availability": "true"})
    with pytest.raises(MalformedPayloadError):
        parse_book_record({**base, "genre": None})


def test_parse_books_page():
    """Test parsing complete API response."""
    response = {
        "book": [
            {"title": "Book 1", "author": "X", "genre": "Fiction", "price": 5, "availability": True},
            {"title": "Book 2", "author": "Y", "genre": "Poetry", "price": 7.5, "availability": False},
        ],
        "totalCount": 25
    }

    page = parse_books_page(response, page=1)

    assert len(page.records) == 2
    assert page.records[0].title == "Book 1"
    assert page.records[1].title == "Book 2"
    assert page.total_count == 25
    assert page.total_pages == 3


def test_parse_books_page_empty_listing():
    page = parse_books_page({"book": [], "totalCount": 0})

    assert page.records == ()
    assert page.total_pages == 1


def test_parse_books_page_missing_keys():
    with pytest.raises(MalformedPayloadError):
        parse_books_page({"totalCount": 3})
    with pytest.raises(MalformedPayloadError):
        parse_books_page({"book": []})
    with pytest.raises(MalformedPayloadError):
        parse_books_page([])


def test_parse_books_page_reports_page_number():
    with pytest.raises(MalformedPayloadError) as excinfo:
        parse_books_page({"book": [{"title": "only"}], "totalCount": 1}, page=4)

    assert excinfo.value.page == 4
