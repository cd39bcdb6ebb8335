"""Parse and validate books listing responses."""
from typing import Dict, Any, Optional
from inventory.errors import MalformedPayloadError
from inventory.models import BookRecord, BooksPage


def parse_book_record(item: Dict[str, Any], page: Optional[int] = None) -> BookRecord:
    """
    Parse a single book from the listing.

    Args:
        item: One element of the response's "book" array
        page: Page number, for error reporting

    Returns:
        BookRecord

    Raises:
        MalformedPayloadError: if a field is missing or has the wrong type
    """
    if not isinstance(item, dict):
        raise MalformedPayloadError(f"Book entry is not an object: {item!r}", page)

    try:
        title = item["title"]
        author = item["author"]
        genre = item["genre"]
        price = item["price"]
        availability = item["availability"]
    except KeyError as e:
        raise MalformedPayloadError(f"Book entry missing field {e}", page) from e

    for name, value in (("title", title), ("author", author), ("genre", genre)):
        if not isinstance(value, str):
            raise MalformedPayloadError(f"Field '{name}' is not a string: {value!r}", page)

    # bool is an int subclass, keep it out of price
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise MalformedPayloadError(f"Field 'price' is not a number: {price!r}", page)

    if not isinstance(availability, bool):
        raise MalformedPayloadError(f"Field 'availability' is not a boolean: {availability!r}", page)

    return BookRecord(
        title=title,
        author=author,
        genre=genre,
        price=price,
        availability=availability
    )


def parse_books_page(response_json: Any, page: Optional[int] = None) -> BooksPage:
    """
    Parse a full listing response: {"book": [...], "totalCount": n}.

    Args:
        response_json: Decoded response body
        page: Page number, for error reporting

    Returns:
        BooksPage with records in response order
    """
    if not isinstance(response_json, dict):
        raise MalformedPayloadError("Response body is not a JSON object", page)

    items = response_json.get("book")
    if not isinstance(items, list):
        raise MalformedPayloadError("Response has no 'book' array", page)

    total_count = response_json.get("totalCount")
    if isinstance(total_count, bool) or not isinstance(total_count, int) or total_count < 0:
        raise MalformedPayloadError(f"Invalid 'totalCount': {total_count!r}", page)

    records = tuple(parse_book_record(item, page) for item in items)
    return BooksPage(records=records, total_count=total_count)
