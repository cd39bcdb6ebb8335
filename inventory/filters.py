"""Client-side availability filter."""
from typing import Iterable, Tuple, Union

from inventory.models import AvailabilityFilter, BookRecord


def parse_filter(value: Union[str, AvailabilityFilter]) -> AvailabilityFilter:
    """Accept the enum or one of its literal labels ("All", "In Stock", "Out of Stock")."""
    if isinstance(value, AvailabilityFilter):
        return value
    try:
        return AvailabilityFilter(value)
    except ValueError:
        options = ", ".join(f.value for f in AvailabilityFilter)
        raise ValueError(f"Unknown availability filter {value!r} (expected one of: {options})") from None


def apply_filter(
    catalog: Iterable[BookRecord],
    filter_value: Union[str, AvailabilityFilter]
) -> Tuple[BookRecord, ...]:
    """
    Project the catalog through the availability filter.

    The result keeps catalog order and never modifies the catalog.
    """
    selected = parse_filter(filter_value)

    if selected is AvailabilityFilter.ALL:
        return tuple(catalog)

    wanted = selected is AvailabilityFilter.IN_STOCK
    return tuple(book for book in catalog if book.availability is wanted)
