"""Data models for the inventory dashboard."""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

PAGE_SIZE = 10

IN_STOCK = "In Stock"
OUT_OF_STOCK = "Out of Stock"


@dataclass(frozen=True)
class BookRecord:
    """One book as listed by the backend."""
    title: str
    author: str
    genre: str
    price: float
    availability: bool

    @property
    def availability_label(self) -> str:
        """Human label for the stock flag."""
        return IN_STOCK if self.availability else OUT_OF_STOCK


@dataclass(frozen=True)
class BooksPage:
    """Decoded response for a single page request."""
    records: Tuple[BookRecord, ...]
    total_count: int

    @property
    def total_pages(self) -> int:
        return pages_for(self.total_count)


def pages_for(total_count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages for a reported total, never less than one."""
    return max(1, math.ceil(total_count / page_size))


@dataclass(frozen=True)
class InventorySummary:
    """Counts grouped by availability and by genre."""
    by_availability: Dict[bool, int] = field(default_factory=dict)
    by_genre: Dict[str, int] = field(default_factory=dict)

    @property
    def in_stock(self) -> int:
        return self.by_availability.get(True, 0)

    @property
    def out_of_stock(self) -> int:
        return self.by_availability.get(False, 0)

    @property
    def total(self) -> int:
        return sum(self.by_availability.values())

    def availability_counts(self) -> Dict[str, int]:
        """Availability counts keyed the way the backend spells booleans."""
        return {
            ("true" if key else "false"): count
            for key, count in self.by_availability.items()
        }


class AvailabilityFilter(str, Enum):
    """Options of the availability select."""
    ALL = "All"
    IN_STOCK = IN_STOCK
    OUT_OF_STOCK = OUT_OF_STOCK


class PaginationPhase(str, Enum):
    IDLE = "Idle"
    LOADING = "Loading"
    EXHAUSTED = "Exhausted"


@dataclass(frozen=True)
class PaginationState:
    """
    Pagination progress.

    current_page is the last page applied to the catalog (0 until page 1
    lands); total_pages starts at 1 and follows the backend's totalCount.
    """
    current_page: int = 0
    total_pages: int = 1
    phase: PaginationPhase = PaginationPhase.IDLE
    in_flight_page: Optional[int] = None

    @property
    def loading(self) -> bool:
        return self.phase is PaginationPhase.LOADING

    @property
    def has_more(self) -> bool:
        return self.current_page < self.total_pages


@dataclass(frozen=True)
class DashboardState:
    """Immutable snapshot of everything the view renders."""
    catalog: Tuple[BookRecord, ...] = ()
    summary: InventorySummary = field(default_factory=InventorySummary)
    availability_filter: AvailabilityFilter = AvailabilityFilter.ALL
    filtered: Tuple[BookRecord, ...] = ()
    pagination: PaginationState = field(default_factory=PaginationState)
    last_error: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.pagination.loading
