"""
Dashboard state transitions.

Every event is a pure function from one DashboardState snapshot to the
next. Events that start a request also return the page number to fetch;
the caller performs the request and reports back through
on_fetch_resolved. The summary and the filtered view are recomputed
explicitly after each transition.

Pagination phases:

    Idle --(mount / scroll, current_page < total_pages)--> Loading
    Loading --(fetch resolved)--> Idle       if current_page < total_pages
    Loading --(fetch resolved)--> Exhausted  otherwise (terminal)
"""
from dataclasses import replace
from typing import Optional, Tuple, Union

from inventory.errors import FetchError
from inventory.filters import apply_filter, parse_filter
from inventory.models import (
    AvailabilityFilter,
    BooksPage,
    DashboardState,
    PaginationPhase,
    PaginationState,
)
from inventory.summary import summarize

Transition = Tuple[DashboardState, Optional[int]]


def initial_state(
    availability_filter: Union[str, AvailabilityFilter] = AvailabilityFilter.ALL
) -> DashboardState:
    """Empty catalog, nothing loaded, Idle."""
    return DashboardState(availability_filter=parse_filter(availability_filter))


def can_request_next(state: DashboardState) -> bool:
    pagination = state.pagination
    return pagination.phase is PaginationPhase.IDLE and pagination.has_more


def _start_loading(state: DashboardState) -> Transition:
    if not can_request_next(state):
        return state, None

    page = state.pagination.current_page + 1
    pagination = replace(
        state.pagination,
        phase=PaginationPhase.LOADING,
        in_flight_page=page
    )
    return replace(state, pagination=pagination), page


def on_mount(state: DashboardState) -> Transition:
    """Initial load of page 1."""
    return _start_loading(state)


def on_scroll_near_bottom(state: DashboardState) -> Transition:
    """Request the next page unless one is in flight or all are loaded."""
    return _start_loading(state)


def on_filter_change(
    state: DashboardState,
    availability_filter: Union[str, AvailabilityFilter]
) -> DashboardState:
    selected = parse_filter(availability_filter)
    return replace(
        state,
        availability_filter=selected,
        filtered=apply_filter(state.catalog, selected)
    )


def on_fetch_resolved(
    state: DashboardState,
    page: int,
    result: Union[BooksPage, FetchError]
) -> DashboardState:
    """
    Apply the outcome of a page request.

    A successful page is appended to the catalog and becomes current_page;
    the summary and the filtered view are rebuilt from the updated catalog.
    A failure leaves catalog and current_page as they were and is kept in
    last_error, so the next scroll retries the same page.

    Outcomes for a page that is not in flight are ignored.
    """
    pagination = state.pagination
    if pagination.phase is not PaginationPhase.LOADING or pagination.in_flight_page != page:
        return state

    if isinstance(result, FetchError):
        catalog = state.catalog
        current_page = pagination.current_page
        total_pages = pagination.total_pages
        summary = state.summary
        filtered = state.filtered
        last_error = f"Page {page}: {result}"
    else:
        catalog = state.catalog + tuple(result.records)
        current_page = page
        total_pages = max(result.total_pages, current_page)
        summary = summarize(catalog)
        filtered = apply_filter(catalog, state.availability_filter)
        last_error = None

    phase = PaginationPhase.IDLE if current_page < total_pages else PaginationPhase.EXHAUSTED

    return replace(
        state,
        catalog=catalog,
        summary=summary,
        filtered=filtered,
        pagination=PaginationState(
            current_page=current_page,
            total_pages=total_pages,
            phase=phase,
            in_flight_page=None
        ),
        last_error=last_error
    )
