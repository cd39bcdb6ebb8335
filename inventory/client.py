"""HTTP client for the books listing API with resilience patterns."""
import time
import random
import requests
from typing import Any, Dict
import logging

from inventory.errors import FetchError, HttpStatusError, MalformedPayloadError, NetworkError
from inventory.models import PAGE_SIZE, BooksPage
from inventory.parse import parse_books_page

logger = logging.getLogger(__name__)


def books_url(base_url: str) -> str:
    """Listing endpoint under the configured base URL."""
    return f"{base_url.rstrip('/')}/books"


def page_params(page: int) -> Dict[str, Any]:
    """Query parameters for one page; pages are 1-based."""
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    return {"page": page, "pageSize": PAGE_SIZE}


class BooksApiClient:
    """Client for the books listing API with timeouts, retries, and backoff."""

    def __init__(
        self,
        base_url: str,
        timeout: int = 10,
        max_retries: int = 3,
        base_backoff: float = 1.0,
        session: requests.Session = None
    ):
        """
        Initialize books API client.

        Args:
            base_url: API base URL, e.g. https://shop.example.com/api
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts per page
            base_backoff: Base delay for exponential backoff
            session: Optional pre-built session
        """
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.base_backoff = base_backoff

        # Create session for connection pooling
        self.session = session or requests.Session()

    def fetch_page(self, page: int) -> BooksPage:
        """
        Fetch one page of books.

        Args:
            page: Page number (1-based)

        Returns:
            Parsed BooksPage

        Raises:
            NetworkError, HttpStatusError, MalformedPayloadError
        """
        params = page_params(page)
        payload = self._get_json_with_retry(books_url(self.base_url), params, page)
        books_page = parse_books_page(payload, page)
        logger.info(f"Page {page}: {len(books_page.records)} books (totalCount={books_page.total_count})")
        return books_page

    def _get_json_with_retry(
        self,
        url: str,
        params: Dict[str, Any],
        page: int
    ) -> Any:
        """
        Make HTTP request with retry logic.

        Timeouts, connection errors, 429 and 5xx are retried with backoff;
        other 4xx fail immediately.
        """
        last_error: FetchError = NetworkError("No attempt made", page)

        for attempt in range(self.max_retries):
            try:
                logger.info(f"Request attempt {attempt + 1}/{self.max_retries}: {url} page={page}")

                response = self.session.get(
                    url,
                    params=params,
                    timeout=self.timeout
                )

            except requests.exceptions.Timeout as e:
                logger.warning(f"Timeout on attempt {attempt + 1}")
                last_error = NetworkError(f"Timed out: {e}", page)

            except requests.exceptions.RequestException as e:
                logger.warning(f"Connection error on attempt {attempt + 1}: {e}")
                last_error = NetworkError(str(e), page)

            else:
                status = response.status_code

                if 200 <= status < 300:
                    try:
                        return response.json()
                    except ValueError as e:
                        raise MalformedPayloadError(f"Response is not JSON: {e}", page) from e

                if status == 429:
                    # Rate limited - retry with backoff
                    logger.warning(f"Rate limited (429) on attempt {attempt + 1}")
                elif status >= 500:
                    logger.warning(f"Server error ({status}) on attempt {attempt + 1}")
                else:
                    # Client error - don't retry
                    logger.error(f"Client error ({status}): {response.text}")
                    raise HttpStatusError(status, page, response.text)

                last_error = HttpStatusError(status, page, response.text)

            if attempt < self.max_retries - 1:
                self._backoff(attempt)

        logger.error(f"All {self.max_retries} attempts failed for page {page}")
        raise last_error

    def _backoff(self, attempt: int):
        """
        Sleep with exponential backoff and jitter.

        Args:
            attempt: Current attempt number (0-indexed)
        """
        # Exponential backoff: base * 2^attempt
        delay = self.base_backoff * (2 ** attempt)

        # Add jitter: random value between 0 and delay
        jitter = random.uniform(0, delay)
        total_delay = delay + jitter

        logger.info(f"Backing off for {total_delay:.2f} seconds")
        time.sleep(total_delay)

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
