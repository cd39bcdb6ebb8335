"""Async HTTP client for the books listing API."""
import httpx
from typing import Optional
import logging

from inventory.client import books_url, page_params
from inventory.errors import HttpStatusError, MalformedPayloadError, NetworkError
from inventory.models import BooksPage
from inventory.parse import parse_books_page

logger = logging.getLogger(__name__)


class AsyncBooksApiClient:
    """Async client for fetching catalog pages."""

    def __init__(
        self,
        base_url: str,
        timeout: int = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize async client.

        Args:
            base_url: API base URL
            timeout: Request timeout
            transport: Optional httpx transport (mock transports in tests)
        """
        self.base_url = base_url
        self.timeout = timeout

        # Create async HTTP client
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def fetch_page(self, page: int) -> BooksPage:
        """
        Fetch one page of books asynchronously.

        Args:
            page: Page number (1-based)

        Returns:
            Parsed BooksPage

        Raises:
            NetworkError, HttpStatusError, MalformedPayloadError
        """
        params = page_params(page)

        try:
            logger.info(f"Async request: {books_url(self.base_url)} page={page}")
            response = await self.client.get(books_url(self.base_url), params=params)
        except httpx.HTTPError as e:
            logger.error(f"Async request failed: {e}")
            raise NetworkError(str(e) or type(e).__name__, page) from e

        if not response.is_success:
            logger.warning(f"Status {response.status_code} for page {page}")
            raise HttpStatusError(response.status_code, page, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedPayloadError(f"Response is not JSON: {e}", page) from e

        return parse_books_page(payload, page)

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
