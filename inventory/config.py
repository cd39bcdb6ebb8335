"""Configuration management."""
import os
from dotenv import load_dotenv

from inventory.errors import ConfigError

# Load environment variables
load_dotenv()


class Config:
    """Application configuration."""

    # API
    BOOKS_API_URL = os.getenv("BOOKS_API_URL") or os.getenv("VITE_DB_URL", "")

    # Defaults
    DEFAULT_TIMEOUT = int(os.getenv("DEFAULT_TIMEOUT", "10"))
    DEFAULT_MAX_RETRIES = int(os.getenv("DEFAULT_MAX_RETRIES", "3"))
    DEFAULT_BACKOFF = float(os.getenv("DEFAULT_BACKOFF", "1.0"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def base_url(self) -> str:
        """Books API base URL without a trailing slash."""
        if not self.BOOKS_API_URL:
            raise ConfigError("BOOKS_API_URL is not set (add it to the environment or .env)")
        return self.BOOKS_API_URL.rstrip("/")
