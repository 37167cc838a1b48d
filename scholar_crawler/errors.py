from __future__ import annotations


class FetchError(Exception):
    """Raised when a page could not be rendered within the allowed attempts."""

    def __init__(self, url: str, attempts: int, cause: BaseException) -> None:
        super().__init__(f"failed to fetch {url} after {attempts} attempts: {cause}")
        self.url = url
        self.attempts = attempts
        self.cause = cause


class ConfigurationError(Exception):
    """Raised when the crawler configuration is missing or invalid."""
