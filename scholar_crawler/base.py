from __future__ import annotations

from abc import ABC, abstractmethod


class BaseRenderer(ABC):
    """Abstract base class for anything that turns a URL into page HTML.

    Each call to render() must open and release its own session, so a
    failed attempt never leaks a browser or connection into the next one.
    """

    def __init__(self, timeout_ms: int = 30000) -> None:
        self._timeout_ms = timeout_ms

    def render(self, url: str) -> str:
        self.validate(url)
        return self.fetch_html(url)

    def validate(self, url: str) -> None:
        if not url:
            raise ValueError("url is required")

    @abstractmethod
    def fetch_html(self, url: str) -> str:
        ...
