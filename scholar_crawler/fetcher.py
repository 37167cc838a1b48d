from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .backoff import BackoffStrategy
from .base import BaseRenderer
from .errors import FetchError


class PageFetcher:
    """Renders a URL with bounded retries.

    Attempts run 1..max_retries. The first success is returned immediately;
    after a failed non-final attempt a warning is logged and the fetcher
    sleeps for the backoff delay. The final failure is logged as an error
    and raised as FetchError chained from the renderer's exception."""

    def __init__(
        self,
        renderer: BaseRenderer,
        max_retries: int = 3,
        backoff: Optional[BackoffStrategy] = None,
        sleep: Callable[[float], None] = time.sleep,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be >= 1")
        self._renderer = renderer
        self._max_retries = max_retries
        self._backoff = backoff or BackoffStrategy()
        self._sleep = sleep
        self._log = logger or logging.getLogger(__name__)

    @property
    def max_retries(self) -> int:
        return self._max_retries

    def fetch(self, url: str) -> str:
        attempt = 0
        while True:
            attempt += 1
            try:
                return self._renderer.render(url)
            except Exception as exc:  # noqa: BLE001
                if attempt >= self._max_retries:
                    self._log.error("Failed to fetch %s after %d attempts: %s", url, attempt, exc)
                    raise FetchError(url, attempt, exc) from exc
                self._log.warning("Attempt %d for %s failed: %s. Retrying...", attempt, url, exc)
                self._sleep(self._backoff.get_sleep(attempt))
