from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional
from urllib.parse import quote

from .errors import FetchError
from .extractor import SCHOLAR_BASE_URL, RecordExtractor
from .fetcher import PageFetcher
from .metrics import CrawlMetrics
from .models import PageState, Record


SCHOLAR_SEARCH_URL = f"{SCHOLAR_BASE_URL}/scholar"

# characters left unescaped in the q= parameter
_URI_SAFE = "!'()*"


class PaginationDriver:
    """Walks the result pages of one query.

    Each iteration fetches the current page, appends its records and looks
    for a next-page link. Traversal stops when there is no link, when the
    page budget is spent, or when a fetch fails for good; in the last case
    the records collected from earlier pages are still returned.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        extractor: RecordExtractor,
        max_pages: int,
        page_delay_seconds: float = 0.0,
        search_url: str = SCHOLAR_SEARCH_URL,
        sleep: Callable[[float], None] = time.sleep,
        metrics: Optional[CrawlMetrics] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._fetcher = fetcher
        self._extractor = extractor
        self._max_pages = max_pages
        self._page_delay = page_delay_seconds
        self._search_url = search_url
        self._sleep = sleep
        self._metrics = metrics
        self._log = logger or logging.getLogger(__name__)

    def build_search_url(self, query: str) -> str:
        return f"{self._search_url}?q={quote(query, safe=_URI_SAFE)}"

    def traverse(self, query: str) -> List[Record]:
        state = PageState(page_number=0, current_url=self.build_search_url(query))

        while state.page_number < self._max_pages:
            start_ms = self._now_ms()
            try:
                html = self._fetcher.fetch(state.current_url)
            except FetchError as exc:
                self._log.error("Error processing page %d for query %r: %s", state.page_number, query, exc.cause)
                self._record(query, state, False, 0, start_ms, type(exc.cause).__name__)
                break

            records = self._extractor.extract(html)
            state.collected.extend(records)
            self._record(query, state, True, len(records), start_ms, None)
            self._log.info("Query %r page %d: %d records", query, state.page_number, len(records))

            next_url = self._extractor.find_next_page_link(html)
            if next_url is None:
                break
            if state.page_number + 1 >= self._max_pages:
                break

            state.page_number += 1
            state.current_url = next_url
            self._sleep(self._page_delay)

        return state.collected

    def _record(
        self,
        query: str,
        state: PageState,
        success: bool,
        record_count: int,
        start_ms: int,
        error_type: Optional[str],
    ) -> None:
        if self._metrics is None:
            return
        self._metrics.record_page(
            query=query,
            page_number=state.page_number,
            url=state.current_url,
            success=success,
            record_count=record_count,
            latency_ms=self._now_ms() - start_ms,
            error_type=error_type,
        )

    @staticmethod
    def _now_ms() -> int:
        return int(time.time() * 1000)
