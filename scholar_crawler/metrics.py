from __future__ import annotations

from typing import List, Optional

from .models import CrawlSummary, PageEvent


class CrawlMetrics:
    """Collects one event per page fetch and aggregates them into a summary."""

    def __init__(self) -> None:
        self._events: List[PageEvent] = []

    def record_page(
        self,
        query: str,
        page_number: int,
        url: str,
        success: bool,
        record_count: int,
        latency_ms: int,
        error_type: Optional[str] = None,
    ) -> None:
        self._events.append(
            PageEvent(
                query=query,
                page_number=page_number,
                url=url,
                success=success,
                record_count=record_count,
                latency_ms=latency_ms,
                error_type=error_type,
            )
        )

    def events_for(self, query: str) -> List[PageEvent]:
        return [e for e in self._events if e.query == query]

    def summary(self) -> CrawlSummary:
        """Return totals over every page recorded so far."""
        total = len(self._events)
        failed = sum(1 for e in self._events if not e.success)
        records = sum(e.record_count for e in self._events)
        avg_latency_ms = (sum(e.latency_ms for e in self._events) / total) if total else 0.0
        return CrawlSummary(
            total_pages=total,
            failed_pages=failed,
            total_records=records,
            avg_latency_ms=avg_latency_ms,
        )
