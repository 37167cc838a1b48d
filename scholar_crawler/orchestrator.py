from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .models import Record, RunResult
from .paginator import PaginationDriver


def parse_queries(raw: str, delimiter: str = ",", drop_empty: bool = False) -> List[str]:
    """Split raw user input into trimmed queries.

    Empty entries (``"a,,b"``) are kept as literal empty searches unless
    *drop_empty* is set.
    """
    queries = [q.strip() for q in raw.split(delimiter)]
    if drop_empty:
        queries = [q for q in queries if q]
    return queries


class QueryOrchestrator:
    """Runs one traversal per query, in input order, one at a time."""

    def __init__(self, driver: PaginationDriver, logger: Optional[logging.Logger] = None) -> None:
        self._driver = driver
        self._log = logger or logging.getLogger(__name__)

    def run(self, queries: Sequence[str]) -> RunResult:
        if not queries:
            raise ValueError("at least one query is required")

        cleaned = [q.strip() for q in queries]
        groups: List[List[Record]] = []
        for query in cleaned:
            self._log.info("Searching articles for query: %r", query)
            records = self._driver.traverse(query)
            self._log.info("Query %r finished with %d records", query, len(records))
            groups.append(records)

        return RunResult.from_groups(cleaned, groups)
