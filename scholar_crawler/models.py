from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Record:
    title: str = ""
    authors: str = ""
    abstract: str = ""
    link: Optional[str] = None
    citation_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Return the record keyed by its export column names."""
        return {
            "title": self.title,
            "authors": self.authors,
            "abstract": self.abstract,
            "link": self.link,
            "citationCount": self.citation_count,
        }


@dataclass
class PageState:
    page_number: int
    current_url: str
    collected: List[Record] = field(default_factory=list)


@dataclass(frozen=True)
class RunResult:
    flat: Tuple[Record, ...]
    by_query: Tuple[Tuple[Record, ...], ...]
    queries: Tuple[str, ...] = ()

    @classmethod
    def from_groups(cls, queries: Sequence[str], groups: Sequence[Sequence[Record]]) -> "RunResult":
        by_query = tuple(tuple(g) for g in groups)
        flat = tuple(r for g in by_query for r in g)
        return cls(flat=flat, by_query=by_query, queries=tuple(queries))


@dataclass(frozen=True)
class PageEvent:
    query: str
    page_number: int
    url: str
    success: bool
    record_count: int
    latency_ms: int
    error_type: Optional[str]


@dataclass(frozen=True)
class CrawlSummary:
    total_pages: int
    failed_pages: int
    total_records: int
    avg_latency_ms: float
