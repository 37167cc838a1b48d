"""Turns one search-result page into :class:`Record` objects.

Extraction is total: a selector that misses leaves its field at the
default (``""``, ``None`` or ``0``) and markup that matches nothing yields
an empty list. Nothing in here raises on odd input.
"""

from __future__ import annotations

import re
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from .models import Record


SCHOLAR_BASE_URL = "https://scholar.google.com"

_DIGITS = re.compile(r"\d+")


def _text(node: Optional[Tag]) -> str:
    if node is None:
        return ""
    return node.get_text().strip()


class RecordExtractor:
    """Extracts result blocks and the next-page link from Scholar markup."""

    def __init__(
        self,
        block_selector: str = ".gs_r.gs_or.gs_scl",
        title_selector: str = ".gs_rt a",
        authors_selector: str = ".gs_a",
        abstract_selector: str = ".gs_rs",
        footer_link_selector: str = ".gs_fl a",
        next_link_selector: str = "td a.gs_nma",
        base_url: str = SCHOLAR_BASE_URL,
    ) -> None:
        self._block_selector = block_selector
        self._title_selector = title_selector
        self._authors_selector = authors_selector
        self._abstract_selector = abstract_selector
        self._footer_link_selector = footer_link_selector
        self._next_link_selector = next_link_selector
        self._base_url = base_url

    def extract(self, html: str) -> List[Record]:
        if not html:
            return []
        soup = BeautifulSoup(html, "html.parser")
        return [self._parse_block(block) for block in soup.select(self._block_selector)]

    def find_next_page_link(self, html: str) -> Optional[str]:
        """Return the absolute URL of the next page, or None.

        Several pagination controls can render on one page; the last
        matching anchor in document order wins.
        """
        if not html:
            return None
        soup = BeautifulSoup(html, "html.parser")
        anchors = soup.select(self._next_link_selector)
        if not anchors:
            return None
        href = anchors[-1].get("href")
        if not href:
            return None
        return urljoin(self._base_url, href)

    def _parse_block(self, block: Tag) -> Record:
        title_anchor = block.select_one(self._title_selector)
        link = title_anchor.get("href") if title_anchor is not None else None
        return Record(
            title=_text(title_anchor),
            authors=_text(block.select_one(self._authors_selector)),
            abstract=_text(block.select_one(self._abstract_selector)),
            link=link or None,
            citation_count=self._citation_count(block),
        )

    def _citation_count(self, block: Tag) -> int:
        # first digit run of the first footer anchor, e.g. "Cited by 42"
        footer = block.select_one(self._footer_link_selector)
        match = _DIGITS.search(_text(footer))
        return int(match.group(0)) if match else 0
