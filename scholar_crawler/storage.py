from __future__ import annotations

import csv
import enum
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, List, Sequence
from xml.sax.saxutils import escape

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer

from .models import Record, RunResult


logger = logging.getLogger(__name__)

# (attribute, header, spreadsheet column width)
COLUMNS = (
    ("title", "Title", 30),
    ("authors", "Authors", 30),
    ("abstract", "Abstract", 50),
    ("link", "Link", 30),
    ("citation_count", "Citations", 10),
)

SEPARATOR_ROWS = 2


class OutputFormat(str, enum.Enum):
    JSON = "json"
    CSV = "csv"
    XLSX = "xlsx"
    PDF = "pdf"

    @property
    def extension(self) -> str:
        return self.value


def _row(record: Record) -> List[Any]:
    return ["" if getattr(record, attr) is None else getattr(record, attr) for attr, _, _ in COLUMNS]


def _rows_with_separators(by_query: Sequence[Sequence[Record]]) -> List[List[Any]]:
    """Flatten grouped records, putting blank rows between consecutive groups."""
    rows: List[List[Any]] = []
    for index, records in enumerate(by_query):
        rows.extend(_row(r) for r in records)
        if index < len(by_query) - 1:
            rows.extend([""] * len(COLUMNS) for _ in range(SEPARATOR_ROWS))
    return rows


class RecordWriter(ABC):
    """Abstract base class for all output backends."""

    @abstractmethod
    def write(self, result: RunResult, path: str) -> None:
        """Persist a run result to *path*."""


class JsonWriter(RecordWriter):
    """Writes every record of the run as one pretty-printed JSON array."""

    def write(self, result: RunResult, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump([r.to_dict() for r in result.flat], f, ensure_ascii=False, indent=2)
        logger.info("Saved data to %s", path)


class CsvWriter(RecordWriter):
    """Writes records grouped by query, two blank rows between groups."""

    def write(self, result: RunResult, path: str) -> None:
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow([header for _, header, _ in COLUMNS])
            writer.writerows(_rows_with_separators(result.by_query))
        logger.info("Saved data to %s", path)


class ExcelWriter(RecordWriter):
    """Writes an 'Articles' sheet laid out like the CSV output."""

    def write(self, result: RunResult, path: str) -> None:
        wb = Workbook()
        ws = wb.active
        ws.title = "Articles"

        ws.append([header for _, header, _ in COLUMNS])
        for col_idx, (_, _, width) in enumerate(COLUMNS, start=1):
            ws.column_dimensions[get_column_letter(col_idx)].width = width

        for row in _rows_with_separators(result.by_query):
            ws.append([None if value == "" else value for value in row])

        wb.save(path)
        logger.info("Saved data to %s", path)


class PdfWriter(RecordWriter):
    """Writes one section per query, separated by page breaks."""

    def write(self, result: RunResult, path: str) -> None:
        doc = SimpleDocTemplate(path, pagesize=A4, title="Articles")
        doc.build(self.build_story(result))
        logger.info("Saved data to %s", path)

    def build_story(self, result: RunResult) -> list:
        styles = getSampleStyleSheet()
        heading, title, body = styles["Heading2"], styles["Heading4"], styles["BodyText"]

        story: list = []
        for index, records in enumerate(result.by_query):
            query = result.queries[index] if index < len(result.queries) else ""
            story.append(Paragraph(escape(f"Query: {query}"), heading))
            for record in records:
                story.append(Paragraph(escape(f"Title: {record.title}"), title))
                story.append(Paragraph(escape(f"Authors: {record.authors}"), body))
                story.append(Paragraph(escape(f"Abstract: {record.abstract}"), body))
                story.append(Paragraph(escape(f"Link: {record.link or ''}"), body))
                story.append(Paragraph(escape(f"Citations: {record.citation_count}"), body))
                story.append(Spacer(1, 12))
            if index < len(result.by_query) - 1:
                story.append(PageBreak())
        return story


_WRITERS = {
    OutputFormat.JSON: JsonWriter,
    OutputFormat.CSV: CsvWriter,
    OutputFormat.XLSX: ExcelWriter,
    OutputFormat.PDF: PdfWriter,
}


def get_writer(fmt: OutputFormat | str) -> RecordWriter:
    """Return the writer for *fmt*; raises ValueError for unknown formats."""
    return _WRITERS[OutputFormat(fmt)]()
