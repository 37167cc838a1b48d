"""Tests for the CrawlMetrics class."""

import unittest

from scholar_crawler.metrics import CrawlMetrics


def _record(metrics, **overrides):
    """Helper to record a page event with sensible defaults."""
    defaults = dict(
        query="q",
        page_number=0,
        url="https://scholar.google.com/scholar?q=q",
        success=True,
        record_count=10,
        latency_ms=100,
        error_type=None,
    )
    defaults.update(overrides)
    metrics.record_page(**defaults)


class TestCrawlMetrics(unittest.TestCase):
    """Verify page recording and summary aggregation."""

    def test_empty_summary(self):
        """Summary with no events should have all zeros."""
        summary = CrawlMetrics().summary()
        self.assertEqual(summary.total_pages, 0)
        self.assertEqual(summary.failed_pages, 0)
        self.assertEqual(summary.total_records, 0)
        self.assertEqual(summary.avg_latency_ms, 0.0)

    def test_counts_pages_and_records(self):
        """Successful pages should add up their record counts."""
        metrics = CrawlMetrics()
        _record(metrics, page_number=0, record_count=10)
        _record(metrics, page_number=1, record_count=7)
        summary = metrics.summary()
        self.assertEqual(summary.total_pages, 2)
        self.assertEqual(summary.total_records, 17)

    def test_counts_failures(self):
        """Failed pages should be counted separately."""
        metrics = CrawlMetrics()
        _record(metrics)
        _record(metrics, success=False, record_count=0, error_type="TimeoutError")
        self.assertEqual(metrics.summary().failed_pages, 1)

    def test_average_latency(self):
        """Average latency should be computed correctly."""
        metrics = CrawlMetrics()
        _record(metrics, latency_ms=100)
        _record(metrics, latency_ms=200)
        self.assertAlmostEqual(metrics.summary().avg_latency_ms, 150.0)

    def test_events_for_query(self):
        """events_for() should filter by query."""
        metrics = CrawlMetrics()
        _record(metrics, query="a")
        _record(metrics, query="b")
        _record(metrics, query="a", page_number=1)
        self.assertEqual([e.page_number for e in metrics.events_for("a")], [0, 1])


if __name__ == "__main__":
    unittest.main()
