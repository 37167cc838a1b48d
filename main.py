from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from scholar_crawler.backoff import BackoffStrategy
from scholar_crawler.config import DEFAULT_CONFIG_PATH, CrawlConfig, load_config
from scholar_crawler.errors import ConfigurationError
from scholar_crawler.extractor import RecordExtractor
from scholar_crawler.factory import RENDERER_KINDS, RendererFactory
from scholar_crawler.fetcher import PageFetcher
from scholar_crawler.log import setup_logging
from scholar_crawler.metrics import CrawlMetrics
from scholar_crawler.models import RunResult
from scholar_crawler.orchestrator import QueryOrchestrator, parse_queries
from scholar_crawler.paginator import PaginationDriver
from scholar_crawler.storage import OutputFormat, get_writer


logger = logging.getLogger("scholar_crawler")

QUERY_PROMPT = "Enter your search queries separated by commas: "


def _read_queries(raw: Optional[str]) -> str:
    if raw is not None:
        return raw
    try:
        return input(QUERY_PROMPT)
    except EOFError:
        return ""


def build_orchestrator(config: CrawlConfig, renderer_kind: str, metrics: CrawlMetrics) -> QueryOrchestrator:
    renderer = RendererFactory(config).create_renderer(renderer_kind)
    fetcher = PageFetcher(
        renderer,
        max_retries=config.max_retries,
        backoff=BackoffStrategy.from_millis(config.retry_delay_ms),
    )
    driver = PaginationDriver(
        fetcher,
        RecordExtractor(),
        max_pages=config.max_pages,
        page_delay_seconds=config.page_delay_seconds,
        metrics=metrics,
    )
    return QueryOrchestrator(driver)


def run_crawl(
    queries: Sequence[str],
    config: CrawlConfig,
    fmt: OutputFormat,
    output_path: str,
    renderer_kind: str = "browser",
) -> RunResult:
    metrics = CrawlMetrics()
    orchestrator = build_orchestrator(config, renderer_kind, metrics)
    result = orchestrator.run(queries)

    get_writer(fmt).write(result, output_path)

    summary = metrics.summary()
    logger.info(
        "DONE: queries=%d pages=%d failed_pages=%d records=%d avg_latency_ms=%.0f",
        len(result.by_query),
        summary.total_pages,
        summary.failed_pages,
        summary.total_records,
        summary.avg_latency_ms,
    )
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Crawl Google Scholar result pages and export the articles.")
    parser.add_argument("--queries", default=None, help="Comma-separated search queries (prompted when omitted)")
    parser.add_argument("--delimiter", default=",", help="Separator between queries")
    parser.add_argument("--drop-empty-queries", action="store_true", help="Skip empty entries such as in 'a,,b'")

    parser.add_argument(
        "--format",
        dest="fmt",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.JSON.value,
        help="Output format",
    )
    parser.add_argument("--output", default=None, help="Output file path (default: articles.<format>)")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to config.json")
    parser.add_argument("--renderer", choices=RENDERER_KINDS, default="browser", help="How pages are retrieved")

    parser.add_argument("--log-level", default=None, help="Log level (default: $LOG_LEVEL or INFO)")
    parser.add_argument("--log-file", default="crawler.log", help="Log file path; empty string disables it")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file or None)

    raw = _read_queries(args.queries)
    if not raw.strip():
        print("No queries supplied. Pass --queries or type them at the prompt.", file=sys.stderr)
        return 1

    queries = parse_queries(raw, delimiter=args.delimiter, drop_empty=args.drop_empty_queries)
    if not queries:
        print("No non-empty queries supplied.", file=sys.stderr)
        return 1

    try:
        config = load_config(args.config)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    fmt = OutputFormat(args.fmt)
    output_path = args.output or f"articles.{fmt.extension}"

    try:
        run_crawl(queries, config, fmt, output_path, renderer_kind=args.renderer)
    except OSError as exc:
        logger.error("Could not write %s: %s", output_path, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
