"""Google Scholar crawler package.

Fetches paginated search results, extracts article records and exports
them as JSON, CSV, XLSX or PDF.

Key modules:
    base            -- BaseRenderer abstract class
    renderers       -- BrowserRenderer, HttpRenderer, ImpersonatingRenderer
    factory         -- RendererFactory for picking a renderer
    backoff         -- BackoffStrategy for retry delays
    fetcher         -- PageFetcher with bounded retries
    extractor       -- RecordExtractor for result blocks and next-page links
    paginator       -- PaginationDriver for one query's traversal
    orchestrator    -- QueryOrchestrator and parse_queries
    metrics         -- CrawlMetrics for per-page statistics
    models          -- Record, RunResult, PageState and event dataclasses
    storage         -- RecordWriter and the JSON/CSV/XLSX/PDF writers
    config          -- CrawlConfig and load_config
    log             -- setup_logging
    errors          -- FetchError, ConfigurationError
"""
