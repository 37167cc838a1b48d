from __future__ import annotations

from typing import Optional

from .base import BaseRenderer
from .config import CrawlConfig
from .renderers import BrowserRenderer, HttpRenderer, ImpersonatingRenderer


RENDERER_KINDS = ("browser", "http", "impersonate")


class RendererFactory:
    """Factory for creating renderer instances from the crawl configuration.

    Renderers hold no session state between calls, so one instance per
    kind is cached and reused for the whole run.
    """

    def __init__(self, config: CrawlConfig) -> None:
        self._config = config
        self._cache: dict[str, BaseRenderer] = {}

    def create_renderer(self, kind: Optional[str] = None) -> BaseRenderer:
        kind = kind or "browser"
        if kind in self._cache:
            return self._cache[kind]

        timeout_ms = self._config.navigation_timeout_ms
        if kind == "browser":
            renderer: BaseRenderer = BrowserRenderer(
                executable_path=self._config.render_executable_path,
                timeout_ms=timeout_ms,
            )
        elif kind == "http":
            renderer = HttpRenderer(timeout_ms=timeout_ms)
        elif kind == "impersonate":
            renderer = ImpersonatingRenderer(timeout_ms=timeout_ms)
        else:
            raise ValueError(f"Unknown renderer: {kind}")

        self._cache[kind] = renderer
        return renderer
