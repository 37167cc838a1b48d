"""Crawler settings.

Values come from a JSON file (``config.json`` by default) using the key
names below; anything missing falls back to the dataclass defaults. A
``.env`` file next to the working directory is loaded first, and
``CHROME_PATH`` in the environment wins over ``chromePath`` in the file.

Example ``config.json``::

    {
      "maxPages": 5,
      "maxRetries": 3,
      "retryDelay": 2000,
      "delayBetweenRequests": 1000,
      "chromePath": "/usr/bin/chromium"
    }
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

from .errors import ConfigurationError


DEFAULT_CONFIG_PATH = "config.json"

# config.json key -> CrawlConfig field
_KEY_MAP = {
    "maxPages": "max_pages",
    "maxRetries": "max_retries",
    "retryDelay": "retry_delay_ms",
    "delayBetweenRequests": "delay_between_requests_ms",
    "chromePath": "render_executable_path",
    "navigationTimeout": "navigation_timeout_ms",
}


@dataclass(frozen=True)
class CrawlConfig:
    max_pages: int = 5
    max_retries: int = 3
    retry_delay_ms: int = 2000
    delay_between_requests_ms: int = 1000
    render_executable_path: Optional[str] = None
    navigation_timeout_ms: int = 30000

    def __post_init__(self) -> None:
        if self.max_pages < 0:
            raise ConfigurationError("maxPages must be >= 0")
        if self.max_retries < 1:
            raise ConfigurationError("maxRetries must be >= 1")
        if self.retry_delay_ms < 0:
            raise ConfigurationError("retryDelay must be >= 0")
        if self.delay_between_requests_ms < 0:
            raise ConfigurationError("delayBetweenRequests must be >= 0")
        if self.navigation_timeout_ms <= 0:
            raise ConfigurationError("navigationTimeout must be > 0")

    @property
    def page_delay_seconds(self) -> float:
        return self.delay_between_requests_ms / 1000.0

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "CrawlConfig":
        kwargs: Dict[str, Any] = {}
        for key, attr in _KEY_MAP.items():
            if key not in raw or raw[key] is None:
                continue
            value = raw[key]
            if attr == "render_executable_path":
                kwargs[attr] = str(value)
                continue
            try:
                kwargs[attr] = int(value)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"{key} must be an integer, got {value!r}") from exc
        return cls(**kwargs)


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> CrawlConfig:
    """Read *path* and return a validated :class:`CrawlConfig`.

    Raises:
        ConfigurationError: If the file is missing, is not a JSON object,
            or holds out-of-range values.
    """
    load_dotenv(override=False)

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Configuration file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Configuration file {path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

    chrome_path = os.environ.get("CHROME_PATH")
    if chrome_path:
        raw = {**raw, "chromePath": chrome_path}

    return CrawlConfig.from_dict(raw)
