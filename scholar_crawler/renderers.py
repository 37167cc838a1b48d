from __future__ import annotations

from typing import Dict, Optional

from curl_cffi import requests as curl_requests
from playwright.sync_api import sync_playwright
import requests

from .base import BaseRenderer


DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept-Language": "en-US,en;q=0.9",
}


class BrowserRenderer(BaseRenderer):
    """Renders a page in headless Chromium and returns the final DOM as HTML.

    A fresh browser is launched per call and closed before returning,
    whether navigation succeeded or not."""

    def __init__(
        self,
        executable_path: Optional[str] = None,
        wait_until: str = "networkidle",
        headless: bool = True,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._executable_path = executable_path
        self._wait_until = wait_until
        self._headless = headless

    def fetch_html(self, url: str) -> str:
        with sync_playwright() as pw:
            browser = pw.chromium.launch(
                headless=self._headless,
                executable_path=self._executable_path,
            )
            try:
                page = browser.new_page()
                page.goto(url, wait_until=self._wait_until, timeout=self._timeout_ms)
                return page.content()
            finally:
                browser.close()


class HttpRenderer(BaseRenderer):
    """Plain HTTP GET; no JavaScript is executed."""

    def __init__(self, headers: Optional[Dict[str, str]] = None, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._headers = dict(headers or DEFAULT_HEADERS)

    def fetch_html(self, url: str) -> str:
        with requests.Session() as session:
            resp = session.get(url, headers=self._headers, timeout=self._timeout_ms / 1000)
            resp.raise_for_status()
            return resp.text


class ImpersonatingRenderer(BaseRenderer):
    """HTTP GET with a browser TLS fingerprint (curl_cffi impersonation)."""

    def __init__(self, impersonate: str = "chrome120", *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._impersonate = impersonate

    def fetch_html(self, url: str) -> str:
        session = curl_requests.Session()
        try:
            resp = session.get(
                url,
                impersonate=self._impersonate,
                timeout=self._timeout_ms / 1000,
            )
            status_code = getattr(resp, "status_code", None)
            if status_code is None or not 200 <= int(status_code) < 300:
                raise requests.HTTPError(f"HTTP_{status_code} for {url}")
            return resp.text
        finally:
            session.close()
