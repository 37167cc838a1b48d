"""Tests for the RendererFactory class."""

import unittest

from scholar_crawler.config import CrawlConfig
from scholar_crawler.factory import RendererFactory
from scholar_crawler.renderers import BrowserRenderer, HttpRenderer, ImpersonatingRenderer


class TestRendererFactory(unittest.TestCase):
    """Verify that the factory creates the correct renderer type."""

    def setUp(self):
        """Set up shared factory instance."""
        self.factory = RendererFactory(CrawlConfig(render_executable_path="/usr/bin/chromium"))

    def test_default_is_browser(self):
        """No kind should produce a BrowserRenderer."""
        renderer = self.factory.create_renderer()
        self.assertIsInstance(renderer, BrowserRenderer)
        self.assertEqual(renderer._executable_path, "/usr/bin/chromium")

    def test_creates_http_renderer(self):
        """'http' should produce an HttpRenderer instance."""
        self.assertIsInstance(self.factory.create_renderer("http"), HttpRenderer)

    def test_creates_impersonating_renderer(self):
        """'impersonate' should produce an ImpersonatingRenderer instance."""
        self.assertIsInstance(self.factory.create_renderer("impersonate"), ImpersonatingRenderer)

    def test_instances_are_cached(self):
        """Asking twice for the same kind returns the same object."""
        self.assertIs(self.factory.create_renderer("http"), self.factory.create_renderer("http"))

    def test_unknown_kind_raises_error(self):
        """An unrecognized kind should raise ValueError."""
        with self.assertRaises(ValueError) as ctx:
            self.factory.create_renderer("telnet")
        self.assertIn("telnet", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
