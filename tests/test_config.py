"""Tests for configuration loading and validation."""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from scholar_crawler.config import CrawlConfig, load_config
from scholar_crawler.errors import ConfigurationError


class TestLoadConfig(unittest.TestCase):
    """Verify config.json parsing, defaults and the CHROME_PATH override."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        env = patch.dict(os.environ)
        env.start()
        self.addCleanup(env.stop)
        os.environ.pop("CHROME_PATH", None)

    def _write(self, content):
        path = os.path.join(self._tmp.name, "config.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write(content if isinstance(content, str) else json.dumps(content))
        return path

    def test_reads_camel_case_keys(self):
        path = self._write(
            {
                "maxPages": 3,
                "maxRetries": 4,
                "retryDelay": 250,
                "delayBetweenRequests": 500,
                "chromePath": "/usr/bin/chromium",
            }
        )
        config = load_config(path)
        self.assertEqual(config.max_pages, 3)
        self.assertEqual(config.max_retries, 4)
        self.assertEqual(config.retry_delay_ms, 250)
        self.assertEqual(config.delay_between_requests_ms, 500)
        self.assertEqual(config.render_executable_path, "/usr/bin/chromium")
        self.assertAlmostEqual(config.page_delay_seconds, 0.5)

    def test_missing_keys_use_defaults(self):
        config = load_config(self._write({"maxPages": 2}))
        self.assertEqual(config.max_pages, 2)
        self.assertEqual(config.max_retries, CrawlConfig().max_retries)
        self.assertIsNone(config.render_executable_path)

    def test_chrome_path_env_overrides_file(self):
        os.environ["CHROME_PATH"] = "/opt/chrome/chrome"
        config = load_config(self._write({"chromePath": "/usr/bin/chromium"}))
        self.assertEqual(config.render_executable_path, "/opt/chrome/chrome")

    def test_missing_file(self):
        with self.assertRaises(ConfigurationError):
            load_config(os.path.join(self._tmp.name, "nope.json"))

    def test_invalid_json(self):
        with self.assertRaises(ConfigurationError):
            load_config(self._write("{not json"))

    def test_not_an_object(self):
        with self.assertRaises(ConfigurationError):
            load_config(self._write([1, 2]))

    def test_non_integer_value(self):
        with self.assertRaises(ConfigurationError) as ctx:
            load_config(self._write({"maxPages": "many"}))
        self.assertIn("maxPages", str(ctx.exception))

    def test_zero_retries_rejected(self):
        with self.assertRaises(ConfigurationError):
            load_config(self._write({"maxRetries": 0}))

    def test_negative_delay_rejected(self):
        with self.assertRaises(ConfigurationError):
            CrawlConfig(retry_delay_ms=-1)


if __name__ == "__main__":
    unittest.main()
