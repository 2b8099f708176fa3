import os
import unittest
from unittest import mock

from chainroi.config.env import ConfigError, get_api_config, get_report_config


class TestConfig(unittest.TestCase):
    def test_api_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            cfg = get_api_config()
        self.assertIsNone(cfg.api_key)
        self.assertEqual(cfg.rate_limit_n, 5)
        self.assertEqual(cfg.rate_limit_window_sec, 1.0)

    def test_api_from_env(self):
        env = {"API_KEY": "k", "RATE_LIMIT_N": "0", "RATE_LIMIT_WINDOW_SEC": "2.5"}
        with mock.patch.dict(os.environ, env, clear=True):
            cfg = get_api_config()
        self.assertEqual(cfg.api_key, "k")
        self.assertEqual(cfg.rate_limit_n, 0)
        self.assertEqual(cfg.rate_limit_window_sec, 2.5)

    def test_report_currency(self):
        with mock.patch.dict(os.environ, {"CHAINROI_CURRENCY": "usd"}, clear=True):
            self.assertEqual(get_report_config().currency, "USD")
        with mock.patch.dict(os.environ, {"CHAINROI_CURRENCY": "GBP"}, clear=True):
            with self.assertRaises(ConfigError):
                get_report_config()


if __name__ == "__main__":
    unittest.main()
