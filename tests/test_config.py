# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import unittest
from unittest import mock

from portions.config import Settings


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            s = Settings()
        self.assertEqual(s.bind_address, "0.0.0.0:3000")
        self.assertEqual((s.bind_host, s.bind_port), ("0.0.0.0", 3000))
        self.assertEqual(str(s.db_path), "nutrients.db")
        self.assertFalse(s.in_memory)
        self.assertEqual(s.cors_origins, ["*"])
        self.assertEqual(s.log_level, "INFO")

    def test_bind_address_from_env(self) -> None:
        with mock.patch.dict(os.environ, {"PORTIONS_BIND_ADDRESS": "127.0.0.1:8080"}, clear=True):
            s = Settings()
        self.assertEqual((s.bind_host, s.bind_port), ("127.0.0.1", 8080))

    def test_in_memory_db_and_cors_list(self) -> None:
        env = {"PORTIONS_DB_PATH": ":memory:", "PORTIONS_CORS_ORIGINS": "http://a.test, http://b.test"}
        with mock.patch.dict(os.environ, env, clear=True):
            s = Settings()
        self.assertTrue(s.in_memory)
        self.assertEqual(s.cors_origins, ["http://a.test", "http://b.test"])

    def test_non_numeric_port_is_an_error(self) -> None:
        with mock.patch.dict(os.environ, {"PORTIONS_BIND_ADDRESS": "127.0.0.1:abc"}, clear=True):
            with self.assertRaises(ValueError):
                Settings()

    def test_log_level_is_normalized(self) -> None:
        with mock.patch.dict(os.environ, {"PORTIONS_LOG_LEVEL": "debug"}, clear=True):
            s = Settings()
        self.assertEqual(s.log_level, "DEBUG")

    def test_unknown_log_level_is_an_error(self) -> None:
        with mock.patch.dict(os.environ, {"PORTIONS_LOG_LEVEL": "FOO"}, clear=True):
            with self.assertRaises(ValueError):
                Settings()


if __name__ == "__main__":
    unittest.main()
