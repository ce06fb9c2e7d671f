"""
Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import unittest

try:
    from ._env import ensure_test_env
except ImportError:
    from tests._env import ensure_test_env
ensure_test_env()

from exoquic_auth.config import Config, resolve_environment, resolve_server_url


class ResolveServerUrlTests(unittest.TestCase):
    def test_defaults_to_dev_environment(self):
        self.assertEqual(resolve_environment(environ={}), "dev")
        self.assertEqual(resolve_server_url(environ={}), "https://dev.exoquic.com")

    def test_environment_variable_overrides_default(self):
        environ = {"EXOQUIC_ENV_CONTEXT": "staging"}
        self.assertEqual(resolve_environment(environ=environ), "staging")
        self.assertEqual(resolve_server_url(environ=environ), "https://staging.exoquic.com")

    def test_explicit_env_overrides_environment_variable(self):
        environ = {"EXOQUIC_ENV_CONTEXT": "staging"}
        self.assertEqual(resolve_server_url(env="prod", environ=environ), "https://prod.exoquic.com")

    def test_explicit_server_url_wins(self):
        environ = {"EXOQUIC_ENV_CONTEXT": "staging"}
        self.assertEqual(
            resolve_server_url("https://test.exoquic.com", env="prod", environ=environ),
            "https://test.exoquic.com",
        )

    def test_strips_trailing_slash_and_ignores_blank_values(self):
        self.assertEqual(resolve_server_url("https://test.exoquic.com/", environ={}), "https://test.exoquic.com")
        self.assertEqual(resolve_server_url("  ", env=" ", environ={"EXOQUIC_ENV_CONTEXT": ""}), "https://dev.exoquic.com")


class ConfigTests(unittest.TestCase):
    def test_reads_settings_from_environment(self):
        cfg = Config(environ={
            "EXOQUIC_ENV_CONTEXT": "prod",
            "EXOQUIC_API_KEY": " key-1 ",
            "EXOQUIC_TIMEOUT": "12.5",
            "HTTP_CLIENT_MAX_CONNECTIONS": "10",
            "HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS": "4",
        })
        self.assertEqual(cfg.EXOQUIC_ENV_CONTEXT, "prod")
        self.assertEqual(cfg.EXOQUIC_API_KEY, "key-1")
        self.assertEqual(cfg.EXOQUIC_TIMEOUT, 12.5)
        self.assertEqual(cfg.HTTP_CLIENT_MAX_CONNECTIONS, 10)
        self.assertEqual(cfg.HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS, 4)
        self.assertEqual(cfg.DEFAULT_SERVER_URL, "https://prod.exoquic.com")

    def test_defaults(self):
        cfg = Config(environ={})
        self.assertEqual(cfg.EXOQUIC_ENV_CONTEXT, "dev")
        self.assertIsNone(cfg.EXOQUIC_API_KEY)
        self.assertEqual(cfg.EXOQUIC_TIMEOUT, 30.0)
        self.assertEqual(cfg.DEFAULT_SERVER_URL, "https://dev.exoquic.com")

    def test_rejects_invalid_values(self):
        with self.assertRaises(ValueError):
            Config(environ={"EXOQUIC_TIMEOUT": "0"})
        with self.assertRaises(ValueError):
            Config(environ={"HTTP_CLIENT_MAX_CONNECTIONS": "5", "HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS": "6"})
        with self.assertRaises(ValueError):
            Config(environ={"EXOQUIC_TIMEOUT": "soon"})


if __name__ == '__main__':
    unittest.main()
