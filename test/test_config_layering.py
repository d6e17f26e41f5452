"""Tests for layered config parsing and validation."""

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PokeCatalog.config import load_config, load_config_with_defaults, parse_config_dict
from PokeCatalog.config.api import BASE_URL_ENV


def _base_raw_config() -> dict:
    return {
        "log": {"level": "INFO", "to_file": False, "dir": "log"},
        "api": {
            "base_url": "https://pokeapi.co/api/v2/",
            "limit": 151,
            "max_workers": 8,
            "timeout": 10,
            "max_attempts": 3,
        },
        "search": {"sort": "alphabetic", "type_filter": "all", "query": "", "max_results": -1},
        "cache": {"backend": "memory", "db_path": "database/abilities.db"},
        "output": {"base_dir": "output", "formats": ["console"]},
    }


_BASE_YAML = """
log:
  level: INFO
api:
  limit: 1025
search:
  sort: alphabetic
output:
  base_dir: output
  formats: [console]
"""


class TestConfigLayering(unittest.TestCase):
    def setUp(self) -> None:
        patcher = patch.dict(os.environ, {}, clear=False)
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop(BASE_URL_ENV, None)

    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())

        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.api.base_url, "https://pokeapi.co/api/v2")
        self.assertEqual(cfg.api.limit, 151)
        self.assertEqual(cfg.api.timeout, 10.0)
        self.assertEqual(cfg.search.sort, "alphabetic")
        self.assertEqual(cfg.cache.backend, "memory")
        self.assertEqual(cfg.output.formats, ("console",))

    def test_optional_sections_use_defaults(self) -> None:
        raw = _base_raw_config()
        del raw["api"], raw["search"], raw["cache"]

        cfg = parse_config_dict(raw)

        self.assertEqual(cfg.api.limit, 1025)
        self.assertEqual(cfg.search.type_filter, "all")
        self.assertEqual(cfg.search.max_results, -1)
        self.assertEqual(cfg.cache.backend, "memory")

    def test_missing_log_section(self) -> None:
        raw = _base_raw_config()
        del raw["log"]
        with self.assertRaisesRegex(ValueError, "Missing required config: log"):
            parse_config_dict(raw)

    def test_unknown_output_format_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["output"]["formats"] = ["console", "markdown"]
        with self.assertRaisesRegex(ValueError, "output\\.formats"):
            parse_config_dict(raw)

    def test_unknown_sort_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["search"]["sort"] = "heaviest"
        with self.assertRaisesRegex(ValueError, "search\\.sort"):
            parse_config_dict(raw)

    def test_type_errors_contain_key(self) -> None:
        raw = _base_raw_config()
        raw["api"]["limit"] = True
        with self.assertRaisesRegex(TypeError, "api\\.limit"):
            parse_config_dict(raw)

    def test_scalar_type_errors_name_the_field(self) -> None:
        cases = [
            (("api", "timeout"), True, "api\\.timeout must be a number"),
            (("log", "to_file"), "yes", "log\\.to_file must be a boolean"),
            (("output", "formats"), ["console", 3], "output\\.formats\\[1\\] must be a string"),
            (("output", "formats"), "console", "output\\.formats must be a list"),
        ]
        for (section, field), value, pattern in cases:
            with self.subTest(key=f"{section}.{field}"):
                raw = _base_raw_config()
                raw[section][field] = value
                with self.assertRaisesRegex(TypeError, pattern):
                    parse_config_dict(raw)

    def test_integer_timeout_is_read_as_float(self) -> None:
        raw = _base_raw_config()
        raw["api"]["timeout"] = 5
        cfg = parse_config_dict(raw)
        self.assertIsInstance(cfg.api.timeout, float)
        self.assertEqual(cfg.api.timeout, 5.0)

    def test_invalid_cache_backend(self) -> None:
        raw = _base_raw_config()
        raw["cache"]["backend"] = "redis"
        with self.assertRaisesRegex(ValueError, "cache\\.backend"):
            parse_config_dict(raw)

    def test_positive_api_values(self) -> None:
        raw = _base_raw_config()
        raw["api"]["max_workers"] = 0
        with self.assertRaisesRegex(ValueError, "api\\.max_workers"):
            parse_config_dict(raw)

    def test_env_overrides_base_url(self) -> None:
        os.environ[BASE_URL_ENV] = "http://localhost:8000/api/v2/"

        cfg = parse_config_dict(_base_raw_config())

        self.assertEqual(cfg.api.base_url, "http://localhost:8000/api/v2")

    def test_search_config_builds_request(self) -> None:
        raw = _base_raw_config()
        raw["search"]["type_filter"] = "Fire"
        cfg = parse_config_dict(raw)

        default_request = cfg.search.to_request()
        request = cfg.search.to_request(query="char", sort="newest", type_filter="ALL")

        self.assertEqual(default_request.type_filter, "fire")
        self.assertEqual(default_request.query, "")
        self.assertEqual(request.query, "char")
        self.assertEqual(request.sort_key, "newest")
        self.assertEqual(request.type_filter, "all")

    def test_override_merges_with_defaults(self) -> None:
        override_yaml = """
log:
  level: debug
search:
  sort: newest
output:
  formats: [console, json]
"""
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text(override_yaml, encoding="utf-8")

            cfg = load_config_with_defaults(override_path, defaults_text=_BASE_YAML)

        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertEqual(cfg.search.sort, "newest")
        self.assertEqual(cfg.api.limit, 1025)
        self.assertEqual(cfg.output.base_dir, "output")
        self.assertEqual(cfg.output.formats, ("console", "json"))

    def test_repository_default_config_is_valid(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")

        self.assertEqual(cfg.api.base_url, "https://pokeapi.co/api/v2")
        self.assertEqual(cfg.api.limit, 1025)
        self.assertEqual(cfg.search.sort, "alphabetic")


if __name__ == "__main__":
    unittest.main()
