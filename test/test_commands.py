"""Tests for CLI command orchestration."""

from __future__ import annotations

import logging
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PokeCatalog.cli.commands import SearchCommand, ShowCommand
from PokeCatalog.core.models import AbilityDetail
from PokeCatalog.core.query import SearchRequest
from PokeCatalog.renderers.base import OutputWriter
from PokeCatalog.services.catalog import CatalogService
from PokeCatalog.utils.log import configure_logging, log
from sample_records import ALL_RECORDS


class _StubSource:
    name = "stub"

    def __init__(self) -> None:
        self.load_calls = 0
        self.ability_calls: list[str] = []

    def load_all_records(self, progress=None):
        self.load_calls += 1
        return list(ALL_RECORDS)

    def load_ability_detail(self, name: str) -> AbilityDetail:
        self.ability_calls.append(name)
        return AbilityDetail.placeholder(name)

    def close(self) -> None:
        return


class _RecordingWriter(OutputWriter):
    def __init__(self) -> None:
        self.calls: list[tuple[list, SearchRequest]] = []

    def write_search_result(self, rows, request) -> None:
        self.calls.append((list(rows), request))

    def finalize(self, action: str) -> None:
        return


class TestSearchCommand(unittest.TestCase):
    def test_loads_once_and_caps_rows(self) -> None:
        source = _StubSource()
        catalog = CatalogService(source)
        writer = _RecordingWriter()
        request = SearchRequest(query=":electric", sort_key="oldest")

        command = SearchCommand(catalog=catalog, output_writer=writer, request=request, max_results=1)
        matched = command.execute()
        command.execute()

        self.assertEqual(matched, 2)
        self.assertEqual(source.load_calls, 1)
        rows, seen_request = writer.calls[0]
        self.assertEqual([row.name for row in rows], ["pikachu"])
        self.assertIs(seen_request, request)


class TestShowCommand(unittest.TestCase):
    def test_shows_best_match_with_abilities(self) -> None:
        source = _StubSource()
        found = ShowCommand(catalog=CatalogService(source), term="bulba").execute()

        self.assertTrue(found)
        self.assertEqual(source.ability_calls, ["overgrow", "chlorophyll"])

    def test_missing_match(self) -> None:
        source = _StubSource()

        self.assertFalse(ShowCommand(catalog=CatalogService(source), term="zzz").execute())
        self.assertEqual(source.ability_calls, [])


class TestConfigureLogging(unittest.TestCase):
    def test_file_mirror_uses_action_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = configure_logging(level="WARNING", action="search", log_to_file=True, log_dir=tmp)
            try:
                log.debug("debug line")
                self.assertIsNotNone(log_path)
                self.assertEqual(log_path.parent, Path(tmp) / "search")
                self.assertEqual(log.handlers[0].level, logging.WARNING)
                self.assertEqual(log.handlers[1].level, logging.DEBUG)
                for handler in log.handlers:
                    handler.flush()
                self.assertIn("[DEBG] debug line", log_path.read_text(encoding="utf-8"))
            finally:
                configure_logging(level="INFO")

    def test_no_file_without_action(self) -> None:
        self.assertIsNone(configure_logging(level="INFO", log_to_file=True))
        self.assertEqual(len(log.handlers), 1)


if __name__ == "__main__":
    unittest.main()
