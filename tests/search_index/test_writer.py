"""Tests for index artifact reading and writing."""

import logging
import tempfile
from pathlib import Path

import pytest

from src.search_index.writer import IndexArtifactNotFoundError, find_index_artifact, mirror, write_text


class TestWriteText:
    """Test write_text."""

    def test_write_existing_directory(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            target = Path(temp_dir) / "index.json"

            written = write_text(target, "[]")

            assert written == target
            assert target.read_text(encoding="utf-8") == "[]"

    def test_creates_missing_directory(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            target = Path(temp_dir) / "public" / "nested" / "index.json"

            write_text(target, '{"a": 1}')

            assert target.read_text(encoding="utf-8") == '{"a": 1}'

    def test_overwrites(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            target = Path(temp_dir) / "index.json"
            target.write_text("old")

            write_text(target, "new")

            assert target.read_text() == "new"


class TestFindIndexArtifact:
    """Test find_index_artifact."""

    def test_first_sorted_match(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            vocs = Path(temp_dir) / ".vocs"
            vocs.mkdir()
            (vocs / "search-index-b2.json").write_text("{}")
            (vocs / "search-index-a1.json").write_text("{}")
            (vocs / "other.json").write_text("{}")

            assert find_index_artifact([vocs]).name == "search-index-a1.json"

    def test_candidate_order(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            missing = Path(temp_dir) / "missing"
            empty = Path(temp_dir) / "empty"
            second = Path(temp_dir) / "second"
            empty.mkdir()
            second.mkdir()
            (second / "search-index-x.json").write_text("{}")

            assert find_index_artifact([missing, empty, second]) == second / "search-index-x.json"

    def test_custom_pattern(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            (Path(temp_dir) / "idx.json").write_text("{}")

            assert find_index_artifact([temp_dir], pattern="idx*.json").name == "idx.json"

    def test_not_found(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            with pytest.raises(IndexArtifactNotFoundError, match="search-index"):
                find_index_artifact([temp_dir, Path(temp_dir) / "missing"])

    def test_not_found_is_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            find_index_artifact([])


class TestMirror:
    """Test mirror."""

    def test_copies_to_every_directory(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            dirs = [Path(temp_dir) / "one", Path(temp_dir) / "two" / ".vocs"]

            written = mirror("payload", "search-index-1.json", dirs)

            assert written == [d / "search-index-1.json" for d in dirs]
            for path in written:
                assert path.read_text() == "payload"

    def test_failure_is_logged_and_skipped(self, caplog):
        with tempfile.TemporaryDirectory() as temp_dir:
            blocker = Path(temp_dir) / "blocker"
            blocker.write_text("not a directory")
            good = Path(temp_dir) / "good"

            with caplog.at_level(logging.WARNING):
                written = mirror("payload", "search-index-1.json", [blocker, good])

            assert written == [good / "search-index-1.json"]
            assert "Could not copy index" in caplog.text
