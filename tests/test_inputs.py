"""Tests for inputs.py -- wanted list and candidate directory snapshot."""

from pathlib import Path

import pytest

from rom_picker.errors import MissingInputError
from rom_picker.inputs import load_candidates, load_titles


class TestLoadTitles:
    def test_trims_and_drops_blank_lines(self, tmp_path):
        games = tmp_path / "games.txt"
        games.write_text("  Golden Axe  \n\n   \nColumns\n")
        assert load_titles(games) == ["Golden Axe", "Columns"]

    def test_limit_counts_non_empty_lines(self, tmp_path):
        games = tmp_path / "games.txt"
        games.write_text("\n".join(f"Game {i}\n" for i in range(150)))
        titles = load_titles(games)
        assert len(titles) == 100
        assert titles[0] == "Game 0"
        assert titles[-1] == "Game 99"

    def test_custom_limit(self, tmp_path):
        games = tmp_path / "games.txt"
        games.write_text("a\nb\nc\n")
        assert load_titles(games, limit=2) == ["a", "b"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(MissingInputError, match="game list"):
            load_titles(tmp_path / "nope.txt")

    def test_directory_is_not_a_list(self, tmp_path):
        with pytest.raises(MissingInputError):
            load_titles(tmp_path)


class TestLoadCandidates:
    def test_flat_sorted_files_only(self, tmp_path):
        (tmp_path / "b (U).bin").write_bytes(b"")
        (tmp_path / "a (U).bin").write_bytes(b"")
        nested = tmp_path / "sub"
        nested.mkdir()
        (nested / "c (U).bin").write_bytes(b"")

        candidates = load_candidates(tmp_path)

        assert [c.name for c in candidates] == ["a (U).bin", "b (U).bin"]
        assert candidates[0].stem == "a (U)"
        assert candidates[0].path == tmp_path / "a (U).bin"

    def test_snapshot_is_tuple(self, tmp_path):
        assert load_candidates(tmp_path) == ()

    def test_missing_dir(self, tmp_path):
        with pytest.raises(MissingInputError, match="source directory"):
            load_candidates(tmp_path / "nope")

    def test_file_is_not_a_dir(self, tmp_path):
        f = tmp_path / "x.bin"
        f.write_bytes(b"")
        with pytest.raises(MissingInputError):
            load_candidates(Path(f))
