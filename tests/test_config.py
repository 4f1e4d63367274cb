"""Tests for config.py -- defaults, env var overrides, threshold validation."""

from pathlib import Path

import pytest

from rom_picker.config import PickerConfig, make_run_id
from rom_picker.errors import ConfigurationError

# Env vars that pydantic-settings reads -- must be cleaned for default tests
_CONFIG_ENV_VARS = [
    "SOURCE_DIR", "DEST_DIR", "GAME_LIST_FILE", "MISSED_LIST_FILE", "LOG_DIR",
    "PRIMARY_THRESHOLD", "SECONDARY_THRESHOLD", "MAX_TITLES", "EXTRA_STOP_WORDS",
    "DRY_RUN", "VERBOSE", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove picker env vars so defaults tests see actual defaults."""
    for var in _CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    def test_default_values(self):
        config = PickerConfig(_env_file=None)
        assert config.primary_threshold == 0.80
        assert config.secondary_threshold == 0.65
        assert config.max_titles == 100
        assert config.extra_stop_words == []
        assert config.missed_list_file is None
        assert config.dry_run is False
        assert config.log_level == "INFO"

    def test_default_paths(self):
        config = PickerConfig(_env_file=None)
        assert config.source_dir == Path("roms")
        assert config.dest_dir == Path("picked")
        assert config.game_list_file == Path("games.txt")

    def test_defaults_are_valid(self):
        PickerConfig(_env_file=None).validate_thresholds()


class TestOverrides:
    def test_constructor_override(self):
        config = PickerConfig(_env_file=None, primary_threshold=0.9, dry_run=True)
        assert config.primary_threshold == 0.9
        assert config.dry_run is True

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("PRIMARY_THRESHOLD", "0.75")
        monkeypatch.setenv("SOURCE_DIR", "/tmp/roms")
        config = PickerConfig(_env_file=None)
        assert config.primary_threshold == 0.75
        assert config.source_dir == Path("/tmp/roms")

    def test_extra_stop_words_from_env(self, monkeypatch):
        monkeypatch.setenv("EXTRA_STOP_WORDS", '["deluxe", "edition"]')
        config = PickerConfig(_env_file=None)
        assert config.extra_stop_words == ["deluxe", "edition"]

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("SECONDARY_THRESHOLD=0.5\nDEST_DIR=/tmp/out\n")
        config = PickerConfig(_env_file=env_file)
        assert config.secondary_threshold == 0.5
        assert config.dest_dir == Path("/tmp/out")


class TestValidateThresholds:
    @pytest.mark.parametrize(
        "primary,secondary",
        [(0.8, 0.8), (0.6, 0.7), (1.5, 0.5), (0.8, 0.0), (0.8, -0.1)],
    )
    def test_rejected(self, primary: float, secondary: float):
        config = PickerConfig(
            _env_file=None, primary_threshold=primary, secondary_threshold=secondary
        )
        with pytest.raises(ConfigurationError):
            config.validate_thresholds()

    def test_primary_of_one_allowed(self):
        PickerConfig(
            _env_file=None, primary_threshold=1.0, secondary_threshold=0.5
        ).validate_thresholds()

    def test_message_names_both(self):
        config = PickerConfig(_env_file=None, primary_threshold=0.6, secondary_threshold=0.7)
        with pytest.raises(ConfigurationError, match="secondary_threshold"):
            config.validate_thresholds()


class TestDirs:
    def test_ensure_dirs_creates_dest(self, tmp_path):
        config = PickerConfig(_env_file=None, dest_dir=tmp_path / "a" / "b")
        config.ensure_dirs()
        assert (tmp_path / "a" / "b").is_dir()


class TestRunId:
    def test_unique(self):
        assert make_run_id() != make_run_id()
