"""Picker configuration via pydantic-settings (.env + env vars)."""

import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .models import MAX_TITLES


def make_run_id() -> str:
    """Unique per-run identifier used in the log file name."""
    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    return f"{stamp}-{uuid.uuid4().hex[:6]}"


class PickerConfig(BaseSettings):
    """All picker configuration with layered resolution:
    .env file < environment variables < constructor kwargs.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # -- Inputs / outputs --
    source_dir: Path = Path("roms")
    dest_dir: Path = Path("picked")
    game_list_file: Path = Path("games.txt")
    missed_list_file: Path | None = None
    log_dir: Path = Path("logs")

    # -- Matching --
    primary_threshold: float = 0.80
    secondary_threshold: float = 0.65
    max_titles: int = MAX_TITLES
    extra_stop_words: list[str] = []

    # -- Behavior --
    dry_run: bool = False
    verbose: bool = False
    log_level: str = "INFO"

    def validate_thresholds(self) -> None:
        """Reject thresholds outside (0, 1] or a secondary not below the primary."""
        for name in ("primary_threshold", "secondary_threshold"):
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise ConfigurationError(f"{name} must be in (0, 1], got {value}")
        if self.secondary_threshold >= self.primary_threshold:
            raise ConfigurationError(
                f"secondary_threshold ({self.secondary_threshold}) must be lower "
                f"than primary_threshold ({self.primary_threshold})"
            )

    def ensure_dirs(self) -> None:
        """Create the destination directory if it doesn't exist."""
        self.dest_dir.mkdir(parents=True, exist_ok=True)

    def setup_logging(self, run_id: str | None = None) -> Path:
        """Configure loguru for the picker. Returns the log file path."""
        logger.remove()  # Remove default stderr handler

        log_format = (
            "{time:YYYY-MM-DDTHH:mm:ssZ} | {level:<8} | "
            "{extra[stage]:<10} | {message}"
        )

        def _default_extra(record):
            record["extra"].setdefault("stage", "")
            return True

        logger.add(
            sys.stderr,
            format=log_format,
            level=self.log_level.upper(),
            filter=_default_extra,
        )

        self.log_dir.mkdir(parents=True, exist_ok=True)
        log_file = self.log_dir / f"rom-picker-{run_id or make_run_id()}.log"
        logger.add(
            str(log_file),
            format=log_format,
            level="DEBUG",
            rotation="10 MB",
            retention="30 days",
            filter=_default_extra,
        )
        return log_file
