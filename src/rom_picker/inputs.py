"""Wanted-list and candidate-directory readers."""

import os
from pathlib import Path

from loguru import logger

from .errors import MissingInputError
from .models import MAX_TITLES, CandidateFile

log = logger.bind(stage="inputs")


def load_titles(game_list_file: Path, limit: int = MAX_TITLES) -> list[str]:
    """Read the first `limit` non-empty, trimmed lines of the wanted list."""
    log.debug(f"load_titles(game_list_file={game_list_file}, limit={limit})")

    if not game_list_file.is_file():
        raise MissingInputError(game_list_file, "game list file not found")
    try:
        text = game_list_file.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise MissingInputError(game_list_file, str(e)) from e

    titles = [line.strip() for line in text.splitlines() if line.strip()]
    if len(titles) > limit:
        log.info(f"Game list has {len(titles)} entries, using the first {limit}")
        titles = titles[:limit]

    log.debug(f"Loaded {len(titles)} titles")
    return titles


def load_candidates(source_dir: Path) -> tuple[CandidateFile, ...]:
    """Snapshot the regular files directly inside source_dir, sorted by name.

    Not recursive. The snapshot is reused for every pass of a run.
    """
    log.debug(f"load_candidates(source_dir={source_dir})")

    if not source_dir.is_dir():
        raise MissingInputError(source_dir, "source directory not found")
    try:
        with os.scandir(source_dir) as entries:
            names = sorted(e.name for e in entries if e.is_file())
    except OSError as e:
        raise MissingInputError(source_dir, str(e)) from e

    candidates = tuple(CandidateFile.from_path(source_dir / n) for n in names)
    log.info(f"Found {len(candidates)} candidate files in {source_dir}")
    return candidates
