"""Copy a chosen candidate into the destination directory."""

import shutil
from pathlib import Path

from loguru import logger

from ..errors import CopyFailure, CopyVerificationMismatch
from ..models import CandidateFile

log = logger.bind(stage="deliver")


def copy_candidate(
    candidate: CandidateFile,
    source_dir: Path,
    dest_dir: Path,
    dry_run: bool = False,
) -> Path:
    """Copy a candidate file from source_dir into dest_dir under its display name.

    Overwrites an existing destination file. Returns the destination path.
    Raises CopyFailure if the copy itself fails and CopyVerificationMismatch
    if the destination is missing afterwards.
    """
    source_file = source_dir / candidate.name
    dest_file = dest_dir / candidate.name

    if dry_run:
        log.debug(f"dry-run skip copy {source_file} -> {dest_file}")
        return dest_file

    log.info(f"Copy {source_file} -> {dest_file}")
    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source_file, dest_file)
    except OSError as e:
        raise CopyFailure(source_file, dest_file, str(e)) from e

    if not dest_file.exists():
        raise CopyVerificationMismatch(dest_file)
    return dest_file


def write_missed_list(path: Path, titles: list[str]) -> None:
    """Write unmatched titles one per line."""
    log.debug(f"write_missed_list(path={path}, count={len(titles)})")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{t}\n" for t in titles), encoding="utf-8")
