"""Exception hierarchy for rom-picker.

ConfigurationError and MissingInputError are fatal and stop a run before any
title is scanned. The rest are raised per title and reported inline.
"""

from pathlib import Path


class PickerError(Exception):
    """Base exception for all rom-picker errors."""


class ConfigurationError(PickerError):
    """Invalid threshold range or ordering."""


class MissingInputError(PickerError):
    """Game list file or source directory is absent or unreadable."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class EmptyCanonicalTitle(PickerError):
    """A title normalized to an empty string and cannot be scored."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Title normalizes to nothing: {title!r}")
        self.title = title


class CopyFailure(PickerError):
    """Copying the winning file into the destination failed."""

    def __init__(self, source: Path, dest: Path, reason: str) -> None:
        super().__init__(f"Copy {source} -> {dest} failed: {reason}")
        self.source = source
        self.dest = dest
        self.reason = reason


class CopyVerificationMismatch(PickerError):
    """The destination file was not found after a copy reported success."""

    def __init__(self, dest: Path) -> None:
        super().__init__(f"Copied file not found at destination: {dest}")
        self.dest = dest
