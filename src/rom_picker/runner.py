"""Picker runner -- primary pass, then an optional lower-threshold rescan."""

from collections.abc import Callable, Sequence

import click
from loguru import logger

from .config import PickerConfig
from .models import CandidateFile, RescanReport, ScanResult
from .ops.deliver import write_missed_list
from .scan import scan_titles

log = logger.bind(stage="runner")

# Receives the unmatched titles, returns True to run the secondary pass
ConfirmRescan = Callable[[list[str]], bool]


def _never(unmatched: list[str]) -> bool:
    return False


class PickerRunner:
    """Runs the two-pass scan for a fixed configuration."""

    def __init__(
        self,
        config: PickerConfig,
        confirm: ConfirmRescan | None = None,
    ) -> None:
        self.config = config
        self.confirm = confirm or _never

    def run(
        self,
        titles: Sequence[str],
        candidates: Sequence[CandidateFile],
    ) -> RescanReport:
        """Scan all titles at the primary threshold, then rescan what was missed.

        The secondary pass only sees titles the primary pass left unmatched,
        and only runs when confirm() agrees. Raises ConfigurationError before
        any scanning if the thresholds are invalid.
        """
        self.config.validate_thresholds()
        if not self.config.dry_run:
            self.config.ensure_dirs()

        click.echo(
            f"Primary pass: {len(titles)} titles at threshold "
            f"{self.config.primary_threshold:.2f}"
        )
        if self.config.dry_run:
            click.echo("[DRY-RUN] No files will be copied")
        primary = self._scan(titles, candidates, self.config.primary_threshold)
        report = RescanReport(primary=primary)

        unmatched = primary.unmatched
        if unmatched and self.confirm(unmatched):
            click.echo(
                f"\nSecondary pass: {len(unmatched)} titles at threshold "
                f"{self.config.secondary_threshold:.2f}"
            )
            report.secondary = self._scan(
                unmatched, candidates, self.config.secondary_threshold
            )
        elif unmatched:
            log.info(f"Secondary pass declined, {len(unmatched)} titles unmatched")

        final = report.final_unmatched
        click.echo(f"\nUnmatched titles: {len(final)}")
        for title in final:
            click.echo(f"  - {title}")

        if self.config.missed_list_file is not None:
            write_missed_list(self.config.missed_list_file, final)
            log.info(f"Missed list written to {self.config.missed_list_file}")

        return report

    def _scan(
        self,
        titles: Sequence[str],
        candidates: Sequence[CandidateFile],
        threshold: float,
    ) -> ScanResult:
        return scan_titles(
            titles,
            threshold,
            candidates,
            self.config.source_dir,
            self.config.dest_dir,
            dry_run=self.config.dry_run,
            extra_stop_words=self.config.extra_stop_words,
        )
