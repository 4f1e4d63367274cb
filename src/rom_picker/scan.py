"""Scan driver -- one pass of wanted titles against all candidate files."""

from collections.abc import Iterable, Sequence
from pathlib import Path

import click
from loguru import logger

from .errors import CopyFailure, CopyVerificationMismatch, EmptyCanonicalTitle
from .matching.disambiguate import evaluate
from .matching.normalize import normalize_filename, normalize_title
from .matching.rank import pick_best, priority_tier
from .models import (
    CandidateFile,
    CanonicalName,
    MatchCandidate,
    ScanResult,
    TitleOutcome,
    TitleResult,
)
from .ops.deliver import copy_candidate

log = logger.bind(stage="scan")


def _canonical_title(title: str, extra_stop_words: Sequence[str]) -> CanonicalName:
    name = normalize_title(title, extra_stop_words)
    if not name:
        raise EmptyCanonicalTitle(title)
    return name


def _canonical_candidates(
    candidates: Iterable[CandidateFile],
    extra_stop_words: Sequence[str],
) -> list[tuple[CandidateFile, CanonicalName]]:
    """Normalize each candidate stem once per pass; drop ones that come out empty."""
    prepared = []
    for c in candidates:
        name = normalize_filename(c.stem, extra_stop_words)
        if not name:
            log.debug(f"Ignoring candidate with empty canonical name: {c.name!r}")
            continue
        prepared.append((c, name))
    return prepared


def find_matches(
    title: CanonicalName,
    candidates: list[tuple[CandidateFile, CanonicalName]],
    threshold: float,
) -> list[MatchCandidate]:
    """Every candidate whose adjusted score clears the threshold, in enumeration order."""
    matches = []
    for file, name in candidates:
        decision = evaluate(title, name, threshold)
        if not decision.matched:
            continue
        log.debug(
            f"  accept {file.name!r}: base={decision.base_score:.3f} "
            f"adjusted={decision.score:.3f} {decision.adjustment or 'no-adjustment'}"
        )
        matches.append(
            MatchCandidate(
                file=file,
                score=decision.score,
                tier=priority_tier(file.name),
                decision=decision,
            )
        )
    return matches


def scan_titles(
    titles: Sequence[str],
    threshold: float,
    candidates: Sequence[CandidateFile],
    source_dir: Path,
    dest_dir: Path,
    dry_run: bool = False,
    extra_stop_words: Sequence[str] = (),
) -> ScanResult:
    """Run one pass over titles and copy each title's best match.

    Titles that normalize to nothing are skipped (not counted as unmatched).
    A failed copy is reported but the title stays matched, it is not retried
    or handed to a later pass.
    """
    log.info(
        f"Scan: {len(titles)} titles, {len(candidates)} candidates, "
        f"threshold={threshold:.2f}"
    )
    prepared = _canonical_candidates(candidates, extra_stop_words)
    result = ScanResult(threshold=threshold)

    for title in titles:
        try:
            canonical = _canonical_title(title, extra_stop_words)
        except EmptyCanonicalTitle as e:
            log.warning(str(e))
            click.echo(f"  SKIPPED {title} -- nothing left to match after cleaning")
            result.results.append(TitleResult(title, TitleOutcome.SKIPPED))
            continue

        log.debug(f"Title {title!r} -> {canonical.text!r} numbers={sorted(canonical.numbers)}")
        matches = find_matches(canonical, prepared, threshold)
        best = pick_best(matches)
        if best is None:
            click.echo(f"  MISSED {title}")
            result.results.append(TitleResult(title, TitleOutcome.UNMATCHED))
            continue

        outcome = _deliver(title, best, source_dir, dest_dir, dry_run)
        result.results.append(
            TitleResult(title, outcome, chosen=best, candidates=len(matches))
        )

    _report(result)
    return result


def _deliver(
    title: str,
    best: MatchCandidate,
    source_dir: Path,
    dest_dir: Path,
    dry_run: bool,
) -> TitleOutcome:
    detail = f"score={best.score:.2f} tier={best.tier}"
    if best.decision and best.decision.adjustment:
        detail += f" {best.decision.adjustment}"

    if dry_run:
        click.echo(f"  WOULD COPY {title} -> {best.file.name} ({detail})")
        return TitleOutcome.DRY_RUN

    try:
        copy_candidate(best.file, source_dir, dest_dir)
    except CopyFailure as e:
        log.error(str(e))
        click.echo(f"  FAILED {title} -> {best.file.name}: {e.reason}")
        return TitleOutcome.COPY_FAILED
    except CopyVerificationMismatch as e:
        log.warning(str(e))
        click.echo(f"  WARNING {title}: {best.file.name} not found after copy")

    click.echo(f"  COPIED {title} -> {best.file.name} ({detail})")
    return TitleOutcome.COPIED


def _report(result: ScanResult) -> None:
    click.echo(
        f"\nPass complete (threshold {result.threshold:.2f}): "
        f"{len(result.matched)} matched, {len(result.unmatched)} unmatched, "
        f"{len(result.skipped)} skipped"
    )
    if result.failed:
        click.echo(f"  {len(result.failed)} matched but not delivered (copy failed)")
    log.info(
        f"Pass threshold={result.threshold:.2f} matched={len(result.matched)} "
        f"unmatched={len(result.unmatched)} skipped={len(result.skipped)}"
    )
