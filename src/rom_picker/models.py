"""Core enums, constants, and type definitions for rom-picker.

Types:
    CandidateFile  -- One file in the source collection (path, display name, stem).
    CanonicalName  -- Normalized text plus its tokens and numeric tokens.
    MatchDecision  -- Base/adjusted score and which boost or penalty fired.
    MatchCandidate -- A candidate file that passed the threshold for one title.
    TitleOutcome   -- What happened to a title during one scan pass.
    TitleResult    -- One title's outcome and chosen candidate.
    ScanResult     -- All title results for one pass, in input order.
    RescanReport   -- Primary pass, optional secondary pass, final unmatched list.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

# Always removed during normalization (space-bounded, case-insensitive)
STOP_WORDS: tuple[str, ...] = (
    "the",
    "of",
    "in",
    "and",
    "a",
    "an",
    "vs",
    "versus",
    "starring",
    "video game",
)

LEADING_ARTICLES: tuple[str, ...] = ("the", "a", "an")

# Space-delimited roman numeral sequels -> arabic digits
ROMAN_NUMERALS: dict[str, str] = {
    "I": "1",
    "II": "2",
    "III": "3",
    "IV": "4",
}

# Markers looked up in the original display name (not the canonical one)
PREFERRED_REGION_MARKERS: tuple[str, ...] = ("(U)", "(JUE)")
GOOD_DUMP_MARKER = "[!]"

TIER_BASELINE = 1
TIER_PREFERRED_REGION = 2
TIER_GOOD_DUMP = 3

# Score adjustments applied by the disambiguator
SUBSET_BOOST_FLOOR = 0.95
SUBSET_CONFLICT_CAP = 0.50
NUMERIC_CONFLICT_CAP = 0.65

MAX_TITLES = 100


class TitleOutcome(StrEnum):
    COPIED = "copied"
    UNMATCHED = "unmatched"
    SKIPPED = "skipped"
    COPY_FAILED = "copy_failed"
    DRY_RUN = "dry_run"


@dataclass(frozen=True)
class CandidateFile:
    """A file in the source directory, snapshotted once per run."""

    path: Path
    name: str
    stem: str

    @classmethod
    def from_path(cls, path: Path) -> "CandidateFile":
        return cls(path=path, name=path.name, stem=path.stem)


@dataclass(frozen=True)
class CanonicalName:
    """Normalized form of a title or file stem used for comparison."""

    text: str
    tokens: tuple[str, ...] = ()
    numbers: frozenset[int] = frozenset()

    def __bool__(self) -> bool:
        return bool(self.text)


@dataclass(frozen=True)
class MatchDecision:
    base_score: float
    score: float
    token_subset: bool
    numeric_conflict: bool
    matched: bool

    @property
    def adjustment(self) -> str:
        """Short label for the boost/penalty that fired, '' if none."""
        if self.token_subset and self.numeric_conflict:
            return "subset-conflict-cap"
        if self.token_subset:
            return "subset-boost"
        if self.numeric_conflict and self.score < self.base_score:
            return "numeric-conflict-cap"
        if self.numeric_conflict:
            return "numeric-conflict"
        return ""


@dataclass
class MatchCandidate:
    file: CandidateFile
    score: float
    tier: int
    decision: MatchDecision | None = None


@dataclass
class TitleResult:
    title: str
    outcome: TitleOutcome
    chosen: MatchCandidate | None = None
    candidates: int = 0


@dataclass
class ScanResult:
    """Results of one pass, in input order."""

    threshold: float
    results: list[TitleResult] = field(default_factory=list)

    def _titles(self, *outcomes: TitleOutcome) -> list[str]:
        return [r.title for r in self.results if r.outcome in outcomes]

    @property
    def unmatched(self) -> list[str]:
        return self._titles(TitleOutcome.UNMATCHED)

    @property
    def copied(self) -> list[str]:
        return self._titles(TitleOutcome.COPIED)

    @property
    def skipped(self) -> list[str]:
        return self._titles(TitleOutcome.SKIPPED)

    @property
    def failed(self) -> list[str]:
        return self._titles(TitleOutcome.COPY_FAILED)

    @property
    def matched(self) -> list[str]:
        """Titles with a winner, whether or not the copy landed."""
        return self._titles(
            TitleOutcome.COPIED, TitleOutcome.COPY_FAILED, TitleOutcome.DRY_RUN
        )


@dataclass
class RescanReport:
    primary: ScanResult
    secondary: ScanResult | None = None

    @property
    def final_unmatched(self) -> list[str]:
        last = self.secondary if self.secondary is not None else self.primary
        return last.unmatched
