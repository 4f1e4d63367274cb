"""Turn a raw similarity into an adjusted score and a match decision.

Edit distance alone cannot tell "near-miss spelling" from "same franchise,
wrong entry". Two checks sit on top of it:

- token subset: every word of the file name appears in the title, so the
  file is the title with words missing ("Ecco Dolphin" for "Ecco the
  Dolphin"). Boosted to at least 0.95.
- numeric conflict: the title carries sequence numbers and the file lacks the
  highest one ("Streets of Rage 2" for "Streets of Rage 3"). Capped at 0.65,
  or 0.50 when the file also looks like a token subset.
"""

from ..models import (
    NUMERIC_CONFLICT_CAP,
    SUBSET_BOOST_FLOOR,
    SUBSET_CONFLICT_CAP,
    CanonicalName,
    MatchDecision,
)
from .similarity import similarity


def is_token_subset(title: CanonicalName, file: CanonicalName) -> bool:
    """True when every file token is also a title token (order ignored)."""
    if not file.tokens:
        return False
    return set(file.tokens) <= set(title.tokens)


def has_numeric_conflict(title: CanonicalName, file: CanonicalName) -> bool:
    """True when the file is missing the title's highest sequence number."""
    if not title.numbers:
        return False
    return max(title.numbers) not in file.numbers


def evaluate(
    title: CanonicalName,
    file: CanonicalName,
    threshold: float,
) -> MatchDecision:
    base = similarity(title.text, file.text)
    subset = is_token_subset(title, file)
    conflict = has_numeric_conflict(title, file)

    score = base
    if subset and conflict:
        score = min(score, SUBSET_CONFLICT_CAP)
    elif subset:
        score = max(score, SUBSET_BOOST_FLOOR)
    if conflict and score > NUMERIC_CONFLICT_CAP:
        score = NUMERIC_CONFLICT_CAP

    return MatchDecision(
        base_score=base,
        score=score,
        token_subset=subset,
        numeric_conflict=conflict,
        matched=score >= threshold,
    )
