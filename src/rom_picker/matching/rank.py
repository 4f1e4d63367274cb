"""Priority tiers and winner selection among accepted candidates."""

from loguru import logger

from ..models import (
    GOOD_DUMP_MARKER,
    PREFERRED_REGION_MARKERS,
    TIER_BASELINE,
    TIER_GOOD_DUMP,
    TIER_PREFERRED_REGION,
    MatchCandidate,
)

log = logger.bind(stage="rank")


def priority_tier(display_name: str) -> int:
    """Tier from the original file name: 3 = region + good dump, 2 = region, 1 = any."""
    if not any(marker in display_name for marker in PREFERRED_REGION_MARKERS):
        return TIER_BASELINE
    if GOOD_DUMP_MARKER in display_name:
        return TIER_GOOD_DUMP
    return TIER_PREFERRED_REGION


def rank_candidates(candidates: list[MatchCandidate]) -> list[MatchCandidate]:
    """Sort by (tier, score) descending; equal keys keep enumeration order."""
    # sorted() stays stable with reverse=True
    return sorted(candidates, key=lambda c: (c.tier, c.score), reverse=True)


def pick_best(candidates: list[MatchCandidate]) -> MatchCandidate | None:
    if not candidates:
        return None
    ranked = rank_candidates(candidates)
    best = ranked[0]
    log.debug(
        f"Best of {len(ranked)}: {best.file.name!r} "
        f"tier={best.tier} score={best.score:.3f}"
    )
    return best
