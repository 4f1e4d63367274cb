"""Normalized edit-distance similarity between canonical names."""

from rapidfuzz.distance import Levenshtein


def similarity(a: str, b: str) -> float:
    """Return 1 - levenshtein(a, b) / max(len(a), len(b)).

    Plain character-level ratio with unit costs. Token awareness is layered
    on top by the disambiguator. Empty input scores 0, including two empty
    strings.
    """
    if not a or not b:
        return 0.0
    distance = Levenshtein.distance(a, b)
    return 1.0 - distance / max(len(a), len(b))
