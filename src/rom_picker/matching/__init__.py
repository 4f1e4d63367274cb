"""Matching engine: wanted-list titles against candidate file names.

Submodules:
    normalize    -- Canonical names. Un-inverts "Title, The" in file names,
                    strips leading articles, maps space-delimited roman numerals
                    I-IV to digits (the pronoun "I" included), drops (...) and
                    [...] tags, drops bare 2-4 digit numbers from titles, strips
                    punctuation and stop words, lowercases. Collects the bare
                    numeric tokens for sequence checks.
    similarity   -- Levenshtein ratio via rapidfuzz. Empty input scores 0.
    disambiguate -- Token-subset boost (>= 0.95) and numeric-sequence conflict
                    caps (0.65, or 0.50 for a conflicting subset). Returns a
                    MatchDecision recording which adjustment fired.
    rank         -- Priority tiers from region (U)/(JUE) and good-dump [!]
                    markers; stable (tier, score) ordering and winner pick.
"""
