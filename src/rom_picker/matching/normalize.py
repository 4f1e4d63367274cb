"""Title and filename normalization into comparable canonical names.

Both sides of a comparison go through the same pipeline. Filenames get one
extra step up front (un-inverting "Title, The") and titles get one extra step
in the middle (dropping bare 2-4 digit numbers, usually release years).
"""

import re
from collections.abc import Iterable

from ..models import LEADING_ARTICLES, ROMAN_NUMERALS, STOP_WORDS, CanonicalName

# Digit runs not glued to a letter or another digit ("Sonic_2" -> 2, "X4" -> none)
_BARE_NUMBER = r"(?<![^\W_])\d+(?![^\W_])"
_BARE_YEARISH = r"(?<![^\W_])\d{2,4}(?![^\W_])"

_INVERTED_ARTICLE_RE = re.compile(
    r"^(?P<body>.*?),\s*(?P<article>" + "|".join(LEADING_ARTICLES) + r")\s*$",
    re.IGNORECASE,
)
_LEADING_ARTICLE_RE = re.compile(
    r"^\s*(?:" + "|".join(LEADING_ARTICLES) + r")\s+", re.IGNORECASE
)
_ROMAN_RE = re.compile(
    r"(?<= )("
    + "|".join(sorted(ROMAN_NUMERALS, key=len, reverse=True))
    + r")(?= )"
)
_TAG_RE = re.compile(r"\([^)]*\)|\[[^\]]*\]")
_YEARISH_RE = re.compile(_BARE_YEARISH)
_NUMBER_RE = re.compile(_BARE_NUMBER)
_PUNCT_RE = re.compile(r"[^\w\s]|_")
_SPACE_RE = re.compile(r"\s+")


def _stop_word_pattern(extra: Iterable[str]) -> re.Pattern[str]:
    words = list(STOP_WORDS)
    for word in extra:
        word = _SPACE_RE.sub(" ", word).strip()
        if word and word.lower() not in words:
            words.append(word.lower())
    # Longest first so "video game" wins over any single-word prefix
    alternation = "|".join(
        r"\s+".join(re.escape(part) for part in w.split())
        for w in sorted(words, key=len, reverse=True)
    )
    return re.compile(r"(?<=\s)(?:" + alternation + r")(?=\s)", re.IGNORECASE)


_DEFAULT_STOP_RE = _stop_word_pattern(())


def _uninvert_article(raw: str) -> str:
    """'Lion King, The' -> 'The Lion King'."""
    m = _INVERTED_ARTICLE_RE.match(raw)
    if not m:
        return raw
    return f"{m.group('article')} {m.group('body')}"


def _strip_stop_words(text: str, pattern: re.Pattern[str]) -> str:
    # Removing one stop word can expose a multi-word one ("video the game")
    padded = f" {text} "
    while True:
        stripped = pattern.sub(" ", padded)
        if stripped == padded:
            return stripped
        padded = stripped


def normalize(
    raw: str,
    is_filename: bool = False,
    extra_stop_words: Iterable[str] = (),
) -> CanonicalName:
    """Turn a wanted-list title or a file stem into a CanonicalName.

    Order matters, each step works on the previous step's output:
    article un-inversion (filenames), leading article, roman numerals,
    (...) and [...] tags, bare 2-4 digit numbers (titles), punctuation,
    stop words, whitespace, case.

    The numeric tokens are collected just before punctuation is stripped.
    The roman numeral step is case sensitive and rewrites a lone " I " too,
    so "Before I Sleep" becomes "before 1 sleep".
    """
    s = raw
    if is_filename:
        s = _uninvert_article(s)
    s = _LEADING_ARTICLE_RE.sub("", s)
    s = _ROMAN_RE.sub(lambda m: ROMAN_NUMERALS[m.group(1)], f" {s} ")
    s = _TAG_RE.sub("", s)
    if not is_filename:
        s = _YEARISH_RE.sub("", s)

    numbers = frozenset(int(n) for n in _NUMBER_RE.findall(s))

    s = _PUNCT_RE.sub(" ", s)
    extra = tuple(extra_stop_words)
    pattern = _stop_word_pattern(extra) if extra else _DEFAULT_STOP_RE
    s = _strip_stop_words(s, pattern)
    s = _SPACE_RE.sub(" ", s).strip()
    s = s.lower()

    return CanonicalName(text=s, tokens=tuple(s.split()), numbers=numbers)


def normalize_title(title: str, extra_stop_words: Iterable[str] = ()) -> CanonicalName:
    return normalize(title, is_filename=False, extra_stop_words=extra_stop_words)


def normalize_filename(stem: str, extra_stop_words: Iterable[str] = ()) -> CanonicalName:
    return normalize(stem, is_filename=True, extra_stop_words=extra_stop_words)
