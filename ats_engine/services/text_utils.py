"""Small text helpers shared by the ATS scoring services.

Everything here is regex/whitespace based:
- Word and sentence splitting
- Normalization for keyword lookups
- Boundary-aware term containment
- Half-up rounding for score arithmetic
"""

from __future__ import annotations

import math
import re
from typing import Iterable, Pattern

SENTENCE_SPLIT = re.compile(r"[.!?]+")
NON_ALPHANUMERIC = re.compile(r"[^a-z0-9\s]")
WHITESPACE = re.compile(r"\s+")


def words(text: str, min_length: int = 1) -> list[str]:
    """Whitespace tokens of at least ``min_length`` characters."""
    return [w for w in text.split() if len(w) >= min_length]


def word_count(text: str, min_length: int = 1) -> int:
    return len(words(text, min_length))


def sentences(text: str) -> list[str]:
    return [s for s in SENTENCE_SPLIT.split(text) if s.strip()]


def normalize_text(text: str) -> str:
    """Lowercase, replace punctuation with spaces and collapse whitespace."""
    text = NON_ALPHANUMERIC.sub(" ", text.lower())
    return WHITESPACE.sub(" ", text).strip()


def term_pattern(term: str) -> Pattern[str]:
    """Compile ``term`` so it only matches when not glued to other word characters."""
    return re.compile(rf"(?<!\w){re.escape(term)}(?!\w)", re.I)


def contains_term(text: str, term: str) -> bool:
    if not term:
        return False
    return term_pattern(term).search(text) is not None


def count_matches(text: str, patterns: Iterable[Pattern[str]]) -> int:
    """Total number of non-overlapping hits of every pattern in ``text``."""
    return sum(len(p.findall(text)) for p in patterns)


def round_half_up(value: float) -> int:
    # round() is banker's rounding; scores use the conventional .5-up rule
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))
