"""
Text signal matching.

Exact phrase containment over normalized text: no stemming and no fuzzy
matching, so every detection can be explained by the phrases it matched.
"""

import re
from functools import lru_cache
from typing import NamedTuple

from relevance_engine.models.schemas import Confidence

_DASHES = re.compile(r"[-–—]")
_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")

# Terms this short only match as whole words ("did" must not hit "individual").
SHORT_TERM_LENGTH = 3


@lru_cache(maxsize=8192)
def normalize_text(text: str) -> str:
    """Lowercase, turn dashes and punctuation into spaces, collapse whitespace."""
    if not text:
        return ""
    text = _DASHES.sub(" ", text.lower())
    text = _NON_WORD.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip()


@lru_cache(maxsize=4096)
def _word_pattern(term: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(term)}\b")


def contains_term(text: str, term: str) -> bool:
    """True if ``term`` occurs in ``text`` after normalizing both."""
    if not text or not term:
        return False
    normalized_text = normalize_text(text)
    normalized_term = normalize_text(term)
    if not normalized_term:
        return False
    if len(normalized_term) <= SHORT_TERM_LENGTH:
        return _word_pattern(normalized_term).search(normalized_text) is not None
    return normalized_term in normalized_text


class TermMatches(NamedTuple):
    count: int
    matched: list[str]


def count_term_matches(text: str, terms: tuple[str, ...] | list[str]) -> TermMatches:
    """Count the distinct terms of ``terms`` present in ``text``."""
    matched = [term for term in terms if contains_term(text, term)]
    return TermMatches(len(matched), matched)


class ConfidenceThresholds(NamedTuple):
    """
    Signal-count thresholds for one detection channel.

    ``high_strong`` strong hits are enough for high confidence; a single strong
    hit is high when corroborated and medium otherwise. Without strong hits,
    ``medium_moderate`` moderate hits give medium, and ``low_moderate``
    moderate hits together with ``low_weak`` weak hits give low.
    """
    high_strong: int = 2
    medium_moderate: int = 2
    low_moderate: int = 1
    low_weak: int = 1


def classify_confidence(
    strong_count: int,
    moderate_count: int,
    weak_count: int = 0,
    negative_count: int = 0,
    thresholds: ConfidenceThresholds = ConfidenceThresholds(),
    corroboration: int = 0,
) -> Confidence | None:
    """
    Turn signal-tier match counts into a confidence label (None = undetected).

    ``corroboration`` counts extra evidence (such as satisfied contextual
    signals) that upgrades a lone strong hit the same way a moderate hit does.
    Negative hits demote medium to low and drop low entirely; high confidence
    is never overridden.
    """
    confidence: Confidence | None = None
    if strong_count >= thresholds.high_strong:
        confidence = "high"
    elif strong_count >= 1:
        confidence = "high" if (moderate_count >= 1 or corroboration > 0) else "medium"
    elif moderate_count >= thresholds.medium_moderate:
        confidence = "medium"
    elif moderate_count >= thresholds.low_moderate and weak_count >= thresholds.low_weak:
        confidence = "low"

    if negative_count > 0 and confidence != "high":
        confidence = "low" if confidence == "medium" else None
    return confidence


CONFIDENCE_ORDER: dict[str, int] = {"high": 0, "medium": 1, "low": 2}
