"""Heuristic text scorer.

Scores one free-text answer against one keyword lexicon. Three signals:

  1. Length: a capped credit per word, with a penalty for answers that
     are too short (under-elaborated) or too long (padded).
  2. Keywords: every whole-word occurrence of a lexicon keyword earns its
     weight.
  3. Repetition: any word used more than three times costs points.

Pure function: no I/O, no state, safe to share across requests.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Pattern

from .keyword_lexicon import Lexicon

UNDER_LENGTH_PENALTY = 20.0
OVER_LENGTH_PENALTY = 10.0
MAX_LENGTH_CREDIT = 30.0
REPETITION_ALLOWANCE = 3
REPETITION_PENALTY = 5.0


@dataclass(frozen=True)
class ScoringOptions:
    """Per-dimension length expectations."""

    min_words: int = 15
    max_words: int = 120
    base_length_weight: float = 0.5


DEFAULT_OPTIONS = ScoringOptions()


def _clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    """Clamp *value* to [lo, hi]."""
    return max(lo, min(hi, value))


@lru_cache(maxsize=512)
def _keyword_pattern(keyword: str) -> Pattern[str]:
    # Word edges on both sides; hyphens and dots inside the keyword are literal.
    return re.compile(rf"\b{re.escape(keyword.lower())}\b")


def tokenize(text: str) -> list[str]:
    """Split on whitespace runs, dropping empty tokens."""
    return text.split()


def count_keyword(text: str, keyword: str) -> int:
    """Case-insensitive whole-word occurrences of *keyword* in *text*."""
    return len(_keyword_pattern(keyword).findall(text.lower()))


def score_answer(
    text: Optional[str],
    lexicon: Lexicon,
    options: ScoringOptions = DEFAULT_OPTIONS,
) -> float:
    """Score *text* against *lexicon*, returning a value in [0, 100].

    Intermediate values may go negative; only the result is clamped.
    Absent or blank text scores 0.
    """
    if not text or not isinstance(text, str) or not text.strip():
        return 0.0

    words = tokenize(text)
    word_count = len(words)
    score = 0.0

    # Length
    if word_count < options.min_words:
        score -= UNDER_LENGTH_PENALTY
    if word_count > options.max_words:
        score -= OVER_LENGTH_PENALTY
    score += min(MAX_LENGTH_CREDIT, word_count * options.base_length_weight)

    # Keywords
    for keyword, weight in lexicon.items():
        hits = count_keyword(text, keyword)
        if hits:
            score += hits * weight

    # Repetition
    frequencies = Counter(word.lower() for word in words)
    for count in frequencies.values():
        if count > REPETITION_ALLOWANCE:
            score -= (count - REPETITION_ALLOWANCE) * REPETITION_PENALTY

    return _clamp(score)
