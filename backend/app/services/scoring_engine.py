"""Deterministic Scoring Engine.

Converts the founder's free-text answers into the six insight scores
using keyword-weighted lexical scoring.

Rules
-----
- NO API calls
- NO DB writes
- NO LLMs
- Each score reads exactly one answer field through one lexicon
- Pure deterministic math; blank answers score 0
"""

from __future__ import annotations

from dataclasses import dataclass

from ..schemas.idea_schema import Answers
from ..schemas.score_schema import ScoreVector
from .keyword_lexicon import (
    COMPETITION_KEYWORDS,
    DIFFERENTIATION_KEYWORDS,
    MARKET_KEYWORDS,
    PROBLEM_KEYWORDS,
    RISK_KEYWORDS,
    TECH_KEYWORDS,
    Lexicon,
)
from .text_scorer import ScoringOptions, score_answer

# Any articulated risk awareness beats silence.
RISK_AWARENESS_BONUS = 10.0


def _clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    """Clamp *value* to [lo, hi]."""
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class Dimension:
    """Wiring of one score field to its answer field and lexicon."""

    score_field: str
    answer_field: str
    lexicon: Lexicon
    options: ScoringOptions


DIMENSIONS: tuple[Dimension, ...] = (
    Dimension("problem_validation", "problem", PROBLEM_KEYWORDS,
              ScoringOptions(min_words=15, max_words=120)),
    Dimension("market_maturity", "target_customer", MARKET_KEYWORDS,
              ScoringOptions(min_words=10, max_words=100)),
    Dimension("competition", "existing_alternatives", COMPETITION_KEYWORDS,
              ScoringOptions(min_words=10, max_words=120)),
    Dimension("differentiation", "solution", DIFFERENTIATION_KEYWORDS,
              ScoringOptions(min_words=15, max_words=120)),
    Dimension("tech_feasibility", "tech_stack_thoughts", TECH_KEYWORDS,
              ScoringOptions(min_words=10, max_words=150)),
    Dimension("risk_uncertainty", "biggest_risks", RISK_KEYWORDS,
              ScoringOptions(min_words=10, max_words=150)),
)


def compute_scores(answers: Answers) -> ScoreVector:
    """Compute the six insight scores from *answers*.

    Parameters
    ----------
    answers : Answers
        The founder's answers; any field may be missing.

    Returns
    -------
    ScoreVector
        Every score clamped 0-100. ``risk_uncertainty`` includes the
        flat awareness bonus.
    """
    values: dict[str, float] = {}
    for dim in DIMENSIONS:
        values[dim.score_field] = score_answer(
            getattr(answers, dim.answer_field),
            dim.lexicon,
            dim.options,
        )

    values["risk_uncertainty"] = _clamp(values["risk_uncertainty"] + RISK_AWARENESS_BONUS)

    return ScoreVector(**values)
