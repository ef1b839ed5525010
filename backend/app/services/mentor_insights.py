"""Mentor insights: trends and blind spots across a founder's submissions.

Pure aggregation over stored score dicts, ordered oldest → newest.
No LLM, no DB access.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from ..constants import BLIND_SPOT_THRESHOLD, SCORE_FIELDS, SCORE_LABELS
from ..schemas.mentor_schema import BlindSpot, DimensionTrend, MentorSummary

ScoreMap = Mapping[str, Any]


def _numeric(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def average_score(scores: Optional[ScoreMap]) -> float:
    """Mean of the numeric dimension values in *scores* (0 when none)."""
    if not scores:
        return 0.0
    values = [v for v in (_numeric(scores.get(key)) for key in SCORE_FIELDS) if v is not None]
    if not values:
        return 0.0
    return sum(values) / len(values)


def find_blind_spots(
    scores: Optional[ScoreMap],
    threshold: float = BLIND_SPOT_THRESHOLD,
) -> List[BlindSpot]:
    """Dimensions scoring strictly below *threshold*."""
    if not scores:
        return []
    spots: List[BlindSpot] = []
    for key in SCORE_FIELDS:
        value = _numeric(scores.get(key))
        if value is not None and value < threshold:
            spots.append(BlindSpot(dimension=key, label=SCORE_LABELS[key], score=value))
    return spots


def score_differences(first: ScoreMap, last: ScoreMap) -> List[DimensionTrend]:
    """First vs. last score per dimension; missing values count as 0."""
    trends: List[DimensionTrend] = []
    for key in SCORE_FIELDS:
        first_value = _numeric(first.get(key)) or 0.0
        last_value = _numeric(last.get(key)) or 0.0
        trends.append(
            DimensionTrend(
                dimension=key,
                label=SCORE_LABELS[key],
                first=first_value,
                last=last_value,
                diff=round(last_value - first_value, 2),
            )
        )
    return trends


def build_mentor_summary(score_history: Sequence[Optional[ScoreMap]]) -> MentorSummary:
    """Summarise *score_history* (oldest first) for the mentor view."""
    total = len(score_history)

    if total == 0:
        return MentorSummary(total_ideas=0, message="No analyzed ideas yet.")

    first = score_history[0] or {}
    first_avg = average_score(first)

    if total == 1:
        return MentorSummary(
            total_ideas=1,
            first_average=round(first_avg, 2),
            last_average=round(first_avg, 2),
            blind_spots=find_blind_spots(first),
            message=(
                f"First idea analysis completed. Overall score: {first_avg:.1f}/100. "
                "Submit more analyses to track progress."
            ),
        )

    last = score_history[-1] or {}
    last_avg = average_score(last)
    improvement = last_avg - first_avg
    blind_spots = find_blind_spots(last)

    parts = [
        f"{total} ideas analyzed in total.",
        f"Overall score went from {first_avg:.1f}/100 in the first analysis "
        f"to {last_avg:.1f}/100 in the latest.",
    ]
    if improvement > 0:
        parts.append(f"Improvement: +{improvement:.1f} points.")
    elif improvement < 0:
        parts.append(f"Attention: {abs(improvement):.1f} point decline.")
    else:
        parts.append("Scores stayed the same.")

    if blind_spots:
        parts.append(
            f"{len(blind_spots)} area(s) need work (score < {BLIND_SPOT_THRESHOLD:.0f})."
        )
    else:
        parts.append(f"No area below {BLIND_SPOT_THRESHOLD:.0f}.")

    return MentorSummary(
        total_ideas=total,
        first_average=round(first_avg, 2),
        last_average=round(last_avg, 2),
        improvement=round(improvement, 2),
        trends=score_differences(first, last),
        blind_spots=blind_spots,
        message=" ".join(parts),
    )
