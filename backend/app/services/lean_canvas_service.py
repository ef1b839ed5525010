"""Lean Canvas builder: template-based, no LLM.

Copies the answers that map one-to-one onto canvas boxes, composes a
value proposition from the target customer and problem, and fills the
boxes the intake questions never ask about with generic defaults.
"""

from __future__ import annotations

from typing import Optional

from ..schemas.idea_schema import Answers
from ..schemas.lean_canvas_schema import LeanCanvas

PROBLEM_EXCERPT_CHARS = 100

DEFAULT_REVENUE_STREAMS = (
    "Product or service sales, subscription plans and potential investment income"
)
DEFAULT_CHANNELS = "Digital channels, partner incubators, mentor network"
DEFAULT_COST_STRUCTURE = (
    "Development costs, operating expenses, marketing and distribution costs"
)
DEFAULT_KEY_METRICS = (
    "User acquisition, active users, revenue growth, customer satisfaction "
    "and market penetration"
)
DEFAULT_UNFAIR_ADVANTAGE = (
    "Technology infrastructure, domain knowledge, strategic partnerships "
    "and early market entry"
)


def _excerpt(text: str, limit: int = PROBLEM_EXCERPT_CHARS) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def build_unique_value_prop(target_customer: Optional[str], problem: Optional[str]) -> str:
    """Compose a one-sentence value proposition, degrading gracefully."""
    customer = (target_customer or "").strip()
    problem = (problem or "").strip()

    if customer and problem:
        return f"A unique solution for {customer} that solves: {_excerpt(problem)}"
    if customer:
        return f"A tailored, value-focused solution built for {customer}."
    if problem:
        return f"An innovative and effective approach to: {_excerpt(problem)}"
    return "An innovative solution that delivers unique value to our customers."


def build_lean_canvas(answers: Answers) -> LeanCanvas:
    """Derive a Lean Canvas from *answers*. Never fails."""
    return LeanCanvas(
        problem=answers.problem or "",
        solution=answers.solution or "",
        unique_value_prop=build_unique_value_prop(answers.target_customer, answers.problem),
        customer_segments=answers.target_customer or "",
        channels=DEFAULT_CHANNELS,
        revenue_streams=answers.revenue_model or DEFAULT_REVENUE_STREAMS,
        cost_structure=DEFAULT_COST_STRUCTURE,
        key_metrics=DEFAULT_KEY_METRICS,
        unfair_advantage=DEFAULT_UNFAIR_ADVANTAGE,
    )
