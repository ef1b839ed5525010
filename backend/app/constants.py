"""Centralized constants shared by the analyzers, routes and mentor view.

Field order here is the order used in prompts and in the mentor summary.
"""

from __future__ import annotations

# ── Intake questions ────────────────────────────────────────────────────
# (field name, label used in prompts)

ANSWER_FIELDS: list[tuple[str, str]] = [
    ("problem", "Problem"),
    ("target_customer", "Target Customer"),
    ("existing_alternatives", "Existing Alternatives"),
    ("solution", "Solution"),
    ("revenue_model", "Revenue Model"),
    ("tech_stack_thoughts", "Tech Stack Thoughts"),
    ("biggest_risks", "Biggest Risks"),
]

MISSING_ANSWER_PLACEHOLDER = "Not provided"

# ── Score dimensions ────────────────────────────────────────────────────

SCORE_LABELS: dict[str, str] = {
    "problem_validation": "Problem Validation",
    "market_maturity": "Market Maturity",
    "competition": "Competition",
    "differentiation": "Differentiation",
    "tech_feasibility": "Tech Feasibility",
    "risk_uncertainty": "Risk Awareness",
}

SCORE_FIELDS: list[str] = list(SCORE_LABELS)

# Scores below this are flagged to mentors as blind spots.
BLIND_SPOT_THRESHOLD = 40.0

# ── Lean Canvas ─────────────────────────────────────────────────────────

CANVAS_FIELDS: list[str] = [
    "problem",
    "solution",
    "unique_value_prop",
    "customer_segments",
    "channels",
    "revenue_streams",
    "cost_structure",
    "key_metrics",
    "unfair_advantage",
]
