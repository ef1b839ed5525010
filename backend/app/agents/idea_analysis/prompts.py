"""Prompt templates for AI idea analysis.

System + User prompt separation. Both prompts ask for a single JSON
object with snake_case keys; the reply is validated in the generator.
"""

from __future__ import annotations

from ...constants import ANSWER_FIELDS, MISSING_ANSWER_PLACEHOLDER
from ...schemas.idea_schema import Answers

SCORES_SYSTEM_PROMPT = """You are an experienced startup analyst and investor.
You evaluate startup ideas objectively and in detail.
Respond with a single JSON object only. No markdown, no explanation, no prose."""

CANVAS_SYSTEM_PROMPT = """You are an experienced startup consultant and Lean Canvas expert.
You turn startup ideas into detailed, professional Lean Canvases.
Respond with a single JSON object only. No markdown, no explanation, no prose."""


def format_answers(answers: Answers) -> str:
    """Render all seven answers as a bullet list, in intake order."""
    lines = []
    for field_name, label in ANSWER_FIELDS:
        value = getattr(answers, field_name) or MISSING_ANSWER_PLACEHOLDER
        lines.append(f"- {label}: {value}")
    return "\n".join(lines)


def build_scores_prompt(answers: Answers) -> str:
    """Build user prompt for the six insight scores."""
    return f"""Below are the details of a startup idea.
Give each category a score between 0 and 100 and respond in JSON.

FOUNDER'S ANSWERS:
{format_answers(answers)}

Respond with exactly this JSON shape (JSON only, no other text):

{{
  "problem_validation": 75,
  "market_maturity": 65,
  "competition": 70,
  "differentiation": 80,
  "tech_feasibility": 60,
  "risk_uncertainty": 55
}}

Scoring criteria:
- problem_validation: clarity, urgency and realism of the problem (0-100)
- market_maturity: maturity of the market and clarity of the target segment (0-100)
- competition: depth of the competitive analysis and awareness of alternatives (0-100)
- differentiation: strength of differentiation and unique value of the solution (0-100)
- tech_feasibility: technical feasibility and fit of the technology stack (0-100)
- risk_uncertainty: risk awareness and uncertainty management (0-100, higher awareness = higher score)"""


def build_canvas_prompt(answers: Answers) -> str:
    """Build user prompt for Lean Canvas generation."""
    return f"""Below are the details of a startup idea.
Build a professional Lean Canvas from this information and respond in JSON.

FOUNDER'S ANSWERS:
{format_answers(answers)}

Respond with exactly this JSON shape (JSON only, no other text):

{{
  "problem": "Core problems customers face (2-3 points)",
  "solution": "Proposed solution approach (2-3 points)",
  "unique_value_prop": "Unique value proposition (1 sentence)",
  "customer_segments": "Target customer segments",
  "channels": "Channels to reach customers",
  "revenue_streams": "Revenue models and streams",
  "cost_structure": "Main cost items",
  "key_metrics": "Key metrics to track",
  "unfair_advantage": "Sustainable competitive advantage"
}}

Write detailed, professional and realistic content for every field."""
