"""Keyword lexicons for heuristic answer scoring.

One read-only lexicon per score dimension, mapping a keyword to the points
each whole-word occurrence earns. Lexicons are built once at import and
shared by every request; ``MappingProxyType`` keeps them read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

Lexicon = Mapping[str, float]


def _freeze(entries: dict[str, float]) -> Lexicon:
    for keyword, weight in entries.items():
        if weight <= 0:
            raise ValueError(f"Lexicon weight must be positive: {keyword!r}={weight}")
    return MappingProxyType(dict(entries))


# ── Problem validation ──────────────────────────────────────────────────

PROBLEM_KEYWORDS: Lexicon = _freeze({
    "pain": 10, "pains": 10,
    "costly": 10, "expensive": 10,
    "inefficient": 12,
    "manual": 10,
    "slow": 8, "delays": 8, "delay": 8,
    "fragmented": 12,
    "risk": 10, "risks": 10,
    "compliance": 8,
    "uncertainty": 8,
})

# ── Market maturity ─────────────────────────────────────────────────────

MARKET_KEYWORDS: Lexicon = _freeze({
    "market": 8,
    "segment": 10, "segmented": 10,
    "niche": 6,
    "b2b": 8, "b2c": 8,
    "enterprise": 8,
    "startup": 6, "startups": 6,
    "early": 5, "adopters": 5,
    "smb": 6,
    "global": 6,
    "tam": 10, "sam": 10, "som": 10,
})

# ── Competition ─────────────────────────────────────────────────────────

COMPETITION_KEYWORDS: Lexicon = _freeze({
    "competitor": 10, "competitors": 10,
    "alternative": 8, "alternatives": 8,
    "incumbent": 10,
    "existing": 6,
    "manual": 6,
    "spreadsheet": 6, "excel": 6,
    "marketplace": 6,
    "saturated": 10,
    "crowded": 10,
})

# ── Differentiation ─────────────────────────────────────────────────────

DIFFERENTIATION_KEYWORDS: Lexicon = _freeze({
    "unique": 10, "uniquely": 10,
    "different": 8,
    "innovative": 8, "innovation": 8,
    "personalized": 6,
    "automated": 6, "automation": 6,
    "ai": 8, "machine-learning": 8, "ml": 8,
    "data-driven": 8,
    "integrated": 6,
})

# ── Tech feasibility ────────────────────────────────────────────────────

TECH_KEYWORDS: Lexicon = _freeze({
    "api": 8, "apis": 8,
    "microservice": 8, "microservices": 8,
    "event": 5, "event-driven": 8,
    "queue": 6, "kafka": 6, "rabbitmq": 6,
    "react": 5, "vue": 5, "angular": 5,
    "node": 5, "node.js": 5,
    "python": 5, "django": 5, "flask": 5,
    "postgres": 5, "mongodb": 5,
    "docker": 5, "kubernetes": 5,
    "scalable": 8, "scaling": 8,
    "latency": 6,
    "reliability": 6, "resilient": 6,
})

# ── Risk awareness ──────────────────────────────────────────────────────

RISK_KEYWORDS: Lexicon = _freeze({
    "risk": 10, "risks": 10,
    "uncertainty": 10,
    "adoption": 8,
    "churn": 8,
    "regulation": 8, "regulatory": 8,
    "compliance": 8,
    "funding": 6,
    "liquidity": 6,
    "go-to-market": 6,
    "competition": 6,
    "dependency": 6,
})
