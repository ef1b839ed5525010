"""Analysis orchestrator: AI first, heuristic fallback.

Per request:
  1. Check availability (flag on, endpoint and credential configured).
  2. If available, run AI scores and AI canvas concurrently and wait for
     both (a join, not a race).
  3. If both succeed → source "ai".
  4. Otherwise (unavailable, or either call failed) recompute BOTH scores
     and canvas heuristically → source "heuristic". A lone AI success is
     discarded so one result never mixes provenance.

`analyze()` never raises for AI problems; the caller always gets a
usable `AnalysisResult`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from ...config import AiConfig
from ...schemas.analysis_schema import AnalysisResult
from ...schemas.idea_schema import Answers
from ...services.ai_client import AiRequestError, AiUnavailable
from ...services.lean_canvas_service import build_lean_canvas
from ...services.scoring_engine import compute_scores
from .generator import AiAnalyzer

logger = logging.getLogger(__name__)

_EXPECTED_FAILURES = (AiUnavailable, AiRequestError)


def analyze_heuristically(answers: Answers) -> AnalysisResult:
    """Deterministic scores + template canvas, no I/O."""
    return AnalysisResult(
        scores=compute_scores(answers),
        lean_canvas=build_lean_canvas(answers),
        source="heuristic",
    )


class AnalysisOrchestrator:
    """Chooses between the AI path and the heuristic fallback."""

    def __init__(self, config: AiConfig, analyzer: Optional[AiAnalyzer] = None):
        self.config = config
        self.analyzer = analyzer or AiAnalyzer(config)

    def is_available(self) -> bool:
        return self.config.is_available()

    async def analyze(self, answers: Answers) -> AnalysisResult:
        """Analyze *answers*, falling back to heuristics on any AI failure."""
        if not self.is_available():
            logger.warning(
                "AI is not available (enabled=%s, endpoint=%s, key=%s): using heuristic methods.",
                self.config.enabled,
                "set" if self.config.api_url else "NOT SET",
                "set" if self.config.api_key else "NOT SET",
            )
            return analyze_heuristically(answers)

        logger.info("Attempting AI analysis with model %s", self.config.model)

        async with self.analyzer.open_client() as client:
            scores, canvas = await asyncio.gather(
                self.analyzer.generate_scores(answers, client=client),
                self.analyzer.generate_canvas(answers, client=client),
                return_exceptions=True,
            )

        failures = [r for r in (scores, canvas) if isinstance(r, BaseException)]
        for failure in failures:
            if not isinstance(failure, Exception):
                raise failure
            if isinstance(failure, _EXPECTED_FAILURES):
                logger.warning("AI analysis failed: %s", failure)
            else:
                logger.error("Unexpected error during AI analysis", exc_info=failure)

        if failures:
            logger.warning("Falling back to heuristic methods.")
            return analyze_heuristically(answers)

        logger.info("AI analysis completed successfully.")
        return AnalysisResult(scores=scores, lean_canvas=canvas, source="ai")

    def analyze_sync(self, answers: Answers) -> AnalysisResult:
        """Blocking wrapper for scripts; do not call from a running loop."""
        return asyncio.run(self.analyze(answers))
