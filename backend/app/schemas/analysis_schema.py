from __future__ import annotations

from typing import Any, Dict, Literal, Tuple

from pydantic import BaseModel, Field

from .lean_canvas_schema import LeanCanvas
from .score_schema import ScoreVector

AnalysisSource = Literal["ai", "heuristic"]


class AnalysisResult(BaseModel):
    """Scores and canvas for one submission, plus where they came from.

    ``source`` is provenance metadata: it is stored on the idea record but
    never inside the score or canvas payloads.
    """

    scores: ScoreVector
    lean_canvas: LeanCanvas
    source: AnalysisSource = Field(..., description="'ai' or 'heuristic'")

    def payload(self) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """Return ``(scores, lean_canvas)`` as plain dicts for persistence."""
        return self.scores.model_dump(), self.lean_canvas.model_dump()


class AiStatusResponse(BaseModel):
    """Availability probe output. Never includes the credential."""

    available: bool
    enabled: bool
    endpoint_configured: bool
    credential_configured: bool
    model: str
    structured_output: bool
