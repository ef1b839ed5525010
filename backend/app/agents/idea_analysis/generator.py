"""AI Idea Analyzer: LLM-powered scores and Lean Canvas.

Uses the centralized completion client (`request_completion`) for one
request per task. The reply is parsed into a JSON object and validated
at this boundary before any field is trusted:

  - Scores: all six keys must be present; each value is coerced into
    an int in [0, 100] (non-numeric → 0).
  - Canvas: missing or unusable fields become empty strings.
"""

from __future__ import annotations

import math
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

import httpx

from ...config import AiConfig
from ...constants import CANVAS_FIELDS, SCORE_FIELDS
from ...schemas.idea_schema import Answers
from ...schemas.lean_canvas_schema import LeanCanvas
from ...schemas.score_schema import ScoreVector
from ...services.ai_client import (
    AiRequestError,
    AiUnavailable,
    ParseFailed,
    parse_json_object,
    request_completion,
)
from .prompts import (
    CANVAS_SYSTEM_PROMPT,
    SCORES_SYSTEM_PROMPT,
    build_canvas_prompt,
    build_scores_prompt,
)

__all__ = [
    "AiAnalyzer",
    "AiRequestError",
    "AiUnavailable",
    "normalize_score",
    "normalize_canvas_field",
]


def normalize_score(value: Any) -> int:
    """Coerce a model-supplied score into an int in [0, 100].

    Non-numbers (including booleans, ``None`` and NaN) become 0.
    Halves round up.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, int):
        return max(0, min(100, value))
    if math.isnan(value):
        return 0
    clamped = max(0.0, min(100.0, float(value)))
    return int(math.floor(clamped + 0.5))


def normalize_canvas_field(value: Any) -> str:
    """Coerce a model-supplied canvas box into plain text."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return "\n".join(item.strip() for item in value if item.strip())
    return ""


class AiAnalyzer:
    """Generates scores and a Lean Canvas via the completion service."""

    def __init__(
        self,
        config: AiConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport

    def is_available(self) -> bool:
        return self.config.is_available()

    @asynccontextmanager
    async def open_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """One client shared by the concurrent calls of a single request."""
        async with httpx.AsyncClient(
            timeout=self.config.timeout,
            transport=self._transport,
        ) as client:
            yield client

    async def _complete_json(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
        client: Optional[httpx.AsyncClient],
    ) -> Dict[str, Any]:
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]
        if client is None:
            async with self.open_client() as own_client:
                raw = await request_completion(
                    self.config, messages=messages, max_tokens=max_tokens, client=own_client
                )
        else:
            raw = await request_completion(
                self.config, messages=messages, max_tokens=max_tokens, client=client
            )

        result = parse_json_object(raw)
        if isinstance(result, ParseFailed):
            raise AiRequestError(f"Failed to parse JSON response: {result.reason}")
        return result.data

    async def generate_scores(
        self,
        answers: Answers,
        client: Optional[httpx.AsyncClient] = None,
    ) -> ScoreVector:
        """Ask the model for the six insight scores.

        Raises
        ------
        AiUnavailable
            If AI is disabled or not configured.
        AiRequestError
            On any transport, status or parsing failure, or missing keys.
        """
        if not self.is_available():
            raise AiUnavailable("AI is not available")

        parsed = await self._complete_json(
            system_prompt=SCORES_SYSTEM_PROMPT,
            user_prompt=build_scores_prompt(answers),
            max_tokens=self.config.scores_max_tokens,
            client=client,
        )

        missing = [key for key in SCORE_FIELDS if key not in parsed]
        if missing:
            raise AiRequestError(f"AI scores response missing fields: {missing}")

        return ScoreVector(**{key: normalize_score(parsed[key]) for key in SCORE_FIELDS})

    async def generate_canvas(
        self,
        answers: Answers,
        client: Optional[httpx.AsyncClient] = None,
    ) -> LeanCanvas:
        """Ask the model for a Lean Canvas.

        Raises
        ------
        AiUnavailable
            If AI is disabled or not configured.
        AiRequestError
            On any transport, status or parsing failure.
        """
        if not self.is_available():
            raise AiUnavailable("AI is not available")

        parsed = await self._complete_json(
            system_prompt=CANVAS_SYSTEM_PROMPT,
            user_prompt=build_canvas_prompt(answers),
            max_tokens=self.config.canvas_max_tokens,
            client=client,
        )

        return LeanCanvas(**{key: normalize_canvas_field(parsed.get(key)) for key in CANVAS_FIELDS})
