"""OpenAI-compatible chat completions client.

Every AI call in the service goes through `request_completion()`.
This ensures:
  - Endpoint, credential, model, temperature and timeout come from one
    ``AiConfig`` value.
  - JSON mode (``response_format``) is only requested from models the
    capability table says support it.
  - Every failure surfaces as ``AiUnavailable`` or ``AiRequestError``;
    there are no retries: callers fall back instead.
"""

from __future__ import annotations

import json
import logging
import re
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

import httpx

from ..config import AiConfig

logger = logging.getLogger(__name__)

_JSON_BLOCK = re.compile(r"\{.*\}", re.DOTALL)


class AiUnavailable(Exception):
    """Raised when AI analysis is disabled or not configured."""


class AiRequestError(Exception):
    """Raised when the completion service cannot produce a usable reply."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Reply parsing
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ParsedOk:
    data: Dict[str, Any]


@dataclass(frozen=True)
class ParseFailed:
    reason: str


ParseResult = Union[ParsedOk, ParseFailed]


def parse_json_object(raw: str) -> ParseResult:
    """Parse a JSON object out of raw model output.

    Tries the whole reply first, then the outermost ``{...}`` block for
    replies wrapped in prose or markdown fences.
    """
    text = (raw or "").strip()
    if not text:
        return ParseFailed("empty content")

    try:
        parsed = json.loads(text)
    except (ValueError, RecursionError) as exc:
        match = _JSON_BLOCK.search(text)
        if match is None:
            return ParseFailed(f"no JSON object found: {exc}")
        try:
            parsed = json.loads(match.group(0))
        except (ValueError, RecursionError) as inner:
            return ParseFailed(f"invalid JSON object: {inner}")

    if not isinstance(parsed, dict):
        return ParseFailed(f"expected a JSON object, got {type(parsed).__name__}")
    return ParsedOk(parsed)


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------
def build_payload(
    config: AiConfig,
    *,
    messages: List[Dict[str, str]],
    max_tokens: int,
) -> Dict[str, Any]:
    """Build a chat completions payload for *config*'s model."""
    payload: Dict[str, Any] = {
        "model": config.model,
        "messages": messages,
        "temperature": config.temperature,
        "max_tokens": max_tokens,
    }
    if config.capabilities.supports_structured_output:
        payload["response_format"] = {"type": "json_object"}
    return payload


def _extract_content(data: Any) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as exc:
        raise AiRequestError("Invalid API response structure") from exc
    if not isinstance(content, str) or not content.strip():
        raise AiRequestError("Empty response from AI")
    return content


async def request_completion(
    config: AiConfig,
    *,
    messages: List[Dict[str, str]],
    max_tokens: int,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """POST one chat completion and return the first choice's content.

    Parameters
    ----------
    config : AiConfig
        Endpoint, credential and model settings.
    messages : list[dict]
        The messages array (system + user).
    max_tokens : int
        Token limit for the reply.
    client : httpx.AsyncClient, optional
        Reuse an existing client; a short-lived one is opened otherwise.

    Raises
    ------
    AiUnavailable
        If *config* is disabled or incomplete.
    AiRequestError
        On timeout, transport failure, non-2xx status or an unusable body.
    """
    if not config.is_available():
        raise AiUnavailable("AI is not available")

    headers = {
        "Authorization": f"Bearer {config.api_key}",
        "Content-Type": "application/json",
    }
    payload = build_payload(config, messages=messages, max_tokens=max_tokens)

    t0 = time.perf_counter()
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=config.timeout) as own_client:
                response = await own_client.post(config.api_url, headers=headers, json=payload)
        else:
            response = await client.post(
                config.api_url, headers=headers, json=payload, timeout=config.timeout
            )
    except httpx.TimeoutException as exc:
        raise AiRequestError(f"AI request timed out after {config.timeout:.0f}s") from exc
    except httpx.HTTPError as exc:
        raise AiRequestError(f"AI request failed: {exc}") from exc

    duration = time.perf_counter() - t0
    logger.debug("Completion HTTP %s from %s (%.1fs)", response.status_code, config.model, duration)

    if not response.is_success:
        raise AiRequestError(
            f"AI API error: {response.status_code} - {response.text[:400]}",
            status_code=response.status_code,
        )

    try:
        data = response.json()
    except ValueError as exc:
        raise AiRequestError("AI API response is not valid JSON") from exc

    usage = data.get("usage") if isinstance(data, dict) else None
    if usage:
        logger.info(
            "Tokens used: prompt=%s, completion=%s, total=%s",
            usage.get("prompt_tokens", "?"),
            usage.get("completion_tokens", "?"),
            usage.get("total_tokens", "?"),
        )

    return _extract_content(data)
