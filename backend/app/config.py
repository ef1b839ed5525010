"""Runtime configuration for the idea analysis service.

All values are read from the environment (``.env`` supported) exactly once
at process start and handed around as plain value objects:

  AI_ENABLED         : feature flag, enabled unless explicitly false/0/no/off
  AI_API_URL         : OpenAI-compatible chat completions endpoint
  AI_API_KEY         : bearer credential for the endpoint (no default)
  AI_MODEL           : model identifier (default: llama3-70b-8192)
  AI_REQUEST_TIMEOUT : per-request timeout in seconds (default: 30)
  AI_TEMPERATURE     : sampling temperature (default: 0.7)
  DATABASE_URL       : SQLAlchemy URL for idea records
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_AI_API_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_AI_MODEL = "llama3-70b-8192"
DEFAULT_AI_TIMEOUT = 30.0
DEFAULT_AI_TEMPERATURE = 0.7
DEFAULT_DATABASE_URL = "sqlite:///./ideas.db"

_FALSY_FLAGS = {"false", "0", "no", "off"}


# ── Model capabilities ──────────────────────────────────────────────────

@dataclass(frozen=True)
class ModelCapabilities:
    """What a completion model supports beyond plain chat."""

    supports_structured_output: bool = False


MODEL_CAPABILITIES: Dict[str, ModelCapabilities] = {
    # Groq
    "llama3-70b-8192": ModelCapabilities(supports_structured_output=True),
    "llama3-8b-8192": ModelCapabilities(supports_structured_output=True),
    "llama-3.1-8b-instant": ModelCapabilities(supports_structured_output=True),
    "llama-3.3-70b-versatile": ModelCapabilities(supports_structured_output=True),
    "mixtral-8x7b-32768": ModelCapabilities(supports_structured_output=False),
    "gemma2-9b-it": ModelCapabilities(supports_structured_output=False),
    # OpenAI
    "gpt-3.5-turbo": ModelCapabilities(supports_structured_output=True),
    "gpt-4-turbo": ModelCapabilities(supports_structured_output=True),
    "gpt-4o": ModelCapabilities(supports_structured_output=True),
    "gpt-4o-mini": ModelCapabilities(supports_structured_output=True),
    "gpt-4.1": ModelCapabilities(supports_structured_output=True),
    "gpt-4.1-mini": ModelCapabilities(supports_structured_output=True),
}

_UNKNOWN_MODEL = ModelCapabilities()


def capabilities_for(model: str) -> ModelCapabilities:
    """Look up *model* in the capability table; unknown models get plain chat."""
    return MODEL_CAPABILITIES.get(model.strip(), _UNKNOWN_MODEL)


# ── AI configuration ────────────────────────────────────────────────────

@dataclass(frozen=True)
class AiConfig:
    """Immutable settings for the external completion service."""

    enabled: bool = True
    api_url: str = DEFAULT_AI_API_URL
    api_key: str = ""
    model: str = DEFAULT_AI_MODEL
    timeout: float = DEFAULT_AI_TIMEOUT
    temperature: float = DEFAULT_AI_TEMPERATURE
    scores_max_tokens: int = 1500
    canvas_max_tokens: int = 2000

    def is_available(self) -> bool:
        """True iff the flag is on and both endpoint and credential are set."""
        return bool(self.enabled and self.api_url.strip() and self.api_key.strip())

    @property
    def capabilities(self) -> ModelCapabilities:
        return capabilities_for(self.model)

    def masked_key(self, visible: int = 10) -> str:
        """Credential prefix safe for diagnostics output."""
        if not self.api_key:
            return ""
        return f"{self.api_key[:visible]}..."


def _parse_flag(raw: Optional[str], default: bool = True) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSY_FLAGS


def _env_float(env: Mapping[str, str], key: str, default: float) -> float:
    try:
        return float(env.get(key, str(default)))
    except ValueError:
        return default


def load_ai_config(env: Optional[Mapping[str, str]] = None) -> AiConfig:
    """Build an ``AiConfig`` from *env* (defaults to ``os.environ``)."""
    if env is None:
        env = os.environ

    return AiConfig(
        enabled=_parse_flag(env.get("AI_ENABLED")),
        api_url=env.get("AI_API_URL", DEFAULT_AI_API_URL).strip(),
        api_key=env.get("AI_API_KEY", "").strip(),
        model=env.get("AI_MODEL", "").strip() or DEFAULT_AI_MODEL,
        timeout=_env_float(env, "AI_REQUEST_TIMEOUT", DEFAULT_AI_TIMEOUT),
        temperature=_env_float(env, "AI_TEMPERATURE", DEFAULT_AI_TEMPERATURE),
    )


@lru_cache(maxsize=1)
def get_ai_config() -> AiConfig:
    """Process-wide configuration, read from the environment on first use."""
    return load_ai_config()


def get_database_url() -> str:
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
