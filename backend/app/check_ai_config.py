"""AI configuration checker.

Usage: python -m app.check_ai_config

Exits 0 when AI analysis is available, 1 otherwise.
"""

from __future__ import annotations

import sys
from typing import Optional

from .config import DEFAULT_AI_MODEL, AiConfig, load_ai_config


def render_report(config: AiConfig) -> str:
    """Human-readable configuration report. The key is masked."""
    lines = [
        "Checking AI Configuration...",
        "",
        "Environment Variables:",
        f"  AI_ENABLED: {'true' if config.enabled else 'false'}",
        f"  AI_API_URL: {config.api_url or 'NOT SET'}",
        f"  AI_API_KEY: {'Set (' + config.masked_key() + ')' if config.api_key else 'NOT SET'}",
        f"  AI_MODEL:   {config.model}{' (default)' if config.model == DEFAULT_AI_MODEL else ''}",
        f"  JSON mode:  {'yes' if config.capabilities.supports_structured_output else 'no'}",
        "",
    ]

    if config.is_available():
        lines += [
            "AI is AVAILABLE and ready to use!",
            "",
            "To test AI analysis, use:",
            "  curl -X POST http://localhost:8000/ideas/ai/test",
        ]
    else:
        lines += [
            "AI is NOT AVAILABLE - ideas will be analyzed heuristically.",
            "",
            "To enable AI analysis:",
            "1. Create a .env file in the backend directory",
            "2. Add the following variables:",
            "",
            "   AI_API_URL=https://api.groq.com/openai/v1/chat/completions",
            "   AI_API_KEY=gsk-your-groq-api-key-here",
            f"   AI_MODEL={DEFAULT_AI_MODEL}",
            "   AI_ENABLED=true",
            "",
            "3. Restart your server",
        ]
    return "\n".join(lines)


def main(config: Optional[AiConfig] = None) -> int:
    config = config or load_ai_config()
    print(render_report(config))
    return 0 if config.is_available() else 1


if __name__ == "__main__":
    sys.exit(main())
