from __future__ import annotations

from typing import TYPE_CHECKING

from ai.service import AIService
from ai.gemini_service import GeminiService

if TYPE_CHECKING:
    from llm_helper.config import HelperConfig


def make_service(config: "HelperConfig") -> AIService:
    """
    Instantiate the AIService named by ``config.provider``.

    Only ``"gemini"`` (alias ``"google"``) is available.
    """
    provider = config.provider.lower().strip()
    if provider in ("gemini", "google"):
        return GeminiService(
            api_key=config.api_key,
            model=config.model,
            max_attempts=config.max_attempts,
            request_timeout_ms=config.request_timeout_ms,
        )
    raise ValueError(f"Unknown AI provider: {config.provider!r}")
