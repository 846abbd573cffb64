from __future__ import annotations

import os
from typing import Optional

import dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from prompts.templates import PromptTemplates

DEFAULT_MODEL = "gemini-2.0-flash"


class HelperConfig(BaseModel):
    """
    Everything the helper needs to open its model session.

    Built once and passed to ``LLMHelper``; frozen afterwards.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False)
    model: str = DEFAULT_MODEL
    provider: str = "gemini"
    prompts: PromptTemplates = Field(default_factory=PromptTemplates.standard)
    max_attempts: int = Field(default=1, ge=1)
    request_timeout_ms: Optional[int] = Field(default=None, gt=0)

    @field_validator("api_key")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("api_key must be a non-empty string")
        return value

    @classmethod
    def from_env(cls, **overrides) -> "HelperConfig":
        """
        Build a config from the environment (after loading ``.env``).

        Reads:
          - GEMINI_API_KEY (falls back to GOOGLE_API_KEY)
          - LLM_HELPER_MODEL
          - LLM_HELPER_PROMPT_STYLE   ("standard" | "quoted")
          - LLM_HELPER_PROMPTS_FILE   (JSON template set, wins over the style)
          - LLM_HELPER_MAX_ATTEMPTS

        Keyword *overrides* win over the environment.
        """
        dotenv.load_dotenv()

        values = {}
        api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
        if api_key:
            values["api_key"] = api_key

        model = os.getenv("LLM_HELPER_MODEL")
        if model:
            values["model"] = model

        prompts_file = os.getenv("LLM_HELPER_PROMPTS_FILE")
        prompt_style = os.getenv("LLM_HELPER_PROMPT_STYLE")
        if prompts_file:
            values["prompts"] = PromptTemplates.from_file(prompts_file)
        elif prompt_style:
            values["prompts"] = PromptTemplates.from_style(prompt_style)

        max_attempts = os.getenv("LLM_HELPER_MAX_ATTEMPTS")
        if max_attempts:
            values["max_attempts"] = int(max_attempts)

        values.update({k: v for k, v in overrides.items() if v is not None})
        if "api_key" not in values:
            raise ValueError(
                "No API key configured: set GEMINI_API_KEY or GOOGLE_API_KEY"
            )
        return cls(**values)
