"""
Utilities for turning raw LLM output into validated structured data.
"""

import json
import logging
import re
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ai.exceptions import ResponseParseError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*")
_TRAILING_FENCE = re.compile(r"\s*```$")


def clean_json_response(raw: str) -> str:
    """
    Strip one leading and one trailing markdown code fence (```` ``` ```` or
    ```` ```json ````) and the surrounding whitespace.

    Text without fences is only trimmed.
    """
    cleaned = raw.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_llm_json(raw: str) -> Any:
    """
    Clean *raw* and load it as JSON.

    Raises ``ResponseParseError`` when the cleaned text is not valid JSON.
    Nothing is repaired or extracted from surrounding prose.
    """
    cleaned = clean_json_response(raw)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.warning("Failed to parse LLM JSON: %s — %s", exc, cleaned[:200])
        raise ResponseParseError(
            f"Model response is not valid JSON: {exc}", text=cleaned
        ) from exc


def validate_llm_json(raw: str, model: Type[ModelT]) -> ModelT:
    """Parse *raw* and validate the result against *model*."""
    payload = parse_llm_json(raw)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.warning(
            "LLM JSON does not match %s: %d error(s)",
            model.__name__,
            exc.error_count(),
        )
        raise ResponseParseError(
            f"Model response does not match {model.__name__}: {exc}",
            text=clean_json_response(raw),
        ) from exc
