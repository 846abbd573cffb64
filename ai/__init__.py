from ai.service import AIService, ContentPart
from ai.factory import make_service
from ai.exceptions import (
    LLMHelperError,
    MediaReadError,
    RemoteCallError,
    ResponseParseError,
)
from ai.response_parser import clean_json_response, parse_llm_json, validate_llm_json

__all__ = [
    "AIService",
    "ContentPart",
    "make_service",
    "LLMHelperError",
    "MediaReadError",
    "RemoteCallError",
    "ResponseParseError",
    "clean_json_response",
    "parse_llm_json",
    "validate_llm_json",
]
