from __future__ import annotations

from typing import List, Optional

import pytest

from ai.service import AIService, ContentPart
from llm_helper import HelperConfig, LLMHelper

# 1x1 transparent PNG
PNG_1PX = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)

PROBLEM_JSON = (
    '{"problem_statement":"x","context":"y",'
    '"suggested_responses":["z"],"reasoning":"w"}'
)

SOLUTION_JSON = (
    '{"solution": {"code": "c", "problem_statement": "x", "context": "y",'
    ' "suggested_responses": ["z"], "reasoning": "w"}}'
)


class FakeService(AIService):
    """In-memory session that records every request it receives."""

    def __init__(self, response: str = "", error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[List[ContentPart]] = []
        self.closed = False

    async def generate(self, parts: List[ContentPart]) -> str:
        self.calls.append(list(parts))
        if self.error is not None:
            raise self.error
        return self.response

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def service() -> FakeService:
    return FakeService()


@pytest.fixture
def config() -> HelperConfig:
    return HelperConfig(api_key="test-key")


@pytest.fixture
def helper(config, service) -> LLMHelper:
    return LLMHelper(config, service=service)


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "shot.png"
    path.write_bytes(PNG_1PX)
    return path
