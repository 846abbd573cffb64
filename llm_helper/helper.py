"""
Model client facade.

``LLMHelper`` owns one model session and exposes six request operations:

  - extract_problem_from_images   images        -> ProblemInfo
  - generate_solution             problem info  -> SolutionResponse
  - debug_solution_with_images    info + images -> SolutionResponse
  - analyze_audio_file            audio file    -> AnalysisResult
  - analyze_audio_from_base64     base64 audio  -> AnalysisResult
  - analyze_image_file            image file    -> AnalysisResult

Every operation sends exactly one request.  Failures surface as
MediaReadError, RemoteCallError or ResponseParseError.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel

from ai.exceptions import LLMHelperError, RemoteCallError
from ai.factory import make_service
from ai.response_parser import validate_llm_json
from ai.service import AIService, ContentPart
from dto.analysis import AnalysisResult, ProblemInfo, SolutionResponse
from dto.media import AUDIO_MIME_TYPE, IMAGE_MIME_TYPE, MediaPart
from prompts.analysis import (
    get_audio_analysis_prompt,
    get_debug_prompt,
    get_extract_problem_prompt,
    get_image_analysis_prompt,
    get_solution_prompt,
)

from llm_helper.config import HelperConfig
from llm_helper.media import PathLike, read_media_part, read_media_parts

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _serialise_problem_info(problem_info: Any) -> str:
    if isinstance(problem_info, BaseModel):
        problem_info = problem_info.model_dump(mode="json")
    return json.dumps(problem_info, indent=2, ensure_ascii=False)


class LLMHelper:
    """
    Facade over a remote generative-model session.

    The session is created from *config* unless one is injected.  Close
    it with ``await helper.aclose()`` or use the helper as an async
    context manager.
    """

    def __init__(self, config: HelperConfig, service: Optional[AIService] = None) -> None:
        self._config = config
        self._service = service if service is not None else make_service(config)
        logger.info(
            "[LLMHelper] Initialised with provider=%s model=%s",
            config.provider,
            config.model,
        )

    @classmethod
    def from_api_key(cls, api_key: str, **overrides) -> "LLMHelper":
        return cls(HelperConfig(api_key=api_key, **overrides))

    @property
    def config(self) -> HelperConfig:
        return self._config

    async def aclose(self) -> None:
        await self._service.aclose()

    async def __aenter__(self) -> "LLMHelper":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # JSON operations
    # ------------------------------------------------------------------

    async def extract_problem_from_images(self, image_paths: Sequence[PathLike]) -> ProblemInfo:
        if not image_paths:
            raise ValueError("extract_problem_from_images needs at least one image path")
        try:
            image_parts = await read_media_parts(image_paths, IMAGE_MIME_TYPE)
            prompt = get_extract_problem_prompt(self._config.prompts)
            logger.info("[LLMHelper] Extracting problem from %d image(s)", len(image_parts))
            text = await self._send([prompt, *image_parts])
            parsed = validate_llm_json(text, ProblemInfo)
        except LLMHelperError as exc:
            logger.error("[LLMHelper] Error extracting problem from images: %s", exc)
            raise
        logger.debug("[LLMHelper] Parsed problem: %s", parsed)
        return parsed

    async def generate_solution(self, problem_info: Any) -> SolutionResponse:
        prompt = get_solution_prompt(
            self._config.prompts, _serialise_problem_info(problem_info)
        )
        logger.info("[LLMHelper] Calling model for solution...")
        try:
            text = await self._send([prompt])
            logger.info("[LLMHelper] Model returned result.")
            parsed = validate_llm_json(text, SolutionResponse)
        except LLMHelperError as exc:
            logger.error("[LLMHelper] Error in generate_solution: %s", exc)
            raise
        logger.debug("[LLMHelper] Parsed solution: %s", parsed)
        return parsed

    async def debug_solution_with_images(
        self,
        problem_info: Any,
        current_state: str,
        debug_image_paths: Sequence[PathLike],
    ) -> SolutionResponse:
        serialised = _serialise_problem_info(problem_info)
        try:
            image_parts = await read_media_parts(debug_image_paths, IMAGE_MIME_TYPE)
            prompt = get_debug_prompt(self._config.prompts, serialised, current_state)
            logger.info(
                "[LLMHelper] Debugging solution with %d image(s)", len(image_parts)
            )
            text = await self._send([prompt, *image_parts])
            parsed = validate_llm_json(text, SolutionResponse)
        except LLMHelperError as exc:
            logger.error("[LLMHelper] Error debugging solution with images: %s", exc)
            raise
        logger.debug("[LLMHelper] Parsed debug solution: %s", parsed)
        return parsed

    # ------------------------------------------------------------------
    # Raw-text operations
    # ------------------------------------------------------------------

    async def analyze_audio_file(self, audio_path: PathLike) -> AnalysisResult:
        try:
            audio_part = await read_media_part(audio_path, AUDIO_MIME_TYPE)
            return await self._analyze(
                get_audio_analysis_prompt(self._config.prompts), audio_part
            )
        except LLMHelperError as exc:
            logger.error("[LLMHelper] Error analyzing audio file: %s", exc)
            raise

    async def analyze_audio_from_base64(self, data: str, mime_type: str) -> AnalysisResult:
        audio_part = MediaPart(data=data, mime_type=mime_type)
        try:
            return await self._analyze(
                get_audio_analysis_prompt(self._config.prompts), audio_part
            )
        except LLMHelperError as exc:
            logger.error("[LLMHelper] Error analyzing audio from base64: %s", exc)
            raise

    async def analyze_image_file(self, image_path: PathLike) -> AnalysisResult:
        try:
            image_part = await read_media_part(image_path, IMAGE_MIME_TYPE)
            return await self._analyze(
                get_image_analysis_prompt(self._config.prompts), image_part
            )
        except LLMHelperError as exc:
            logger.error("[LLMHelper] Error analyzing image file: %s", exc)
            raise

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _analyze(self, prompt: str, part: MediaPart) -> AnalysisResult:
        logger.info("[LLMHelper] Analyzing %s payload", part.mime_type)
        text = await self._send([prompt, part])
        return AnalysisResult(text=text, timestamp=_now_ms())

    async def _send(self, parts: List[ContentPart]) -> str:
        """Single outbound call; SDK errors become RemoteCallError."""
        try:
            return await self._service.generate(parts)
        except LLMHelperError:
            raise
        except Exception as exc:
            raise RemoteCallError(f"Model request failed: {exc}") from exc
