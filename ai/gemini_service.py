import base64
import logging
from typing import Any, List, Optional

from google import genai
from google.genai import errors, types

from tenacity import (
    AsyncRetrying,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

from ai.exceptions import RemoteCallError
from ai.service import AIService, ContentPart
from dto.media import MediaPart

logger = logging.getLogger(__name__)

_DEFAULT_MODEL = "gemini-2.0-flash"

_MIN_WAIT_SECONDS = 2
_MAX_WAIT_SECONDS = 60

_RETRYABLE_EXCEPTIONS = (errors.ServerError, ConnectionError)


class GeminiService(AIService):
    """AIService backed by the Google Gemini API."""

    def __init__(
        self,
        api_key: str,
        model: str = _DEFAULT_MODEL,
        *,
        max_attempts: int = 1,
        request_timeout_ms: Optional[int] = None,
        min_wait_seconds: float = _MIN_WAIT_SECONDS,
        max_wait_seconds: float = _MAX_WAIT_SECONDS,
        client: Optional[Any] = None,
    ):
        self._model = model
        self._max_attempts = max(1, max_attempts)
        self._min_wait = min_wait_seconds
        self._max_wait = max_wait_seconds
        if client is None:
            http_options = None
            if request_timeout_ms is not None:
                http_options = types.HttpOptions(timeout=request_timeout_ms)
            client = genai.Client(api_key=api_key, http_options=http_options)
        self._client = client

    @property
    def model(self) -> str:
        return self._model

    async def generate(self, parts: List[ContentPart]) -> str:
        contents = [self._to_content(p) for p in parts]

        retrying = AsyncRetrying(
            retry=retry_if_exception_type(_RETRYABLE_EXCEPTIONS),
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(multiplier=1, min=self._min_wait, max=self._max_wait),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                response = await self._client.aio.models.generate_content(
                    model=self._model,
                    contents=contents,
                )

        text = response.text
        if text is None:
            raise RemoteCallError(
                f"Gemini returned no text (prompt feedback: {response.prompt_feedback})"
            )
        return text

    async def aclose(self) -> None:
        await self._client.aio.aclose()

    @staticmethod
    def _to_content(part: ContentPart):
        if isinstance(part, MediaPart):
            return types.Part.from_bytes(
                data=base64.b64decode(part.data, validate=True),
                mime_type=part.mime_type,
            )
        return part
