from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Union

from dto.media import MediaPart

ContentPart = Union[str, MediaPart]


class AIService(ABC):
    """
    Base class for remote generative-model sessions.

    A session turns an ordered list of parts (text prompts and inline
    base64 media) into the model's generated text.
    """

    @abstractmethod
    async def generate(self, parts: List[ContentPart]) -> str:
        """Send the parts as a single request and return the response text."""
        ...

    async def aclose(self) -> None:
        """Release the underlying connection.  No-op by default."""
        return None
