"""Error hierarchy for the model client.

Three failure kinds are kept apart so callers can tell "the model said
something unexpected" from "the model was unreachable" from "the input
file was not there".
"""

from __future__ import annotations

from typing import Optional


class LLMHelperError(Exception):
    """Base exception for every failure surfaced by the helper."""

    kind: str = "error"


class MediaReadError(LLMHelperError, OSError):
    """
    Raised when a source image/audio file cannot be read.

    Attributes:
        path: The path that failed to load.
    """

    kind = "io"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class RemoteCallError(LLMHelperError, RuntimeError):
    """Raised when the remote model rejects the request or cannot be reached."""

    kind = "remote"


class ResponseParseError(LLMHelperError, ValueError):
    """
    Raised when the cleaned model output is not valid JSON or does not
    match the expected shape.

    Attributes:
        text: The cleaned response text that failed to parse.
    """

    kind = "parse"

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text
