from __future__ import annotations

import base64

from pydantic import BaseModel, ConfigDict

IMAGE_MIME_TYPE = "image/png"
AUDIO_MIME_TYPE = "audio/mp3"


class MediaPart(BaseModel):
    """Inline media payload: base64 text plus the MIME type it was tagged with."""

    model_config = ConfigDict(frozen=True)

    data: str
    mime_type: str

    @classmethod
    def from_bytes(cls, raw: bytes, mime_type: str) -> "MediaPart":
        return cls(
            data=base64.b64encode(raw).decode("ascii"),
            mime_type=mime_type,
        )
