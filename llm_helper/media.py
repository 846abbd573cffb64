"""
File-to-payload conversion.

Each path is read fully into memory on a worker thread and wrapped as a
base64 ``MediaPart``.  Multi-path loads fan out concurrently and only
return once every read has finished.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import List, Sequence, Union

from ai.exceptions import MediaReadError
from dto.media import MediaPart

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


async def _read_bytes(path: PathLike) -> bytes:
    return await asyncio.to_thread(Path(path).read_bytes)


async def read_media_part(path: PathLike, mime_type: str) -> MediaPart:
    try:
        raw = await _read_bytes(path)
    except OSError as exc:
        logger.error("  [Media] Cannot read %s: %s", path, exc)
        raise MediaReadError(f"Cannot read media file {path}: {exc}", path=str(path)) from exc
    logger.debug("  [Media] Loaded %s (%d bytes, %s)", path, len(raw), mime_type)
    return MediaPart.from_bytes(raw, mime_type)


async def read_media_parts(paths: Sequence[PathLike], mime_type: str) -> List[MediaPart]:
    """Load every path concurrently, preserving the input order."""
    return list(
        await asyncio.gather(*(read_media_part(p, mime_type) for p in paths))
    )
