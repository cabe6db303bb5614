"""Transcript tool — fetches the transcript of a YouTube video."""

import asyncio
import logging
from typing import Optional

from slidegen.config import SlideGenConfig
from slidegen.errors import InvalidInputError, error_payload
from slidegen.youtube import fetch_transcript, is_youtube_url

logger = logging.getLogger(__name__)


async def get_youtube_transcript(
    yt_url: str,
    config: Optional[SlideGenConfig] = None,
) -> dict:
    """Fetch the transcript of a YouTube video.

    Args:
        yt_url: YouTube video URL.
        config: Service configuration (default: loaded from YAML/env per call).

    Returns:
        Dict with success status and transcript text, or an error message.
    """
    try:
        if not yt_url or not yt_url.strip():
            raise InvalidInputError("Missing YouTube URL parameter.")
        if not is_youtube_url(yt_url.strip()):
            raise InvalidInputError(f"Invalid YouTube URL: {yt_url}")

        config = config or SlideGenConfig.load_from_yaml()
        transcript = await asyncio.to_thread(fetch_transcript, yt_url.strip(), config)

        return {"success": True, "transcript": transcript}
    except Exception as e:
        logger.warning(f"get_youtube_transcript failed: {e}")
        return error_payload(e)
