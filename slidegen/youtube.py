"""YouTube URL classification and transcript lookup."""

import logging
import re
from typing import Optional

from slidegen.config import SlideGenConfig
from slidegen.errors import TranscriptFetchError
from slidegen.http import post_json

logger = logging.getLogger(__name__)

YOUTUBE_URL_PATTERN = re.compile(
    r"^(https?://)?(www\.)?(youtube\.com|youtu\.?be)/.+$",
    re.IGNORECASE,
)


def is_youtube_url(text: Optional[str]) -> bool:
    """Return True if text is a YouTube (youtube.com or youtu.be) URL with a path."""
    if not isinstance(text, str):
        return False
    return YOUTUBE_URL_PATTERN.match(text) is not None


def fetch_transcript(url: str, config: Optional[SlideGenConfig] = None) -> str:
    """Fetch the transcript of a YouTube video from the transcript service.

    Args:
        url: YouTube video URL
        config: Service configuration (default: loaded from YAML/env)

    Returns:
        Non-empty transcript text

    Raises:
        TranscriptFetchError: If the service fails or returns no transcript
    """
    config = config or SlideGenConfig.load_from_yaml()
    logger.info(f"Fetching YouTube transcript for {url}")

    data = post_json(
        config.transcript_url,
        {"ytUrl": url},
        timeout=config.service_timeout,
        error_cls=TranscriptFetchError,
    )

    transcript = data.get("transcript") if isinstance(data, dict) else None
    if not isinstance(transcript, str) or not transcript.strip():
        raise TranscriptFetchError(
            "Failed to fetch YouTube transcript: response contained no transcript",
            upstream_message=str(data)[:500],
        )

    logger.debug(f"Transcript fetched: {len(transcript)} characters")
    return transcript
