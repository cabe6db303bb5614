"""Create-presentation tool — wraps the slide generation pipeline."""

import asyncio
import logging
from typing import Optional

from slidegen.config import SlideGenConfig
from slidegen.errors import InvalidInputError, error_payload
from slidegen.generation import create_presentation

logger = logging.getLogger(__name__)


async def create_ppt_from_text(
    user_text: str,
    account_id: Optional[str] = None,
    config: Optional[SlideGenConfig] = None,
) -> dict:
    """Generate a presentation from text or a YouTube URL.

    Args:
        user_text: Topic text, or a YouTube URL to build the deck from its transcript.
        account_id: Account ID used to check the caller's plan.
        config: Service configuration (default: loaded from YAML/env per call).

    Returns:
        Dict with success status and presentation links, or an error message.
    """
    try:
        if not user_text or not user_text.strip():
            raise InvalidInputError("Missing parameters: userText is required.")

        config = config or SlideGenConfig.load_from_yaml()
        result = await asyncio.to_thread(create_presentation, user_text, account_id, config)

        return {"message": "PPT Created!", **result.to_dict()}
    except Exception as e:
        logger.warning(f"create_ppt_from_text failed: {e}")
        return error_payload(e)
