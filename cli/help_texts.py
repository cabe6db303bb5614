"""
Centralized Help Text Constants

CLI help text constants and exit codes shared by the subcommands.
"""

from slidegen.errors import (
    ConfigurationError,
    EntitlementError,
    GenerationError,
    InvalidInputError,
    TranscriptFetchError,
)


# Exit codes for different error types
class ExitCodes:
    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_INPUT = 2
    INVALID_CONFIGURATION = 3
    ENTITLEMENT_ERROR = 5
    TRANSCRIPT_ERROR = 6
    GENERATION_ERROR = 8


EXIT_CODE_BY_ERROR = (
    (ConfigurationError, ExitCodes.INVALID_CONFIGURATION),
    (InvalidInputError, ExitCodes.INVALID_INPUT),
    (EntitlementError, ExitCodes.ENTITLEMENT_ERROR),
    (TranscriptFetchError, ExitCodes.TRANSCRIPT_ERROR),
    (GenerationError, ExitCodes.GENERATION_ERROR),
)


def exit_code_for(error: Exception) -> int:
    """Map a pipeline error to the CLI exit code."""
    for error_cls, code in EXIT_CODE_BY_ERROR:
        if isinstance(error, error_cls):
            return code
    return ExitCodes.GENERAL_ERROR


# Command help texts
CREATE_HELP = "Generate a presentation from text or a YouTube URL."
TRANSCRIPT_HELP = "Fetch the transcript of a YouTube video."

CREATE_TEXT_HELP = (
    "Topic text, or a YouTube URL whose transcript becomes the topic. "
    "Slide count, model (gpt-4 or gemini), template and images can be requested "
    "in the text itself, e.g. '8 slides about volcanoes using gpt-4 with images'."
)

TRANSCRIPT_URL_HELP = "YouTube video URL (youtube.com or youtu.be)."

CONFIG_HELP = "Path to configuration YAML (default: $SLIDEGEN_CONFIG or .slidedeck/config.yaml)."
