"""
Slide Generation Core

Turns free-form text, or a YouTube video URL, into a generated slide deck
by orchestrating four external services: account entitlement, YouTube
transcripts, parameter inference and presentation generation.

Key Components:
    - youtube.py: YouTube URL classification and transcript lookup
    - entitlement.py: Account plan lookup and allow-list enforcement
    - parameters.py: Hint extraction, inference call and precedence merge
    - generation.py: Request assembly, submission and response validation
    - config.py: Configuration loading and startup validation
    - errors.py: One tagged error class per collaborator

Usage:
    >>> from slidegen import SlideGenConfig, create_presentation
    >>>
    >>> config = SlideGenConfig.load_from_yaml('.slidedeck/config.yaml')
    >>> result = create_presentation("8 slides about volcanoes", "acct-123", config)
    >>> print(result.presentation_url)
"""

from slidegen.config import ConfigStatus, SlideGenConfig
from slidegen.entitlement import Entitlement, resolve_entitlement
from slidegen.errors import (
    ConfigurationError,
    EntitlementError,
    GenerationError,
    InvalidInputError,
    ParameterInferenceError,
    ServiceError,
    SlideGenError,
    TranscriptFetchError,
    error_payload,
)
from slidegen.generation import (
    GenerationRequest,
    GenerationResult,
    build_generation_request,
    create_presentation,
)
from slidegen.parameters import (
    GenerationParameters,
    InferredParameters,
    ParsedHints,
    extract_hints,
    infer_parameters,
    merge_parameters,
)
from slidegen.youtube import fetch_transcript, is_youtube_url

__all__ = [
    # Configuration
    "ConfigStatus",
    "SlideGenConfig",

    # Components
    "is_youtube_url",
    "fetch_transcript",
    "Entitlement",
    "resolve_entitlement",
    "ParsedHints",
    "InferredParameters",
    "GenerationParameters",
    "extract_hints",
    "merge_parameters",
    "infer_parameters",
    "GenerationRequest",
    "GenerationResult",
    "build_generation_request",
    "create_presentation",

    # Errors
    "SlideGenError",
    "ConfigurationError",
    "InvalidInputError",
    "ServiceError",
    "TranscriptFetchError",
    "EntitlementError",
    "ParameterInferenceError",
    "GenerationError",
    "error_payload",
]
