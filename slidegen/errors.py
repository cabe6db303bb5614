"""
Slide Generation Error Classes

This module defines the exception hierarchy for the slide generation core.
Every outbound collaborator has exactly one tagged error class, so the
tool boundary can render failures uniformly without parsing messages.

Error Hierarchy:
    SlideGenError (base)
    ├── ConfigurationError (missing/invalid configuration, no network call made)
    ├── InvalidInputError (missing text or invalid URL, no network call made)
    └── ServiceError (an external collaborator failed)
        ├── TranscriptFetchError (transcript service)
        ├── EntitlementError (account-info service or disallowed plan)
        ├── ParameterInferenceError (inference service, never escapes the core)
        └── GenerationError (presentation generation service)

Usage:
    >>> from slidegen.errors import EntitlementError
    >>>
    >>> try:
    >>>     entitlement = resolve_entitlement(account_id)
    >>> except EntitlementError as e:
    >>>     print(e.upgrade_url)
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class SlideGenError(Exception):
    """Base exception for all slide generation errors.

    All core exceptions inherit from this class, enabling catch-all
    handling at the tool boundary:

    Example:
        >>> try:
        >>>     create_presentation(text, account_id)
        >>> except SlideGenError as e:
        >>>     logger.error(f"Presentation failed: {e}")
    """

    error_type = "slidegen"


class ConfigurationError(SlideGenError):
    """Raised when configuration is invalid or the caller identity is missing.

    Raised before any network call is attempted. The message should tell
    the user which setting or environment variable to provide.

    Example:
        >>> raise ConfigurationError(
        >>>     "No account ID supplied. Pass accountId or set SLIDEGEN_ACCOUNT_ID."
        >>> )
    """

    error_type = "configuration"


class InvalidInputError(SlideGenError):
    """Raised when a tool call is missing its text or carries an unusable URL."""

    error_type = "invalid_input"


class ServiceError(SlideGenError):
    """Raised when an external collaborator call fails.

    Attributes:
        service: Collaborator tag (transcript, entitlement, inference, generation)
        status_code: Upstream HTTP status code, when a response was received
        upstream_message: Raw message from the upstream failure, if any
    """

    service = "service"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        upstream_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.upstream_message = upstream_message

    @property
    def error_type(self) -> str:
        return self.service


class TranscriptFetchError(ServiceError):
    """Raised when a YouTube transcript cannot be obtained.

    Fatal for YouTube-URL inputs; there is no fallback text.
    """

    service = "transcript"


class EntitlementError(ServiceError):
    """Raised when the caller's account cannot be resolved or is not allowed.

    Attributes:
        upgrade_url: Pricing page link, set only when the plan is not allowed
    """

    service = "entitlement"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        upstream_message: Optional[str] = None,
        upgrade_url: Optional[str] = None,
    ):
        super().__init__(message, status_code=status_code, upstream_message=upstream_message)
        self.upgrade_url = upgrade_url


class ParameterInferenceError(ServiceError):
    """Raised when the parameter-inference service fails.

    Always caught inside the parameter inferencer and downgraded to
    hints and defaults.
    """

    service = "inference"


class GenerationError(ServiceError):
    """Raised when the generation service fails or returns an unusable response."""

    service = "generation"


def error_payload(error: BaseException) -> Dict[str, Any]:
    """Render an exception as the flat error object returned by the tools.

    Args:
        error: Any exception raised while serving a tool call

    Returns:
        Dict with success=False, a human-readable message and an error tag
    """
    if isinstance(error, SlideGenError):
        payload: Dict[str, Any] = {
            "success": False,
            "error": str(error),
            "error_type": error.error_type,
        }
        if isinstance(error, EntitlementError) and error.upgrade_url:
            payload["upgrade_url"] = error.upgrade_url
        return payload

    logger.exception("Unexpected error while serving tool call")
    return {
        "success": False,
        "error": str(error) or "Unknown error",
        "error_type": "internal",
    }
