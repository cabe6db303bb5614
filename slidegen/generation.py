"""
Presentation Generation

Assembles the single generation request for a tool call and submits it.

Pipeline (strictly sequential, no retries, no partial results):
    configuration check → entitlement → (YouTube URL? transcript)
        → parameter inference → request assembly → submission → validation

Every step either hands a usable value to the next one or aborts the
call with one terminal error. Parameter inference is the only step that
degrades instead of failing.
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from slidegen.config import SlideGenConfig
from slidegen.entitlement import Entitlement, resolve_entitlement
from slidegen.errors import ConfigurationError, GenerationError, InvalidInputError
from slidegen.http import post_json
from slidegen.parameters import GenerationParameters, infer_parameters
from slidegen.youtube import fetch_transcript, is_youtube_url

logger = logging.getLogger(__name__)

REQUEST_SOURCE = "mcp"


@dataclass
class GenerationRequest:
    """The merged payload for one presentation, built and submitted once.

    Attributes:
        entitlement: Resolved account entitlement
        parameters: Resolved generation parameters (topic included)
        request_id: Unique identifier for this submission
        cache: Let the generation service reuse cached results
        source: Tag identifying the calling surface
    """
    entitlement: Entitlement
    parameters: GenerationParameters
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    cache: bool = True
    source: str = REQUEST_SOURCE

    def to_payload(self) -> Dict[str, Any]:
        """Render the wire body expected by the generation service."""
        params = self.parameters
        payload = {
            "msSummaryText": params.topic,
            "extraInfoSource": "",
            "plan": self.entitlement.plan,
            "email": self.entitlement.email,
            "slideCount": params.slide_count,
            "imageForEachSlide": params.image_for_each_slide,
            "language": params.language,
            "model": params.model,
            "template": params.template,
            "image_source": params.image_source,
            "cache": self.cache,
            "source": self.source,
            "requestId": self.request_id,
        }
        if self.entitlement.workspace_id:
            payload["workspaceId"] = self.entitlement.workspace_id
        return payload


class GenerationResult(BaseModel):
    """Validated response of the generation service."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    success: bool
    presentation_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("presentationUrl", "pptUrl", "url", "presentation_url"),
        serialization_alias="presentationUrl",
    )
    pdf_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("pdfUrl", "pdf_url"),
        serialization_alias="pdfUrl",
    )
    presentation_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("presentationId", "presentation_id"),
        serialization_alias="presentationId",
    )
    slide_count: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("slideCount", "slide_count"),
        serialization_alias="slideCount",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Camel-cased result without unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


def build_generation_request(
    entitlement: Entitlement,
    parameters: GenerationParameters,
) -> GenerationRequest:
    """Build the request for one submission with a fresh request ID."""
    return GenerationRequest(entitlement=entitlement, parameters=parameters)


def parse_generation_response(data: Any) -> GenerationResult:
    """Validate a generation service response.

    Raises:
        GenerationError: If the response is not an object, is not
            successful, or carries no presentation reference
    """
    if not isinstance(data, dict):
        raise GenerationError(
            "Invalid API response: expected an object",
            upstream_message=str(data)[:500],
        )

    try:
        result = GenerationResult.model_validate(data)
    except ValidationError as e:
        raise GenerationError("Invalid API response", upstream_message=str(e))

    if not result.success:
        message = data.get("error") or data.get("message") or "generation was not successful"
        raise GenerationError(f"Presentation generation failed: {message}", upstream_message=str(message))

    if not result.presentation_url and not result.presentation_id:
        raise GenerationError("Invalid API response: no presentation URL or ID returned")

    return result


def submit_generation_request(request: GenerationRequest, config: SlideGenConfig) -> GenerationResult:
    """Submit a generation request exactly once and validate the response."""
    logger.info(
        f"Submitting generation request {request.request_id} "
        f"(slides={request.parameters.slide_count}, model={request.parameters.model})"
    )
    data = post_json(
        config.generation_url,
        request.to_payload(),
        timeout=config.generation_timeout,
        error_cls=GenerationError,
    )
    return parse_generation_response(data)


def create_presentation(
    raw_input: str,
    account_id: Optional[str] = None,
    config: Optional[SlideGenConfig] = None,
) -> GenerationResult:
    """Create a presentation from free text or a YouTube URL.

    Args:
        raw_input: Topic text, or a YouTube URL whose transcript becomes the topic
        account_id: Caller identity (default: configured SLIDEGEN_ACCOUNT_ID)
        config: Service configuration (default: loaded from YAML/env)

    Returns:
        Validated GenerationResult

    Raises:
        ConfigurationError: If configuration is invalid or no identity is available
        InvalidInputError: If raw_input is empty
        EntitlementError: If the account cannot be resolved or its plan is not allowed
        TranscriptFetchError: If the input is a YouTube URL and its transcript is unavailable
        GenerationError: If the generation service fails or returns an unusable response
    """
    config = config or SlideGenConfig.load_from_yaml()

    status = config.validate()
    if not status.ok:
        raise ConfigurationError("Invalid configuration: " + "; ".join(status.errors))

    identity = config.resolve_account_id(account_id)
    if not identity:
        raise ConfigurationError(
            "No account ID supplied. Pass an account ID or set SLIDEGEN_ACCOUNT_ID."
        )

    if not raw_input or not raw_input.strip():
        raise InvalidInputError("No text supplied to build a presentation from.")

    start = time.time()
    entitlement = resolve_entitlement(identity, config)

    topic_text = raw_input
    if is_youtube_url(raw_input.strip()):
        logger.info("YouTube URL detected, fetching transcript")
        topic_text = fetch_transcript(raw_input.strip(), config)

    parameters = infer_parameters(topic_text, config)
    request = build_generation_request(entitlement, parameters)
    result = submit_generation_request(request, config)

    logger.info(f"Presentation {request.request_id} created in {time.time() - start:.1f}s")
    return result
