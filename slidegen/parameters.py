"""
Generation Parameter Inference

Turns free-form user text into a complete set of generation parameters
in three steps:

1. Deterministic hint extraction (`extract_hints`): model, template,
   slide count and image preference stated literally in the text.
2. A call to the external inference service, which may suggest any
   parameter and may rewrite the topic text.
3. A pure merge (`merge_parameters`) following FIELD_PRECEDENCE, where
   hints always beat inferred values and inferred values beat defaults.

If the inference service fails for any reason the merge runs with no
inferred values, so `infer_parameters` never raises.
"""

import logging
import re
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from slidegen.config import SlideGenConfig
from slidegen.errors import ParameterInferenceError
from slidegen.http import post_json

logger = logging.getLogger(__name__)

MODEL_GPT4 = "gpt-4"
MODEL_GEMINI = "gemini"

# Longer aliases first: "bullet-point1" is a substring of "ed-bullet-point1".
TEMPLATE_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("ed-bullet-point2", "ed-bullet-point2"),
    ("ed-bullet-point1", "ed-bullet-point1"),
    ("bullet-point2", "bullet-point2"),
    ("bullet-point1", "bullet-point1"),
    ("custom design", "custom-design"),
    ("custom-design", "custom-design"),
)

IMAGE_PHRASES: Tuple[str, ...] = (
    "with images",
    "with image",
    "with pictures",
    "include images",
    "including images",
    "add images",
    "image for each slide",
    "images for each slide",
    "image on each slide",
    "images on each slide",
)

SLIDE_COUNT_PATTERN = re.compile(r"(\d+)\s*slides?\b")


@dataclass(frozen=True)
class ParsedHints:
    """Parameters stated literally in the user's text. None means not stated."""
    model: Optional[str] = None
    template: Optional[str] = None
    slide_count: Optional[int] = None
    image_for_each_slide: Optional[bool] = None


@dataclass(frozen=True)
class InferredParameters:
    """Parameters suggested by the inference service. None means no suggestion."""
    model: Optional[str] = None
    template: Optional[str] = None
    slide_count: Optional[int] = None
    image_for_each_slide: Optional[bool] = None
    language: Optional[str] = None
    image_source: Optional[str] = None
    rewritten_topic: Optional[str] = None


@dataclass
class GenerationParameters:
    """Fully resolved generation parameters.

    The field defaults double as the built-in fallback values.
    """
    topic: str
    slide_count: int = 10
    image_for_each_slide: bool = False
    language: str = "en"
    model: str = MODEL_GEMINI
    template: str = "bullet-point1"
    image_source: str = "google"


# Sources are consulted left to right; the first non-None value wins.
FIELD_PRECEDENCE: Dict[str, Tuple[str, ...]] = {
    "model": ("hint", "inferred", "default"),
    "template": ("hint", "inferred", "default"),
    "slide_count": ("hint", "inferred", "default"),
    "image_for_each_slide": ("hint", "inferred", "default"),
    "language": ("inferred", "default"),
    "image_source": ("inferred", "default"),
}


class InferenceResponse(BaseModel):
    """Wire format of the inference service response."""
    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    slide_count: Optional[int] = Field(default=None, validation_alias=AliasChoices("slideCount", "slide_count"))
    language: Optional[str] = None
    model: Optional[str] = None
    template: Optional[str] = None
    image_for_each_slide: Optional[bool] = Field(
        default=None, validation_alias=AliasChoices("imageForEachSlide", "image_for_each_slide")
    )
    image_source: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("imageSource", "image_source")
    )
    rewritten_topic: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("rewrittenTopic", "msSummaryText")
    )

    @field_validator("language", "model", "template", "image_source", "rewritten_topic", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("slide_count", mode="before")
    @classmethod
    def _falsy_count_to_none(cls, value: Any) -> Any:
        if value in (None, "", 0, "0"):
            return None
        return value

    @field_validator("slide_count")
    @classmethod
    def _positive_count(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("slideCount must be positive")
        return value

    def to_inferred(self) -> InferredParameters:
        return InferredParameters(
            model=self.model.lower() if self.model else None,
            template=self.template.lower() if self.template else None,
            slide_count=self.slide_count,
            image_for_each_slide=self.image_for_each_slide,
            language=self.language,
            image_source=self.image_source,
            rewritten_topic=self.rewritten_topic,
        )


def extract_hints(text: str) -> ParsedHints:
    """Extract explicitly stated parameters from user text.

    Args:
        text: Raw user text

    Returns:
        ParsedHints with only the fields the text states
    """
    lowered = (text or "").lower()

    model = None
    if "gpt-4" in lowered or "gpt4" in lowered:
        model = MODEL_GPT4
    elif "gemini" in lowered:
        model = MODEL_GEMINI

    template = None
    for alias, name in TEMPLATE_ALIASES:
        if alias in lowered:
            template = name
            break

    image_for_each_slide = True if any(p in lowered for p in IMAGE_PHRASES) else None

    slide_count = None
    match = SLIDE_COUNT_PATTERN.search(lowered)
    if match:
        count = int(match.group(1))
        if count > 0:
            slide_count = count

    return ParsedHints(
        model=model,
        template=template,
        slide_count=slide_count,
        image_for_each_slide=image_for_each_slide,
    )


def merge_parameters(
    topic: str,
    hints: ParsedHints,
    inferred: Optional[InferredParameters] = None,
    defaults: Optional[GenerationParameters] = None,
) -> GenerationParameters:
    """Merge hints, inferred values and defaults following FIELD_PRECEDENCE.

    Pure function: no I/O, no logging.

    Args:
        topic: Original user text, used when no rewritten topic is inferred
        hints: Deterministic hints from the user text
        inferred: Suggestions from the inference service (None when it failed)
        defaults: Fallback values (default: GenerationParameters defaults)

    Returns:
        GenerationParameters with every field resolved
    """
    inferred = inferred or InferredParameters()
    defaults = defaults or GenerationParameters(topic=topic)
    sources = {"hint": hints, "inferred": inferred, "default": defaults}

    resolved: Dict[str, Any] = {}
    for name, order in FIELD_PRECEDENCE.items():
        for source in order:
            value = getattr(sources[source], name, None)
            if value is not None:
                resolved[name] = value
                break

    resolved["topic"] = inferred.rewritten_topic or topic
    return GenerationParameters(**resolved)


def request_inference(text: str, config: SlideGenConfig) -> InferredParameters:
    """Ask the inference service for parameter suggestions.

    Raises:
        ParameterInferenceError: On any transport, status or body problem
    """
    data = post_json(
        config.inference_url,
        {"text": text},
        timeout=config.service_timeout,
        error_cls=ParameterInferenceError,
    )
    if not isinstance(data, dict):
        raise ParameterInferenceError(
            "Invalid response from inference service: expected an object",
            upstream_message=str(data)[:500],
        )
    try:
        return InferenceResponse.model_validate(data).to_inferred()
    except ValidationError as e:
        raise ParameterInferenceError(
            "Invalid response from inference service", upstream_message=str(e)
        )


def infer_parameters(text: str, config: Optional[SlideGenConfig] = None) -> GenerationParameters:
    """Resolve generation parameters for user text. Never raises.

    Args:
        text: Raw user text or a video transcript
        config: Service configuration (default: loaded from YAML/env)

    Returns:
        GenerationParameters; falls back to hints and defaults when the
        inference service is unavailable
    """
    config = config or SlideGenConfig.load_from_yaml()
    topic = (text or "").strip()
    hints = extract_hints(topic)
    defaults = GenerationParameters(topic=topic, template=config.default_template)

    try:
        inferred = request_inference(topic, config)
    except ParameterInferenceError as e:
        logger.warning(f"Parameter inference failed, using hints and defaults: {e}")
        inferred = None

    params = merge_parameters(topic, hints, inferred, defaults)
    logger.debug(
        "Resolved parameters: "
        + ", ".join(f"{f.name}={getattr(params, f.name)!r}" for f in fields(params) if f.name != "topic")
    )
    return params
