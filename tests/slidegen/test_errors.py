"""Tests for slidegen.errors"""

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


class TestErrorHierarchy:
    def test_service_errors_share_base(self):
        for error_cls in (TranscriptFetchError, EntitlementError, ParameterInferenceError, GenerationError):
            assert issubclass(error_cls, ServiceError)
            assert issubclass(error_cls, SlideGenError)

    def test_tags(self):
        assert TranscriptFetchError("x").error_type == "transcript"
        assert EntitlementError("x").error_type == "entitlement"
        assert ParameterInferenceError("x").error_type == "inference"
        assert GenerationError("x").error_type == "generation"
        assert ConfigurationError("x").error_type == "configuration"
        assert InvalidInputError("x").error_type == "invalid_input"


class TestErrorPayload:
    def test_service_error(self):
        payload = error_payload(GenerationError("Invalid API response", status_code=502))
        assert payload == {
            "success": False,
            "error": "Invalid API response",
            "error_type": "generation",
        }

    def test_upgrade_link(self):
        error = EntitlementError("Your plan (free) ...", upgrade_url="https://slides.test/pricing")
        assert error_payload(error)["upgrade_url"] == "https://slides.test/pricing"

    def test_unexpected_error(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            payload = error_payload(e)

        assert payload == {"success": False, "error": "boom", "error_type": "internal"}
