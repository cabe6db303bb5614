"""
Unit Tests: Outbound HTTP helper

Verifies that every failure mode maps onto the collaborator's tagged error.
"""

import pytest
from unittest.mock import patch

import requests

from slidegen.errors import GenerationError, ParameterInferenceError
from slidegen.http import JSON_HEADERS, post_json


@patch("requests.post")
def test_returns_decoded_json(mock_post, mock_response):
    mock_post.return_value = mock_response({"ok": True})

    assert post_json("https://svc.test", {"a": 1}, 5, GenerationError) == {"ok": True}
    mock_post.assert_called_once_with(
        "https://svc.test", json={"a": 1}, headers=JSON_HEADERS, timeout=5
    )


@patch("requests.post")
def test_timeout(mock_post):
    mock_post.side_effect = requests.exceptions.Timeout()

    with pytest.raises(GenerationError) as exc_info:
        post_json("https://svc.test", {}, 60, GenerationError)

    assert "timed out after 60s" in str(exc_info.value)
    assert exc_info.value.upstream_message == "timeout"


@patch("requests.post")
def test_connection_error(mock_post):
    mock_post.side_effect = requests.exceptions.ConnectionError("Name or service not known")

    with pytest.raises(ParameterInferenceError, match="Cannot connect to inference service"):
        post_json("https://svc.test", {}, 30, ParameterInferenceError)


@patch("requests.post")
def test_other_request_error(mock_post):
    mock_post.side_effect = requests.exceptions.InvalidURL("bad url")

    with pytest.raises(GenerationError, match="request failed"):
        post_json("nope", {}, 30, GenerationError)


@patch("requests.post")
def test_http_error_status(mock_post, mock_response):
    mock_post.return_value = mock_response({"detail": "Unauthorized"}, status_code=401)

    with pytest.raises(GenerationError) as exc_info:
        post_json("https://svc.test", {}, 30, GenerationError)

    assert exc_info.value.status_code == 401
    assert exc_info.value.upstream_message == "Unauthorized"
    assert "HTTP 401" in str(exc_info.value)


@patch("requests.post")
def test_invalid_json(mock_post, mock_response):
    mock_post.return_value = mock_response(invalid_json=True)

    with pytest.raises(GenerationError, match="non-JSON"):
        post_json("https://svc.test", {}, 30, GenerationError)
