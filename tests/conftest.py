"""
Pytest configuration and fixtures for test isolation.
"""
import pytest
from unittest.mock import Mock

import requests

from slidegen.config import SlideGenConfig
from slidegen.logging_config import logging_config


SLIDEGEN_ENV_VARS = (
    "SLIDEGEN_CONFIG",
    "SLIDEGEN_ACCOUNT_ID",
    "SLIDEGEN_GENERATION_URL",
    "SLIDEGEN_ACCOUNT_INFO_URL",
    "SLIDEGEN_TRANSCRIPT_URL",
    "SLIDEGEN_INFERENCE_URL",
    "SLIDEGEN_PRICING_URL",
    "SLIDEGEN_DEFAULT_TEMPLATE",
    "SLIDEGEN_ALLOWED_PLANS",
    "SLIDEGEN_SERVICE_TIMEOUT",
    "SLIDEGEN_GENERATION_TIMEOUT",
    "MCP_SERVER_CONFIG",
    "MCP_TRANSPORT",
    "MCP_PORT",
    "MCP_LOG_LEVEL",
    "MCP_LOG_FILE",
)


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path, monkeypatch):
    """
    Automatically isolate each test by:
    1. Running from a temporary directory (no stray .slidedeck/config.yaml)
    2. Removing configuration environment variables
    3. Resetting logging configured by CLI commands
    """
    monkeypatch.chdir(tmp_path)
    for name in SLIDEGEN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    logging_config.reset()


@pytest.fixture
def slidegen_config():
    """Configuration pointing at fake service hosts."""
    return SlideGenConfig(
        generation_url="https://gen.test/create",
        account_info_url="https://accounts.test/info",
        transcript_url="https://transcripts.test/get",
        inference_url="https://inference.test/params",
        pricing_url="https://slides.test/pricing",
    )


def make_response(json_data=None, status_code=200, invalid_json=False):
    """Build a mock requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = ""
    if invalid_json:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Client Error"
        )
    else:
        response.raise_for_status = Mock()
    return response


@pytest.fixture
def mock_response():
    """Factory fixture for mock HTTP responses."""
    return make_response


@pytest.fixture
def route_services(slidegen_config, mock_response):
    """Build a requests.post side effect that answers per service URL.

    Each route value is either a JSON body, a Mock response, or an
    exception instance to raise.
    """
    def _build(account=None, transcript=None, inference=None, generation=None):
        routes = {
            slidegen_config.account_info_url: account,
            slidegen_config.transcript_url: transcript,
            slidegen_config.inference_url: inference,
            slidegen_config.generation_url: generation,
        }

        def _post(url, json=None, headers=None, timeout=None):
            value = routes[url]
            if isinstance(value, Exception):
                raise value
            if isinstance(value, Mock):
                return value
            return mock_response(value)

        return _post

    return _build
