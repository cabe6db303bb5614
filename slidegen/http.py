"""
Outbound HTTP helper

Every collaborator call is a one-shot JSON POST with its own timeout and
no retries. Failures are mapped onto the collaborator's tagged error
class so callers only ever see one exception type per service.
"""

import logging
import time
from typing import Any, Dict, Type

import requests

from slidegen.errors import ServiceError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def post_json(
    url: str,
    payload: Dict[str, Any],
    timeout: float,
    error_cls: Type[ServiceError],
) -> Any:
    """POST a JSON payload and return the decoded JSON response.

    Args:
        url: Endpoint to call
        payload: JSON-serializable request body
        timeout: Seconds allowed for connecting and for each read (not a bound on the whole call)
        error_cls: ServiceError subclass raised on any failure

    Returns:
        Decoded JSON body (any JSON type)

    Raises:
        error_cls: On connection failure, timeout, non-2xx status or invalid JSON
    """
    service = error_cls.service
    start = time.time()

    try:
        response = requests.post(url, json=payload, headers=JSON_HEADERS, timeout=timeout)
    except requests.exceptions.Timeout:
        raise error_cls(
            f"{service.capitalize()} service timed out after {timeout:g}s",
            upstream_message="timeout",
        )
    except requests.exceptions.ConnectionError as e:
        raise error_cls(
            f"Cannot connect to {service} service at {url}",
            upstream_message=str(e),
        )
    except requests.exceptions.RequestException as e:
        raise error_cls(f"{service.capitalize()} service request failed: {e}", upstream_message=str(e))

    logger.debug(f"{service} call returned {response.status_code} in {time.time() - start:.2f}s")

    try:
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        raise error_cls(
            f"{service.capitalize()} service returned HTTP {response.status_code}",
            status_code=response.status_code,
            upstream_message=_upstream_message(response) or str(e),
        )

    try:
        return response.json()
    except ValueError as e:
        raise error_cls(
            f"{service.capitalize()} service returned a non-JSON response",
            status_code=response.status_code,
            upstream_message=str(e),
        )


def _upstream_message(response: requests.Response) -> str:
    """Best-effort extraction of an error message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        return (response.text or "")[:500]
    if isinstance(body, dict):
        for key in ("error", "message", "detail"):
            if body.get(key):
                return str(body[key])
    return str(body)[:500]
