from __future__ import annotations

import json
from typing import Any, Mapping

from .errors import AccessGridError, AuthenticationError, ResourceNotFoundError, ValidationError
from .types import Card, Result, UnifiedAccessPass

SUCCESS_CODES = {200, 201, 202}


def classify(data: Any) -> Result:
    """Decode a card response as a single ``Card`` or a ``UnifiedAccessPass``.

    A response is a pass only when ``details`` is a non-empty list. Entries of
    ``details`` are always decoded as plain cards, one level deep.
    """
    data = data if isinstance(data, Mapping) else {}
    details = data.get("details")
    if not isinstance(details, list) or not details:
        return Card.from_response(data)

    return UnifiedAccessPass(
        id=data.get("id"),
        state=data.get("state"),
        status=data.get("status"),
        install_url=data.get("install_url"),
        details=tuple(Card.from_response(d) for d in details),
    )


def _parse(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return None


def decode_response(status_code: int, text: str) -> Any:
    """Return the decoded JSON body of a successful response, or raise the matching error."""
    if status_code in SUCCESS_CODES:
        try:
            data = json.loads(text)
        except ValueError as err:
            raise AccessGridError(f"Invalid JSON in response body: {err}", status_code, text) from err
        if not isinstance(data, dict):
            raise AccessGridError("Expected a JSON object in response body", status_code, data)
        return data

    data = _parse(text) if text else None
    server_message = data.get("message") if isinstance(data, dict) else None

    if status_code == 401:
        raise AuthenticationError("Invalid credentials", status_code, data)
    if status_code == 402:
        raise AccessGridError("Insufficient account balance", status_code, data)
    if status_code == 404:
        raise ResourceNotFoundError("Resource not found", status_code, data)
    if status_code == 422:
        raise ValidationError(server_message or text or "Validation failed", status_code, data)

    message = server_message or text or f"HTTP Status {status_code}"
    raise AccessGridError(message, status_code, data)
