from __future__ import annotations

import base64
import hashlib
import hmac
import json
import re
from typing import Any

from .errors import UnsupportedMethodError
from .types import RequestSignature

SUPPORTED_METHODS = {"GET", "POST", "PUT", "PATCH"}

# Trailing path segments that act on the resource named just before them.
ACTION_SEGMENTS = {"suspend", "resume", "unlink", "delete"}

_VERSION_SEGMENT = re.compile(r"^v\d+$")


def encode_json(value: Any) -> str:
    """Compact JSON, insertion order kept. Bodies go on the wire exactly as signed."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def normalize_method(method: str) -> str:
    verb = str(method or "").upper()
    if verb not in SUPPORTED_METHODS:
        raise UnsupportedMethodError(f"Unsupported HTTP method: {method}")
    return verb


def extract_resource_id(path: str) -> str | None:
    parts = [p for p in str(path or "").strip().split("?", 1)[0].split("/") if p]
    if parts and _VERSION_SEGMENT.match(parts[0]):
        parts = parts[1:]
    if len(parts) < 2:
        return None
    if parts[-1] in ACTION_SEGMENTS:
        return parts[-2]
    return parts[-1]


def signable_payload(method: str, path: str, body: Any = None) -> tuple[str, bool]:
    """Return the string to sign and whether it was synthesized from the path."""
    verb = normalize_method(method)

    if body and verb != "GET":
        return encode_json(body), False

    resource_id = extract_resource_id(path)
    if resource_id is None:
        return "{}", False
    return encode_json({"id": resource_id}), True


def generate_signature(api_secret: str, payload: str) -> str:
    encoded = base64.b64encode(payload.encode("utf-8"))
    return hmac.new(api_secret.encode("utf-8"), encoded, hashlib.sha256).hexdigest()


def sign_request(api_secret: str, method: str, path: str, body: Any = None) -> RequestSignature:
    payload, synthesized = signable_payload(method, path, body)
    params = {"sig_payload": payload} if synthesized else {}
    return RequestSignature(
        payload=payload,
        signature=generate_signature(api_secret, payload),
        params=params,
    )
