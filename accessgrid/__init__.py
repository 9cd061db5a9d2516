"""AccessGrid Python SDK."""

from .access_cards import AccessCards
from .client import AccessGrid, create_client
from .console import Console
from .errors import (
    AccessGridError,
    AuthenticationError,
    ResourceNotFoundError,
    UnsupportedMethodError,
    ValidationError,
)
from .responses import classify, decode_response
from .signing import extract_resource_id, generate_signature, sign_request
from .types import Card, Event, RequestSignature, Result, Template, UnifiedAccessPass
from .version import __version__

__all__ = [
    "AccessGrid",
    "create_client",
    "AccessCards",
    "Console",
    "AccessGridError",
    "AuthenticationError",
    "ResourceNotFoundError",
    "UnsupportedMethodError",
    "ValidationError",
    "Card",
    "UnifiedAccessPass",
    "Result",
    "Template",
    "Event",
    "RequestSignature",
    "classify",
    "decode_response",
    "extract_resource_id",
    "generate_signature",
    "sign_request",
    "__version__",
]
