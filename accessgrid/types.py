from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, Mapping, Union


def _quoted(value: Any) -> str:
    return "" if value is None else str(value)


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _freeze(value: Any) -> Any:
    """Read-only copy: mappings become ``MappingProxyType``, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _frozen_map(value: Any) -> Mapping[str, Any]:
    return _freeze(_as_mapping(value))


def _frozen_seq(value: Any) -> tuple[Any, ...]:
    return _freeze(value) if isinstance(value, (list, tuple)) else ()


def _empty_map() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class RequestSignature:
    """Signed payload plus any query params the server needs to recompute it."""

    payload: str
    signature: str
    params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, repr=False)
class Card:
    id: str | None = None
    state: str | None = None
    url: str | None = None
    install_url: str | None = None
    full_name: str | None = None
    expiration_date: str | None = None
    card_template_id: str | None = None
    card_number: str | None = None
    site_code: str | None = None
    file_data: str | None = None
    direct_install_url: str | None = None
    devices: tuple[Any, ...] = field(default=(), hash=False)
    metadata: Mapping[str, Any] = field(default_factory=_empty_map, hash=False)
    kind: Literal["card"] = field(default="card", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "devices", _frozen_seq(self.devices))
        object.__setattr__(self, "metadata", _frozen_map(self.metadata))

    @classmethod
    def from_response(cls, data: Any) -> Card:
        data = _as_mapping(data)
        return cls(
            id=data.get("id"),
            state=data.get("state"),
            url=data.get("install_url"),
            install_url=data.get("install_url"),
            full_name=data.get("full_name"),
            expiration_date=data.get("expiration_date"),
            card_template_id=data.get("card_template_id"),
            card_number=data.get("card_number"),
            site_code=data.get("site_code"),
            file_data=data.get("file_data"),
            direct_install_url=data.get("direct_install_url"),
            devices=data.get("devices"),
            metadata=data.get("metadata"),
        )

    def __str__(self) -> str:
        return f"Card(name='{_quoted(self.full_name)}', id='{_quoted(self.id)}', state='{_quoted(self.state)}')"

    __repr__ = __str__


@dataclass(frozen=True, repr=False)
class UnifiedAccessPass:
    """Several card issuances (typically one per device platform) under one id."""

    id: str | None = None
    state: str | None = None
    status: str | None = None
    install_url: str | None = None
    details: tuple[Card, ...] = ()
    kind: Literal["unified_access_pass"] = field(default="unified_access_pass", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "details", tuple(self.details))

    def __str__(self) -> str:
        return (
            f"UnifiedAccessPass(id='{_quoted(self.id)}', state='{_quoted(self.state)}', "
            f"status='{_quoted(self.status)}', cards={len(self.details)})"
        )

    __repr__ = __str__


Result = Union[Card, UnifiedAccessPass]


@dataclass(frozen=True)
class Template:
    id: str | None = None
    name: str | None = None
    platform: str | None = None
    protocol: str | None = None
    allow_on_multiple_devices: bool | None = None
    watch_count: int | None = None
    iphone_count: int | None = None
    support_info: Mapping[str, Any] = field(default_factory=_empty_map, hash=False)
    style_settings: Mapping[str, Any] = field(default_factory=_empty_map, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "support_info", _frozen_map(self.support_info))
        object.__setattr__(self, "style_settings", _frozen_map(self.style_settings))

    @classmethod
    def from_response(cls, data: Any) -> Template:
        data = _as_mapping(data)
        counts = _as_mapping(data.get("allowed_device_counts"))
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            platform=data.get("platform"),
            protocol=data.get("protocol"),
            allow_on_multiple_devices=counts.get("allow_on_multiple_devices"),
            watch_count=counts.get("watch"),
            iphone_count=counts.get("iphone"),
            support_info=data.get("support_settings"),
            style_settings=data.get("style_settings"),
        )


@dataclass(frozen=True)
class Event:
    type: str | None = None
    timestamp: str | None = None
    user_id: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=_empty_map, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", _frozen_map(self.metadata))

    @classmethod
    def from_response(cls, data: Any) -> Event:
        data = _as_mapping(data)
        metadata = _as_mapping(data.get("metadata"))
        return cls(
            type=data.get("event"),
            timestamp=data.get("created_at"),
            user_id=metadata.get("user_id"),
            ip_address=data.get("ip_address"),
            user_agent=data.get("user_agent"),
            metadata=metadata,
        )
