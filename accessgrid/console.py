from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from .types import Event, Template

if TYPE_CHECKING:
    from .client import AccessGrid

TEMPLATES_PATH = "/v1/console/card-templates"

DESIGN_KEYS = ("background_color", "label_color", "label_secondary_color")
SUPPORT_KEYS = (
    "support_url",
    "support_phone_number",
    "support_email",
    "privacy_policy_url",
    "terms_and_conditions_url",
)


def transform_template_params(params: dict[str, Any]) -> dict[str, Any]:
    """Flatten the nested ``design`` and ``support_info`` groups into the request body."""
    body = dict(params)
    for group, keys in ((body.pop("design", None), DESIGN_KEYS), (body.pop("support_info", None), SUPPORT_KEYS)):
        if not isinstance(group, Mapping):
            continue
        for key in keys:
            if key in group:
                body[key] = group[key]

    return {k: v for k, v in body.items() if v is not None}


class Console:
    """Card template management and event logs."""

    def __init__(self, client: AccessGrid):
        self._client = client

    def create_template(self, **params: Any) -> Template:
        response = self._client.make_request("POST", TEMPLATES_PATH, transform_template_params(params))
        return Template.from_response(response)

    def update_template(self, card_template_id: str, **params: Any) -> Template:
        response = self._client.make_request(
            "PUT",
            f"{TEMPLATES_PATH}/{card_template_id}",
            transform_template_params(params),
        )
        return Template.from_response(response)

    def read_template(self, card_template_id: str) -> Template:
        response = self._client.make_request("GET", f"{TEMPLATES_PATH}/{card_template_id}")
        return Template.from_response(response)

    def event_log(
        self,
        card_template_id: str,
        filters: dict[str, Any] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[Event]:
        params: dict[str, Any] = {k: v for k, v in (filters or {}).items() if v is not None}
        if page is not None:
            params["page"] = page
        if per_page is not None:
            params["per_page"] = per_page

        response = self._client.make_request(
            "GET",
            f"{TEMPLATES_PATH}/{card_template_id}/logs",
            None,
            params or None,
        )
        return [Event.from_response(log) for log in response.get("logs") or []]
