from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .responses import classify
from .types import Card, Result

if TYPE_CHECKING:
    from .client import AccessGrid


class AccessCards:
    """Key-card issuance and lifecycle under ``/v1/key-cards``."""

    def __init__(self, client: AccessGrid):
        self._client = client

    def issue(self, **params: Any) -> Result:
        return classify(self._client.make_request("POST", "/v1/key-cards", params))

    provision = issue

    def get(self, card_id: str) -> Result:
        return classify(self._client.make_request("GET", f"/v1/key-cards/{card_id}"))

    def update(self, card_id: str, **params: Any) -> Result:
        return classify(self._client.make_request("PATCH", f"/v1/key-cards/{card_id}", params))

    def list(self, template_id: str, state: str | None = None) -> list[Card]:
        params = {"card_template_id": template_id}
        if state:
            params["state"] = state

        response = self._client.make_request("GET", "/v1/key-cards", None, params)
        return [Card.from_response(item) for item in response.get("keys") or []]

    def _manage_state(self, card_id: str, action: str) -> Card:
        response = self._client.make_request("POST", f"/v1/key-cards/{card_id}/{action}", {})
        return Card.from_response(response)

    def suspend(self, card_id: str) -> Card:
        return self._manage_state(card_id, "suspend")

    def resume(self, card_id: str) -> Card:
        return self._manage_state(card_id, "resume")

    def unlink(self, card_id: str) -> Card:
        return self._manage_state(card_id, "unlink")

    def delete(self, card_id: str) -> Card:
        return self._manage_state(card_id, "delete")
