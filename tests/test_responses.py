from __future__ import annotations

import pytest

from accessgrid.errors import (
    AccessGridError,
    AuthenticationError,
    ResourceNotFoundError,
    ValidationError,
)
from accessgrid.responses import classify, decode_response
from accessgrid.types import Card, UnifiedAccessPass


def test_plain_response_is_a_card() -> None:
    result = classify({"id": "c1", "state": "active", "full_name": "John Doe"})

    assert isinstance(result, Card)
    assert result.kind == "card"
    assert result.id == "c1"
    assert result.state == "active"


def test_empty_details_is_a_card() -> None:
    assert isinstance(classify({"id": "c1", "details": []}), Card)


def test_non_list_details_is_a_card() -> None:
    assert isinstance(classify({"id": "c1", "details": {"id": "c2"}}), Card)


def test_none_decodes_to_empty_card() -> None:
    card = classify(None)

    assert card == Card()
    assert card.devices == ()
    assert card.metadata == {}


def test_details_make_a_unified_access_pass() -> None:
    result = classify(
        {
            "id": "TP-1",
            "state": "active",
            "status": "success",
            "install_url": "https://install.url",
            "details": [{"id": "c1", "full_name": "A"}, {"id": "c2", "details": [{"id": "c3"}]}],
        }
    )

    assert isinstance(result, UnifiedAccessPass)
    assert result.kind == "unified_access_pass"
    assert [c.id for c in result.details] == ["c1", "c2"]
    assert all(isinstance(c, Card) for c in result.details)
    assert result.details[1] == Card(id="c2")


def test_card_reads_install_url_into_url() -> None:
    card = classify({"id": "c1", "install_url": "https://install.url", "devices": [{"type": "iphone"}]})

    assert card.url == "https://install.url"
    assert card.install_url == "https://install.url"
    assert card.devices == ({"type": "iphone"},)


def test_classify_is_idempotent() -> None:
    data = {"id": "TP-1", "status": "success", "details": [{"id": "c1"}, {"id": "c2"}]}
    assert classify(data) == classify(data)


def test_text_rendering() -> None:
    card = classify({"id": "c1", "state": "active", "full_name": "John Doe"})
    uap = classify({"id": "TP-1", "state": "active", "status": "success", "details": [{"id": "c1"}, {"id": "c2"}]})

    assert str(card) == "Card(name='John Doe', id='c1', state='active')"
    assert repr(card) == str(card)
    assert str(uap) == "UnifiedAccessPass(id='TP-1', state='active', status='success', cards=2)"


@pytest.mark.parametrize("status", [200, 201, 202])
def test_success_returns_json(status: int) -> None:
    assert decode_response(status, '{"id":"c1"}') == {"id": "c1"}


def test_malformed_success_body_raises_sdk_error() -> None:
    with pytest.raises(AccessGridError, match="Invalid JSON") as exc:
        decode_response(200, "<html>")
    assert exc.value.status_code == 200


def test_401_raises_authentication_error() -> None:
    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        decode_response(401, "whatever")


def test_402_raises_balance_error() -> None:
    with pytest.raises(AccessGridError, match="Insufficient account balance") as exc:
        decode_response(402, "")
    assert type(exc.value) is AccessGridError


def test_404_raises_not_found() -> None:
    with pytest.raises(ResourceNotFoundError):
        decode_response(404, "{}")


def test_422_carries_server_message() -> None:
    with pytest.raises(ValidationError) as exc:
        decode_response(422, '{"status":"error","message":"Invalid parameters"}')

    assert str(exc.value) == "Invalid parameters"
    assert exc.value.status_code == 422
    assert exc.value.details == {"status": "error", "message": "Invalid parameters"}


def test_other_status_uses_json_message() -> None:
    with pytest.raises(AccessGridError, match="^maintenance$"):
        decode_response(503, '{"message":"maintenance"}')


def test_other_status_falls_back_to_raw_body() -> None:
    with pytest.raises(AccessGridError) as exc:
        decode_response(500, "boom")

    assert str(exc.value) == "boom"
    assert exc.value.status_code == 500


def test_other_status_with_empty_body_uses_code() -> None:
    with pytest.raises(AccessGridError, match="HTTP Status 500"):
        decode_response(500, "")


def test_decoded_card_does_not_track_later_input_changes() -> None:
    data = {"id": "c1", "devices": [{"type": "iphone"}], "metadata": {"employee_id": "7"}}
    card = classify(data)

    data["devices"][0]["type"] = "watch"
    data["metadata"]["employee_id"] = "8"

    assert card.devices[0]["type"] == "iphone"
    assert card.metadata["employee_id"] == "7"


def test_decoded_values_are_read_only_and_hashable() -> None:
    card = classify({"id": "c1", "metadata": {"a": 1}, "devices": [{"type": "iphone"}]})

    with pytest.raises(TypeError):
        card.metadata["a"] = 2  # type: ignore[index]
    with pytest.raises(TypeError):
        card.devices[0]["type"] = "watch"  # type: ignore[index]

    assert hash(Card()) == hash(Card())
    assert hash(classify({"id": "TP-1", "details": [{"id": "c1"}]})) is not None


@pytest.mark.parametrize("data", [["x"], "ok", 3])
def test_non_object_input_decodes_to_empty_card(data: object) -> None:
    assert classify(data) == Card()


def test_non_object_detail_entry_decodes_as_empty_card() -> None:
    result = classify({"id": "TP-1", "details": ["junk", {"id": "c2"}]})

    assert isinstance(result, UnifiedAccessPass)
    assert result.details == (Card(), Card(id="c2"))


@pytest.mark.parametrize("body", ['["x"]', '"ok"', "null"])
def test_non_object_success_body_raises_sdk_error(body: str) -> None:
    with pytest.raises(AccessGridError, match="Expected a JSON object") as exc:
        decode_response(200, body)
    assert exc.value.status_code == 200
