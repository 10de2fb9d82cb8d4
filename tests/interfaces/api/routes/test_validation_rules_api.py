"""Integration tests for the validation rule API endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient


@pytest.fixture()
def client(session_factory):
    """Return a test client whose sessions use the in-memory test database."""

    from main import create_app
    from validation_rules.infrastructure.database import get_db

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app = create_app()
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client


def test_save_and_list_rules_in_resolution_order(client: TestClient) -> None:
    payload = {
        "rules": [
            {"type": "Order", "field": "Total", "validator": "A", "sort_order": 10},
            {"type": "Order", "field": "Email", "validator": "B", "sort_order": 5},
            {
                "type": "Order",
                "all_conditions": ["dto.total > 0", "dto.items"],
                "status_code": 0,
            },
        ]
    }

    response = client.post("/validation-rules/", json=payload)
    assert response.status_code == 422

    del payload["rules"][2]["status_code"]
    response = client.post("/validation-rules/", json=payload)
    assert response.status_code == 200
    saved = response.json()
    assert [rule["id"] for rule in saved] == [1, 2, 3]
    assert saved[2]["condition"] == "(dto.total > 0) && (dto.items)"

    list_response = client.get("/validation-rules/types/Order")
    assert list_response.status_code == 200
    assert [rule["id"] for rule in list_response.json()] == [3, 2, 1]
    assert list_response.json()[0]["field"] is None

    assert client.get("/validation-rules/types/Customer").json() == []


def test_invalid_batch_is_rejected_entirely(client: TestClient) -> None:
    payload = {
        "rules": [
            {"type": "Order", "validator": "Valid"},
            {"type": "", "validator": "Invalid"},
        ]
    }

    response = client.post("/validation-rules/", json=payload)

    assert response.status_code == 400
    assert client.get("/validation-rules/types/Order").json() == []


def test_unknown_id_returns_not_found(client: TestClient) -> None:
    response = client.post(
        "/validation-rules/", json={"rules": [{"id": 7, "type": "Order"}]}
    )

    assert response.status_code == 404


def test_conflicting_condition_sources_are_rejected(client: TestClient) -> None:
    response = client.post(
        "/validation-rules/",
        json={"rules": [{"type": "Order", "condition": "a", "any_conditions": ["b"]}]},
    )

    assert response.status_code == 422


def test_update_get_by_ids_and_delete(client: TestClient) -> None:
    created = client.post(
        "/validation-rules/", json={"rules": [{"type": "Order", "validator": "A"}]}
    ).json()[0]

    updated = client.post(
        "/validation-rules/",
        json={"rules": [{"id": created["id"], "type": "Order", "any_conditions": ["a", "b"]}]},
    )
    assert updated.status_code == 200
    assert updated.json()[0]["condition"] == "(a) || (b)"
    assert updated.json()[0]["validator"] == ""

    by_ids = client.get("/validation-rules/", params={"ids": [created["id"], 99]})
    assert by_ids.status_code == 200
    assert [rule["id"] for rule in by_ids.json()] == [created["id"]]

    delete_response = client.delete("/validation-rules/", params={"ids": [created["id"]]})
    assert delete_response.status_code == 204
    assert client.get("/validation-rules/", params={"ids": [created["id"]]}).json() == []

    invalid = client.delete("/validation-rules/", params={"ids": [0]})
    assert invalid.status_code == 400


def test_padded_type_is_rejected(client: TestClient) -> None:
    response = client.post(
        "/validation-rules/",
        json={"rules": [{"type": "Order", "validator": "A"}, {"type": "Order ", "validator": "B"}]},
    )

    assert response.status_code == 400
    assert client.get("/validation-rules/types/Order").json() == []
