"""API tests for cash movement endpoints."""

from fastapi.testclient import TestClient


def _create(client: TestClient, headers: dict, **body) -> dict:
    payload = {"tipo": "capital", "monto": 5000, "descripcion": "Aporte inicial", **body}
    response = client.post("/api/movimientos", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestListMovements:
    def test_empty_ledger(self, client: TestClient, auth_headers: dict):
        response = client.get("/api/movimientos", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"data": []}

    def test_newest_first(self, client: TestClient, auth_headers: dict):
        _create(client, auth_headers, fecha="2024-01-01T10:00:00Z")
        _create(client, auth_headers, tipo="gasto", monto=50, fecha="2024-03-01T10:00:00Z")
        _create(client, auth_headers, tipo="retiro", monto=20, fecha="2024-02-01T10:00:00Z")

        data = client.get("/api/movimientos", headers=auth_headers).json()["data"]
        assert [m["tipo"] for m in data] == ["gasto", "retiro", "capital"]

    def test_requires_auth(self, client: TestClient):
        response = client.get("/api/movimientos")
        assert response.status_code == 401
        body = response.json()
        assert "data" not in body
        assert body["code"] == "UNAUTHENTICATED"


class TestCreateMovement:
    def test_create_stamps_owner(self, client: TestClient, auth_headers: dict):
        data = _create(client, auth_headers, creado_por="someone-else")
        assert data["id"]
        assert data["tipo"] == "capital"
        assert data["monto"] == 5000
        assert data["creado_por"] == "user-1"

    def test_unknown_fields_are_dropped(self, client: TestClient, auth_headers: dict):
        data = _create(client, auth_headers, saldo=999, id="forced-id")
        assert data["id"] != "forced-id"
        assert "saldo" not in data

    def test_rejects_non_positive_amount(self, client: TestClient, auth_headers: dict):
        for monto in (0, -10):
            response = client.post(
                "/api/movimientos",
                json={"tipo": "gasto", "monto": monto},
                headers=auth_headers,
            )
            assert response.status_code == 400
            assert "error" in response.json()

    def test_rejects_non_numeric_amount(self, client: TestClient, auth_headers: dict):
        response = client.post(
            "/api/movimientos",
            json={"tipo": "gasto", "monto": "100"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_rejects_unknown_type(self, client: TestClient, auth_headers: dict):
        response = client.post(
            "/api/movimientos",
            json={"tipo": "prestamo", "monto": 100},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_unknown_equipo_is_rejected_write(self, client: TestClient, auth_headers: dict):
        response = client.post(
            "/api/movimientos",
            json={"tipo": "compra", "monto": 100, "equipo_id": "missing"},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["code"] == "WRITE_REJECTED"

    def test_auth_is_checked_before_body(self, client: TestClient):
        response = client.post("/api/movimientos", json={"tipo": "nope"})
        assert response.status_code == 401


class TestUpdateMovement:
    def test_empty_description_clears_it(self, client: TestClient, auth_headers: dict):
        created = _create(client, auth_headers)

        response = client.put(
            "/api/movimientos",
            json={"id": created["id"], "descripcion": ""},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["descripcion"] is None
        assert data["monto"] == created["monto"]
        assert data["tipo"] == created["tipo"]

    def test_updates_amount(self, client: TestClient, auth_headers: dict):
        created = _create(client, auth_headers)
        response = client.put(
            "/api/movimientos",
            json={"id": created["id"], "monto": 7500.5},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["data"]["monto"] == 7500.5

    def test_no_fields(self, client: TestClient, auth_headers: dict):
        created = _create(client, auth_headers)
        response = client.put(
            "/api/movimientos",
            json={"id": created["id"], "creado_por": "x"},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["error"] == "No fields to update"

    def test_null_amount_rejected(self, client: TestClient, auth_headers: dict):
        created = _create(client, auth_headers)
        response = client.put(
            "/api/movimientos",
            json={"id": created["id"], "monto": None},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_missing_id(self, client: TestClient, auth_headers: dict):
        response = client.put(
            "/api/movimientos", json={"monto": 10}, headers=auth_headers
        )
        assert response.status_code == 400

    def test_unknown_id(self, client: TestClient, auth_headers: dict):
        response = client.put(
            "/api/movimientos",
            json={"id": "does-not-exist", "monto": 10},
            headers=auth_headers,
        )
        assert response.status_code == 404
        assert response.json()["code"] == "MOVEMENT_NOT_FOUND"


class TestDeleteMovement:
    def test_delete_twice(self, client: TestClient, auth_headers: dict):
        created = _create(client, auth_headers)

        first = client.request(
            "DELETE", "/api/movimientos", json={"id": created["id"]}, headers=auth_headers
        )
        assert first.status_code == 200
        assert first.json() == {"data": created}

        second = client.request(
            "DELETE", "/api/movimientos", json={"id": created["id"]}, headers=auth_headers
        )
        assert second.status_code == 200
        assert second.json() == {"ok": True}

    def test_malformed_id(self, client: TestClient, auth_headers: dict):
        for body in ({}, {"id": 42}, {"id": ""}):
            response = client.request(
                "DELETE", "/api/movimientos", json=body, headers=auth_headers
            )
            assert response.status_code == 400


class TestAuthBeforeBody:
    """A protected route answers 401 even when its body cannot be decoded."""

    def test_unauthenticated_malformed_delete(self, client: TestClient):
        response = client.request(
            "DELETE",
            "/api/movimientos",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHENTICATED"

    def test_invalid_token_malformed_put(self, client: TestClient):
        response = client.put(
            "/api/inventario",
            content=b"{not json",
            headers={"Content-Type": "application/json", "Authorization": "Bearer nope"},
        )
        assert response.status_code == 401

    def test_authenticated_malformed_delete(self, client: TestClient, auth_headers: dict):
        response = client.request(
            "DELETE",
            "/api/movimientos",
            content=b"{not json",
            headers={"Content-Type": "application/json", **auth_headers},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
