"""API tests for inventory endpoints."""

from fastapi.testclient import TestClient


def _create(client: TestClient, headers: dict, **body) -> dict:
    payload = {"titulo": "Canon R5", "costo": 1000, **body}
    response = client.post("/api/inventario", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestInventoryAPI:
    def test_list_requires_auth(self, client: TestClient):
        response = client.get("/api/inventario")
        assert response.status_code == 401

    def test_create_defaults(self, client: TestClient, auth_headers: dict):
        data = _create(client, auth_headers)
        assert data["estado"] == "en_stock"
        assert data["creado_por"] == "user-1"
        assert data["actualizado_por"] == "user-1"
        assert data["fecha_venta"] is None
        assert data["precio_venta"] is None

    def test_create_then_sell(self, client: TestClient, auth_headers: dict):
        created = _create(client, auth_headers)

        response = client.put(
            "/api/inventario",
            json={"id": created["id"], "estado": "vendido", "precio_venta": 1500},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["estado"] == "vendido"
        assert data["precio_venta"] == 1500
        assert data["fecha_venta"] is not None
        assert data["titulo"] == "Canon R5"

    def test_blank_title_rejected(self, client: TestClient, auth_headers: dict):
        for titulo in ("", "   "):
            response = client.post(
                "/api/inventario",
                json={"titulo": titulo, "costo": 100},
                headers=auth_headers,
            )
            assert response.status_code == 400

    def test_invalid_cost_rejected(self, client: TestClient, auth_headers: dict):
        for body in ({"titulo": "Sony A7"}, {"titulo": "Sony A7", "costo": None},
                     {"titulo": "Sony A7", "costo": -1}):
            response = client.post("/api/inventario", json=body, headers=auth_headers)
            assert response.status_code == 400

    def test_unknown_status_rejected(self, client: TestClient, auth_headers: dict):
        response = client.post(
            "/api/inventario",
            json={"titulo": "Sony A7", "costo": 100, "estado": "perdido"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_list_newest_first(self, client: TestClient, auth_headers: dict):
        first = _create(client, auth_headers, titulo="Fuji X-T4")
        second = _create(client, auth_headers, titulo="Nikon Z6")

        data = client.get("/api/inventario", headers=auth_headers).json()["data"]
        assert [i["id"] for i in data] == [second["id"], first["id"]]

    def test_partial_update_keeps_other_fields(self, client: TestClient, auth_headers: dict):
        created = _create(client, auth_headers, marca="Canon", notas="Sin caja")

        response = client.put(
            "/api/inventario",
            json={"id": created["id"], "estado": "reservado", "notas": None},
            headers=auth_headers,
        )

        data = response.json()["data"]
        assert data["estado"] == "reservado"
        assert data["marca"] == "Canon"
        assert data["notas"] is None
        assert data["costo"] == 1000

    def test_null_status_rejected(self, client: TestClient, auth_headers: dict):
        created = _create(client, auth_headers)
        response = client.put(
            "/api/inventario",
            json={"id": created["id"], "estado": None},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_update_unknown_item(self, client: TestClient, auth_headers: dict):
        response = client.put(
            "/api/inventario",
            json={"id": "missing", "estado": "vendido"},
            headers=auth_headers,
        )
        assert response.status_code == 404
        assert response.json()["error"] == "Item no encontrado"

    def test_delete(self, client: TestClient, auth_headers: dict):
        created = _create(client, auth_headers)

        first = client.request(
            "DELETE", "/api/inventario", json={"id": created["id"]}, headers=auth_headers
        )
        assert first.status_code == 200
        assert first.json()["data"]["id"] == created["id"]

        second = client.request(
            "DELETE", "/api/inventario", json={"id": created["id"]}, headers=auth_headers
        )
        assert second.json() == {"ok": True}

        listed = client.get("/api/inventario", headers=auth_headers).json()["data"]
        assert listed == []


class TestInventoryMovements:
    """Buying and selling stock writes the matching movements."""

    def test_purchase_and_sale_are_logged_once(self, client: TestClient, auth_headers: dict):
        created = _create(client, auth_headers)
        for _ in range(2):
            client.put(
                "/api/inventario",
                json={"id": created["id"], "estado": "vendido", "precio_venta": 1500},
                headers=auth_headers,
            )

        movements = client.get("/api/movimientos", headers=auth_headers).json()["data"]
        by_type = {m["tipo"]: m for m in movements}

        assert len(movements) == 2
        assert by_type["compra"]["monto"] == 1000
        assert by_type["venta"]["monto"] == 1500
        assert by_type["venta"]["equipo_id"] == created["id"]

    def test_deleting_item_keeps_movement_history(
        self, client: TestClient, auth_headers: dict
    ):
        created = _create(client, auth_headers)
        client.request(
            "DELETE", "/api/inventario", json={"id": created["id"]}, headers=auth_headers
        )

        movements = client.get("/api/movimientos", headers=auth_headers).json()["data"]
        assert len(movements) == 1
        assert movements[0]["tipo"] == "compra"
        assert movements[0]["equipo_id"] is None

    def test_created_as_sold_counts_the_sale(self, client: TestClient, auth_headers: dict):
        created = _create(client, auth_headers, estado="vendido", precio_venta=1500)

        assert created["estado"] == "vendido"
        assert created["fecha_venta"] is not None

        movements = client.get("/api/movimientos", headers=auth_headers).json()["data"]
        assert sorted(m["tipo"] for m in movements) == ["compra", "venta"]

        kpis = client.get("/api/kpis", headers=auth_headers).json()["data"]
        assert kpis["utilidad"] == 500
        assert kpis["ventas_potenciales_pendientes"] == 0
