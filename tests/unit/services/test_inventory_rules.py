"""Tests for inventory update rules."""

from datetime import UTC, datetime

from flipcam.core.entities.inventory import InventoryItem, InventoryPatch, InventoryStatus
from flipcam.core.entities.movement import MovementType
from flipcam.core.services.inventory_rules import (
    apply_inventory_patch,
    is_sale_transition,
    purchase_movement_for,
    sale_movement_for,
    stamp_sale_date,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


def _item(**kwargs) -> InventoryItem:
    data = {"id": "item-1", "titulo": "Canon R5", "costo": 1000.0, "creado_por": "user-1"}
    data.update(kwargs)
    return InventoryItem(**data)


class TestApplyInventoryPatch:
    def test_only_set_fields_change(self):
        current = _item(marca="Canon", notas="Con caja")

        updated = apply_inventory_patch(current, InventoryPatch(notas=None), "user-2")

        assert updated.marca == "Canon"
        assert updated.notas is None
        assert updated.actualizado_por == "user-2"
        assert updated.creado_por == "user-1"

    def test_sale_stamps_date(self):
        updated = apply_inventory_patch(
            _item(), InventoryPatch(estado=InventoryStatus.VENDIDO), "user-1", now=NOW
        )
        assert updated.fecha_venta == NOW

    def test_sale_keeps_supplied_date(self):
        supplied = datetime(2024, 5, 20, tzinfo=UTC)
        updated = apply_inventory_patch(
            _item(),
            InventoryPatch(estado=InventoryStatus.VENDIDO, fecha_venta=supplied),
            "user-1",
            now=NOW,
        )
        assert updated.fecha_venta == supplied

    def test_non_sale_leaves_date(self):
        updated = apply_inventory_patch(
            _item(), InventoryPatch(estado=InventoryStatus.RESERVADO), "user-1", now=NOW
        )
        assert updated.fecha_venta is None

    def test_already_sold_keeps_date(self):
        sold_at = datetime(2024, 1, 1, tzinfo=UTC)
        current = _item(estado=InventoryStatus.VENDIDO, fecha_venta=sold_at)

        updated = apply_inventory_patch(current, InventoryPatch(notas="x"), "user-1", now=NOW)

        assert updated.fecha_venta == sold_at


class TestSaleTransition:
    def test_into_vendido(self):
        assert is_sale_transition(_item(), _item(estado=InventoryStatus.VENDIDO))

    def test_vendido_to_vendido(self):
        sold = _item(estado=InventoryStatus.VENDIDO)
        assert not is_sale_transition(sold, sold)

    def test_any_order_allowed(self):
        pending = _item(estado=InventoryStatus.PENDIENTE)
        assert is_sale_transition(pending, _item(estado=InventoryStatus.VENDIDO))


class TestImpliedMovements:
    def test_purchase(self):
        movement = purchase_movement_for(_item())

        assert movement.tipo == MovementType.COMPRA
        assert movement.monto == 1000.0
        assert movement.equipo_id == "item-1"
        assert movement.idempotency_key == "inventario:item-1:compra"

    def test_free_purchase(self):
        assert purchase_movement_for(_item(costo=0.0)) is None

    def test_sale(self):
        movement = sale_movement_for(
            _item(estado=InventoryStatus.VENDIDO, precio_venta=1500.0, fecha_venta=NOW)
        )

        assert movement.tipo == MovementType.VENTA
        assert movement.monto == 1500.0
        assert movement.fecha == NOW
        assert movement.idempotency_key == "inventario:item-1:venta"

    def test_sale_without_price(self):
        assert sale_movement_for(_item(estado=InventoryStatus.VENDIDO)) is None


class TestSaleDate:
    def test_new_item_sold_on_creation(self):
        created = stamp_sale_date(None, _item(estado=InventoryStatus.VENDIDO), now=NOW)
        assert created.fecha_venta == NOW

    def test_new_item_in_stock(self):
        assert stamp_sale_date(None, _item(), now=NOW).fecha_venta is None

    def test_creation_counts_as_sale_transition(self):
        assert is_sale_transition(None, _item(estado=InventoryStatus.VENDIDO))
        assert not is_sale_transition(None, _item())

    def test_leaving_vendido_clears_date(self):
        sold = _item(estado=InventoryStatus.VENDIDO, fecha_venta=NOW)

        updated = apply_inventory_patch(
            sold, InventoryPatch(estado=InventoryStatus.EN_STOCK), "user-1"
        )

        assert updated.fecha_venta is None

    def test_resale_gets_new_date(self):
        later = datetime(2024, 7, 1, tzinfo=UTC)
        sold = _item(estado=InventoryStatus.VENDIDO, fecha_venta=NOW)

        returned = apply_inventory_patch(
            sold, InventoryPatch(estado=InventoryStatus.RESERVADO), "user-1"
        )
        resold = apply_inventory_patch(
            returned, InventoryPatch(estado=InventoryStatus.VENDIDO), "user-1", now=later
        )

        assert resold.fecha_venta == later
