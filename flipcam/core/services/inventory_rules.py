"""
Inventory update rules and the cash movements they imply.

Buying an item logs a compra movement for its cost; moving it into vendido
stamps the sale date and logs a venta movement for its sale price. Creating an
item directly as vendido counts as both. Each logged movement carries an
idempotency key derived from the item and the transition so that replays never
double-count.
"""

from datetime import UTC, datetime

from flipcam.core.entities.inventory import InventoryItem, InventoryPatch, InventoryStatus
from flipcam.core.entities.movement import Movement, MovementType


def apply_inventory_patch(
    current: InventoryItem,
    patch: InventoryPatch,
    actor_id: str,
    now: datetime | None = None,
) -> InventoryItem:
    """
    Apply a partial update to an item.

    Only fields set on the patch change. Unless the caller sent fecha_venta
    itself, the sale date follows estado (see ``stamp_sale_date``).
    """
    changes = patch.changes()
    updated = current.model_copy(update={**changes, "actualizado_por": actor_id})

    if "fecha_venta" not in changes:
        updated = stamp_sale_date(current, updated, now)
    return updated


def stamp_sale_date(
    before: InventoryItem | None,
    after: InventoryItem,
    now: datetime | None = None,
) -> InventoryItem:
    """
    Keep fecha_venta in step with estado.

    Entering vendido stamps ``now`` when no date is set; leaving vendido clears
    the date so a later sale gets its own. ``before`` is None for a new item.
    """
    if is_sale_transition(before, after) and after.fecha_venta is None:
        return after.model_copy(update={"fecha_venta": now or datetime.now(UTC)})
    if before is not None and before.is_sold and not after.is_sold:
        return after.model_copy(update={"fecha_venta": None})
    return after


def is_sale_transition(before: InventoryItem | None, after: InventoryItem) -> bool:
    """True when the item was not sold before (or did not exist) and is sold after."""
    was_sold = before is not None and before.is_sold
    return not was_sold and after.estado == InventoryStatus.VENDIDO


def purchase_movement_for(item: InventoryItem) -> Movement | None:
    """Compra movement for a newly bought item, None when it cost nothing."""
    if item.id is None or not item.costo or item.costo <= 0:
        return None
    return Movement(
        tipo=MovementType.COMPRA,
        monto=item.costo,
        descripcion=f"Compra: {item.titulo}",
        fecha=item.fecha_ingreso,
        equipo_id=item.id,
        metadata={"origen": "inventario"},
        idempotency_key=f"inventario:{item.id}:compra",
    )


def sale_movement_for(item: InventoryItem) -> Movement | None:
    """Venta movement for a sold item, None when it has no sale price."""
    if item.id is None or not item.precio_venta or item.precio_venta <= 0:
        return None
    return Movement(
        tipo=MovementType.VENTA,
        monto=item.precio_venta,
        descripcion=f"Venta: {item.titulo}",
        fecha=item.fecha_venta or datetime.now(UTC),
        equipo_id=item.id,
        metadata={"origen": "inventario"},
        idempotency_key=f"inventario:{item.id}:venta",
    )
