"""Inventory domain entities."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class InventoryStatus(str, Enum):
    """Workflow states of a unit held for resale."""

    EN_STOCK = "en_stock"
    RESERVADO = "reservado"
    PENDIENTE = "pendiente"
    VENDIDO = "vendido"


class InventoryItem(BaseModel):
    """A physical unit (camera, lens, ...) bought to be resold."""

    id: str | None = None
    titulo: str
    marca: str | None = None
    modelo: str | None = None
    estado: InventoryStatus = InventoryStatus.EN_STOCK
    costo: float
    precio_venta: float | None = None
    fecha_ingreso: datetime = Field(default_factory=lambda: datetime.now(UTC))
    fecha_venta: datetime | None = None
    notas: str | None = None
    creado_por: str | None = None
    actualizado_por: str | None = None

    @property
    def is_sold(self) -> bool:
        return self.estado == InventoryStatus.VENDIDO


class InventoryPatch(BaseModel):
    """Partial update for an inventory item.

    Absent fields are left untouched; fields explicitly set to None are cleared.
    """

    titulo: str | None = None
    marca: str | None = None
    modelo: str | None = None
    estado: InventoryStatus | None = None
    costo: float | None = None
    precio_venta: float | None = None
    notas: str | None = None
    fecha_venta: datetime | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the explicitly set fields."""
        return self.model_dump(exclude_unset=True)
