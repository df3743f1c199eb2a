"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization. Successful responses are
wrapped as ``{"data": ...}``; failures as ``{"error": "...", "code": "..."}``.
"""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from flipcam.core.entities.inventory import InventoryItem
from flipcam.core.entities.kpi import KpiSnapshot
from flipcam.core.entities.movement import Movement

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Success envelope."""

    data: T


class DeleteResponse(BaseModel, Generic[T]):
    """Delete result: the removed row, or ``ok`` when nothing was there."""

    data: T | None = None
    ok: bool | None = None


class OkResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error: str = Field(..., description="Human-readable message")
    code: str | None = Field(default=None, description="Machine-readable error code")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Validation details")


class MovementResponse(BaseModel):
    """Movement as returned to clients."""

    id: str
    tipo: str
    monto: float
    descripcion: str | None = None
    fecha: datetime
    creado_por: str | None = None
    equipo_id: str | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_entity(cls, movement: Movement) -> "MovementResponse":
        return cls(
            id=movement.id or "",
            tipo=movement.tipo.value,
            monto=movement.monto,
            descripcion=movement.descripcion,
            fecha=movement.fecha,
            creado_por=movement.creado_por,
            equipo_id=movement.equipo_id,
            metadata=movement.metadata,
        )


class InventoryItemResponse(BaseModel):
    """Inventory item as returned to clients."""

    id: str
    titulo: str
    marca: str | None = None
    modelo: str | None = None
    estado: str
    costo: float
    precio_venta: float | None = None
    fecha_ingreso: datetime
    fecha_venta: datetime | None = None
    notas: str | None = None
    creado_por: str | None = None
    actualizado_por: str | None = None

    @classmethod
    def from_entity(cls, item: InventoryItem) -> "InventoryItemResponse":
        data = item.model_dump(mode="json")
        data["id"] = item.id or ""
        return cls(**data)


class KpiSnapshotResponse(BaseModel):
    """Current KPIs plus projections over unsold inventory."""

    caja_actual: float
    capital: float
    utilidad: float
    inversion_en_inventario: float
    ventas_potenciales_pendientes: float
    utilidad_proyectada: float
    cash_proyectado: float
    roi: float
    roi_proyectado: float

    @classmethod
    def from_entity(cls, snapshot: KpiSnapshot) -> "KpiSnapshotResponse":
        return cls(**snapshot.model_dump())


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    uptime_seconds: float
    database: bool | None = None
