"""Cash movement domain entities."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class MovementType(str, Enum):
    """Kinds of cash-affecting events."""

    CAPITAL = "capital"
    COMPRA = "compra"
    VENTA = "venta"
    GASTO = "gasto"
    RETIRO = "retiro"


class Movement(BaseModel):
    """A single cash-affecting ledger entry."""

    id: str | None = None
    tipo: MovementType
    monto: float  # always positive
    descripcion: str | None = None
    fecha: datetime = Field(default_factory=lambda: datetime.now(UTC))
    creado_por: str | None = None  # stamped by the store
    equipo_id: str | None = None  # FK → inventario.id
    metadata: dict[str, Any] | None = None

    # Set on movements logged from inventory transitions
    idempotency_key: str | None = None


class MovementPatch(BaseModel):
    """Fields to change on an existing movement.

    Only fields explicitly set are applied; see ``model_fields_set``.
    """

    tipo: MovementType | None = None
    monto: float | None = None
    descripcion: str | None = None
    fecha: datetime | None = None
    equipo_id: str | None = None
    metadata: dict[str, Any] | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the explicitly set fields."""
        return self.model_dump(exclude_unset=True)
