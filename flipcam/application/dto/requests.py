"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation. Each write operation declares
its own whitelist of fields; anything else in the body is dropped.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    field_validator,
    model_validator,
)

from flipcam.core.entities.inventory import InventoryItem, InventoryPatch, InventoryStatus
from flipcam.core.entities.movement import Movement, MovementPatch, MovementType

# A JSON number that is finite and strictly positive; strings are rejected
Amount = Annotated[float, Field(strict=True, gt=0, allow_inf_nan=False)]

# Numeric strings are coerced, as the inventory forms post text inputs
Price = Annotated[float, Field(ge=0, allow_inf_nan=False)]

RecordId = Annotated[StrictStr, Field(min_length=1)]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _falsy_to_none(value: Any) -> Any:
    return value if value else None


class DeleteRequest(BaseModel):
    """Body of DELETE requests."""

    model_config = ConfigDict(extra="ignore")

    id: RecordId = Field(..., description="ID of the row to delete")


# Movements


class CreateMovementRequest(BaseModel):
    """Request to record a cash movement.

    ``creado_por`` is never accepted; the store stamps the owner.
    """

    model_config = ConfigDict(extra="ignore")

    tipo: MovementType = Field(..., description="Movement kind")
    monto: Amount = Field(..., description="Positive amount", examples=[1500.0])
    descripcion: str | None = Field(default=None, description="Free text")
    fecha: datetime | None = Field(default=None, description="Defaults to now")
    equipo_id: str | None = Field(default=None, description="Linked inventory item")
    metadata: dict[str, Any] | None = Field(default=None, description="Free-form metadata")

    def to_entity(self) -> Movement:
        data = self.model_dump(exclude_none=True)
        return Movement(**data)


class UpdateMovementRequest(BaseModel):
    """Request to change some fields of a movement."""

    model_config = ConfigDict(extra="ignore")

    id: RecordId = Field(..., description="Movement ID")
    tipo: MovementType | None = None
    monto: Amount | None = None
    descripcion: str | None = None
    fecha: datetime | None = None
    equipo_id: str | None = None
    metadata: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _reject_null_required(self) -> "UpdateMovementRequest":
        for name in ("tipo", "monto", "fecha"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def to_patch(self) -> MovementPatch:
        """Build a patch holding only the fields present in the request."""
        changes = {
            name: getattr(self, name) for name in self.model_fields_set if name != "id"
        }
        if changes.get("descripcion") == "":
            changes["descripcion"] = None
        return MovementPatch(**changes)


# Inventory


class CreateInventoryItemRequest(BaseModel):
    """Request to register a unit bought for resale."""

    model_config = ConfigDict(extra="ignore")

    titulo: str = Field(..., min_length=1, examples=["Canon R5"])
    marca: str | None = None
    modelo: str | None = None
    estado: InventoryStatus = Field(default=InventoryStatus.EN_STOCK)
    costo: Price = Field(..., description="Purchase cost", examples=[1000])
    precio_venta: Price | None = Field(default=None, description="Listed sale price")
    notas: str | None = None

    @field_validator("titulo")
    @classmethod
    def _titulo_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("titulo is required")
        return v

    @field_validator("marca", "modelo", "notas", mode="before")
    @classmethod
    def _blank_text(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("precio_venta", mode="before")
    @classmethod
    def _unset_price(cls, v: Any) -> Any:
        return _falsy_to_none(v)

    @field_validator("estado", mode="before")
    @classmethod
    def _default_estado(cls, v: Any) -> Any:
        return v or InventoryStatus.EN_STOCK

    def to_entity(self) -> InventoryItem:
        return InventoryItem(**self.model_dump())


class UpdateInventoryItemRequest(BaseModel):
    """Partial update of an inventory item.

    Absent fields are left as they are; explicit nulls clear optional fields.
    """

    model_config = ConfigDict(extra="ignore")

    id: RecordId = Field(..., description="Inventory item ID")
    titulo: str | None = Field(default=None, min_length=1)
    marca: str | None = None
    modelo: str | None = None
    estado: InventoryStatus | None = None
    costo: Price | None = None
    precio_venta: Price | None = None
    notas: str | None = None
    fecha_venta: datetime | None = None

    @field_validator("marca", "modelo", "notas", "fecha_venta", mode="before")
    @classmethod
    def _blank_text(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("precio_venta", mode="before")
    @classmethod
    def _unset_price(cls, v: Any) -> Any:
        return _falsy_to_none(v)

    @model_validator(mode="after")
    def _reject_null_required(self) -> "UpdateInventoryItemRequest":
        for name in ("titulo", "estado", "costo"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        if self.titulo is not None and not self.titulo.strip():
            raise ValueError("titulo cannot be blank")
        return self

    def to_patch(self) -> InventoryPatch:
        """Build a patch holding only the fields present in the request."""
        changes = {
            name: getattr(self, name) for name in self.model_fields_set if name != "id"
        }
        return InventoryPatch(**changes)


# Session bridge


class SessionPayload(BaseModel):
    """Session handed over by the browser-side identity client."""

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., min_length=1)
    refresh_token: str | None = None
    expires_in: int | None = Field(default=None, gt=0)


class AuthEventRequest(BaseModel):
    """Auth state change mirrored from the browser."""

    model_config = ConfigDict(extra="ignore")

    event: str | None = Field(default=None, examples=["SIGNED_IN", "SIGNED_OUT"])
    session: SessionPayload | None = None
