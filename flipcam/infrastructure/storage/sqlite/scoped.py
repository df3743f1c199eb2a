"""Shared helpers for actor-scoped SQLite stores."""

import json
from datetime import UTC, datetime
from typing import Any

from flipcam.core.entities.actor import Actor
from flipcam.infrastructure.storage.sqlite.connection import ConnectionPool


def to_db_timestamp(value: datetime | None) -> str | None:
    """Serialize a datetime as an ISO string in UTC so text ordering is chronological."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat()


def from_db_timestamp(value: str | None) -> datetime | None:
    """Parse a stored ISO timestamp; None for empty or unparsable values."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def to_db_json(value: dict[str, Any] | None) -> str | None:
    return json.dumps(value) if value is not None else None


def from_db_json(value: str | None) -> dict[str, Any] | None:
    if not value:
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return None


class ActorScopedStore:
    """
    Base for stores bound to one actor.

    Row visibility: with a shared ledger every row is visible; otherwise only
    rows whose ``creado_por`` matches the actor.
    """

    def __init__(
        self,
        pool: ConnectionPool,
        actor: Actor,
        shared_ledger: bool = True,
    ):
        self._pool = pool
        self._actor = actor
        self._shared_ledger = shared_ledger

    @property
    def actor(self) -> Actor:
        return self._actor

    def _visibility(self) -> tuple[str, tuple[Any, ...]]:
        """SQL predicate and parameters restricting rows to the actor's view."""
        if self._shared_ledger:
            return "1 = 1", ()
        return "creado_por = ?", (self._actor.user_id,)
