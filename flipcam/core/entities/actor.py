"""Authenticated actor entity."""

from datetime import datetime

from pydantic import BaseModel


class Actor(BaseModel):
    """The user a request acts on behalf of, resolved from an access token."""

    user_id: str
    email: str | None = None
    role: str | None = None
    expires_at: datetime | None = None
