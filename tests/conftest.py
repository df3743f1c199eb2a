"""Pytest configuration and fixtures."""

import time
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from flipcam.api.main import create_app
from flipcam.config.settings import APISettings, AuthSettings, Settings, StorageSettings
from flipcam.core.entities.actor import Actor

JWT_SECRET = "test-secret"
USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a temporary database."""
    return Settings(
        storage=StorageSettings(data_dir=tmp_path, db_name="test.db", pool_size=2),
        auth=AuthSettings(jwt_secret=JWT_SECRET),
        api=APISettings(cors_origins=[]),
    )


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Factory for signed access tokens."""

    def _make(
        sub: str | None = USER_ID,
        expires_in: int = 3600,
        secret: str = JWT_SECRET,
        **claims: Any,
    ) -> str:
        payload: dict[str, Any] = {
            "aud": "authenticated",
            "exp": int(time.time()) + expires_in,
            "email": "socio@example.com",
            "role": "authenticated",
            **claims,
        }
        if sub is not None:
            payload["sub"] = sub
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make


@pytest.fixture
def auth_headers(make_token: Callable[..., str]) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def actor() -> Actor:
    return Actor(user_id=USER_ID, email="socio@example.com")


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Sync test client running the real lifespan against a temp database."""
    app = create_app(settings)
    with TestClient(app) as c:
        yield c
