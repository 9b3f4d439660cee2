from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from hero_api.app import create_app
from hero_api.container import Container
from hero_api.shared.config import AppConfig, DatabaseConfig, SecurityConfig

CREDENTIALS_YAML = """\
users:
  - username: user1
    password: 12345
  - username: user2
    password: "s3cret"
"""


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


def make_config(credentials_file: Path, store: str = "memory", **security: object) -> AppConfig:
    return AppConfig(
        CREDENTIALS_FILE=credentials_file,
        HERO_STORE=store,
        SEED_HEROES=True,
        database=DatabaseConfig(DATABASE_URL="sqlite://"),
        security=SecurityConfig(**security),
    )


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def credentials_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(CREDENTIALS_YAML, encoding="utf-8")
    return path


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(params=["memory", "sql"])
def container(request: pytest.FixtureRequest, credentials_file: Path) -> Iterator[Container]:
    c = Container(make_config(credentials_file, store=request.param))
    yield c
    c.shutdown()


@pytest.fixture()
def app(container: Container) -> Flask:
    flask_app = create_app(container.config, container=container, start_sweeper=False)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def token(client: FlaskClient) -> str:
    response = client.post("/api/login", json={"username": "user1", "password": "12345"})
    assert response.status_code == 200
    return response.get_json()["token"]
