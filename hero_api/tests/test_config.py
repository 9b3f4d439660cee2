from __future__ import annotations

from pathlib import Path

import pytest

from hero_api.shared.config import AppConfig, DatabaseConfig, SecurityConfig


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # no stray .env from the working directory
    monkeypatch.chdir(tmp_path)
    for name in ("DATABASE_URL", "ALLOWED_ORIGINS", "HERO_STORE", "TOKEN_TTL", "DB_SSLMODE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = AppConfig()

    assert config.port == 8080
    assert config.hero_store == "sql"
    assert config.security.allowed_origins == ["*"]
    assert config.security.token_ttl_seconds == 24 * 60 * 60
    assert config.security.sweep_interval_seconds == 30 * 60
    assert config.security.enforce_token_expiry is True
    assert config.database.pool_size == 5
    assert config.database.max_overflow == 20


def test_default_database_url_targets_postgres() -> None:
    url = DatabaseConfig(DB_HOST="db", DB_PASSWORD="pw", DB_SSLMODE="require").sqlalchemy_url()

    assert url.drivername == "postgresql+psycopg2"
    assert url.host == "db"
    assert url.port == 5432
    assert url.database == "heroes_db"
    assert url.query["sslmode"] == "require"


def test_database_url_overrides_parts(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///heroes.db")
    assert DatabaseConfig().sqlalchemy_url() == "sqlite:///heroes.db"


def test_allowed_origins_from_comma_list(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    assert SecurityConfig().allowed_origins == ["https://a.example", "https://b.example"]


@pytest.mark.parametrize("raw", ["memory", "MEMORY", " Memory "])
def test_hero_store_is_normalised(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("HERO_STORE", raw)
    assert AppConfig().hero_store == "memory"


def test_unknown_hero_store_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HERO_STORE", "redis")
    with pytest.raises(ValueError):
        AppConfig()


@pytest.mark.parametrize(("raw", "expected"), [("false", False), ("0", False), ("yes", True)])
def test_expiry_flag_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("TOKEN_ENFORCE_EXPIRY", raw)
    assert SecurityConfig().enforce_token_expiry is expected
