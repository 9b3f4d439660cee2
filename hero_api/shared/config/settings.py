# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from sqlalchemy.engine import URL


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str | None = Field(None, alias="DATABASE_URL")
    host: str = Field("localhost", alias="DB_HOST")
    port: int = Field(5432, alias="DB_PORT")
    user: str = Field("postgres", alias="DB_USER")
    password: str = Field("password", alias="DB_PASSWORD")
    name: str = Field("heroes_db", alias="DB_NAME")
    sslmode: str = Field("disable", alias="DB_SSLMODE")

    # 5 idle + 20 overflow = 25 open connections, recycled after 5 minutes
    pool_size: int = Field(5, ge=1, alias="DB_POOL_SIZE")
    max_overflow: int = Field(20, ge=0, alias="DB_MAX_OVERFLOW")
    pool_recycle: int = Field(300, ge=1, alias="DB_POOL_RECYCLE")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DB_POOL_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", validate_by_name=True
    )

    def sqlalchemy_url(self) -> str | URL:
        if self.url:
            return self.url
        return URL.create(
            "postgresql+psycopg2",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.name,
            query={"sslmode": self.sslmode},
        )


class SecurityConfig(BaseSettings):
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")
    token_ttl_seconds: int = Field(24 * 60 * 60, ge=1, alias="TOKEN_TTL")
    sweep_interval_seconds: float = Field(30 * 60, gt=0, alias="TOKEN_SWEEP_INTERVAL")
    enforce_token_expiry: bool = Field(True, alias="TOKEN_ENFORCE_EXPIRY")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", validate_by_name=True
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enforce_token_expiry", mode="before")
    @classmethod
    def _parse_enforce(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8080, ge=1, le=65535, alias="PORT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")
    credentials_file: Path = Field(Path("config.yaml"), alias="CREDENTIALS_FILE")
    hero_store: Literal["sql", "memory"] = Field("sql", alias="HERO_STORE")
    seed_heroes: bool = Field(True, alias="SEED_HEROES")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
        validate_by_name=True,
    )

    @field_validator("debug_logging", "seed_heroes", mode="before")
    @classmethod
    def _parse_flags(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @field_validator("hero_store", mode="before")
    @classmethod
    def _normalize_store(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip().lower()
        return value


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DatabaseConfig", "SecurityConfig", "load_config"]
