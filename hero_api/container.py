# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from hero_api.application.use_cases.auth import LoginUserUseCase, LogoutUserUseCase
from hero_api.application.use_cases.heroes import (
    CreateHeroUseCase,
    DeleteHeroUseCase,
    GetHeroUseCase,
    ListHeroesUseCase,
    UpdateHeroUseCase,
)
from hero_api.domain.heroes import SEED_HEROES, HeroRepository
from hero_api.infrastructure.auth import (
    BearerAuthGuard,
    InMemoryTokenRegistry,
    TokenSweeper,
    YamlCredentialStore,
)
from hero_api.infrastructure.db import (
    build_engine,
    build_session_factory,
    init_schema,
    seed_heroes,
)
from hero_api.infrastructure.repositories.heroes import (
    InMemoryHeroRepository,
    SqlAlchemyHeroRepository,
)
from hero_api.interfaces.http.controllers import (
    AuthController,
    HeroesController,
    MiscController,
)
from hero_api.shared.config import AppConfig
from hero_api.shared.logging import logger


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @property
    def uses_sql(self) -> bool:
        return self.config.hero_store == "sql"

    # Storage

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def hero_repository(self) -> HeroRepository:
        if self.uses_sql:
            return SqlAlchemyHeroRepository(self.session_factory)
        return InMemoryHeroRepository(SEED_HEROES if self.config.seed_heroes else ())

    def bootstrap(self) -> None:
        """Load credentials and prepare storage; any failure here is fatal."""

        if not len(self.credential_store):
            logger.warning("credentials: no users configured, every login will be rejected")
        self.prepare_storage()

    def prepare_storage(self) -> None:
        """Create the schema and seed starter heroes; no-op for the in-memory store."""

        if not self.uses_sql:
            logger.info("storage: using in-memory hero store")
            return
        init_schema(self.engine)
        if self.config.seed_heroes:
            seed_heroes(self.session_factory)

    # Auth

    @cached_property
    def credential_store(self) -> YamlCredentialStore:
        return YamlCredentialStore.from_file(self.config.credentials_file)

    @cached_property
    def token_registry(self) -> InMemoryTokenRegistry:
        security = self.config.security
        return InMemoryTokenRegistry(
            ttl=timedelta(seconds=security.token_ttl_seconds),
            enforce_expiry=security.enforce_token_expiry,
        )

    @cached_property
    def token_sweeper(self) -> TokenSweeper:
        return TokenSweeper(
            self.token_registry, interval=self.config.security.sweep_interval_seconds
        )

    @cached_property
    def auth_guard(self) -> BearerAuthGuard:
        return BearerAuthGuard(self.token_registry)

    # Use cases

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(credentials=self.credential_store, tokens=self.token_registry)

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(tokens=self.token_registry)

    @cached_property
    def list_heroes_use_case(self) -> ListHeroesUseCase:
        return ListHeroesUseCase(heroes=self.hero_repository)

    @cached_property
    def get_hero_use_case(self) -> GetHeroUseCase:
        return GetHeroUseCase(heroes=self.hero_repository)

    @cached_property
    def create_hero_use_case(self) -> CreateHeroUseCase:
        return CreateHeroUseCase(heroes=self.hero_repository)

    @cached_property
    def update_hero_use_case(self) -> UpdateHeroUseCase:
        return UpdateHeroUseCase(heroes=self.hero_repository)

    @cached_property
    def delete_hero_use_case(self) -> DeleteHeroUseCase:
        return DeleteHeroUseCase(heroes=self.hero_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            guard=self.auth_guard,
        )

    @cached_property
    def heroes_controller(self) -> HeroesController:
        return HeroesController(
            list_heroes=self.list_heroes_use_case,
            get_hero=self.get_hero_use_case,
            create_hero=self.create_hero_use_case,
            update_hero=self.update_hero_use_case,
            delete_hero=self.delete_hero_use_case,
            guard=self.auth_guard,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(
            store=self.config.hero_store,
            engine=self.engine if self.uses_sql else None,
        )

    def shutdown(self) -> None:
        if "token_sweeper" in self.__dict__:
            self.token_sweeper.stop()
        if "engine" in self.__dict__:
            self.engine.dispose()
