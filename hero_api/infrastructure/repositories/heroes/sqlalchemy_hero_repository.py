# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hero_api.domain.heroes import Hero, HeroFields, HeroNotFoundError, HeroRepository
from hero_api.infrastructure.db import HeroRow, session_scope
from hero_api.shared.errors import StorageError
from hero_api.shared.logging import logger


class SqlAlchemyHeroRepository(HeroRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list(self) -> Sequence[Hero]:
        try:
            with session_scope(self._session_factory) as session:
                rows = session.scalars(select(HeroRow).order_by(HeroRow.id.asc())).all()
                return [row.to_domain() for row in rows]
        except SQLAlchemyError as exc:
            logger.exception("heroes.list: err")
            raise StorageError("heroes_list_failed", message="Failed to fetch heroes") from exc

    def get(self, hero_id: int) -> Hero:
        try:
            with session_scope(self._session_factory) as session:
                row = session.get(HeroRow, hero_id)
                hero = row.to_domain() if row else None
        except SQLAlchemyError as exc:
            logger.exception(f"heroes.get: err (hero_id={hero_id})")
            raise StorageError("hero_fetch_failed", message="Failed to fetch hero") from exc
        if hero is None:
            raise HeroNotFoundError(hero_id)
        return hero

    def create(self, fields: HeroFields) -> Hero:
        try:
            with session_scope(self._session_factory) as session:
                row = HeroRow(name=fields.name, role=fields.role, difficulty=fields.difficulty)
                session.add(row)
                session.flush()
                session.refresh(row)
                return row.to_domain()
        except SQLAlchemyError as exc:
            logger.exception("heroes.create: err")
            raise StorageError("hero_create_failed", message="Failed to create hero") from exc

    def update(self, hero_id: int, fields: HeroFields) -> Hero:
        try:
            with session_scope(self._session_factory) as session:
                row = session.get(HeroRow, hero_id)
                if row is None:
                    hero = None
                else:
                    row.name = fields.name
                    row.role = fields.role
                    row.difficulty = fields.difficulty
                    session.flush()
                    session.refresh(row)
                    hero = row.to_domain()
        except SQLAlchemyError as exc:
            logger.exception(f"heroes.update: err (hero_id={hero_id})")
            raise StorageError("hero_update_failed", message="Failed to update hero") from exc
        if hero is None:
            raise HeroNotFoundError(hero_id)
        return hero

    def delete(self, hero_id: int) -> None:
        try:
            with session_scope(self._session_factory) as session:
                result = session.execute(delete(HeroRow).where(HeroRow.id == hero_id))
                removed = result.rowcount
        except SQLAlchemyError as exc:
            logger.exception(f"heroes.delete: err (hero_id={hero_id})")
            raise StorageError("hero_delete_failed", message="Failed to delete hero") from exc
        if not removed:
            raise HeroNotFoundError(hero_id)
