# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterable

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from hero_api.domain.heroes import SEED_HEROES, HeroFields
from hero_api.shared.logging import logger

from .models import HeroRow
from .session import Base, session_scope


def init_schema(engine: Engine) -> None:
    """Create the heroes table (and its PostgreSQL trigger) if absent."""

    Base.metadata.create_all(bind=engine)
    logger.info("db.schema: heroes table ensured")


def seed_heroes(
    factory: Callable[[], Session], heroes: Iterable[HeroFields] = SEED_HEROES
) -> int:
    """Insert the starter heroes only into an empty table; returns rows inserted."""

    with session_scope(factory) as session:
        count = session.scalar(select(func.count()).select_from(HeroRow)) or 0
        if count > 0:
            logger.info("db.seed: heroes already present, skipping")
            return 0

        rows = [HeroRow(name=h.name, role=h.role, difficulty=h.difficulty) for h in heroes]
        session.add_all(rows)
    logger.info(f"db.seed: inserted {len(rows)} heroes")
    return len(rows)
