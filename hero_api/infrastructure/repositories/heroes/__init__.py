# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .memory_hero_repository import InMemoryHeroRepository
from .sqlalchemy_hero_repository import SqlAlchemyHeroRepository

__all__ = ["InMemoryHeroRepository", "SqlAlchemyHeroRepository"]
