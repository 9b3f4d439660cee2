# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Volatile hero store: same contract as the SQL store, lost on restart."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Sequence
from dataclasses import replace
from datetime import datetime

from hero_api.domain.heroes import SEED_HEROES, Hero, HeroFields, HeroNotFoundError, HeroRepository


class InMemoryHeroRepository(HeroRepository):
    def __init__(
        self,
        seed: Iterable[HeroFields] = SEED_HEROES,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._heroes: list[Hero] = []
        self._next_id = 1
        for fields in seed:
            self.create(fields)

    def list(self) -> Sequence[Hero]:
        with self._lock:
            return list(self._heroes)

    def get(self, hero_id: int) -> Hero:
        with self._lock:
            return self._heroes[self._index_of(hero_id)]

    def create(self, fields: HeroFields) -> Hero:
        with self._lock:
            now = self._clock()
            hero = Hero(
                id=self._next_id,
                name=fields.name,
                role=fields.role,
                difficulty=fields.difficulty,
                created_at=now,
                updated_at=now,
            )
            self._next_id += 1
            self._heroes.append(hero)
            return hero

    def update(self, hero_id: int, fields: HeroFields) -> Hero:
        with self._lock:
            idx = self._index_of(hero_id)
            hero = replace(
                self._heroes[idx],
                name=fields.name,
                role=fields.role,
                difficulty=fields.difficulty,
                updated_at=self._clock(),
            )
            self._heroes[idx] = hero
            return hero

    def delete(self, hero_id: int) -> None:
        with self._lock:
            del self._heroes[self._index_of(hero_id)]

    def _index_of(self, hero_id: int) -> int:
        for idx, hero in enumerate(self._heroes):
            if hero.id == hero_id:
                return idx
        raise HeroNotFoundError(hero_id)
