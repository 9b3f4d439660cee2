# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from hero_api.domain.heroes import Hero, HeroFields, HeroRepository
from hero_api.shared.logging import logger


class ListHeroesUseCase:
    def __init__(self, *, heroes: HeroRepository) -> None:
        self._heroes = heroes

    def execute(self) -> Sequence[Hero]:
        return self._heroes.list()


class GetHeroUseCase:
    def __init__(self, *, heroes: HeroRepository) -> None:
        self._heroes = heroes

    def execute(self, hero_id: int) -> Hero:
        return self._heroes.get(hero_id)


class CreateHeroUseCase:
    def __init__(self, *, heroes: HeroRepository) -> None:
        self._heroes = heroes

    def execute(self, name: str, role: str, difficulty: str) -> Hero:
        hero = self._heroes.create(HeroFields(name=name, role=role, difficulty=difficulty))
        logger.info(f"hero.create: ok (hero_id={hero.id}, name={hero.name!r})")
        return hero


class UpdateHeroUseCase:
    def __init__(self, *, heroes: HeroRepository) -> None:
        self._heroes = heroes

    def execute(self, hero_id: int, name: str, role: str, difficulty: str) -> Hero:
        # fields are validated before the id lookup
        fields = HeroFields(name=name, role=role, difficulty=difficulty)
        hero = self._heroes.update(hero_id, fields)
        logger.info(f"hero.update: ok (hero_id={hero.id})")
        return hero


class DeleteHeroUseCase:
    def __init__(self, *, heroes: HeroRepository) -> None:
        self._heroes = heroes

    def execute(self, hero_id: int) -> None:
        self._heroes.delete(hero_id)
        logger.info(f"hero.delete: ok (hero_id={hero_id})")
