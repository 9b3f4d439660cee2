# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify

from hero_api.application.use_cases.heroes import (
    CreateHeroUseCase,
    DeleteHeroUseCase,
    GetHeroUseCase,
    ListHeroesUseCase,
    UpdateHeroUseCase,
)
from hero_api.infrastructure.auth import BearerAuthGuard
from hero_api.interfaces.http.dto import HeroRequestDTO, parse_body, parse_hero_id
from hero_api.shared.logging import logger


class HeroesController:
    def __init__(
        self,
        *,
        list_heroes: ListHeroesUseCase,
        get_hero: GetHeroUseCase,
        create_hero: CreateHeroUseCase,
        update_hero: UpdateHeroUseCase,
        delete_hero: DeleteHeroUseCase,
        guard: BearerAuthGuard,
    ) -> None:
        self._list_heroes = list_heroes
        self._get_hero = get_hero
        self._create_hero = create_hero
        self._update_hero = update_hero
        self._delete_hero = delete_hero
        self._guard = guard

    def as_blueprint(self) -> Blueprint:
        auth = self._guard.required
        bp = Blueprint("heroes", __name__, url_prefix="/api")
        bp.add_url_rule("/heroes", view_func=self.list, methods=["GET"])
        bp.add_url_rule("/heroes", view_func=auth(self.create), methods=["POST"])
        bp.add_url_rule("/heroes/<hero_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/heroes/<hero_id>", view_func=auth(self.update), methods=["PUT"])
        bp.add_url_rule("/heroes/<hero_id>", view_func=auth(self.delete), methods=["DELETE"])
        return bp

    def list(self) -> tuple[Response, int]:
        t0 = perf_counter()
        heroes = self._list_heroes.execute()
        dt = (perf_counter() - t0) * 1000
        logger.info(f"heroes.list: ok (n={len(heroes)}, dt_ms={dt:.0f})")
        return jsonify([hero.to_dict() for hero in heroes]), 200

    def get(self, hero_id: str) -> tuple[Response, int]:
        hero = self._get_hero.execute(parse_hero_id(hero_id))
        return jsonify(hero.to_dict()), 200

    def create(self) -> tuple[Response, int]:
        dto = parse_body(HeroRequestDTO)
        hero = self._create_hero.execute(dto.name, dto.role, dto.difficulty)
        return jsonify(hero.to_dict()), 201

    def update(self, hero_id: str) -> tuple[Response, int]:
        hid = parse_hero_id(hero_id)
        dto = parse_body(HeroRequestDTO)
        hero = self._update_hero.execute(hid, dto.name, dto.role, dto.difficulty)
        return jsonify(hero.to_dict()), 200

    def delete(self, hero_id: str) -> tuple[str, int]:
        self._delete_hero.execute(parse_hero_id(hero_id))
        return "", 204
