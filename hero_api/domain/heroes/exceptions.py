# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from hero_api.shared.errors import DomainError, ValidationError


class HeroNotFoundError(DomainError):
    code = "hero_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Hero not found"

    def __init__(self, hero_id: int) -> None:
        super().__init__(context={"hero_id": hero_id})


class MissingHeroFieldsError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            "hero_fields_required",
            message="Name, role, and difficulty are required",
        )


class InvalidHeroIdError(ValidationError):
    def __init__(self, raw_id: str) -> None:
        super().__init__(
            "invalid_hero_id",
            message="Invalid hero ID",
            context={"hero_id": raw_id},
        )
