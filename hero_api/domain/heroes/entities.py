# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .exceptions import MissingHeroFieldsError


@dataclass(slots=True, frozen=True)
class HeroFields:
    """The mutable part of a hero; every field must be non-blank."""

    name: str
    role: str
    difficulty: str

    def __post_init__(self) -> None:
        if not all(isinstance(v, str) and v.strip() for v in (self.name, self.role, self.difficulty)):
            raise MissingHeroFieldsError()


@dataclass(slots=True, frozen=True)
class Hero:
    id: int
    name: str
    role: str
    difficulty: str
    created_at: datetime
    updated_at: datetime

    @property
    def fields(self) -> HeroFields:
        return HeroFields(name=self.name, role=self.role, difficulty=self.difficulty)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role,
            "difficulty": self.difficulty,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


SEED_HEROES: tuple[HeroFields, ...] = (
    HeroFields(name="Alucard", role="Fighter", difficulty="Mudah"),
    HeroFields(name="Miya", role="Marksman", difficulty="Mudah"),
    HeroFields(name="Fanny", role="Assassin", difficulty="Sulit"),
)
