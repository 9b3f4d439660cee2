from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from hero_api.domain.heroes import InvalidHeroIdError

_MAX_HERO_ID = 2**31 - 1  # SERIAL column range


class HeroRequestDTO(BaseModel):
    """Body of POST /api/heroes and PUT /api/heroes/<id>; blank checks live in the domain."""

    name: str = ""
    role: str = ""
    difficulty: str = ""

    model_config = ConfigDict(strict=True)


def parse_hero_id(raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()) or len(raw) > 10 or int(raw) > _MAX_HERO_ID:
        raise InvalidHeroIdError(raw)
    return int(raw)
