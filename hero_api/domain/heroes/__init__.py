# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import SEED_HEROES, Hero, HeroFields
from .exceptions import HeroNotFoundError, InvalidHeroIdError, MissingHeroFieldsError
from .repositories import HeroRepository

__all__ = [
    "SEED_HEROES",
    "Hero",
    "HeroFields",
    "HeroNotFoundError",
    "HeroRepository",
    "InvalidHeroIdError",
    "MissingHeroFieldsError",
]
