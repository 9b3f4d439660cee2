# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .manage_heroes import (
    CreateHeroUseCase,
    DeleteHeroUseCase,
    GetHeroUseCase,
    ListHeroesUseCase,
    UpdateHeroUseCase,
)

__all__ = [
    "CreateHeroUseCase",
    "DeleteHeroUseCase",
    "GetHeroUseCase",
    "ListHeroesUseCase",
    "UpdateHeroUseCase",
]
