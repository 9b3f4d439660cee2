# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Hero, HeroFields


class HeroRepository(Protocol):
    """Storage contract shared by the durable and in-memory hero stores.

    ``get``/``update``/``delete`` raise ``HeroNotFoundError`` for unknown ids;
    storage failures surface as ``StorageError``.
    """

    def list(self) -> Sequence[Hero]: ...
    def get(self, hero_id: int) -> Hero: ...
    def create(self, fields: HeroFields) -> Hero: ...
    def update(self, hero_id: int, fields: HeroFields) -> Hero: ...
    def delete(self, hero_id: int) -> None: ...
