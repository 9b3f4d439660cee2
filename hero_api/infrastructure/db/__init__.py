# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .models import HeroRow
from .schema import init_schema, seed_heroes
from .session import Base, build_engine, build_session_factory, session_scope

__all__ = [
    "Base",
    "HeroRow",
    "build_engine",
    "build_session_factory",
    "init_schema",
    "seed_heroes",
    "session_scope",
]
