# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth import LoginRequestDTO, LoginResponseDTO, MessageDTO
from .common import parse_body
from .heroes import HeroRequestDTO, parse_hero_id

__all__ = [
    "HeroRequestDTO",
    "LoginRequestDTO",
    "LoginResponseDTO",
    "MessageDTO",
    "parse_body",
    "parse_hero_id",
]
