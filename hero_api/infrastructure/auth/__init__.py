# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .credentials import YamlCredentialStore
from .guard import BearerAuthGuard, extract_bearer_token
from .sweeper import TokenSweeper
from .token_registry import InMemoryTokenRegistry

__all__ = [
    "BearerAuthGuard",
    "InMemoryTokenRegistry",
    "TokenSweeper",
    "YamlCredentialStore",
    "extract_bearer_token",
]
