# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import SessionToken


class CredentialStore(Protocol):
    def verify(self, username: str, password: str) -> bool: ...


class TokenRegistry(Protocol):
    def issue(self) -> SessionToken: ...
    def validate(self, token: str) -> bool: ...
    def revoke(self, token: str) -> None: ...
    def sweep(self) -> int: ...
