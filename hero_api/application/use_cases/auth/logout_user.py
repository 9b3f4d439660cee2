"""Use-case for revoking access tokens."""

from __future__ import annotations

from hero_api.domain.auth import TokenRegistry


class LogoutUserUseCase:
    def __init__(self, *, tokens: TokenRegistry) -> None:
        self._tokens = tokens

    def execute(self, token: str) -> None:
        if token:
            self._tokens.revoke(token)
