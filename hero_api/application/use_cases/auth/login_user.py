# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from hero_api.domain.auth import CredentialStore, InvalidCredentialsError, TokenRegistry
from hero_api.shared.logging import logger


class LoginUserUseCase:
    def __init__(self, *, credentials: CredentialStore, tokens: TokenRegistry) -> None:
        self._credentials = credentials
        self._tokens = tokens

    def execute(self, username: str, password: str, ip_address: str | None = None) -> str:
        if not self._credentials.verify(username, password):
            logger.warning(f"auth.login: rejected (username={username!r}, ip={ip_address})")
            raise InvalidCredentialsError()

        token = self._tokens.issue()
        logger.info(
            f"auth.login: ok (username={username!r}, exp={token.expires_at.isoformat()})"
        )
        return token.token
