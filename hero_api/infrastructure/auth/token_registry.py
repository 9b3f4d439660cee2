# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from hero_api.domain.auth import SessionToken, TokenRegistry
from hero_api.shared.logging import logger
from hero_api.shared.utils import ReadWriteLock


def _utcnow() -> datetime:
    return datetime.now(UTC)


class InMemoryTokenRegistry(TokenRegistry):
    """Process-wide map of issued bearer tokens.

    With ``enforce_expiry`` off, an expired token stays valid until the next
    :meth:`sweep` removes it.
    """

    def __init__(
        self,
        *,
        ttl: timedelta = timedelta(hours=24),
        enforce_expiry: bool = True,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ttl = ttl
        self._enforce_expiry = enforce_expiry
        self._clock = clock
        self._tokens: dict[str, SessionToken] = {}
        self._lock = ReadWriteLock()

    def issue(self) -> SessionToken:
        token = SessionToken(token=secrets.token_urlsafe(32), expires_at=self._clock() + self._ttl)
        with self._lock.write():
            self._tokens[token.token] = token
        logger.debug(f"tokens.issue: ok (exp={token.expires_at.isoformat()})")
        return token

    def validate(self, token: str) -> bool:
        with self._lock.read():
            issued = self._tokens.get(token)
        if issued is None:
            return False
        if self._enforce_expiry and issued.is_expired(self._clock()):
            return False
        return True

    def revoke(self, token: str) -> None:
        with self._lock.write():
            self._tokens.pop(token, None)

    def sweep(self) -> int:
        now = self._clock()
        with self._lock.write():
            expired = [tok for tok, issued in self._tokens.items() if issued.is_expired(now)]
            for tok in expired:
                del self._tokens[tok]
            remaining = len(self._tokens)
        logger.info(f"tokens.sweep: removed={len(expired)} remaining={remaining}")
        return len(expired)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._tokens)
