# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from hero_api.domain.auth import (
    InvalidAuthorizationFormatError,
    InvalidTokenError,
    MissingAuthorizationError,
    TokenRegistry,
    TokenRequiredError,
)
from hero_api.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])

_BEARER_PREFIX = "Bearer "


def extract_bearer_token(header: str | None) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` value."""

    if not header:
        raise MissingAuthorizationError()
    if not header.startswith(_BEARER_PREFIX):
        raise InvalidAuthorizationFormatError()
    token = header[len(_BEARER_PREFIX):]
    if not token:
        raise TokenRequiredError()
    return token


class BearerAuthGuard:
    def __init__(self, tokens: TokenRegistry) -> None:
        self._tokens = tokens

    def authenticate(self) -> str:
        token = extract_bearer_token(request.headers.get("Authorization"))
        if not self._tokens.validate(token):
            logger.warning(
                f"Auth failed (token not found/expired) on {request.method} {request.path}"
            )
            raise InvalidTokenError()
        return token

    def required(self, f: F) -> F:
        @wraps(f)
        def inner(*a, **kw):
            g.auth_token = self.authenticate()
            logger.debug(f"Auth OK: {request.method} {request.path}")
            return f(*a, **kw)

        return cast(F, inner)
