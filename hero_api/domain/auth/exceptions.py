# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from hero_api.shared.errors import DomainError


class AuthError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED
    message = "Unauthorized"


class MissingAuthorizationError(AuthError):
    code = "authorization_required"
    message = "Authorization header required"


class InvalidAuthorizationFormatError(AuthError):
    code = "invalid_authorization_format"
    message = "Invalid authorization format"


class TokenRequiredError(AuthError):
    code = "token_required"
    message = "Token required"


class InvalidTokenError(AuthError):
    code = "invalid_token"
    message = "Invalid or expired token"


class InvalidCredentialsError(AuthError):
    code = "invalid_credentials"
    message = "Invalid username or password"
