# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Credential, SessionToken
from .exceptions import (
    AuthError,
    InvalidAuthorizationFormatError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingAuthorizationError,
    TokenRequiredError,
)
from .repositories import CredentialStore, TokenRegistry

__all__ = [
    "AuthError",
    "Credential",
    "CredentialStore",
    "InvalidAuthorizationFormatError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingAuthorizationError",
    "SessionToken",
    "TokenRegistry",
    "TokenRequiredError",
]
