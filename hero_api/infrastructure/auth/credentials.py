# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hmac
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from hero_api.domain.auth import Credential, CredentialStore
from hero_api.shared.errors import ConfigurationError
from hero_api.shared.logging import logger


class YamlCredentialStore(CredentialStore):
    """Static username/password list, read once at startup.

    Expected document::

        users:
          - username: user1
            password: "12345"
    """

    def __init__(self, credentials: Iterable[Credential]) -> None:
        self._credentials: tuple[Credential, ...] = tuple(credentials)

    @classmethod
    def from_file(cls, path: str | Path) -> YamlCredentialStore:
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except OSError as exc:
            raise ConfigurationError(f"cannot read credentials file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"invalid YAML in credentials file {path}: {exc}") from exc

        store = cls(_parse_users(data, path))
        logger.info(f"credentials: loaded {len(store)} users from {path}")
        return store

    def __len__(self) -> int:
        return len(self._credentials)

    def verify(self, username: str, password: str) -> bool:
        # exact, case-sensitive match; compare every entry to keep timing flat
        matched = False
        for cred in self._credentials:
            user_ok = hmac.compare_digest(cred.username.encode(), username.encode())
            pass_ok = hmac.compare_digest(cred.password.encode(), password.encode())
            matched |= user_ok and pass_ok
        return matched


def _parse_users(data: Any, path: Path) -> list[Credential]:
    if not isinstance(data, dict) or not isinstance(data.get("users"), list):
        raise ConfigurationError(f"credentials file {path} must define a 'users' list")

    credentials = []
    for i, entry in enumerate(data["users"]):
        if not isinstance(entry, dict):
            raise ConfigurationError(f"credentials file {path}: users[{i}] is not a mapping")
        username = entry.get("username")
        password = entry.get("password")
        if username is None or password is None or str(username) == "":
            raise ConfigurationError(
                f"credentials file {path}: users[{i}] needs username and password"
            )
        # YAML turns unquoted 12345 into an int
        credentials.append(Credential(username=str(username), password=str(password)))
    return credentials
