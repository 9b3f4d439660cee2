# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request

from hero_api.application.use_cases.auth import LoginUserUseCase, LogoutUserUseCase
from hero_api.infrastructure.auth import BearerAuthGuard
from hero_api.interfaces.http.dto import (
    LoginRequestDTO,
    LoginResponseDTO,
    MessageDTO,
    parse_body,
)
from hero_api.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        guard: BearerAuthGuard,
    ) -> None:
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._guard = guard

    def login(self) -> tuple[Response, int]:
        dto = parse_body(LoginRequestDTO)
        token = self._login_use_case.execute(dto.username, dto.password, _get_client_ip())
        return jsonify(LoginResponseDTO(token=token).model_dump()), 200

    def logout(self) -> tuple[Response, int]:
        self._logout_use_case.execute(g.auth_token)
        logger.info("auth.logout: ok")
        return jsonify(MessageDTO(message="Logged out successfully").model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self._guard.required(self.logout), methods=["POST"])
        return bp
