# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response, request
from flask_cors import CORS

ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]


def configure_cors(app: Flask, *, allowed_origins: list[str]) -> None:
    """Permissive CORS on every response; preflight never reaches routing or auth."""

    CORS(
        app,
        resources={r"/*": {"origins": allowed_origins}},
        methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )
    wildcard = "*" in allowed_origins

    @app.before_request
    def _short_circuit_preflight():
        if request.method == "OPTIONS":
            return Response(status=200)
        return None

    @app.after_request
    def _add_cors_defaults(resp: Response) -> Response:
        if wildcard:
            resp.headers.setdefault("Access-Control-Allow-Origin", "*")
        resp.headers.setdefault("Access-Control-Allow-Methods", ", ".join(ALLOWED_METHODS))
        resp.headers.setdefault("Access-Control-Allow-Headers", ", ".join(ALLOWED_HEADERS))
        return resp


__all__ = ["ALLOWED_HEADERS", "ALLOWED_METHODS", "configure_cors"]
