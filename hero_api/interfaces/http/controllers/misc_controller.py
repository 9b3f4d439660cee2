# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify
from sqlalchemy.engine import Engine

from hero_api.infrastructure.health import check_database


class MiscController:
    def __init__(self, *, store: str, engine: Engine | None = None) -> None:
        self._store = store
        self._engine = engine

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True, "store": self._store}
        if self._engine is not None:
            try:
                check_database(self._engine)
                status["database"] = "ok"
            except Exception as exc:  # pragma: no cover
                status["ok"] = False
                status["database"] = f"error: {type(exc).__name__}"
        return jsonify(status)
