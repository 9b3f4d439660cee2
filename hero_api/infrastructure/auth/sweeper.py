# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading

from hero_api.domain.auth import TokenRegistry
from hero_api.shared.logging import logger


class TokenSweeper:
    """Calls ``registry.sweep()`` every ``interval`` seconds on a daemon thread."""

    def __init__(self, registry: TokenRegistry, *, interval: float) -> None:
        self._registry = registry
        self._interval = interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="token-sweeper", daemon=True)
        self._thread.start()
        logger.info(f"tokens.sweeper: start (interval={self._interval:.0f}s)")

    def stop(self, timeout: float | None = 5.0) -> None:
        thread = self._thread
        if thread is None:
            return
        self._stop.set()
        thread.join(timeout)
        self._thread = None
        logger.info("tokens.sweeper: stop")

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            try:
                self._registry.sweep()
            except Exception:
                logger.exception("tokens.sweeper: sweep failed")
