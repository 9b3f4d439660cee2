from __future__ import annotations

import threading
from datetime import timedelta

import pytest

from hero_api.domain.auth import SessionToken
from hero_api.infrastructure.auth import InMemoryTokenRegistry
from hero_api.shared.utils import ReadWriteLock

from .conftest import FakeClock


def test_issued_token_validates_immediately(clock: FakeClock) -> None:
    registry = InMemoryTokenRegistry(clock=clock)

    token = registry.issue()

    assert registry.validate(token.token) is True
    assert token.expires_at == clock.now + timedelta(hours=24)


def test_tokens_are_unique(clock: FakeClock) -> None:
    registry = InMemoryTokenRegistry(clock=clock)

    tokens = {registry.issue().token for _ in range(200)}

    assert len(tokens) == 200
    assert len(registry) == 200


def test_unknown_token_is_invalid(clock: FakeClock) -> None:
    registry = InMemoryTokenRegistry(clock=clock)
    assert registry.validate("nope") is False


def test_revoke_is_idempotent(clock: FakeClock) -> None:
    registry = InMemoryTokenRegistry(clock=clock)
    token = registry.issue().token

    registry.revoke(token)
    registry.revoke(token)
    registry.revoke("never-issued")

    assert registry.validate(token) is False


def test_expired_token_rejected_inline(clock: FakeClock) -> None:
    registry = InMemoryTokenRegistry(ttl=timedelta(hours=24), clock=clock)
    token = registry.issue().token

    clock.advance(hours=24)

    assert registry.validate(token) is False


def test_expired_token_survives_until_sweep_without_inline_check(clock: FakeClock) -> None:
    registry = InMemoryTokenRegistry(enforce_expiry=False, clock=clock)
    token = registry.issue().token

    clock.advance(hours=25)
    assert registry.validate(token) is True

    assert registry.sweep() == 1
    assert registry.validate(token) is False


def test_sweep_removes_only_expired(clock: FakeClock) -> None:
    registry = InMemoryTokenRegistry(ttl=timedelta(minutes=10), clock=clock)
    old = registry.issue().token
    clock.advance(minutes=6)
    fresh = registry.issue().token
    clock.advance(minutes=5)

    removed = registry.sweep()

    assert removed == 1
    assert registry.validate(old) is False
    assert registry.validate(fresh) is True
    assert len(registry) == 1


def test_concurrent_issue_and_validate() -> None:
    registry = InMemoryTokenRegistry()
    issued: list[str] = []
    failures: list[str] = []
    guard = threading.Lock()

    def worker() -> None:
        for _ in range(50):
            tok = registry.issue().token
            if not registry.validate(tok):
                failures.append(tok)
            with guard:
                issued.append(tok)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(5.0)

    assert failures == []
    assert len(registry) == len(issued) == 400


def test_readers_share_the_lock() -> None:
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader() -> None:
        with lock.read():
            entered.set()

    with lock.read():
        t = threading.Thread(target=reader)
        t.start()
        assert entered.wait(1.0)
    t.join(1.0)


def test_writer_waits_for_readers() -> None:
    lock = ReadWriteLock()
    acquired = threading.Event()

    def writer() -> None:
        with lock.write():
            acquired.set()

    with lock.read():
        t = threading.Thread(target=writer)
        t.start()
        assert not acquired.wait(0.1)
    assert acquired.wait(1.0)
    t.join(1.0)


@pytest.mark.parametrize("ttl_hours", [1, 24])
def test_ttl_is_configurable(clock: FakeClock, ttl_hours: int) -> None:
    registry = InMemoryTokenRegistry(ttl=timedelta(hours=ttl_hours), clock=clock)
    assert registry.issue().expires_at - clock.now == timedelta(hours=ttl_hours)


def test_session_token_expires_exactly_at_its_deadline(clock: FakeClock) -> None:
    token = SessionToken(token="t", expires_at=clock() + timedelta(seconds=5))

    assert not token.is_expired(clock())
    clock.advance(seconds=5)
    assert token.is_expired(clock())
