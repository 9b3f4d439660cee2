from __future__ import annotations

import threading
from collections.abc import Iterator

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from hero_api.application.use_cases.heroes import CreateHeroUseCase, UpdateHeroUseCase
from hero_api.domain.heroes import (
    HeroFields,
    HeroNotFoundError,
    HeroRepository,
    MissingHeroFieldsError,
)
from hero_api.infrastructure.db import (
    build_engine,
    build_session_factory,
    init_schema,
    seed_heroes,
)
from hero_api.infrastructure.repositories.heroes import (
    InMemoryHeroRepository,
    SqlAlchemyHeroRepository,
)
from hero_api.shared.config import DatabaseConfig
from hero_api.shared.errors import StorageError

from .conftest import FakeClock

ZILONG = HeroFields(name="Zilong", role="Fighter", difficulty="Mudah")


@pytest.fixture(params=["memory", "sql"])
def heroes(request: pytest.FixtureRequest) -> Iterator[HeroRepository]:
    if request.param == "memory":
        yield InMemoryHeroRepository()
        return

    engine = build_engine(DatabaseConfig(DATABASE_URL="sqlite://"))
    init_schema(engine)
    factory = build_session_factory(engine)
    seed_heroes(factory)
    yield SqlAlchemyHeroRepository(factory)
    engine.dispose()


def test_list_returns_seeded_heroes_ordered_by_id(heroes: HeroRepository) -> None:
    items = heroes.list()

    assert [h.id for h in items] == [1, 2, 3]
    assert [(h.name, h.role, h.difficulty) for h in items] == [
        ("Alucard", "Fighter", "Mudah"),
        ("Miya", "Marksman", "Mudah"),
        ("Fanny", "Assassin", "Sulit"),
    ]


def test_create_assigns_next_id_and_get_returns_same_record(heroes: HeroRepository) -> None:
    created = heroes.create(ZILONG)

    assert created.id == 4
    fetched = heroes.get(created.id)
    assert fetched.fields == ZILONG
    assert fetched.id == created.id
    assert fetched.created_at == created.created_at


def test_ids_are_never_reused(heroes: HeroRepository) -> None:
    first = heroes.create(ZILONG)
    heroes.delete(first.id)
    second = heroes.create(ZILONG)

    assert second.id > first.id
    assert len({h.id for h in heroes.list()}) == len(heroes.list())


def test_get_unknown_id_raises_not_found(heroes: HeroRepository) -> None:
    with pytest.raises(HeroNotFoundError):
        heroes.get(999999)


def test_update_replaces_fields_and_keeps_identity(heroes: HeroRepository) -> None:
    before = heroes.get(2)
    fields = HeroFields(name="Miya", role="Marksman", difficulty="Sedang")

    updated = heroes.update(2, fields)

    assert updated.id == 2
    assert updated.fields == fields
    assert updated.created_at == before.created_at
    assert updated.updated_at >= before.updated_at
    assert heroes.get(2).difficulty == "Sedang"


def test_update_unknown_id_raises_not_found(heroes: HeroRepository) -> None:
    with pytest.raises(HeroNotFoundError):
        heroes.update(999999, ZILONG)


def test_update_with_blank_field_leaves_record_unchanged(heroes: HeroRepository) -> None:
    use_case = UpdateHeroUseCase(heroes=heroes)
    before = heroes.get(1)

    with pytest.raises(MissingHeroFieldsError):
        use_case.execute(1, "Alucard", "", "Mudah")

    assert heroes.get(1) == before


def test_create_with_blank_field_stores_nothing(heroes: HeroRepository) -> None:
    use_case = CreateHeroUseCase(heroes=heroes)

    with pytest.raises(MissingHeroFieldsError):
        use_case.execute("Zilong", "Fighter", "   ")

    assert len(heroes.list()) == 3


def test_delete_then_get_raises_not_found(heroes: HeroRepository) -> None:
    heroes.delete(3)

    with pytest.raises(HeroNotFoundError):
        heroes.get(3)
    with pytest.raises(HeroNotFoundError):
        heroes.delete(3)
    assert [h.id for h in heroes.list()] == [1, 2]


def test_seed_skips_non_empty_table() -> None:
    engine = build_engine(DatabaseConfig(DATABASE_URL="sqlite://"))
    init_schema(engine)
    factory = build_session_factory(engine)

    assert seed_heroes(factory) == 3
    assert seed_heroes(factory) == 0
    assert len(SqlAlchemyHeroRepository(factory).list()) == 3
    engine.dispose()


def test_memory_update_refreshes_updated_at() -> None:
    clock = FakeClock()
    heroes = InMemoryHeroRepository(seed=(), clock=clock)
    hero = heroes.create(ZILONG)

    clock.advance(minutes=5)
    updated = heroes.update(hero.id, HeroFields(name="Zilong", role="Fighter", difficulty="Sulit"))

    assert updated.created_at == hero.created_at
    assert updated.updated_at == clock.now
    assert updated.updated_at > updated.created_at


def test_hero_fields_reject_blank_values() -> None:
    for name, role, difficulty in [("", "a", "b"), ("a", " ", "b"), ("a", "b", "")]:
        with pytest.raises(MissingHeroFieldsError):
            HeroFields(name=name, role=role, difficulty=difficulty)


def _broken_session() -> Session:
    raise OperationalError("SELECT 1", {}, Exception("database is locked"))


@pytest.mark.parametrize(
    ("call", "code"),
    [
        (lambda repo: repo.list(), "heroes_list_failed"),
        (lambda repo: repo.get(1), "hero_fetch_failed"),
        (lambda repo: repo.create(ZILONG), "hero_create_failed"),
        (lambda repo: repo.update(1, ZILONG), "hero_update_failed"),
        (lambda repo: repo.delete(1), "hero_delete_failed"),
    ],
)
def test_sql_errors_become_storage_errors(call, code: str) -> None:
    repo = SqlAlchemyHeroRepository(_broken_session)

    with pytest.raises(StorageError) as excinfo:
        call(repo)

    assert excinfo.value.code == code
    assert excinfo.value.status == 500
    assert "locked" not in excinfo.value.to_dict()["error"]


def test_memory_store_assigns_unique_ids_under_threads() -> None:
    heroes = InMemoryHeroRepository()
    ids: list[int] = []
    guard = threading.Lock()

    def worker() -> None:
        for _ in range(50):
            hero = heroes.create(ZILONG)
            with guard:
                ids.append(hero.id)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(5.0)

    assert len(ids) == len(set(ids)) == 400
    assert sorted(ids) == list(range(4, 404))
    assert len(heroes.list()) == 403
