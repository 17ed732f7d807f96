"""SQLAlchemy repository tests against in-memory SQLite."""

from datetime import datetime, timezone

import pytest

from blockboard.domain.entities import Block, SearchHistory, User
from blockboard.domain.exceptions import DuplicateEntityError
from blockboard.infrastructure.database.repositories import (
    SQLAlchemyBlockRepository,
    SQLAlchemySearchHistoryRepository,
    SQLAlchemyUserRepository,
)


@pytest.mark.asyncio
async def test_user_app_id_is_unique(container):
    async with container.session_factory() as session:
        repository = SQLAlchemyUserRepository(session)
        await repository.create(User(app_id="wx-1", name="first"))
        await session.commit()

        with pytest.raises(DuplicateEntityError):
            await repository.create(User(app_id="wx-1", name="second"))

        users, total = await repository.get_page(skip=0, limit=10)
        assert total == 1
        assert users[0].name == "first"


@pytest.mark.asyncio
async def test_block_round_trip_and_delete_count(container):
    async with container.session_factory() as session:
        repository = SQLAlchemyBlockRepository(session)
        block = await repository.create(
            Block(pid="owner-1", context="hi", imgs=["u1", "u2"], draft=False)
        )
        await session.commit()

        loaded = await repository.get_by_id(block.id)
        assert loaded is not None
        assert loaded.imgs == ["u1", "u2"]
        assert loaded.draft is False

        assert await repository.delete(block.id) == 1
        assert await repository.delete(block.id) == 0


@pytest.mark.asyncio
async def test_block_page_orders_by_creation(container):
    async with container.session_factory() as session:
        repository = SQLAlchemyBlockRepository(session)
        for minute in (3, 1, 2):
            when = datetime(2024, 1, 1, 0, minute, tzinfo=timezone.utc)
            await repository.create(
                Block(pid="p", context=str(minute), create_time=when, update_time=when)
            )
        await session.commit()

        blocks, total = await repository.get_page(skip=0, limit=2)
        rest, _ = await repository.get_page(skip=2, limit=2)

    assert total == 3
    assert [b.context for b in blocks + rest] == ["1", "2", "3"]


@pytest.mark.asyncio
async def test_search_history_delete_by_uid(container):
    async with container.session_factory() as session:
        repository = SQLAlchemySearchHistoryRepository(session)
        await repository.create(SearchHistory(uid="a", history={"q": 1}))
        await repository.create(SearchHistory(uid="a", history=["x"]))
        await repository.create(SearchHistory(uid="b", history="y"))
        await session.commit()

        assert await repository.delete_by_uid("a") == 2
        assert await repository.list_by_uid("a") == []
        remaining = await repository.list_by_uid("b")
        assert [r.history for r in remaining] == ["y"]
