import pytest

from todo_core.database import get_db, transaction
from todo_core.errors import IntegrityError, NotFound, ReferentialError


async def test_create_and_get_label(session_factory, labels):
    async with transaction(session_factory) as db:
        label = await labels.create(db, "work")

    async with get_db(session_factory) as db:
        found = await labels.get(db, label.id)
    assert found.name == "work"


async def test_duplicate_names_are_allowed(session_factory, labels):
    async with transaction(session_factory) as db:
        first = await labels.create(db, "home")
        second = await labels.create(db, "home")

    assert first.id != second.id
    async with get_db(session_factory) as db:
        names = [label.name for label in await labels.all(db)]
    assert names == ["home", "home"]


async def test_null_name_violates_not_null(session_factory, labels):
    with pytest.raises(IntegrityError):
        async with transaction(session_factory) as db:
            await labels.create(db, None)

    async with get_db(session_factory) as db:
        assert await labels.all(db) == []


async def test_get_missing_label(session_factory, labels):
    async with get_db(session_factory) as db:
        with pytest.raises(NotFound) as excinfo:
            await labels.get(db, 42)
    assert excinfo.value.entity == "label"
    assert excinfo.value.id == 42


async def test_delete_missing_label(session_factory, labels):
    with pytest.raises(NotFound):
        async with transaction(session_factory) as db:
            await labels.delete(db, 7)


async def test_delete_referenced_label_fails_until_unlinked(session_factory, todos, labels, associations):
    async with transaction(session_factory) as db:
        todo = await todos.create(db, "write report")
        label = await labels.create(db, "work")
        await associations.link(db, todo.id, label.id)

    with pytest.raises(ReferentialError):
        async with transaction(session_factory) as db:
            await labels.delete(db, label.id)

    async with get_db(session_factory) as db:
        assert (await labels.get(db, label.id)).name == "work"

    async with transaction(session_factory) as db:
        await associations.unlink(db, todo.id, label.id)

    async with transaction(session_factory) as db:
        await labels.delete(db, label.id)

    async with get_db(session_factory) as db:
        with pytest.raises(NotFound):
            await labels.get(db, label.id)


async def test_error_inside_transaction_rolls_everything_back(session_factory, labels):
    with pytest.raises(RuntimeError):
        async with transaction(session_factory) as db:
            await labels.create(db, "discarded")
            raise RuntimeError("boom")

    async with get_db(session_factory) as db:
        assert await labels.all(db) == []
