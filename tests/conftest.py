import os

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from todo_core.database import make_engine, make_session_factory
from todo_core.migrations import migrate
from todo_core.services.association_service import AssociationService
from todo_core.services.label_service import LabelService
from todo_core.services.log_service import LogService
from todo_core.services.todo_service import TodoService


@pytest.fixture
async def engine(tmp_path):
    engine_test = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await migrate(engine_test)
    yield engine_test
    await engine_test.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def todos():
    return TodoService()


@pytest.fixture
def labels():
    return LabelService()


@pytest.fixture
def associations():
    return AssociationService()


@pytest.fixture
def sink(session_factory):
    return LogService(session_factory)
