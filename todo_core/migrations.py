"""
Versioned, forward-only schema migrations.

Each migration is identified by a sortable timestamp version
(``YYYYMMDDhhmmss``) and applied at most once. Applied versions are kept in
the ``schema_migrations`` ledger; a migration's DDL and its ledger row are
written in the same transaction.
"""

import re
from dataclasses import dataclass
from typing import Callable

from loguru import logger
from sqlalchemy import Connection, insert, inspect
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.future import select

from todo_core.database import Base
from todo_core.models.label import Label
from todo_core.models.log import LogEntry
from todo_core.models.migration import MigrationRecord
from todo_core.models.todo import Todo
from todo_core.models.todo_label import TodoLabel
from todo_core.util import utcnow

_VERSION = re.compile(r"^\d{14}$")


@dataclass(frozen=True)
class Migration:
    version: str
    name: str
    upgrade: Callable[[Connection], None]


def _create_logs(conn: Connection) -> None:
    Base.metadata.create_all(conn, tables=[LogEntry.__table__])


def _create_todos(conn: Connection) -> None:
    Base.metadata.create_all(conn, tables=[Todo.__table__])


def _label(conn: Connection) -> None:
    Base.metadata.create_all(conn, tables=[Label.__table__, TodoLabel.__table__])


MIGRATIONS = [
    Migration("20230107145601", "create_logs", _create_logs),
    Migration("20240220120000", "create_todos", _create_todos),
    Migration("20240221143957", "label", _label),
]


def check_registry(migrations: list[Migration]) -> None:
    previous = ""
    for migration in migrations:
        if not _VERSION.match(migration.version):
            raise ValueError(f"migration version must be 14 digits: {migration.version!r}")
        if migration.version <= previous:
            raise ValueError(f"migration {migration.version} is out of order or duplicated")
        previous = migration.version


check_registry(MIGRATIONS)


async def _ensure_ledger(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, tables=[MigrationRecord.__table__])


async def applied(engine: AsyncEngine) -> list[str]:
    """Versions recorded in the ledger; empty when no migration ever ran."""
    async with engine.connect() as conn:
        has_ledger = await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).has_table(MigrationRecord.__tablename__)
        )
        if not has_ledger:
            return []
        result = await conn.execute(select(MigrationRecord.version).order_by(MigrationRecord.version))
        return list(result.scalars().all())


async def pending(engine: AsyncEngine, migrations: list[Migration] = MIGRATIONS) -> list[Migration]:
    done = set(await applied(engine))
    return [m for m in migrations if m.version not in done]


async def migrate(engine: AsyncEngine, migrations: list[Migration] = MIGRATIONS) -> list[str]:
    """Apply every pending migration in version order; return the versions applied."""
    check_registry(migrations)
    await _ensure_ledger(engine)
    ran = []
    for migration in await pending(engine, migrations):
        async with engine.begin() as conn:
            await conn.run_sync(migration.upgrade)
            await conn.execute(
                insert(MigrationRecord).values(
                    version=migration.version,
                    name=migration.name,
                    applied_at=utcnow(),
                )
            )
        logger.info("migration applied version={} name={}", migration.version, migration.name)
        ran.append(migration.version)
    return ran
