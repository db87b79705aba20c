from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import and_, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from todo_core.database import flush
from todo_core.models.log import LogEntry


class LogRepository:
    """Append and read only; log rows are never updated or deleted."""

    async def create(self, db: AsyncSession, user_agent: str, response_time: int, timestamp: datetime) -> LogEntry:
        entry = LogEntry(user_agent=user_agent, response_time=response_time, timestamp=timestamp)
        db.add(entry)
        await flush(db)
        return entry

    async def bulk_create(self, db: AsyncSession, rows: Iterable[dict]) -> list[LogEntry]:
        entries = [LogEntry(**row) for row in rows]
        if not entries:
            return []
        db.add_all(entries)
        await flush(db)
        return entries

    async def recent(
        self,
        db: AsyncSession,
        limit: int,
        before: Optional[datetime] = None,
        before_id: Optional[int] = None,
    ) -> list[LogEntry]:
        stmt = select(LogEntry)
        if before is not None and before_id is not None:
            # keyset cursor matching the ORDER BY below
            stmt = stmt.where(
                or_(
                    LogEntry.timestamp < before,
                    and_(LogEntry.timestamp == before, LogEntry.id < before_id),
                )
            )
        elif before is not None:
            stmt = stmt.where(LogEntry.timestamp < before)
        stmt = stmt.order_by(LogEntry.timestamp.desc(), LogEntry.id.desc()).limit(limit)
        result = await db.execute(stmt)
        return list(result.scalars().all())
