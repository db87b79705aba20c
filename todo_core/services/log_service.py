from datetime import datetime
from typing import Iterable, Optional, Union

from loguru import logger
from sqlalchemy.orm import sessionmaker

from todo_core.database import get_db, transaction
from todo_core.repositories.log_repo import LogRepository
from todo_core.schemas.log import LogCreate, LogEntryOut, LogQuery
from todo_core.util import utcnow, validate


class LogService:
    """
    Append-only request log.

    Every call opens its own session, so a log write is never part of (and
    never rolls back) a todo/label transaction. There is no update or delete.
    """

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self.session_factory = session_factory
        self.repo = LogRepository()

    async def record(
        self,
        user_agent: str,
        response_time: int,
        timestamp: Optional[datetime] = None,
    ) -> LogEntryOut:
        log_in = validate(LogCreate, user_agent=user_agent, response_time=response_time, timestamp=timestamp)
        async with transaction(self.session_factory) as db:
            entry = await self.repo.create(
                db,
                user_agent=log_in.user_agent,
                response_time=log_in.response_time,
                timestamp=log_in.timestamp or utcnow(),
            )
            out = LogEntryOut.model_validate(entry)
        logger.debug("request logged id={} response_time={}ms", out.id, out.response_time)
        return out

    async def record_many(self, entries: Iterable[dict]) -> list[LogEntryOut]:
        """Append a batch of entries atomically; the whole batch is validated before any write."""
        logs_in = [validate(LogCreate, **entry) for entry in entries]
        now = utcnow()
        rows = [
            {
                "user_agent": log_in.user_agent,
                "response_time": log_in.response_time,
                "timestamp": log_in.timestamp or now,
            }
            for log_in in logs_in
        ]
        async with transaction(self.session_factory) as db:
            created = await self.repo.bulk_create(db, rows)
            out = [LogEntryOut.model_validate(entry) for entry in created]
        logger.debug("requests logged count={}", len(out))
        return out

    async def recent(
        self,
        limit: int,
        before: Union[datetime, LogEntryOut, None] = None,
    ) -> list[LogEntryOut]:
        """
        Newest entries first.

        ``before`` is either a bare timestamp (entries strictly older) or the
        last entry of the previous page, which resumes after that exact row
        even when several entries share its timestamp.
        """
        if isinstance(before, LogEntryOut):
            query = validate(LogQuery, limit=limit, before=before.timestamp, before_id=before.id)
        else:
            query = validate(LogQuery, limit=limit, before=before)
        async with get_db(self.session_factory) as db:
            entries = await self.repo.recent(db, query.limit, query.before, query.before_id)
            return [LogEntryOut.model_validate(entry) for entry in entries]
