from typing import Iterable

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from todo_core.models.label import Label
from todo_core.models.todo_label import TodoLabel
from todo_core.repositories.todo_label_repo import TodoLabelRepository


class AssociationService:
    """
    Maintains the todo <-> label graph.

    Nothing here checks that the referenced todo or label exists: the
    foreign keys on ``todo_labels`` are deferred, so a link may precede the
    rows it references within a transaction, and a dangling reference fails
    the whole transaction at commit with IntegrityError.
    """

    def __init__(self):
        self.repo = TodoLabelRepository()

    async def link(self, db: AsyncSession, todo_id: int, label_id: int) -> TodoLabel:
        existing = await self.repo.find(db, todo_id, label_id)
        if existing is not None:
            return existing
        link = await self.repo.create(db, todo_id, label_id)
        logger.debug("linked todo={} label={}", todo_id, label_id)
        return link

    async def unlink(self, db: AsyncSession, todo_id: int, label_id: int) -> int:
        removed = await self.repo.delete(db, todo_id, label_id)
        if removed:
            logger.debug("unlinked todo={} label={}", todo_id, label_id)
        return removed

    async def labels_for(self, db: AsyncSession, todo_id: int) -> list[Label]:
        return await self.repo.labels_for(db, todo_id)

    async def todos_for(self, db: AsyncSession, label_id: int) -> list[int]:
        return await self.repo.todo_ids_for(db, label_id)

    async def replace(self, db: AsyncSession, todo_id: int, label_ids: Iterable[int]) -> list[TodoLabel]:
        """Make ``label_ids`` the exact label set of a todo, linking in the given order."""
        wanted = list(dict.fromkeys(label_ids))
        for label_id in await self.repo.label_ids_for(db, todo_id):
            if label_id not in wanted:
                await self.unlink(db, todo_id, label_id)
        return [await self.link(db, todo_id, label_id) for label_id in wanted]
