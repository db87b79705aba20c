from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from todo_core.errors import NotFound
from todo_core.models.label import Label
from todo_core.repositories.label_repo import LabelRepository


class LabelService:
    def __init__(self):
        self.repo = LabelRepository()

    async def create(self, db: AsyncSession, name: str) -> Label:
        # no uniqueness check; a null name fails on the NOT NULL constraint
        label = await self.repo.create(db, name)
        logger.info("label created id={} name={!r}", label.id, label.name)
        return label

    async def all(self, db: AsyncSession) -> list[Label]:
        return list(await self.repo.list(db))

    async def get(self, db: AsyncSession, label_id: int) -> Label:
        label = await self.repo.get(db, label_id)
        if label is None:
            raise NotFound("label", label_id)
        return label

    async def delete(self, db: AsyncSession, label_id: int) -> None:
        """
        Delete a label.

        Whether the label is still attached to a todo is left to the
        database: the deferred foreign key rejects the transaction at commit
        with ReferentialError.
        """
        if not await self.repo.delete(db, label_id):
            raise NotFound("label", label_id)
        logger.info("label deleted id={}", label_id)
