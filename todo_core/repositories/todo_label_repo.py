from typing import Optional

from sqlalchemy import delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from todo_core.database import flush
from todo_core.models.label import Label
from todo_core.models.todo_label import TodoLabel


class TodoLabelRepository:
    """
    Join-table access. Reads order by the join row id so results follow the
    order in which links were made; a pair linked more than once (possible
    under concurrent writers) is reported once, at its first position.
    """

    async def find(self, db: AsyncSession, todo_id: int, label_id: int) -> Optional[TodoLabel]:
        result = await db.execute(
            select(TodoLabel)
            .where(TodoLabel.todo_id == todo_id, TodoLabel.label_id == label_id)
            .order_by(TodoLabel.id)
            .limit(1)
        )
        return result.scalars().first()

    async def create(self, db: AsyncSession, todo_id: int, label_id: int) -> TodoLabel:
        link = TodoLabel(todo_id=todo_id, label_id=label_id)
        db.add(link)
        await flush(db)
        return link

    async def delete(self, db: AsyncSession, todo_id: int, label_id: int) -> int:
        result = await db.execute(
            delete(TodoLabel).where(TodoLabel.todo_id == todo_id, TodoLabel.label_id == label_id)
        )
        return result.rowcount or 0

    async def labels_for(self, db: AsyncSession, todo_id: int) -> list[Label]:
        first_link = (
            select(TodoLabel.label_id, func.min(TodoLabel.id).label("position"))
            .where(TodoLabel.todo_id == todo_id)
            .group_by(TodoLabel.label_id)
            .subquery()
        )
        result = await db.execute(
            select(Label)
            .join(first_link, first_link.c.label_id == Label.id)
            .order_by(first_link.c.position)
        )
        return list(result.scalars().all())

    async def todo_ids_for(self, db: AsyncSession, label_id: int) -> list[int]:
        position = func.min(TodoLabel.id)
        result = await db.execute(
            select(TodoLabel.todo_id)
            .where(TodoLabel.label_id == label_id)
            .group_by(TodoLabel.todo_id)
            .order_by(position)
        )
        return list(result.scalars().all())

    async def label_ids_for(self, db: AsyncSession, todo_id: int) -> list[int]:
        position = func.min(TodoLabel.id)
        result = await db.execute(
            select(TodoLabel.label_id)
            .where(TodoLabel.todo_id == todo_id)
            .group_by(TodoLabel.label_id)
            .order_by(position)
        )
        return list(result.scalars().all())
