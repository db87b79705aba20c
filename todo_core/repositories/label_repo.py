from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from todo_core.database import flush, mark_deletes
from todo_core.models.label import Label


class LabelRepository:
    async def create(self, db: AsyncSession, name: str) -> Label:
        label = Label(name=name)
        db.add(label)
        await flush(db)
        return label

    async def list(self, db: AsyncSession):
        result = await db.execute(select(Label).order_by(Label.id))
        return result.scalars().all()

    async def get(self, db: AsyncSession, label_id: int):
        return await db.get(Label, label_id)

    async def delete(self, db: AsyncSession, label_id: int) -> bool:
        mark_deletes(db)
        result = await db.execute(delete(Label).where(Label.id == label_id))
        return (result.rowcount or 0) > 0
