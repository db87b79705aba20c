from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from todo_core.database import flush, mark_deletes
from todo_core.models.todo import Todo
from todo_core.schemas.todo import TodoCreate, TodoUpdate


class TodoRepository:
    async def create(self, db: AsyncSession, todo_in: TodoCreate) -> Todo:
        todo = Todo(**todo_in.model_dump(), completed=False)
        db.add(todo)
        await flush(db)
        return todo

    async def list(self, db: AsyncSession):
        result = await db.execute(select(Todo).order_by(Todo.id.desc()))
        return result.scalars().all()

    async def get(self, db: AsyncSession, todo_id: int):
        return await db.get(Todo, todo_id)

    async def update(self, db: AsyncSession, todo: Todo, todo_in: TodoUpdate) -> Todo:
        for field, value in todo_in.model_dump(exclude_none=True).items():
            setattr(todo, field, value)
        await flush(db)
        return todo

    async def delete(self, db: AsyncSession, todo_id: int) -> bool:
        mark_deletes(db)
        result = await db.execute(delete(Todo).where(Todo.id == todo_id))
        return (result.rowcount or 0) > 0
