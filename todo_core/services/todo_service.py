from typing import Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from todo_core.errors import NotFound
from todo_core.models.todo import Todo
from todo_core.repositories.todo_repo import TodoRepository
from todo_core.schemas.todo import TodoCreate, TodoUpdate
from todo_core.util import validate


class TodoService:
    def __init__(self):
        self.repo = TodoRepository()

    async def create(self, db: AsyncSession, text: str) -> Todo:
        todo = await self.repo.create(db, validate(TodoCreate, text=text))
        logger.info("todo created id={}", todo.id)
        return todo

    async def all(self, db: AsyncSession) -> list[Todo]:
        return list(await self.repo.list(db))

    async def get(self, db: AsyncSession, todo_id: int) -> Todo:
        todo = await self.repo.get(db, todo_id)
        if todo is None:
            raise NotFound("todo", todo_id)
        return todo

    async def update(
        self,
        db: AsyncSession,
        todo_id: int,
        text: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Todo:
        todo_in = validate(TodoUpdate, text=text, completed=completed)
        todo = await self.get(db, todo_id)
        return await self.repo.update(db, todo, todo_in)

    async def delete(self, db: AsyncSession, todo_id: int) -> None:
        """
        Delete a todo. A todo that still has labels is rejected when the
        transaction commits (ReferentialError); associations never cascade.
        """
        if not await self.repo.delete(db, todo_id):
            raise NotFound("todo", todo_id)
        logger.info("todo deleted id={}", todo_id)
