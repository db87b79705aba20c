from sqlalchemy import Boolean, Column, Integer, String, false

from todo_core.database import Base


class Todo(Base):
    __tablename__ = "todos"
    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(String(100), nullable=False)
    completed = Column(Boolean, nullable=False, default=False, server_default=false())
