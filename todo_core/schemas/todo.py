from pydantic import BaseModel, Field
from typing import Optional


class TodoBase(BaseModel):
    text: str = Field(min_length=1, max_length=100)


class TodoCreate(TodoBase):
    pass


class TodoUpdate(BaseModel):
    text: Optional[str] = Field(default=None, min_length=1, max_length=100)
    completed: Optional[bool] = None
