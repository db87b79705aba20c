from sqlalchemy import Column, Integer, Text

from todo_core.database import Base


class Label(Base):
    __tablename__ = "labels"
    id = Column(Integer, primary_key=True, autoincrement=True)
    # duplicate names are allowed
    name = Column(Text, nullable=False)
