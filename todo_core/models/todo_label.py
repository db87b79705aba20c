from sqlalchemy import Column, ForeignKey, Integer

from todo_core.database import Base


class TodoLabel(Base):
    """
    Association row between a todo and a label.

    Both foreign keys are checked when the enclosing transaction commits, so
    a link may be written before the rows it points at. No relationship() is
    mapped here: the unit of work must not reorder these inserts.
    """

    __tablename__ = "todo_labels"
    id = Column(Integer, primary_key=True, autoincrement=True)
    todo_id = Column(
        Integer,
        ForeignKey("todos.id", deferrable=True, initially="DEFERRED"),
        nullable=False,
    )
    label_id = Column(
        Integer,
        ForeignKey("labels.id", deferrable=True, initially="DEFERRED"),
        nullable=False,
    )
