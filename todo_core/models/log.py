from sqlalchemy import BigInteger, Column, DateTime, Integer, String, func

from todo_core.database import Base


class LogEntry(Base):
    __tablename__ = "logs"
    # bigserial on PostgreSQL; SQLite only auto-increments an INTEGER primary key
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    user_agent = Column(String, nullable=False)
    response_time = Column(Integer, nullable=False)
    timestamp = Column(DateTime, nullable=False, server_default=func.now())
