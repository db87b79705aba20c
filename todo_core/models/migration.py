from sqlalchemy import Column, DateTime, String

from todo_core.database import Base


class MigrationRecord(Base):
    __tablename__ = "schema_migrations"
    version = Column(String(14), primary_key=True)
    name = Column(String, nullable=False)
    applied_at = Column(DateTime, nullable=False)
