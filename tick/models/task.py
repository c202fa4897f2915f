"""Task model"""

from sqlalchemy import Column, Integer, String, Boolean, text
from tick.core.database import Base


class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    completed = Column(Boolean, default=False, server_default=text("0"))
    date = Column(String, nullable=False)  # YYYY-MM-DD
    created_at = Column(String, server_default=text("CURRENT_TIMESTAMP"))
