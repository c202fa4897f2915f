from sqlalchemy import Column, Integer, String, text
from tick.core.database import Base

class Quicklink(Base):
    __tablename__ = "quicklinks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    url = Column(String, nullable=False)
    created_at = Column(String, server_default=text("CURRENT_TIMESTAMP"))
