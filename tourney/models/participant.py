from sqlalchemy import Column, Integer, String, text

from tourney.core.database import Base, LOCAL_NOW_SQL, local_timestamp

class Participant(Base):
    __tablename__ = "participants"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    game = Column(String, nullable=False)
    email = Column(String, default="", server_default=text("''"))
    phone = Column(String, default="", server_default=text("''"))
    created_at = Column(String, default=local_timestamp, server_default=text(LOCAL_NOW_SQL)) # server-local "YYYY-MM-DD HH:MM:SS"
    status = Column(String, default="active", server_default=text("'active'")) # e.g., "active", "banned"
