from sqlalchemy import Column, Integer, String, text

from tourney.core.database import Base, LOCAL_NOW_SQL, local_timestamp

class Tournament(Base):
    __tablename__ = "tournaments"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    game = Column(String, nullable=False)
    name = Column(String, nullable=False)
    max_players = Column(Integer, default=32, server_default=text("32"))
    start_date = Column(String)
    status = Column(String, default="upcoming", server_default=text("'upcoming'")) # free text, no enforced transitions
    prize = Column(String, default="", server_default=text("''"))
    created_at = Column(String, default=local_timestamp, server_default=text(LOCAL_NOW_SQL))
