from sqlalchemy import Column, Integer, String, text

from tourney.core.database import Base, LOCAL_NOW_SQL, local_timestamp

class Admin(Base):
    __tablename__ = "admins"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    username = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False) # bcrypt hash
    created_at = Column(String, default=local_timestamp, server_default=text(LOCAL_NOW_SQL))
