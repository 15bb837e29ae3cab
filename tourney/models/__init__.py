from tourney.core.database import Base, Store

# Import all models here to ensure they are registered with Base
from .participant import Participant
from .tournament import Tournament
from .admin import Admin

def create_tables(store: Store) -> None:
    # checkfirst: CREATE TABLE only for tables that are missing
    with store.transaction() as session:
        Base.metadata.create_all(bind=session.connection())
