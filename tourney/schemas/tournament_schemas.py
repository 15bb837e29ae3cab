from pydantic import BaseModel
from typing import Optional

class TournamentCreate(BaseModel):
    game: Optional[str] = None
    name: Optional[str] = None
    max_players: Optional[int] = None
    start_date: Optional[str] = None
    prize: Optional[str] = None

class TournamentStatusUpdate(BaseModel):
    status: Optional[str] = None

class TournamentRead(BaseModel):
    id: int
    game: str
    name: str
    max_players: Optional[int] = None
    start_date: Optional[str] = None
    status: Optional[str] = None
    prize: Optional[str] = None
    created_at: Optional[str] = None

    class Config:
        from_attributes = True
