from pydantic import BaseModel
from typing import Optional

class ParticipantCreate(BaseModel):
    # Presence and length are checked by the service so the error messages stay ours
    name: Optional[str] = None
    game: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

class ParticipantUpdate(BaseModel):
    status: Optional[str] = None
    name: Optional[str] = None
    game: Optional[str] = None

class ParticipantPublic(BaseModel):
    id: int
    name: str
    game: str
    created_at: Optional[str] = None

    class Config:
        from_attributes = True

class ParticipantRead(ParticipantPublic):
    email: Optional[str] = ""
    phone: Optional[str] = ""
    status: Optional[str] = None

class RecentRegistration(ParticipantPublic):
    status: Optional[str] = None
