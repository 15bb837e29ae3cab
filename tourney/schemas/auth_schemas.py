from pydantic import BaseModel
from typing import Optional

class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

class ChangePasswordRequest(BaseModel):
    currentPassword: Optional[str] = None
    newPassword: Optional[str] = None

class AdminRead(BaseModel):
    id: int
    username: str

class LoginResponse(BaseModel):
    success: bool = True
    message: str
    admin: AdminRead

class WhoAmI(BaseModel):
    authenticated: bool
    admin: Optional[AdminRead] = None
