from typing import Optional

from fastapi import Depends, Request
from passlib.context import CryptContext

from tourney.core.database import Store
from tourney.core.errors import AuthError
from tourney.core.sessions import SESSION_TOKEN_KEY, AdminIdentity, SessionStore

def get_store(request: Request) -> Store:
    return request.app.state.store

def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions

def get_pwd_context(request: Request) -> CryptContext:
    return request.app.state.pwd_context

def get_current_admin(
    request: Request,
    sessions: SessionStore = Depends(get_sessions),
) -> Optional[AdminIdentity]:
    """Identity behind the session cookie, or None. Never raises."""
    return sessions.get(request.session.get(SESSION_TOKEN_KEY))

def require_admin(admin: Optional[AdminIdentity] = Depends(get_current_admin)) -> AdminIdentity:
    """
    Access guard for admin routes, re-evaluated on every request.
    Raises AuthError before the handler runs when there is no live session.
    """
    if admin is None:
        raise AuthError("Non autorisé")
    return admin
