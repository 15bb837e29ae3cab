"""
Server-side admin sessions.

The browser only holds an opaque token (inside Starlette's signed session
cookie); the identity it maps to lives here, in memory, and is lost on
restart.
"""

import secrets
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

SESSION_TOKEN_KEY = "sid"


@dataclass(frozen=True)
class AdminIdentity:
    admin_id: int
    username: str


@dataclass(frozen=True)
class SessionRecord:
    identity: AdminIdentity
    expires_at: float


class SessionStore:
    def __init__(self, max_age: int = 24 * 60 * 60, clock: Callable[[], float] = time.time):
        self.max_age = max_age
        self._clock = clock
        self._records: Dict[str, SessionRecord] = {}
        self._lock = threading.Lock()

    def create(self, admin_id: int, username: str) -> str:
        token = secrets.token_urlsafe(32)
        record = SessionRecord(
            identity=AdminIdentity(admin_id=admin_id, username=username),
            expires_at=self._clock() + self.max_age,
        )
        with self._lock:
            self._purge_expired()
            self._records[token] = record
        return token

    def get(self, token: Optional[str]) -> Optional[AdminIdentity]:
        """Returns the identity behind ``token``, or None if unknown or expired."""
        if not token:
            return None
        with self._lock:
            record = self._records.get(token)
            if record is None:
                return None
            if record.expires_at <= self._clock():
                del self._records[token]
                return None
            return record.identity

    def destroy(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            self._records.pop(token, None)

    def __len__(self) -> int:
        with self._lock:
            self._purge_expired()
            return len(self._records)

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [token for token, record in self._records.items() if record.expires_at <= now]
        for token in expired:
            del self._records[token]
