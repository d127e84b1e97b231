"""
Admin session auth — password hashing, server-side sessions, current-user dependency.

Libraries: passlib for scrypt password hashes (per-user salt embedded in the hash).
Sessions are opaque random tokens in a cookie; the server keeps only a keyed
hash of each token, mapped to the user id and an expiry.
"""

import hashlib
import hmac
import logging
import secrets
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from passlib.context import CryptContext

from . import schemas
from .config import settings
from .storage import Storage, get_storage

logger = logging.getLogger(__name__)

# --- Password hashing ---

pwd_context = CryptContext(schemes=["scrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def authenticate(storage: Storage, username: str, password: str) -> Optional[schemas.UserRecord]:
    """Return the user when the credentials match, else None."""
    user = storage.get_user_by_username(username)
    if not user or not verify_password(password, user.password_hash):
        return None
    return user


# --- Sessions ---

def hash_token(token: str) -> str:
    """Keyed SHA-256 of a session token. Raw tokens are never stored."""
    return hmac.new(settings.SESSION_SECRET.encode(), token.encode(), hashlib.sha256).hexdigest()


@dataclass
class SessionData:
    user_id: int
    expires_at: datetime


class SessionStore(ABC):
    """Where admin sessions live. Swap for a shared store to run several instances."""

    @abstractmethod
    def create(self, user_id: int) -> str:
        """Open a session and return the raw token for the cookie."""

    @abstractmethod
    def get(self, token: str) -> Optional[SessionData]:
        """Resolve a raw token to its live session, or None."""

    @abstractmethod
    def destroy(self, token: str) -> None:
        pass


class MemorySessionStore(SessionStore):

    def __init__(self, max_age_seconds: int = None):
        self.max_age = timedelta(seconds=max_age_seconds or settings.SESSION_MAX_AGE_SECONDS)
        self._sessions: dict[str, SessionData] = {}

    def create(self, user_id):
        self.prune()
        token = secrets.token_urlsafe(32)
        self._sessions[hash_token(token)] = SessionData(
            user_id=user_id,
            expires_at=datetime.utcnow() + self.max_age,
        )
        return token

    def get(self, token):
        key = hash_token(token)
        session = self._sessions.get(key)
        if session is None:
            return None
        if session.expires_at <= datetime.utcnow():
            del self._sessions[key]
            return None
        return session

    def destroy(self, token):
        self._sessions.pop(hash_token(token), None)

    def prune(self):
        """Drop every expired session."""
        now = datetime.utcnow()
        expired = [key for key, s in self._sessions.items() if s.expires_at <= now]
        for key in expired:
            del self._sessions[key]

    def __len__(self):
        return len(self._sessions)


_session_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """FastAPI dependency — the process-wide session store."""
    global _session_store
    if _session_store is None:
        _session_store = MemorySessionStore()
    return _session_store


# --- FastAPI dependency: current admin user from the session cookie ---

def get_optional_user(
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
    storage: Storage = Depends(get_storage),
) -> Optional[schemas.UserRecord]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    session = sessions.get(token)
    if session is None:
        return None
    return storage.get_user(session.user_id)


def get_current_user(
    user: Optional[schemas.UserRecord] = Depends(get_optional_user),
) -> schemas.UserRecord:
    """FastAPI dependency — 401 unless the request carries a live admin session."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return user


# --- Seeding ---

def ensure_admin_user(storage: Storage) -> schemas.UserRecord:
    """Create the initial admin account unless one with that username exists."""
    existing = storage.get_user_by_username(settings.ADMIN_USERNAME)
    if existing:
        return existing
    user = storage.create_user(schemas.UserCreate(
        username=settings.ADMIN_USERNAME,
        password_hash=hash_password(settings.ADMIN_PASSWORD),
        name="Admin",
        role="admin",
    ))
    logger.info("Created initial admin user '%s'", user.username)
    return user
