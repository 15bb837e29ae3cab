from typing import Optional

from passlib.context import CryptContext

BCRYPT_ROUNDS = 10


def make_pwd_context(rounds: int = BCRYPT_ROUNDS) -> CryptContext:
    """A bcrypt context with its own cost factor; each app keeps one on its state."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


pwd_context = make_pwd_context()


def get_password_hash(password: str, context: Optional[CryptContext] = None) -> str:
    return (context or pwd_context).hash(password)


def verify_password(plain_password: str, hashed_password: str, context: Optional[CryptContext] = None) -> bool:
    return (context or pwd_context).verify(plain_password, hashed_password)


def dummy_verify(context: Optional[CryptContext] = None) -> None:
    # Burns one hash round so unknown usernames take as long as wrong passwords
    (context or pwd_context).dummy_verify()
