import logging

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_PATH: str = "tournament.db"
    SESSION_SECRET: str = "ramadan-tournament-2026-secret-key"
    SESSION_COOKIE: str = "tourney_session"
    SESSION_MAX_AGE: int = 24 * 60 * 60 # seconds, absolute
    ADMIN_USER: str = "admin"
    ADMIN_PASS: str = "admin123"
    BCRYPT_ROUNDS: int = 10
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    STATIC_DIR: str = "public"
    CSV_FILENAME: str = "participants_ramadan_2026.csv"

    class Config:
        env_file = ".env"

def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
