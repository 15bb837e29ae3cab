import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from passlib.context import CryptContext
from starlette.middleware.sessions import SessionMiddleware

from tourney.api.endpoints import admin as admin_endpoints
from tourney.api.endpoints import public as public_endpoints
from tourney.core import security
from tourney.core.config import Settings
from tourney.core.database import Store
from tourney.core.errors import register_error_handlers
from tourney.core.sessions import SessionStore
from tourney.models import create_tables
from tourney.services import auth_service

logger = logging.getLogger(__name__)


def init_db(settings: Settings, pwd_context: Optional[CryptContext] = None) -> Store:
    """Opens the snapshot, creates missing tables and seeds the first admin."""
    store = Store(settings.DATABASE_PATH)
    create_tables(store)
    auth_service.seed_admin(store, settings.ADMIN_USER, settings.ADMIN_PASS, pwd_context)
    logger.info("Database ready (%s)", store.path or "in memory")
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    app.state.store.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="Tournament Registration API", lifespan=lifespan)
    app.state.settings = settings
    app.state.pwd_context = security.make_pwd_context(settings.BCRYPT_ROUNDS)
    app.state.store = init_db(settings, app.state.pwd_context)
    app.state.sessions = SessionStore(max_age=settings.SESSION_MAX_AGE)

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET,
        session_cookie=settings.SESSION_COOKIE,
        max_age=settings.SESSION_MAX_AGE,
        same_site="lax",
        https_only=False,
    )
    register_error_handlers(app)

    # Include routers
    app.include_router(public_endpoints.router, prefix="/api", tags=["Public"])
    app.include_router(admin_endpoints.router, prefix="/api/admin", tags=["Admin"])

    if os.path.isdir(settings.STATIC_DIR):
        _mount_front_end(app, settings.STATIC_DIR)

    return app


def _mount_front_end(app: FastAPI, static_dir: str) -> None:
    @app.get("/admin", include_in_schema=False)
    async def admin_page():
        return FileResponse(os.path.join(static_dir, "admin.html"))

    # Mounted last so it never shadows the API routes
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
