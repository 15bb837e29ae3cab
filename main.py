import uvicorn

from tourney.core.config import Settings, configure_logging


if __name__ == "__main__":
    settings = Settings()
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run("tourney.main:create_app", factory=True, host=settings.HOST, port=settings.PORT)
