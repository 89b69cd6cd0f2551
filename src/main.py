import logging

from fastapi import FastAPI

from src.apps.api import router
from src.config.logging import configure_logging
from src.config.settings import get_settings

settings = get_settings()
configure_logging(settings.LOG_LEVEL, debug=settings.DEBUG)

logger = logging.getLogger(__name__)

# --- アプリケーション初期化 ---

app = FastAPI(
    title="GeniDocs Change Tracker",
    version="0.1.0",
    description="GitHub App webhook listener forwarding code changes to the documentation server",
)

app.include_router(router.router, prefix="/api")

if not settings.DOCS_SERVER_URL:
    logger.warning("DOCS_SERVER_URL is not set: documentation updates will be skipped")


@app.get("/health")
async def health_check():
    """
    Simple health check endpoint to confirm the API is running.
    """
    return {"status": "ok"}


def run() -> None:  # pragma: no cover - process entrypoint
    """Serve the app with uvicorn on the configured host and port."""
    import uvicorn

    logger.info(f"Change tracker listening on {settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
