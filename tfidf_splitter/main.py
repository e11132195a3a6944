"""FastAPI app entry: config, logging, health, and graceful shutdown."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tfidf_splitter.config.logging import configure_logging, get_logger
from tfidf_splitter.config.settings import get_settings
from tfidf_splitter.controllers.routes.split import router as split_router
from tfidf_splitter.resources.segmentation.dictionary import close_jieba_dictionary, open_jieba_dictionary

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config, logging, and the jieba dictionary. Shutdown: release the dictionary."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    open_jieba_dictionary()
    yield
    logger.info("Application shutting down")
    close_jieba_dictionary()
    logger.info("Shutdown complete")


app = FastAPI(
    title="TF-IDF Splitter",
    description="Split long text into topically coherent chunks for embedding and retrieval",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(split_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: no stack traces or internal details reach the client."""
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
