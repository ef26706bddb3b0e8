"""
Homework Grader - Backend Application

FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from homework_grader.api import api_router
from homework_grader.api.errors import error_response
from homework_grader.core.config import get_config, get_log_path
from homework_grader.core.database import init_db
from homework_grader.core.logging import setup_logging, get_logger


# Record startup time globally
_startup_time = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Creates missing tables on startup.
    """
    global _startup_time
    _startup_time = datetime.now(timezone.utc).isoformat()
    logger = setup_logging()
    logger.info("Starting Homework Grader...")
    logger.debug("Log level: %s, log file: %s", get_config().logging.level, get_log_path())

    init_db()

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title="Homework Grader",
    description="Uploads homework to Google Drive and grades it with an LLM",
    version="0.1.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request, call_next):
    logger = get_logger("http")
    method = request.method
    path = request.url.path
    logger.debug("Request started: %s %s", method, path)
    response = await call_next(request)
    logger.debug("Request completed: %s %s -> %s", method, path, response.status_code)
    return response


# Every failure, including bad request bodies and dependency errors, is a 500
# with {success: false, error}.
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(f"{request.method} {request.url.path}", exc)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    return error_response(f"{request.method} {request.url.path}", exc)


# Any origin may call the endpoints
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "name": "Homework Grader",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint with startup time."""
    return {
        "status": "healthy",
        "startup_time": _startup_time,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(
        "main:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.debug,
    )
