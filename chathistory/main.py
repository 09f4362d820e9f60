"""
Chat history backend — FastAPI application entry point.
Lifespan: create DB tables → verify connectivity.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chathistory.config import get_settings
from chathistory.database import check_db_connectivity, engine
from chathistory.exceptions import ChatHistoryError
from chathistory.models import Base
from chathistory.routers import chats, health, users

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.
    1. Create all tables (idempotent — IF NOT EXISTS).
    2. Verify DB connectivity.
    """
    logger.info("Starting chat history backend (env=%s)", settings.app_env)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created/verified.")

    if not await check_db_connectivity():
        logger.error("Database connectivity check FAILED at startup.")
    else:
        logger.info("Database connectivity verified.")

    yield

    logger.info("Shutting down chat history backend.")
    await engine.dispose()


app = FastAPI(
    title="Chat History Backend",
    description="Passcode login and chat history storage.",
    version="1.0.0",
    lifespan=lifespan,
)

# ── CORS ─────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ──────────────────────────────────────────────────────────────────

app.include_router(health.router)
app.include_router(users.router)
app.include_router(chats.router)


# ── Exception handlers ───────────────────────────────────────────────────────

@app.exception_handler(ChatHistoryError)
async def domain_exception_handler(request: Request, exc: ChatHistoryError) -> JSONResponse:
    """Render a domain error as {"message", "code"} with its own status."""
    if exc.status_code >= 500:
        logger.warning("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "code": exc.code},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed input as {"message", "code"} naming the first bad field."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{field}: {first.get('msg', 'invalid value')}" if field else first.get("msg", message)
    return JSONResponse(
        status_code=422,
        content={"message": message, "code": "VALIDATION_ERROR"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return a machine-readable error for any unhandled exception."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error", "code": "SERVER_ERROR"},
    )


def run() -> None:
    """Console entry point: serve the app on HOST:PORT."""
    uvicorn.run("chathistory.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
