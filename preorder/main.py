"""FastAPI entrypoint for the office lunch pre-order service."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from preorder.api.v1.api import api_router
from preorder.core.config import settings
from preorder.core.errors import SchedulerError, status_code_for
from preorder.db import session as db_session
from preorder.db.base import Base

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug)
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def startup() -> None:
    logger.info("Regional timezone: %s", settings.timezone_name)
    logger.info("Database backend: %s", settings.database_url.split(":", 1)[0])
    Base.metadata.create_all(bind=db_session.engine)


@app.exception_handler(SchedulerError)
async def scheduler_error_handler(request: Request, exc: SchedulerError) -> JSONResponse:
    """Translate typed service errors into JSON responses."""
    status_code: int = status_code_for(exc)
    if status_code >= 500:
        logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": type(exc).__name__, **({"details": exc.details} if exc.details else {})},
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
