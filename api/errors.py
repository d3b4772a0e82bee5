"""
App-level exception handlers.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Answer unparseable bodies with 400 and anything unexpected with 500."""

    @app.exception_handler(RequestValidationError)
    async def handle_bad_body(request: Request, exc: RequestValidationError):
        logger.debug("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
        # The reports routes answer every client error under "error".
        key = "error" if request.url.path.startswith("/api/reports") else "message"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={key: "Invalid request body"},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unexpected error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )
