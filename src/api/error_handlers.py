"""
Error handlers - keep framework-level rejections inside the envelope.

Requests whose body FastAPI cannot parse into a request model (malformed
JSON, a non-object body) never reach the domain service. They still get
the {status, message} envelope rather than FastAPI's default detail list.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.outcomes import Status

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Request body must be a JSON object"


def register_error_handlers(app: FastAPI) -> None:
    """Register envelope-shaped error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Answer unparseable request bodies with the error envelope."""
        logger.warning(f"Rejected request body on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=422,
            content={"status": Status.ERROR.value, "message": INVALID_BODY_MESSAGE},
        )
