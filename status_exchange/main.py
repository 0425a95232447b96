from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .api.routes import build_status_router, router
from .config import get_settings
from .core.errors import DateParseError
from .core.schemas import ProblemDetails
from .logging_setup import setup_logging


def create_app() -> FastAPI:
    setup_logging()
    logger = logging.getLogger(__name__)
    settings = get_settings()

    app = FastAPI(
        title="Status Responder",
        description="""
        ## Status Responder

        Serves a fixed JSON status document for contract-testing demos.

        ### Status payload:
        - **test** - marker flag, always `NO`
        - **date** - ISO-8601 date-time string
        - **count** - non-negative integer
        """,
        version=__version__,
        tags_metadata=[
            {"name": "status", "description": "Status payload endpoint"},
            {"name": "health", "description": "Health check and version endpoints"},
            {"name": "metrics", "description": "Prometheus metrics for monitoring"},
        ]
    )

    @app.exception_handler(DateParseError)
    async def date_error_handler(request: Request, exc: DateParseError):
        logger.info("Rejected unparsable date", extra={"extra": exc.error_detail.to_dict()})
        problem = ProblemDetails(
            type="https://status-exchange.local/problems/date-parse-error",
            title="Invalid valid_date",
            status=400,
            detail=str(exc),
            instance=str(request.url.path),
            errorCode=exc.code.value,
        )
        return JSONResponse(
            status_code=400,
            content=problem.model_dump(),
            headers={"Content-Type": "application/problem+json"}
        )

    app.include_router(router)
    app.include_router(build_status_router(settings.RESPONDER_PATH))
    logger.info("Responder configured", extra={"extra": {"path": settings.RESPONDER_PATH}})
    return app


app = create_app()
