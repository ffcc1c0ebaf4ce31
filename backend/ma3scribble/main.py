"""FastAPI app factory."""

from __future__ import annotations

import logging
import time

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ma3scribble import __version__
from ma3scribble.config import settings
from ma3scribble.errors import InputError, InternalError
from ma3scribble.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def _error_response(title: str, status: int, detail: str) -> JSONResponse:
    body = ErrorResponse(title=title, status=status, detail=detail)
    return JSONResponse(status_code=status, content=body.model_dump())


async def _handle_input_error(request: Request, exc: InputError) -> JSONResponse:
    logger.info("%s %s: bad input: %s", request.method, request.url, exc)
    return _error_response("bad-input", 400, str(exc))


async def _handle_internal_error(request: Request, exc: InternalError) -> JSONResponse:
    logger.error("%s %s: internal error: %s", request.method, request.url, exc, exc_info=exc)
    return _error_response("internal", 500, "")


def create_app() -> FastAPI:
    app = FastAPI(
        title="image-to-ma3-scribble",
        description="Convert PNG images into grandMA3 scribbles via potrace",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.debug(
            "%s %s → %d in %.1fms",
            request.method,
            request.url,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response

    app.add_exception_handler(InputError, _handle_input_error)
    app.add_exception_handler(InternalError, _handle_internal_error)

    from ma3scribble.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.http_api_host, port=settings.http_api_port)
