"""FastAPI application for the motus JSON API."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..errors import AssemblyFailure, MotusError
from .routers import goals, nutrition, programs

logger = logging.getLogger(__name__)


async def motus_error_handler(request: Request, exc: MotusError) -> JSONResponse:
    """Translate engine errors into JSON responses."""
    status_code = 409 if isinstance(exc, AssemblyFailure) else 422
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content={"error": exc.to_dict()})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="motus",
        description="Periodized training program engine",
        version=__version__,
    )

    app.add_exception_handler(MotusError, motus_error_handler)

    # Include routers
    app.include_router(nutrition.router)
    app.include_router(goals.router)
    app.include_router(programs.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
