"""JSON HTTP API over the session services."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from result import Ok

from clawlog import __version__
from clawlog.config import Config
from clawlog.errors import SessionLogError, SessionNotFoundError
from clawlog.services.container import ServiceContainer

logger = logging.getLogger(__name__)


def create_app(
    config: Config | None = None,
    services: ServiceContainer | None = None,
) -> FastAPI:
    """Build the API app. ``services`` overrides the default wiring for ``config``."""
    container = services or ServiceContainer.create(config or Config())

    app = FastAPI(
        title="clawlog",
        description="Browse and search OpenClaw session logs",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/sessions")
    def list_sessions() -> JSONResponse:
        """Merged session list, unsorted."""
        result = container.session_service.list_sessions()
        if isinstance(result, Ok):
            return JSONResponse(
                [record.model_dump(mode="json", by_alias=True) for record in result.ok_value]
            )
        return _error_response("Error reading sessions", result.err_value)

    @app.get("/api/sessions/{session_id}")
    def get_session(session_id: str) -> JSONResponse:
        """Every event of one session, as stored on disk."""
        result = container.session_service.get_session_detail(session_id)
        if isinstance(result, Ok):
            return JSONResponse([event.model_dump(mode="json") for event in result.ok_value])
        return _error_response("Error reading session log", result.err_value)

    @app.get("/api/search")
    def search(q: str = "") -> JSONResponse:
        """Substring search across all sessions; a blank query returns []."""
        result = container.search_service.search(q)
        if isinstance(result, Ok):
            return JSONResponse(
                [item.model_dump(mode="json", by_alias=True) for item in result.ok_value]
            )
        return _error_response("Error searching sessions", result.err_value)

    return app


def _error_response(context: str, exc: SessionLogError) -> JSONResponse:
    logger.error("%s: %s", context, exc)
    status_code = 404 if isinstance(exc, SessionNotFoundError) else 500
    return JSONResponse({"error": str(exc)}, status_code=status_code)
