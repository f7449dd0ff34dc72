"""FastAPI service exposing editing-pattern analysis over HTTP.

The service is a thin host: request bodies go to the boundary adapter
unchanged and its JSON text comes back as the response body.
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, Response

from backspace_detective.adapter import encode_outcome, handle_request
from backspace_detective.batch import analyze_per_file
from backspace_detective.config import BackspaceDetectiveConfig, load_config
from backspace_detective.errors import DecodeError
from backspace_detective.models import ErrorEnvelope

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

_JSON = "application/json"


class AnalysisServer:
    """HTTP host for the analysis pipeline."""

    def __init__(self, config: BackspaceDetectiveConfig | None = None) -> None:
        """Initialize the server.

        Args:
            config: Optional configuration. If None, loads from
                backspace_detective.yaml.
        """
        self.config = config or load_config()
        self.app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create the FastAPI application with its routes."""

        @asynccontextmanager
        async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
            logger.info(
                "Backspace Detective listening on %s:%d",
                self.config.server.host,
                self.config.server.port,
            )
            yield
            logger.info("Backspace Detective shutting down")

        app = FastAPI(title="Backspace Detective", lifespan=lifespan)

        @app.get("/health")
        async def health_check() -> dict[str, str]:
            return {"status": "ok"}

        @app.post("/analyze")
        async def analyze_endpoint(request: Request) -> Response:
            return self._analyze(await request.body())

        @app.post("/analyze/files")
        async def analyze_files_endpoint(request: Request) -> Response:
            return self._analyze_files(await request.body())

        return app

    def _analyze(self, body: bytes) -> Response:
        """Run one request through the adapter and wrap its JSON text.

        Args:
            body: The raw request body.

        Returns:
            200 with the analysis result, or 400 with an error envelope.
        """
        outcome = handle_request(body)
        status_code = 400 if isinstance(outcome, ErrorEnvelope) else 200
        return Response(content=encode_outcome(outcome), status_code=status_code, media_type=_JSON)

    def _analyze_files(self, body: bytes) -> Response:
        """Analyze a ``{path: stats}`` body file by file."""
        try:
            results = analyze_per_file(body)
        except DecodeError as exc:
            logger.warning("Rejected per-file request: %s", exc)
            envelope = ErrorEnvelope(error=str(exc))
            return Response(content=envelope.model_dump_json(), status_code=400, media_type=_JSON)

        return Response(content=json.dumps(results), status_code=200, media_type=_JSON)


def create_app(config_path: str | None = None) -> FastAPI:
    """Create a Backspace Detective FastAPI application.

    This is the main entry point for ASGI servers like uvicorn.

    Args:
        config_path: Optional path to the backspace_detective.yaml file.

    Returns:
        A configured FastAPI application.
    """
    config = load_config(config_path)
    server = AnalysisServer(config)
    return server.app
