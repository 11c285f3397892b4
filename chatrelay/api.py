"""
FastAPI application and the relay endpoint
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from . import __version__
from .config import RelaySettings
from .cors import CORS_HEADERS, preflight_response
from .exceptions import InvalidInboundPayload, RelayError
from .models import ParsedChatRequest
from .upstream import UpstreamClient, create_http_client

logger = logging.getLogger(__name__)

GENERIC_ERROR = {"error": "An error occurred processing your request"}

RELAY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]


async def parse_chat_request(request: Request) -> ParsedChatRequest:
    """Decode and validate the inbound body"""
    try:
        data = await request.json()
    except ValueError as e:
        raise InvalidInboundPayload("body is not JSON") from e

    try:
        return ParsedChatRequest.model_validate(data)
    except ValidationError as e:
        raise InvalidInboundPayload(f"{e.error_count()} validation error(s)") from e


def error_response() -> JSONResponse:
    return JSONResponse(GENERIC_ERROR, status_code=500, headers=CORS_HEADERS)


def create_app(settings: RelaySettings, http_client: Optional[httpx.AsyncClient] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: loaded once by the caller; the handler never reads the environment
        http_client: optional pre-built client, left open on shutdown
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if http_client is not None:
            app.state.upstream = UpstreamClient(settings, http_client)
            yield
            return

        async with create_http_client() as client:
            app.state.upstream = UpstreamClient(settings, client)
            logger.info(f"Relaying to {settings.UPSTREAM_URL}")
            yield

    app = FastAPI(
        title="chatrelay",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.api_route("/{path:path}", methods=["OPTIONS"], include_in_schema=False)
    async def preflight(path: str) -> Response:
        """Browser preflight check; never touches upstream"""
        return preflight_response()

    @app.api_route("/{path:path}", methods=RELAY_METHODS, include_in_schema=False)
    async def relay(request: Request, path: str) -> Response:
        """Forward the caller's messages and relay the completion"""
        try:
            upstream: UpstreamClient = request.app.state.upstream
            parsed = await parse_chat_request(request)
            result = await upstream.complete(parsed)
            status_code = result.status_code if settings.FORWARD_UPSTREAM_STATUS else 200
            return JSONResponse(result.body, status_code=status_code, headers=CORS_HEADERS)
        except RelayError as e:
            logger.warning(f"Relay failed for {request.method} /{path}: {e}")
            return error_response()
        except Exception as e:
            logger.exception(f"Unexpected error: {type(e).__name__}")
            return error_response()

    return app
