"""
FastAPI middleware for CORS and request logging.

This module provides configurable middleware for:
- CORS configuration for browser clients
- Request/response logging with request IDs
"""

import time
import uuid
import logging
from typing import Callable
from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from backend.postboard.core.utils.config import ConfigManager

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request/response logging middleware.

    Logs all incoming requests with:
    - Request ID (UUID for tracing)
    - Method and path
    - Client IP
    - Response status code
    - Processing time
    """

    def __init__(self, app, config: ConfigManager):
        """
        Initialize logging middleware.

        Args:
            app: FastAPI application instance.
            config: ConfigManager for reading log level.
        """
        super().__init__(app)
        self.config = config
        log_level = str(config.get("api.log_level", "info")).upper()
        logger.setLevel(getattr(logging, log_level, logging.INFO))

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and log details.

        Args:
            request: Incoming HTTP request.
            call_next: Next middleware/handler in chain.

        Returns:
            Response from next handler with added request ID header.
        """
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        client_ip = request.client.host if request.client else "unknown"

        logger.info(f"[{request_id}] {request.method} {request.url.path} - Client: {client_ip}")

        start_time = time.time()
        response = await call_next(request)
        processing_time = time.time() - start_time

        logger.info(
            f"[{request_id}] {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Time: {processing_time:.3f}s"
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Processing-Time"] = f"{processing_time:.3f}"

        return response


def configure_cors(app, config: ConfigManager) -> None:
    """
    Configure CORS middleware for FastAPI app.

    Reads CORS settings from config and adds CORSMiddleware to app.
    Defaults allow every origin without credentials.

    Args:
        app: FastAPI application instance.
        config: ConfigManager for reading CORS configuration.
    """
    allowed_origins = config.get("api.cors.allowed_origins", ["*"])
    allow_credentials = config.get("api.cors.allow_credentials", False)
    allowed_methods = config.get("api.cors.allowed_methods", ["*"])
    allowed_headers = config.get("api.cors.allowed_headers", ["*"])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=allow_credentials,
        allow_methods=allowed_methods,
        allow_headers=allowed_headers,
    )

    logger.info(f"CORS configured with origins: {allowed_origins}")
