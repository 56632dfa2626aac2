# src/xerror/adapters/http/errors.py
# Copyright (c) xerror.
# SPDX-License-Identifier: MIT
"""FastAPI error boundary for augmented errors.

Purpose:
    Render ``AugmentedError`` instances escaping a request handler into the
    standard error envelope, and log them with their debug values and stack.

Layer: adapters/http

Notes:
    - The envelope always carries the rendered message and the template
      chain; debug values and stack frames are included only when the
      corresponding ``XERROR_HTTP_EXPOSE_*`` settings are enabled.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.responses import Response

from xerror.adapters.schemas.error_payload import ErrorPayload
from xerror.config.settings import get_runtime_settings
from xerror.domain.error import AugmentedError
from xerror.infrastructure.logging.logger import get_json_logger

__all__ = [
    "error_envelope",
    "handle_augmented_error",
    "install_error_handlers",
]

logger = get_json_logger(__name__)


def _trace_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "trace_id", None)


def error_envelope(
    err: AugmentedError,
    *,
    code: str = "INTERNAL_ERROR",
    http_status: int = 500,
    trace_id: str | None = None,
    expose_debug: bool | None = None,
    expose_stack: bool | None = None,
) -> dict[str, Any]:
    """Build the error envelope for ``err``.

    Args:
        err: Error to render.
        code: Stable error code.
        http_status: HTTP status the envelope is served with.
        trace_id: Optional correlation identifier.
        expose_debug: Include debug values. Defaults to settings.
        expose_stack: Include stack frames. Defaults to settings.

    Returns:
        ``{"error": {...}}`` mapping suitable for a JSON response body.
    """
    settings = get_runtime_settings()
    if expose_debug is None:
        expose_debug = settings.http_expose_debug
    if expose_stack is None:
        expose_stack = settings.http_expose_stack

    wire = ErrorPayload.from_error(err).model_dump_wire()
    details: dict[str, Any] = {"templates": list(err.templates)}
    if expose_debug and "debug" in wire:
        details["debug"] = wire["debug"]
    if expose_stack:
        details["stack"] = wire["stack"]

    body: dict[str, Any] = {
        "code": code,
        "http_status": http_status,
        "message": err.message,
        "details": details,
    }
    if trace_id is not None:
        body["trace_id"] = trace_id
    return {"error": body}


async def handle_augmented_error(request: Request, exc: AugmentedError) -> Response:
    """Render an ``AugmentedError`` as a 500 JSON response and log it."""
    logger.error(
        "Unhandled augmented error",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    payload = error_envelope(exc, trace_id=_trace_id(request))
    return JSONResponse(status_code=500, content=payload)


def install_error_handlers(app: FastAPI) -> None:
    """Register the augmented-error handler on ``app``."""
    app.add_exception_handler(AugmentedError, handle_augmented_error)  # type: ignore[arg-type]
