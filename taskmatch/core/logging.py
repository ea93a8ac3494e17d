"""
Structured logging for TaskMatch, built on structlog.

Every line carries the request id, and once a session resolves, the
caller's user id and role. Email addresses are masked and token values
dropped before rendering, because login and session events name them.

Output is a colored console in development and JSON lines elsewhere.
"""
import logging
import re
import sys
import time
import uuid
from typing import Any, MutableMapping

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from taskmatch.core.config import settings

REDACTED = "[redacted]"
SECRET_KEYS = frozenset({"access_token", "token", "password", "authorization"})

_EMAIL = re.compile(r"^([^@\s])[^@\s]*(@[^@\s]+)$")


def mask_email(value: str) -> str:
    """`jane@example.com` -> `j***@example.com`. Non-addresses pass through."""
    return _EMAIL.sub(r"\1***\2", value)


def scrub_sensitive(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    for key in list(event_dict):
        if key in SECRET_KEYS:
            event_dict[key] = REDACTED
        elif key == "email" and isinstance(event_dict[key], str):
            event_dict[key] = mask_email(event_dict[key])
    return event_dict


def setup_logging() -> None:
    """Configure structlog over stdlib logging. Called from the app lifespan."""
    shared = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        scrub_sensitive,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.environment == "development"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    # uvicorn's access log duplicates request_completed
    for name in ("uvicorn.access", "httpx"):
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


_access_logger = get_logger("taskmatch.access")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Bind a request id for the life of the request and log its outcome.

    A client-supplied `X-Request-ID` is reused so traces line up with the
    web client; otherwise a fresh one is issued. The id is echoed back.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        started = time.perf_counter()
        response = await call_next(request)
        _access_logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        response.headers["X-Request-ID"] = request_id
        return response


def bind_identity(user_id: str, role: str) -> None:
    """Tag the rest of the request's log lines with the signed-in user."""
    structlog.contextvars.bind_contextvars(user_id=user_id, role=role)
