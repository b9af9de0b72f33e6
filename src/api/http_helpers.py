"""
HTTP helpers - Response constructors and the server error boundary.
"""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from src.api.protocols import HttpResponse
from src.domain.exceptions import ServerError, SignUpError

logger = logging.getLogger(__name__)


def bad_request(error: SignUpError) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=data)


def server_error() -> HttpResponse:
    return HttpResponse(status_code=500, body=ServerError())


def server_error_boundary(
    handler: Callable[..., Awaitable[HttpResponse]],
) -> Callable[..., Awaitable[HttpResponse]]:
    """
    Wrap an async handler so any exception becomes a 500 response.

    The cause is logged with its traceback but never attached to the
    response body.
    """

    @functools.wraps(handler)
    async def wrapper(*args: Any, **kwargs: Any) -> HttpResponse:
        try:
            return await handler(*args, **kwargs)
        except Exception:
            logger.exception("Unhandled error in %s", handler.__qualname__)
            return server_error()

    return wrapper
