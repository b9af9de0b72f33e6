"""
HTTP protocol types - Framework-agnostic request/response contract.

Controllers receive an HttpRequest and return an HttpResponse; the web
framework adapts to and from these types at the route level.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass
class HttpRequest:
    """Incoming request with a raw, string-keyed body."""

    body: dict[str, Any] = field(default_factory=dict)


@dataclass
class HttpResponse:
    """Outgoing response: status code plus error descriptor or payload."""

    status_code: int
    body: Any


class Controller(Protocol):
    """Port interface for request handlers."""

    async def handle(self, http_request: HttpRequest) -> HttpResponse: ...
