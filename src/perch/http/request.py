"""Immutable HTTP request.

Only what the preview pipeline needs: method, decoded path, headers.
The body is never read — POST is served exactly like GET.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote

from perch.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, frozen at creation."""

    method: str
    path: str
    headers: Headers
    query_string: bytes = b""
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    @property
    def url(self) -> str:
        """Request path plus query string."""
        if self.query_string:
            return f"{self.path}?{self.query_string.decode('latin-1')}"
        return self.path

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI scope.

        ASGI servers already percent-decode ``path``; decoding again
        would turn a literal ``%2F`` into a separator, so only
        ``raw_path`` (when ``path`` is absent) is unquoted here.
        """
        path = scope.get("path")
        if path is None:
            path = unquote(scope.get("raw_path", b"/").decode("latin-1"))
        client = scope.get("client")
        return cls(
            method=scope["method"].upper(),
            path=path or "/",
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b""),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
        )
