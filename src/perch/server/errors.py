"""Error pages for the preview server.

Maps classified failures and unexpected faults to small HTML pages.
A developer preview tool, so fault messages are shown verbatim.
"""

import html
import logging

from perch.errors import HTTPError, RenderError
from perch.http.request import Request
from perch.http.response import Response

logger = logging.getLogger("perch.server")

_TITLES = {
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    500: "Internal Server Error",
}


def error_page(status: int, title: str, message: str) -> str:
    """Minimal HTML page for an error response."""
    return (
        f"<html><head><title>{status} {html.escape(title)}</title></head>"
        f'<body><h1>{html.escape(title)}</h1><p class="perch-error" data-status="{status}">'
        f"{html.escape(message)}</p></body></html>"
    )


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to its status, headers, and page."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    title = _TITLES.get(exc.status, f"Error {exc.status}")
    if exc.status == 404:
        message = f"The requested resource {request.path} was not found."
    else:
        message = exc.detail or title

    resp = Response(body=error_page(exc.status, title, message), status=exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_render_error(exc: RenderError, request: Request) -> Response:
    """A missing layout or partial aborts the render as a missing resource."""
    logger.warning("404 %s %s — %s", request.method, request.path, exc)
    return Response(body=error_page(404, "Not Found", str(exc)), status=404)


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Log an unexpected exception and report it as a 500."""
    logger.exception("500 %s %s", request.method, request.path)
    message = str(exc) or type(exc).__name__
    return Response(body=error_page(500, "Internal Server Error", message), status=500)
