"""ASGI handler — translates ASGI scope/messages to perch types.

The only component that touches raw ASGI directly. Converts scope dicts
to typed Request objects, dispatches through the middleware chain, and
sends the Response back through ASGI send().
"""

from collections.abc import Callable
from typing import Any

from perch._internal.asgi import Receive, Scope, Send
from perch.errors import HTTPError, MethodNotAllowed, NotFound, RenderError
from perch.http.request import Request
from perch.http.response import Response
from perch.middleware.protocol import Next
from perch.server.errors import handle_http_error, handle_internal_error, handle_render_error
from perch.server.sender import send_response

# GET and POST are served identically; HEAD is GET without a body
ALLOWED_METHODS = frozenset({"GET", "HEAD", "POST"})


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    middleware: tuple[Callable[..., Any], ...],
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(dict(scope))

    try:
        if request.method not in ALLOWED_METHODS:
            raise MethodNotAllowed(ALLOWED_METHODS)

        # Innermost handler: nothing claimed the path
        async def dispatch(req: Request) -> Response:
            raise NotFound(f"Not Found: {req.path}")

        handler: Next = dispatch
        for mw in reversed(middleware):
            outer = handler

            async def make_next(req: Request, _mw: Any = mw, _next: Next = outer) -> Response:
                return await _mw(req, _next)

            handler = make_next

        response = await handler(request)

    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except RenderError as exc:
        response = handle_render_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send, head=request.method == "HEAD")
