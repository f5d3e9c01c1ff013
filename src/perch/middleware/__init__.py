"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    TransformFiles -- Run registered transformers for matching files
    StaticFiles -- Serve every other file from the content root
"""

from perch.middleware.protocol import Middleware, Next
from perch.middleware.static import StaticFiles
from perch.middleware.transform import TransformFiles

__all__ = [
    "Middleware",
    "Next",
    "StaticFiles",
    "TransformFiles",
]
