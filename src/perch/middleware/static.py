"""Static file serving middleware.

Serves any existing file under the content root that no transformer
claimed, with automatic index file resolution for directories.

Falls through to the next handler when nothing matches.
"""

import mimetypes
from pathlib import Path

from perch._internal.paths import resolve_request_path
from perch.http.request import Request
from perch.http.response import Response
from perch.middleware.protocol import Next


class StaticFiles:
    """Middleware that serves plain files from the content root.

    Security: resolves symlinks and verifies the final path is within
    the content root to prevent path traversal.

    Usage::

        app.add_middleware(StaticFiles(directory="./site"))
    """

    __slots__ = ("_cache_control", "_directory", "_index_files")

    def __init__(
        self,
        directory: str | Path,
        *,
        index_files: tuple[str, ...] = ("index.html", "index.htm"),
        cache_control: str = "no-cache",
    ) -> None:
        self._directory = Path(directory).resolve()
        self._index_files = index_files
        self._cache_control = cache_control

    async def __call__(self, request: Request, next: Next) -> Response:
        """Serve a static file or fall through."""
        path = request.path
        file_path = resolve_request_path(self._directory, path)

        # Directory: redirect to the trailing-slash URL, then try index files
        if file_path.is_dir():
            index_path = self._find_index(file_path)
            if index_path is None:
                return await next(request)
            if not path.endswith("/"):
                return Response.redirect(path + "/", status=301)
            file_path = index_path

        if not file_path.is_file():
            return await next(request)

        return self._serve_file(file_path)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _find_index(self, directory: Path) -> Path | None:
        for name in self._index_files:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        return None

    def _serve_file(self, file_path: Path) -> Response:
        """Read a file and build a response."""
        content_type, _ = mimetypes.guess_type(str(file_path))
        if content_type is None:
            content_type = "application/octet-stream"
        elif content_type.startswith("text/"):
            content_type = f"{content_type}; charset=utf-8"

        return Response(
            body=file_path.read_bytes(),
            content_type=content_type,
        ).with_header("Cache-Control", self._cache_control)
