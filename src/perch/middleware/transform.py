"""Transform middleware — routes requests to registered transformers.

Maps the URL path onto the content root and, when the target file has
a registered extension, hands it to the ``FileTransformHandler``.
Everything else falls through untouched (a registry miss is a "no
transform" signal, not an error).

Resolution order for a URL path ``/p``:

1. ``<root>/p`` is a file with a registered extension -> transform it.
2. ``<root>/p`` is a directory -> plain index files are left to the
   static middleware; otherwise ``index.<ext>`` for each registered
   extension, in registration order.
3. ``<root>/p`` does not exist and has no registered extension ->
   ``<root>/p.<ext>`` for each registered extension, in order.

Layouts and partials (``_``-prefixed template files) are never served
directly.
"""

from pathlib import Path

import anyio

from perch._internal.paths import resolve_request_path
from perch.errors import NotFound
from perch.http.request import Request
from perch.http.response import Response
from perch.middleware.protocol import Next
from perch.server.transform import FileTransformHandler
from perch.transforms.base import RequestFile, normalize_extension
from perch.transforms.registry import ExtensionRegistry


class TransformFiles:
    """Middleware that serves transformed files from the content root.

    The transform itself (file read, converter call) is blocking, so it
    runs in a worker thread; a slow converter only stalls its own request.
    """

    __slots__ = ("_handler", "_index_files", "_registry", "_root", "_template_extension")

    def __init__(
        self,
        root: str | Path,
        registry: ExtensionRegistry,
        *,
        template_extension: str = "kida",
        index_files: tuple[str, ...] = ("index.html", "index.htm"),
    ) -> None:
        self._root = Path(root).resolve()
        self._registry = registry
        self._handler = FileTransformHandler(registry)
        self._template_extension = normalize_extension(template_extension)
        self._index_files = index_files

    async def __call__(self, request: Request, next: Next) -> Response:
        """Transform the target file or fall through."""
        path = request.path
        target = resolve_request_path(self._root, path)

        if target.is_dir():
            index = self._find_index(target)
            if index is None:
                return await next(request)
            if not path.endswith("/"):
                return Response.redirect(path + "/", status=301)
            target = index
        elif not target.exists():
            fallback = self._find_by_extension(target)
            if fallback is None:
                return await next(request)
            target = fallback

        file = RequestFile(path=target, root=self._root)
        if not self._handler.can_handle(file):
            return await next(request)
        if self._is_hidden_template(target):
            raise NotFound(f"Not Found: {path}")

        return await anyio.to_thread.run_sync(self._handler.handle, file)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _find_index(self, directory: Path) -> Path | None:
        """First ``index.<ext>`` to transform, unless a plain index exists."""
        if any((directory / name).is_file() for name in self._index_files):
            return None
        for extension in self._registry.extensions():
            candidate = directory / f"index.{extension}"
            if candidate.is_file():
                return candidate
        return None

    def _find_by_extension(self, target: Path) -> Path | None:
        """Try ``<target>.<ext>`` for an extension-less URL."""
        if normalize_extension(target.suffix) in self._registry:
            return None
        for extension in self._registry.extensions():
            candidate = target.with_name(f"{target.name}.{extension}")
            if candidate.is_file():
                return candidate
        return None

    def _is_hidden_template(self, target: Path) -> bool:
        """Layouts and partials only render as part of another page."""
        return (
            target.name.startswith("_")
            and normalize_extension(target.suffix) == self._template_extension
        )
