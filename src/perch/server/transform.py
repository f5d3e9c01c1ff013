"""File transform handler — one file in, one response out.

Reads the file backing a request, runs the transformer bound to its
extension, and wraps the result.  Errors are classified, never
recovered from:

- ``HTTPError``, ``RenderError`` and the transformer's declared
  conversion errors propagate unchanged;
- anything else (bad encoding, unsupported render option, a missing
  converter library, ...) is logged and re-raised as a 500
  ``InternalServerError`` carrying the fault's message.
"""

import logging

from perch.errors import HTTPError, InternalServerError, NotFound, RenderError
from perch.http.response import Response
from perch.transforms.base import RedirectSignal, RequestFile, Transformer
from perch.transforms.registry import ExtensionRegistry

logger = logging.getLogger("perch.server")


class FileTransformHandler:
    """Dispatch a request file to the transformer bound to its extension.

    Synchronous and blocking: the caller decides which thread runs it.
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: ExtensionRegistry) -> None:
        self._registry = registry

    def can_handle(self, file: RequestFile) -> bool:
        """Whether a transformer is registered for the file's extension."""
        return self._registry.resolve(file.extension) is not None

    def handle(self, file: RequestFile) -> Response:
        """Transform *file* into a response.

        Raises:
            NotFound: If the file is absent or no transformer is bound.
            InternalServerError: For unclassified faults.
        """
        factory = self._registry.resolve(file.extension)
        if factory is None:
            raise NotFound(f"No transformer for {file.relative_name}")

        transformer: Transformer | None = None
        try:
            transformer = factory()
            try:
                data = file.path.read_bytes()
            except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
                raise NotFound(f"File not found: {file.relative_name}") from None
            text = data.decode("utf-8")
            result = transformer.transform(text, file)
        except (HTTPError, RenderError):
            raise
        except Exception as exc:
            if transformer is not None and isinstance(exc, transformer.conversion_errors):
                raise
            logger.exception("500 transform failed for %s", file.relative_name)
            raise InternalServerError(str(exc)) from exc

        if isinstance(result, RedirectSignal):
            return _redirect_response(result, file)
        return Response(body=result, content_type=transformer.content_type)


def _redirect_response(signal: RedirectSignal, file: RequestFile) -> Response:
    """302 Found with the target as ``Location`` and an empty body."""
    if not signal.url:
        msg = f"Redirect file {file.relative_name} names no target URL"
        raise InternalServerError(msg)
    logger.debug("302 %s -> %s", file.relative_name, signal.url)
    return Response.redirect(signal.url, status=302)
