"""Redirect transformer — a ``.redirect`` file holds a target URL.

The output is not a body: the file handler turns the signal into a
302 Found response with a ``Location`` header and an empty body.
"""

from typing import ClassVar

from perch.transforms.base import RedirectSignal, RequestFile


class RedirectTransformer:
    """Read the (whitespace-trimmed) target URL from the file."""

    content_type: ClassVar[str] = "text/html; charset=utf-8"
    conversion_errors: ClassVar[tuple[type[Exception], ...]] = ()

    def transform(self, text: str, file: RequestFile) -> RedirectSignal:
        return RedirectSignal(text.strip())
