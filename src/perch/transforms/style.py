"""Sass transformer — indented-syntax stylesheets to CSS via libsass."""

from __future__ import annotations

from typing import ClassVar

from perch.errors import ConverterNotInstalledError
from perch.transforms.base import RequestFile


def _sass_compile_error() -> tuple[type[Exception], ...]:
    try:
        import sass
    except ImportError:
        return ()
    return (sass.CompileError,)


class SassTransformer:
    """Compile ``.sass`` files to CSS.

    ``sass.CompileError`` is a conversion error: it reaches the caller
    unchanged so the compiler's own diagnostics stay intact.
    """

    content_type: ClassVar[str] = "text/css; charset=utf-8"
    conversion_errors: ClassVar[tuple[type[Exception], ...]] = _sass_compile_error()

    __slots__ = ("_output_style",)

    def __init__(self, *, output_style: str = "expanded") -> None:
        self._output_style = output_style

    def transform(self, text: str, file: RequestFile) -> str:
        try:
            import sass
        except ImportError:
            msg = (
                "Sass previews require 'libsass'. "
                "Install with: pip install perch[sass]"
            )
            raise ConverterNotInstalledError(msg) from None

        return sass.compile(
            string=text,
            indented=True,
            output_style=self._output_style,
            include_paths=[str(file.path.parent)],
        )
