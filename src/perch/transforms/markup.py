"""Markup transformers — Textile and Markdown to HTML.

Thin pass-throughs to external converters.  The full file text goes
in unmodified; the converter's HTML comes back wrapped in a minimal
document shell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from perch.errors import ConverterNotInstalledError
from perch.transforms.base import HTMLTransformer, RequestFile

if TYPE_CHECKING:
    from patitas import Markdown


def wrap_document(body: str) -> str:
    """Wrap converted markup in a bare HTML document."""
    return f"<html><body>{body}</body></html>"


class TextileTransformer(HTMLTransformer):
    """Render ``.textile`` files via the ``textile`` package."""

    def transform(self, text: str, file: RequestFile) -> str:
        try:
            import textile
        except ImportError:
            msg = (
                "Textile previews require the 'textile' package. "
                "Install with: pip install perch[textile]"
            )
            raise ConverterNotInstalledError(msg) from None

        return wrap_document(textile.textile(text))


class MarkdownTransformer(HTMLTransformer):
    """Render ``.markdown`` / ``.md`` files via patitas.

    Args:
        plugins: Patitas plugins to enable (default: all).
        highlight: Enable syntax highlighting for fenced code blocks.
    """

    __slots__ = ("_md",)

    def __init__(
        self,
        *,
        plugins: tuple[str, ...] = ("all",),
        highlight: bool = False,
    ) -> None:
        self._md: Markdown = create_markdown(plugins=list(plugins), highlight=highlight)

    def transform(self, text: str, file: RequestFile) -> str:
        if not text:
            return wrap_document("")
        return wrap_document(self._md(text))


def create_markdown(*, plugins: list[str], highlight: bool) -> Any:
    """Create a patitas Markdown instance, raising a clear error if missing."""
    try:
        from patitas import Markdown
    except ImportError:
        msg = (
            "Markdown previews require 'patitas'. "
            "Install with: pip install patitas"
        )
        raise ConverterNotInstalledError(msg) from None

    return Markdown(plugins=plugins or ["all"], highlight=highlight)
