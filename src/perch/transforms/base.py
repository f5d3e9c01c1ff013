"""Transformer interface and per-request value types.

A transformer converts the decoded text of one file into response
content.  Every variant (Textile, Markdown, Sass, templates, e-mail,
redirect) implements the same ``transform`` shape; the registry maps
extensions to the factories that build them.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Protocol


@dataclass(frozen=True, slots=True)
class RequestFile:
    """The file backing the current request and the root bounding its search.

    Attributes:
        path: Absolute path of the requested file.
        root: Absolute content root directory.
    """

    path: Path
    root: Path

    @property
    def extension(self) -> str:
        """Normalized extension of the file (lower-case, no dot)."""
        return normalize_extension(self.path.suffix)

    @property
    def relative_name(self) -> str:
        """POSIX path of the file relative to the content root."""
        return self.path.relative_to(self.root).as_posix()


@dataclass(frozen=True, slots=True)
class RedirectSignal:
    """Transform output naming a redirect target instead of a body."""

    url: str


type TransformResult = str | RedirectSignal


class Transformer(Protocol):
    """Protocol for a per-request transformer.

    ``content_type`` labels string results.  ``conversion_errors`` lists
    the exception types the underlying converter raises on malformed
    input; the file handler propagates those unchanged instead of
    downgrading them to a generic failure.
    """

    content_type: ClassVar[str]
    conversion_errors: ClassVar[tuple[type[Exception], ...]]

    def transform(self, text: str, file: RequestFile) -> TransformResult: ...


# Zero-argument factory producing a fresh transformer for one request
type TransformerFactory = Callable[[], Transformer]


class HTMLTransformer:
    """Base for transformers that produce a full HTML document."""

    content_type: ClassVar[str] = "text/html; charset=utf-8"
    conversion_errors: ClassVar[tuple[type[Exception], ...]] = ()

    def transform(self, text: str, file: RequestFile) -> TransformResult:
        return text


def normalize_extension(extension: str) -> str:
    """Lower-case an extension and strip its leading dot."""
    return extension.lower().removeprefix(".")
