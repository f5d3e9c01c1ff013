"""Template transformer — renders ``.kida`` files with layouts and partials."""

from __future__ import annotations

from typing import ClassVar

from kida import Environment
from kida.environment.exceptions import (
    TemplateNotFoundError,
    TemplateRuntimeError,
    TemplateSyntaxError,
    UndefinedError,
)

from perch.templating.context import RenderContext
from perch.transforms.base import RequestFile


class TemplateTransformer:
    """Render a template file through its nearest layout.

    The page is loaded by name through the environment's loader rather
    than compiled from the decoded text, so kida reports errors against
    the real file name.  Kida's own template errors are conversion
    errors and reach the caller unchanged.
    """

    content_type: ClassVar[str] = "text/html; charset=utf-8"
    conversion_errors: ClassVar[tuple[type[Exception], ...]] = (
        TemplateNotFoundError,
        TemplateRuntimeError,
        TemplateSyntaxError,
        UndefinedError,
    )

    __slots__ = ("_env", "_extension")

    def __init__(self, env: Environment, *, extension: str = "kida") -> None:
        self._env = env
        self._extension = extension

    def transform(self, text: str, file: RequestFile) -> str:
        context = RenderContext(
            root=file.root,
            current_file=file.path,
            env=self._env,
            extension=self._extension,
        )
        return context.render_page()
