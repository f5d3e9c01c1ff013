"""Nested rendering context for templates, layouts, and partials.

A ``RenderContext`` is an immutable value naming the file that is
currently rendering.  Every nested render (layout or partial) gets a
fresh context for its own file, so partial paths always resolve from
the directory of the template that asked for them — including a
partial requested from inside another partial.

Templates include partials with the ``render`` callable::

    {{ render(partial="nav") }}        {# ./_nav.kida #}
    {{ render(partial="shared/nav") }} {# ./shared/_nav.kida #}
    {{ render(partial="/footer") }}    {# <root>/_footer.kida #}

Layouts receive the rendered page as ``content``::

    <body>{{ content }}</body>
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from kida import Environment
from kida.utils.html import Markup

from perch.errors import ConfigurationError, PerchError, RenderError
from perch.templating.layout import find_layout


@dataclass(frozen=True, slots=True)
class RenderContext:
    """The state threaded through one top-level render.

    Attributes:
        root: Absolute content root.
        current_file: Absolute path of the template being rendered.
        env: Shared kida environment (loader rooted at ``root``).
        extension: Template extension, without the dot.
    """

    root: Path
    current_file: Path
    env: Environment
    extension: str

    def render_page(self) -> str:
        """Render ``current_file``, wrapped in its layout if one exists."""
        rendered = self.render_file(self.current_file)
        layout = find_layout(self.root, self.current_file, self.extension)
        if layout is None:
            return rendered
        return self.render_file(layout, content=Markup(rendered))

    def render_file(self, path: Path, **context: Any) -> str:
        """Render the template at *path* in a context of its own."""
        nested = replace(self, current_file=path)
        template = self.env.get_template(self.template_name(path))
        try:
            return template.render({**context, "render": nested.render})
        except PerchError:
            raise
        except Exception as exc:
            # Surface our own errors even if the engine wrapped them
            original = _find_perch_error(exc)
            if original is None:
                raise
            raise original from exc

    def render(self, **options: Any) -> Markup:
        """Template-facing ``render()``; only ``partial=`` is supported."""
        partial = options.pop("partial", None)
        if partial is None or options:
            msg = f"render options not supported: {options!r}"
            raise ConfigurationError(msg)
        return Markup(self.render_file(self.resolve_partial(str(partial))))

    def resolve_partial(self, partial: str) -> Path:
        """Map a partial reference to its ``_<name>.<ext>`` file.

        A leading ``/`` makes the reference root-relative; otherwise it
        is relative to the directory of ``current_file``.

        Raises:
            RenderError: If the partial does not exist (or would escape
                the content root).
        """
        if partial.startswith("/"):
            base = self.root
            token = partial.lstrip("/")
        else:
            base = self.current_file.parent
            token = partial

        directory, _, stem = token.rpartition("/")
        candidate = (base / directory / f"_{stem}.{self.extension}").resolve()
        if not candidate.is_relative_to(self.root) or not candidate.is_file():
            msg = f"Partial {partial!r} not found: {candidate}"
            raise RenderError(msg, path=str(candidate))
        return candidate

    def template_name(self, path: Path) -> str:
        """Loader name for *path*: its POSIX path relative to the root."""
        return path.relative_to(self.root).as_posix()


def _find_perch_error(exc: BaseException) -> PerchError | None:
    """Walk the cause/context chain looking for a perch error."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, PerchError):
            return current
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None
