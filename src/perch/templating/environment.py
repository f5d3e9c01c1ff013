"""Kida environment setup for the content root.

One environment is created at startup and shared by every template
render.  Templates load by their path relative to the content root,
so kida diagnostics carry the real file name.
"""

from __future__ import annotations

from functools import cache
from pathlib import Path
from typing import TYPE_CHECKING, Any

from kida import Environment, FileSystemLoader
from kida.utils.html import Markup

if TYPE_CHECKING:
    from perch.config import PreviewConfig


def create_environment(config: PreviewConfig, root: Path) -> Environment:
    """Create a kida Environment rooted at *root*.

    ``auto_reload`` is always on: files may be edited between requests
    and the preview must reflect them.
    """
    env = Environment(
        loader=FileSystemLoader(str(root)),
        autoescape=config.autoescape,
        auto_reload=True,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )
    env.update_filters({"markdown": markdown_filter})
    return env


def markdown_filter(source: Any) -> Markup:
    """Render Markdown inline: ``{{ intro | markdown }}``."""
    text = str(source or "")
    if not text:
        return Markup("")
    return Markup(_markdown()(text))


@cache
def _markdown() -> Any:
    from perch.transforms.markup import create_markdown

    return create_markdown(plugins=["all"], highlight=False)
