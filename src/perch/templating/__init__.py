"""Template rendering with layout discovery and partial inclusion.

Conventions under the content root::

    site/
      _layout.kida        # wraps every page below it
      _footer.kida        # partial: render(partial="/footer")
      index.kida          # GET /
      docs/
        _layout.kida      # nearest layout wins for docs/*
        _toc.kida         # partial: render(partial="toc")
        intro.kida        # GET /docs/intro
"""

from perch.templating.context import RenderContext
from perch.templating.environment import create_environment
from perch.templating.layout import find_layout, layout_name
from perch.templating.transformer import TemplateTransformer

__all__ = [
    "RenderContext",
    "TemplateTransformer",
    "create_environment",
    "find_layout",
    "layout_name",
]
