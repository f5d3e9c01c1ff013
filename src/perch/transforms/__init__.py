"""Per-extension transformers and the registry that dispatches to them.

Each transformer turns the decoded text of one file into response
content.  ``default_registry()`` binds the built-in set::

    textile        -> TextileTransformer   (textile)
    markdown, md   -> MarkdownTransformer  (patitas)
    sass           -> SassTransformer      (libsass, text/css)
    kida           -> TemplateTransformer  (kida, layouts + partials)
    email          -> EmailTransformer
    redirect       -> RedirectTransformer  (302 Found)
"""

from perch.transforms.base import (
    HTMLTransformer,
    RedirectSignal,
    RequestFile,
    Transformer,
    TransformerFactory,
    TransformResult,
    normalize_extension,
)
from perch.transforms.email import EmailTransformer
from perch.transforms.markup import MarkdownTransformer, TextileTransformer, create_markdown
from perch.transforms.redirect import RedirectTransformer
from perch.transforms.registry import ExtensionRegistry, default_registry
from perch.transforms.style import SassTransformer

__all__ = [
    "EmailTransformer",
    "ExtensionRegistry",
    "HTMLTransformer",
    "MarkdownTransformer",
    "RedirectSignal",
    "RedirectTransformer",
    "RequestFile",
    "SassTransformer",
    "TextileTransformer",
    "TransformResult",
    "Transformer",
    "TransformerFactory",
    "create_markdown",
    "default_registry",
    "normalize_extension",
]
