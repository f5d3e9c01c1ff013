"""Extension registry — maps file extensions to transformer factories.

Built once at startup and passed by reference into the request
pipeline.  Mutable during setup, frozen when the app starts serving.
"""

from __future__ import annotations

import logging
import threading
from functools import partial
from typing import TYPE_CHECKING

from perch.transforms.base import TransformerFactory, normalize_extension

if TYPE_CHECKING:
    from perch.config import PreviewConfig

logger = logging.getLogger("perch.transforms")


class ExtensionRegistry:
    """Extension → transformer factory bindings.

    Re-registering an extension overwrites the earlier binding (last
    write wins) but keeps its original position in registration order.

    Thread safety:
        ``register`` takes a lock so setup code may run from any thread.
        After ``freeze()`` the mapping is never written again, so
        ``resolve`` reads it without locking.
    """

    __slots__ = ("_bindings", "_frozen", "_lock")

    def __init__(self) -> None:
        self._bindings: dict[str, TransformerFactory] = {}
        self._frozen: bool = False
        self._lock: threading.Lock = threading.Lock()

    def register(self, extension: str, factory: TransformerFactory) -> None:
        """Bind *extension* to *factory*, replacing any earlier binding."""
        key = normalize_extension(extension)
        with self._lock:
            if self._frozen:
                msg = (
                    f"Cannot register {key!r}: the extension registry is frozen. "
                    "Register transformers before the app starts serving requests."
                )
                raise RuntimeError(msg)
            if key in self._bindings:
                logger.debug("Replacing transformer for .%s", key)
            self._bindings[key] = factory

    def resolve(self, extension: str) -> TransformerFactory | None:
        """Return the factory bound to *extension*, or ``None`` on a miss."""
        return self._bindings.get(normalize_extension(extension))

    def extensions(self) -> tuple[str, ...]:
        """Registered extensions in registration order."""
        return tuple(self._bindings)

    def freeze(self) -> None:
        """Reject further registration."""
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, extension: object) -> bool:
        if not isinstance(extension, str):
            return False
        return normalize_extension(extension) in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)


def default_registry(config: PreviewConfig) -> ExtensionRegistry:
    """Build the registry with every built-in transformer bound.

    Converter libraries are imported lazily by each transformer, so a
    missing optional library only fails requests for its own extension.
    """
    from perch.templating.environment import create_environment
    from perch.templating.transformer import TemplateTransformer
    from perch.transforms.email import EmailTransformer
    from perch.transforms.markup import MarkdownTransformer, TextileTransformer
    from perch.transforms.redirect import RedirectTransformer
    from perch.transforms.style import SassTransformer

    root = config.root_path
    env = create_environment(config, root)

    registry = ExtensionRegistry()
    registry.register("textile", TextileTransformer)
    markdown = partial(
        MarkdownTransformer,
        plugins=config.markdown_plugins,
        highlight=config.markdown_highlight,
    )
    registry.register("markdown", markdown)
    registry.register("md", markdown)
    registry.register("sass", partial(SassTransformer, output_style=config.sass_output_style))
    registry.register(
        config.template_extension,
        partial(TemplateTransformer, env, extension=config.template_extension),
    )
    registry.register("email", EmailTransformer)
    registry.register("redirect", RedirectTransformer)
    return registry
