"""Perch preview application.

Mutable during setup (extra transformers, middleware).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from perch._internal.asgi import Receive, Scope, Send
from perch.config import PreviewConfig
from perch.errors import ConfigurationError
from perch.middleware.protocol import Middleware
from perch.middleware.static import StaticFiles
from perch.middleware.transform import TransformFiles
from perch.server.handler import handle_request
from perch.transforms.base import TransformerFactory
from perch.transforms.registry import ExtensionRegistry, default_registry

logger = logging.getLogger("perch.server")


class PreviewApp:
    """The perch preview server application.

    Built from a ``PreviewConfig`` and an ``ExtensionRegistry``.  The
    registry defaults to every built-in transformer; pass your own (or
    call ``register``) to add or override extensions::

        app = PreviewApp(PreviewConfig(root="site"))
        app.register("txt", PlainTextTransformer)
        app.run()

    Thread safety:
        Setup is single-threaded.  The freeze transition uses a Lock +
        double-check so exactly one thread freezes the registry and
        compiles the middleware chain, even if several ASGI workers take
        their first request at once.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_middleware",
        "_middleware_list",
        "config",
        "registry",
    )

    def __init__(
        self,
        config: PreviewConfig | None = None,
        *,
        registry: ExtensionRegistry | None = None,
    ) -> None:
        self.config: PreviewConfig = config or PreviewConfig()
        self.registry: ExtensionRegistry = (
            registry if registry is not None else default_registry(self.config)
        )
        self._middleware_list: list[Middleware] = []
        self._middleware: tuple[Callable[..., Any], ...] = ()
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Setup --

    def register(self, extension: str, factory: TransformerFactory) -> None:
        """Bind a transformer factory to *extension* (last write wins)."""
        self._check_not_frozen()
        self.registry.register(extension, factory)

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a middleware ahead of the built-in file handlers."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the app and serve it with pounce."""
        self._ensure_frozen()

        _host = host if host is not None else self.config.host
        _port = port if port is not None else self.config.port
        logger.info(
            "Previewing %s at http://%s:%d/ (%s)",
            self.config.root_path,
            _host,
            _port,
            ", ".join(f".{ext}" for ext in self.registry.extensions()),
        )

        from perch.server.dev import run_dev_server

        run_dev_server(self, _host, _port)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan scopes directly, then delegates HTTP scopes to
        the request handler pipeline.  Other scope types are ignored.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] != "http":
            return

        self._ensure_frozen()
        await handle_request(scope, receive, send, middleware=self._middleware)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol, freezing the app at startup."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except ConfigurationError as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        root = self.config.root_path
        if not root.is_dir():
            msg = f"Content root is not a directory: {root}"
            raise ConfigurationError(msg)

        self.registry.freeze()

        # User middleware first (outermost), then transforms, then static files
        self._middleware = (
            *self._middleware_list,
            TransformFiles(
                root,
                self.registry,
                template_extension=self.config.template_extension,
                index_files=self.config.index_files,
            ),
            StaticFiles(root, index_files=self.config.index_files),
        )
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register transformers and middleware before calling app.run()."
            )
            raise RuntimeError(msg)
