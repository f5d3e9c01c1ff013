"""Perch — a local preview server for hand-written sites.

Point it at a directory and browse: files with a registered extension
are transformed on every request (Textile, Markdown, Sass, kida
templates with layouts and partials, e-mail drafts, redirects); every
other file is served as-is.

Basic usage::

    from perch import PreviewApp, PreviewConfig

    app = PreviewApp(PreviewConfig(root="site"))
    app.run()

Or from the shell::

    perch serve site --port 4000
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "ExtensionRegistry",
    "HTTPError",
    "Middleware",
    "Next",
    "NotFound",
    "PerchError",
    "PreviewApp",
    "PreviewConfig",
    "RenderError",
    "Request",
    "Response",
    "default_registry",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast; converter libraries load on first use.
    """
    if name == "PreviewApp":
        from perch.app import PreviewApp

        return PreviewApp

    if name == "PreviewConfig":
        from perch.config import PreviewConfig

        return PreviewConfig

    if name == "Request":
        from perch.http.request import Request

        return Request

    if name == "Response":
        from perch.http.response import Response

        return Response

    if name in ("ExtensionRegistry", "default_registry"):
        from perch.transforms import registry as _registry

        return getattr(_registry, name)

    if name in ("Middleware", "Next"):
        from perch.middleware import protocol as _mw

        return getattr(_mw, name)

    if name in ("ConfigurationError", "HTTPError", "NotFound", "PerchError", "RenderError"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
