"""``perch serve`` and ``perch extensions`` commands."""

import argparse
import sys

from perch.app import PreviewApp
from perch.config import PreviewConfig
from perch.errors import ConfigurationError


def build_config(args: argparse.Namespace) -> PreviewConfig:
    """Turn parsed CLI arguments into a ``PreviewConfig``.

    Flags that were not given fall back to the config defaults.
    """
    defaults = PreviewConfig()
    log_level = args.log_level or ("debug" if args.debug else defaults.log_level)
    return PreviewConfig(
        root=args.root,
        host=args.host if args.host is not None else defaults.host,
        port=args.port if args.port is not None else defaults.port,
        debug=args.debug,
        log_level=log_level,
    )


def run_serve(args: argparse.Namespace) -> None:
    """Start the preview server for ``args.root``."""
    from perch.cli import configure_logging

    config = build_config(args)
    if not config.root_path.is_dir():
        print(f"Error: not a directory: {config.root_path}", file=sys.stderr)
        raise SystemExit(1)

    configure_logging(config.log_level)
    app = PreviewApp(config)
    try:
        app.run()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def list_extensions(args: argparse.Namespace) -> None:
    """Print each transformed extension with the transformer bound to it."""
    from perch.transforms.registry import default_registry

    registry = default_registry(PreviewConfig(root=args.root))
    for extension in registry.extensions():
        factory = registry.resolve(extension)
        func = getattr(factory, "func", factory)
        print(f".{extension:<10} {getattr(func, '__name__', repr(func))}")
