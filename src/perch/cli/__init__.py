"""Perch CLI — preview a directory, list transform extensions.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import logging
import sys

LOG_LEVELS = ("debug", "info", "warning", "error")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch — preview a hand-written site with on-the-fly transforms.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch serve ------------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Preview a directory over HTTP")
    serve_parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Content root (default: current directory)",
    )
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument(
        "--debug",
        action="store_true",
        help="Verbose logging (same as --log-level debug)",
    )
    serve_parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Logging threshold (default: info)",
    )

    # -- perch extensions -------------------------------------------------
    ext_parser = subparsers.add_parser(
        "extensions", help="List the file extensions that are transformed"
    )
    ext_parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Content root (default: current directory)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from perch.cli._serve import run_serve

        run_serve(args)
    elif args.command == "extensions":
        from perch.cli._serve import list_extensions

        list_extensions(args)


def configure_logging(level: str) -> None:
    """Route ``perch.*`` loggers to stderr at *level*."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        stream=sys.stderr,
    )
