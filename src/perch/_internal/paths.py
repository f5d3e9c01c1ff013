"""Mapping URL paths onto the content root."""

from pathlib import Path

from perch.errors import Forbidden


def resolve_request_path(root: Path, url_path: str) -> Path:
    """Join a decoded URL path to *root* and resolve it.

    Resolves symlinks and verifies the final path is within *root*.

    Raises:
        Forbidden: If the resolved path escapes the content root.
    """
    relative = url_path.lstrip("/")
    path = (root / relative).resolve() if relative else root
    if not path.is_relative_to(root):
        raise Forbidden(f"Path escapes the content root: {url_path}")
    return path
