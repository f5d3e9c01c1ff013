"""Layout discovery for template files.

A content file is wrapped by the nearest ``_layout.<ext>`` found by
walking up from its directory.  The content root itself is checked;
nothing above it ever is.
"""

from pathlib import Path

LAYOUT_STEM = "_layout"


def layout_name(extension: str) -> str:
    """File name of a layout for the given template extension."""
    return f"{LAYOUT_STEM}.{extension}"


def find_layout(root: Path, path: Path, extension: str) -> Path | None:
    """Return the closest-ancestor layout for *path*, or ``None``.

    Re-executed on every call; layouts may appear or disappear between
    requests.

    Args:
        root: Absolute content root.
        path: Absolute path of the content file.
        extension: Template extension (without the dot).
    """
    directory = path.parent
    if not directory.is_relative_to(root):
        return None

    name = layout_name(extension)
    while True:
        candidate = directory / name
        if candidate.is_file():
            return candidate
        if directory == root:
            return None
        directory = directory.parent
