"""Preview server configuration.

PreviewConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class PreviewConfig:
    """Preview server configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = PreviewConfig(root="site", port=3000, debug=True)
    """

    # Content root; layout and partial search never ascends above it
    root: str | Path = "."

    # Server
    host: str = "127.0.0.1"
    port: int = 4000
    debug: bool = False

    # Templates
    template_extension: str = "kida"
    autoescape: bool = False
    trim_blocks: bool = False
    lstrip_blocks: bool = False

    # Directory requests try these first, then index.<ext> for every
    # registered transform extension
    index_files: tuple[str, ...] = ("index.html", "index.htm")

    # Markdown (patitas)
    markdown_plugins: tuple[str, ...] = ("all",)
    markdown_highlight: bool = False

    # Sass (libsass)
    sass_output_style: str = "expanded"

    # Logging
    log_level: str = "info"

    @property
    def root_path(self) -> Path:
        """The content root as an absolute, symlink-resolved path."""
        return Path(self.root).resolve()
