"""HtmlPageWriter: writes rendered pages to disk."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_directory(path: str | Path) -> Path:
    """Create *path* and any missing parents. No-op if it already exists.

    Raises OSError when a regular file sits at *path* or one of its parents.
    """
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


class HtmlPageWriter:
    """Writes HTML pages to disk, creating parent directories on demand."""

    def write(self, dest: str | Path, html: str, *, dry_run: bool = False) -> Path:
        """Write a single page, overwriting any existing file.

        Returns the Path of the written (or would-be) file.
        """
        dest = Path(dest)

        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return dest

        ensure_directory(dest.parent)
        dest.write_text(html, encoding="utf-8")
        logger.info("wrote %s (%d bytes)", dest, len(html.encode("utf-8")))
        return dest
