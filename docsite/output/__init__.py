"""Output subsystem: writes rendered HTML pages."""

from docsite.output.writer import HtmlPageWriter, ensure_directory

__all__ = [
    "HtmlPageWriter",
    "ensure_directory",
]
