"""Document conversion subsystem: Markdown to templated HTML."""

from docsite.converter.converter import (
    DocumentConverter,
    TemplateNotFoundError,
    convert_document,
    render_markdown,
)
from docsite.converter.models import BuildReport, ConversionResult

__all__ = [
    "BuildReport",
    "ConversionResult",
    "DocumentConverter",
    "TemplateNotFoundError",
    "convert_document",
    "render_markdown",
]
