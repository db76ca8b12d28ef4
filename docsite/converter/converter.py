"""Markdown-to-HTML converter that injects rendered pages into a template."""

from __future__ import annotations

import logging
from functools import cached_property
from pathlib import Path

from markdown_it import MarkdownIt

from docsite.config.models import MarkdownConfig, SiteConfig, TemplateConfig
from docsite.converter.models import ConversionResult
from docsite.output.writer import HtmlPageWriter

logger = logging.getLogger(__name__)


class TemplateNotFoundError(FileNotFoundError):
    """Raised when the page template file does not exist."""

    def __init__(self, path: str | Path):
        self.path = str(path)
        super().__init__(f"Template not found: {self.path}")


def _parser(config: MarkdownConfig) -> MarkdownIt:
    return MarkdownIt(config.preset).enable(config.enable)


def render_markdown(text: str, config: MarkdownConfig | None = None) -> str:
    """Render CommonMark text (plus the enabled rules, tables by default) to HTML."""
    return _parser(config or MarkdownConfig()).render(text)


class DocumentConverter:
    """Renders Markdown sources into the page template and writes them out.

    The template is re-read on every conversion so edits show up on the
    next run without restarting anything.
    """

    def __init__(
        self,
        template: TemplateConfig | None = None,
        markdown_config: MarkdownConfig | None = None,
        writer: HtmlPageWriter | None = None,
    ) -> None:
        self._template = template or TemplateConfig()
        self._markdown = markdown_config or MarkdownConfig()
        self._writer = writer or HtmlPageWriter()

    @cached_property
    def _md(self) -> MarkdownIt:
        return _parser(self._markdown)

    @classmethod
    def from_config(cls, config: SiteConfig) -> DocumentConverter:
        return cls(template=config.template, markdown_config=config.markdown)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load_template(self) -> str:
        path = Path(self._template.path)
        if not path.is_file():
            raise TemplateNotFoundError(path)
        return path.read_text(encoding="utf-8")

    def apply_template(self, template: str, html: str) -> tuple[str, bool]:
        """Replace the first placeholder with *html*. Returns (page, substituted)."""
        placeholder = self._template.placeholder
        if placeholder not in template:
            logger.warning(
                "placeholder %r not found in %s; page written without content",
                placeholder,
                self._template.path,
            )
            return template, False
        return template.replace(placeholder, html, 1), True

    def convert(
        self, source: str | Path, target: str | Path, *, dry_run: bool = False
    ) -> ConversionResult:
        """Convert one Markdown file into a templated HTML page at *target*."""
        source = Path(source)
        target = Path(target)

        text = source.read_text(encoding="utf-8")
        html = self._md.render(text)
        # Template is loaded before the target is touched
        template = self.load_template()
        page, substituted = self.apply_template(template, html)

        self._writer.write(target, page, dry_run=dry_run)
        logger.debug("converted %s -> %s", source, target)
        return ConversionResult(
            source_path=str(source),
            target_path=str(target),
            size_bytes=len(page.encode("utf-8")),
            substituted=substituted,
            dry_run=dry_run,
        )


def convert_document(
    source: str | Path, target: str | Path, config: SiteConfig | None = None
) -> ConversionResult:
    """Convert a single document using *config* (defaults when omitted)."""
    converter = DocumentConverter.from_config(config or SiteConfig())
    return converter.convert(source, target)
