"""Batch build over every configured manifest."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from docsite.config.models import ManifestConfig, SiteConfig
from docsite.converter.converter import DocumentConverter
from docsite.converter.models import BuildReport

logger = logging.getLogger(__name__)


def target_name(filename: str) -> str:
    """Map a source filename to its page filename (``.md`` -> ``.html``)."""
    path = Path(filename)
    if path.suffix == ".md":
        return str(path.with_suffix(".html"))
    return f"{filename}.html"


def resolve_documents(manifest: ManifestConfig) -> list[tuple[Path, Path]]:
    """Return (source, target) pairs for a manifest, in listed order."""
    source_root = Path(manifest.source_dir)
    output_root = Path(manifest.output_dir)
    return [
        (source_root / name, output_root / target_name(name))
        for name in manifest.files
    ]


def run(
    config: SiteConfig,
    *,
    progress: Callable[[str], object] = print,
    dry_run: bool = False,
) -> BuildReport:
    """Convert every present document in every manifest, in order.

    Missing sources are skipped without output. The first failing conversion
    propagates; pages written before it stay on disk.
    """
    converter = DocumentConverter.from_config(config)
    report = BuildReport()

    for manifest in config.manifests:
        for source, target in resolve_documents(manifest):
            if not source.exists():
                logger.debug("skipping missing source %s", source)
                report.skipped.append(str(source))
                continue
            result = converter.convert(source, target, dry_run=dry_run)
            report.converted.append(result)
            verb = "Would convert" if dry_run else "Converted"
            progress(f"{verb} {source} to {target}")

    logger.info(
        "build finished: %d converted, %d skipped",
        report.count,
        len(report.skipped),
    )
    return report
