"""Pydantic models for the conversion subsystem."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
    """Result of converting one Markdown document to an HTML page."""

    source_path: str
    target_path: str
    size_bytes: int
    substituted: bool = True  # False when the template had no placeholder
    dry_run: bool = False


class BuildReport(BaseModel):
    """Outcome of a full run over every manifest."""

    converted: list[ConversionResult] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.converted)
