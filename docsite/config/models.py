from pydantic import BaseModel, Field, model_validator
from typing import Literal

from markdown_it import MarkdownIt


GUIDELINE_FILES = [
    "01-component-guidelines.md",
    "02-scss-guidelines.md",
    "03-template-guidelines.md",
    "04-store-ngrx-guidelines.md",
    "05-services-guidelines.md",
    "06-directives-pipes-guidelines.md",
]

PROCESS_FILES = ["pr-submission-process.md"]


class TemplateConfig(BaseModel):
    path: str = "src/template.html"
    placeholder: str = Field(default="{{content}}", min_length=1)


class MarkdownConfig(BaseModel):
    preset: Literal["commonmark", "default", "zero"] = "commonmark"
    enable: list[str] = Field(default_factory=lambda: ["table"])

    @model_validator(mode="after")
    def _check_rules(self) -> "MarkdownConfig":
        # markdown-it raises ValueError for rule names it does not know
        try:
            MarkdownIt(self.preset).enable(self.enable)
        except ValueError as e:
            raise ValueError(f"unknown markdown rule in {self.enable}: {e}") from e
        return self


class ManifestConfig(BaseModel):
    name: str
    source_dir: str
    output_dir: str
    files: list[str] = Field(default_factory=list)


def _default_manifests() -> list[ManifestConfig]:
    return [
        ManifestConfig(
            name="guidelines",
            source_dir="src/guidelines",
            output_dir="docs/guidelines",
            files=list(GUIDELINE_FILES),
        ),
        ManifestConfig(
            name="process",
            source_dir="src/process",
            output_dir="docs/process",
            files=list(PROCESS_FILES),
        ),
    ]


class SiteConfig(BaseModel):
    template: TemplateConfig = Field(default_factory=TemplateConfig)
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    manifests: list[ManifestConfig] = Field(default_factory=_default_manifests)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
