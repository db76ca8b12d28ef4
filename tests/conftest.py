"""Shared test fixtures for docsite."""

import pytest

from docsite.config.models import ManifestConfig, SiteConfig, TemplateConfig

TEMPLATE = (
    "<!DOCTYPE html>\n"
    "<html>\n<head><title>Docs</title></head>\n"
    "<body>\n<main>{{content}}</main>\n</body>\n</html>\n"
)


@pytest.fixture
def template_text():
    return TEMPLATE


@pytest.fixture
def site_dir(tmp_path):
    """A temp site: template plus two guideline sources and one process source."""
    src = tmp_path / "src"
    (src / "guidelines").mkdir(parents=True)
    (src / "process").mkdir()
    (src / "template.html").write_text(TEMPLATE, encoding="utf-8")
    (src / "guidelines" / "01-component-guidelines.md").write_text(
        "# Components\n\nKeep them *small*.\n", encoding="utf-8"
    )
    (src / "guidelines" / "03-template-guidelines.md").write_text(
        "# Templates\n\n- no logic\n- use pipes\n", encoding="utf-8"
    )
    (src / "process" / "pr-submission-process.md").write_text(
        "# PR Process\n\nOpen a **draft** first.\n", encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def site_config(site_dir):
    """Config pointing at site_dir with absolute roots."""
    return SiteConfig(
        template=TemplateConfig(path=str(site_dir / "src" / "template.html")),
        manifests=[
            ManifestConfig(
                name="guidelines",
                source_dir=str(site_dir / "src" / "guidelines"),
                output_dir=str(site_dir / "docs" / "guidelines"),
                files=[
                    "01-component-guidelines.md",
                    "02-scss-guidelines.md",
                    "03-template-guidelines.md",
                ],
            ),
            ManifestConfig(
                name="process",
                source_dir=str(site_dir / "src" / "process"),
                output_dir=str(site_dir / "docs" / "process"),
                files=["pr-submission-process.md"],
            ),
        ],
    )


@pytest.fixture
def sample_config():
    return SiteConfig()
