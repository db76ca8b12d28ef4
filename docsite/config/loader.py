"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import SiteConfig

PROJECT_CONFIG = "docsite.yaml"


def load_config(cli_path: str | None = None) -> SiteConfig:
    """Load config with resolution order: CLI > project-local > defaults.

    An explicit path always wins, even when empty; a missing one is an error.
    """
    if cli_path:
        path = Path(cli_path)
        if not path.exists():
            raise ValueError(f"Config file not found: {cli_path}")
        return _load_file(path)

    local = Path(PROJECT_CONFIG)
    if local.exists():
        return _load_file(local)
    return SiteConfig()


def _load_file(path: Path) -> SiteConfig:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return SiteConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping")
    try:
        return SiteConfig(**_expand_env_vars(raw))
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `docsite config init`
DEFAULT_CONFIG_TEMPLATE = """\
# docsite.yaml

# Page template, read fresh for every document
template:
  path: "src/template.html"
  placeholder: "{{content}}"

# Markdown renderer: markdown-it preset plus extra rules
markdown:
  preset: "commonmark"         # commonmark | default | zero
  enable: [table]

# Documents to build, in order. Missing sources are skipped.
manifests:
  - name: guidelines
    source_dir: "src/guidelines"
    output_dir: "docs/guidelines"
    files:
      - 01-component-guidelines.md
      - 02-scss-guidelines.md
      - 03-template-guidelines.md
      - 04-store-ngrx-guidelines.md
      - 05-services-guidelines.md
      - 06-directives-pipes-guidelines.md
  - name: process
    source_dir: "src/process"
    output_dir: "docs/process"
    files:
      - pr-submission-process.md

# Logging
log_level: "warn"              # debug | info | warn | error
"""
