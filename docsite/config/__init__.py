from .loader import load_config
from .models import (
    ManifestConfig,
    MarkdownConfig,
    SiteConfig,
    TemplateConfig,
)

__all__ = [
    "ManifestConfig",
    "MarkdownConfig",
    "SiteConfig",
    "TemplateConfig",
    "load_config",
]
