"""docsite: render a Markdown documentation corpus to templated HTML pages."""

__version__ = "0.1.0"
