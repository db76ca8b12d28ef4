"""CLI entry point for docsite."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from docsite.build import resolve_documents, run
from docsite.config import SiteConfig, load_config
from docsite.config.loader import DEFAULT_CONFIG_TEMPLATE, PROJECT_CONFIG

app = typer.Typer(
    name="docsite",
    help="Render the Markdown documentation corpus to HTML pages.",
)

config_app = typer.Typer(help="Manage docsite configuration.")
app.add_typer(config_app, name="config")

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Global state
_config_path: str | None = None
_config: SiteConfig | None = None


def _get_config() -> SiteConfig:
    """Load the config on first use so `config init` works over a broken file."""
    global _config
    if _config is None:
        try:
            _config = load_config(_config_path)
        except ValueError as e:
            rprint(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        _configure_logging(_config.log_level)
    return _config


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS[level],
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to docsite.yaml")
    ] = None,
) -> None:
    """Global options. With no command, runs `build`."""
    global _config, _config_path
    _config_path = config
    _config = None

    if ctx.invoked_subcommand is None:
        build(dry_run=False)


@app.command()
def build(
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview without writing"),
) -> None:
    """Convert every present document in the manifests."""
    cfg = _get_config()
    try:
        report = run(cfg, progress=typer.echo, dry_run=dry_run)
    except (OSError, UnicodeDecodeError) as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if dry_run:
        rprint(f"[yellow](dry run: {report.count} page(s) not written)[/yellow]")


@app.command()
def manifest() -> None:
    """List every manifest entry and whether its source exists."""
    cfg = _get_config()
    table = Table(title="Manifest")
    table.add_column("Manifest", style="cyan", no_wrap=True)
    table.add_column("Source")
    table.add_column("Target")
    table.add_column("Status", no_wrap=True)
    for entry in cfg.manifests:
        for source, target in resolve_documents(entry):
            status = "[green]present[/green]" if source.exists() else "[dim]missing[/dim]"
            table.add_row(entry.name, str(source), str(target), status)
    rprint(table)


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a default docsite.yaml in the current directory."""
    dest = Path(PROJECT_CONFIG)
    if dest.exists() and not force:
        rprint(f"[yellow]{dest} already exists[/yellow] (use --force to overwrite)")
        raise typer.Exit(1)
    dest.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    rprint(f"[green]Wrote[/green] {dest}")


@config_app.command("show")
def config_show() -> None:
    """Print the effective configuration as YAML."""
    cfg = _get_config()
    text = yaml.safe_dump(cfg.model_dump(), default_flow_style=False, sort_keys=False)
    rprint(Syntax(text, "yaml"))
