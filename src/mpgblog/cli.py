"""
Command line interface for the MPGCalculator.net blog generator.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlsplit

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .api import IndexNowError, submit_urls
from .config import ConfigError, SiteConfig, get_settings, load_config
from .content import ArticleLibrary, ContentError, load_article
from .web import BuildReport, generate_site, resolve_content_dir, resolve_web_root, sitemap_urls
from .widgets import build_share_links, resolve_share_url

console = Console()
app = typer.Typer(help="Build and publish the MPGCalculator.net blog.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level_name: str) -> None:
    env_override = os.getenv("MPGBLOG_LOG_LEVEL")
    level_str = (env_override or level_name or "info").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_existing_file(value: Path) -> Path:
    """Ensure a path exists, is a file, and return it absolute."""
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No file found at {resolved}")
    if not resolved.is_file():
        raise typer.BadParameter(f"Path must be a file, got directory: {resolved}")
    return resolved


def _load_config_or_exit(path: Path) -> SiteConfig:
    try:
        return load_config(path)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _load_library_or_exit(config: SiteConfig) -> ArticleLibrary:
    try:
        return ArticleLibrary.from_directory(resolve_content_dir(config))
    except ContentError as exc:
        console.print(f"[bold red]Content error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _print_build_report(report: BuildReport) -> None:
    table = Table(title="Build Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, value)
    console.print(table)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show mpgblog version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]mpgblog[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            "[bold yellow]mpgblog[/] is ready. Run [cyan]mpgblog build --config path/to/site.toml[/] "
            "to render the blog.",
        )


@app.command()
def build(
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to the site configuration TOML file.",
        callback=_resolve_existing_file,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Validate configuration and content without writing files.",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Rewrite the favicon even if it already exists.",
    ),
) -> None:
    """
    Render the blog hub, category pages, articles, admin page, sitemap and robots.txt.
    """
    logger.info("Loading configuration from %s", config)
    site_config = _load_config_or_exit(config)
    library = _load_library_or_exit(site_config)
    logger.info("Loaded %d article(s) in %d categories", len(library), len(library.categories()))

    summary_table = Table(title="Site Configuration Summary")
    summary_table.add_column("Key")
    summary_table.add_column("Value", overflow="fold")
    summary_table.add_row("Site origin", get_settings().site_origin)
    summary_table.add_row("Categories", str(len(site_config.categories)))
    summary_table.add_row("Articles", str(len(library)))
    summary_table.add_row("Web root", str(resolve_web_root(site_config)))
    summary_table.add_row("Config hash", site_config.hash)
    console.print(summary_table)

    if dry_run:
        console.print("[bold blue]Dry run complete.[/] No filesystem changes made.")
        return

    report = generate_site(site_config, library=library, force=force)
    _print_build_report(report)
    if report.skipped_articles:
        console.print("[bold yellow]Some articles reference unknown categories:[/]")
        for url in report.skipped_articles:
            console.print(f"- {url}")
    console.print("[bold green]Site built.[/]")


@app.command("config-hash")
def config_hash(
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to configuration TOML.",
        callback=_resolve_existing_file,
    ),
) -> None:
    """
    Output the deterministic hash of a config file for change detection.
    """
    site_config = _load_config_or_exit(config)
    console.print(f"[bold green]{site_config.hash}[/]")


@app.command()
def toc(
    article: Path = typer.Argument(..., help="Article Markdown file.", callback=_resolve_existing_file),
) -> None:
    """
    Show the table of contents an article will render with.
    """
    try:
        loaded = load_article(article)
    except ContentError as exc:
        console.print(f"[bold red]Content error:[/] {exc}")
        raise typer.Exit(code=1) from exc

    table = Table(title=f"{loaded.meta.toc_title}: {loaded.title}")
    table.add_column("Anchor")
    table.add_column("Title", overflow="fold")
    table.add_column("Level", justify="right")
    for entry in loaded.toc_entries:
        table.add_row(f"#{entry.id}", entry.title, str(entry.level))
    console.print(table)


@app.command("share-links")
def share_links(
    url: str = typer.Option(..., "--url", "-u", help="Site-relative URL, e.g. /blog/road-trips/route-66."),
    title: str = typer.Option(..., "--title", "-t", help="Page title."),
    description: str = typer.Option("", "--description", "-d", help="Optional page description."),
    origin: Optional[str] = typer.Option(None, "--origin", help="Override the configured site origin."),
) -> None:
    """
    Print the outbound share link for every supported service.
    """
    if not url.startswith("/"):
        raise typer.BadParameter("URL must be site-relative and start with '/'.", param_hint="--url")
    table = Table(title=resolve_share_url(url, origin))
    table.add_column("Service")
    table.add_column("Link", overflow="fold")
    for link in build_share_links(url, title, description, origin=origin):
        table.add_row(link.label, link.href)
    console.print(table)


@app.command()
def indexnow(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Site configuration; every URL in <web_root>/sitemap.xml is submitted.",
    ),
    url: List[str] = typer.Option(
        None,
        "--url",
        help="Absolute URL to submit (multiple allowed).",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="List what would be submitted without contacting IndexNow.",
    ),
) -> None:
    """
    Submit built or explicitly listed URLs to search engines via IndexNow.
    """
    settings = get_settings()
    urls: List[str] = list(url or [])
    if config is not None:
        site_config = _load_config_or_exit(_resolve_existing_file(config))
        sitemap = resolve_web_root(site_config) / "sitemap.xml"
        if not sitemap.exists():
            console.print(f"[bold red]No sitemap at {sitemap}.[/] Run [cyan]mpgblog build[/] first.")
            raise typer.Exit(code=1)
        urls.extend(sitemap_urls(sitemap.read_text(encoding="utf-8")))

    if not urls:
        console.print("[bold yellow]Nothing to submit.[/] Pass --config or --url.")
        raise typer.Exit(code=1)

    if dry_run:
        for item in urls:
            console.print(f"- {item}")
        console.print(f"[bold blue]Dry run complete.[/] {len(urls)} URL(s) would be submitted.")
        return

    if not settings.indexnow_key:
        console.print("[bold red]INDEXNOW_KEY is not set.[/]")
        raise typer.Exit(code=1)

    host = urlsplit(settings.site_origin).netloc
    try:
        result = submit_urls(urls, host=host, key=settings.indexnow_key)
    except IndexNowError as exc:
        console.print(f"[bold red]{exc}[/]")
        raise typer.Exit(code=1) from exc

    if not result.sent:
        console.print("[bold red]No valid URLs to submit.[/]")
        raise typer.Exit(code=1)
    console.print(f"[bold green]Submitted {len(result.submitted)} URL(s) to IndexNow[/] (status {result.status_code}).")
    if result.rejected:
        console.print(f"[yellow]Skipped {len(result.rejected)} URL(s) not on {host}.[/]")


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
