#!/usr/bin/env python3
"""
Command-line interface for the handover guide.

Browse the guide's sections from a terminal: list the sidebar, look up a
section, or resolve a search query the way the guide's search box does.

Commands:
    sections - List sections in sidebar order
    show     - Show one section's title, subtitle and keywords
    search   - Resolve a search query to a section
    browse   - Interactive single-view session (sidebar + search box)
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from loguru import logger

from handover.contexts.navigation import (
    CatalogConfigError,
    NavigationController,
    NavigationSession,
    SectionCatalog,
    UnknownSectionError,
    explain_match,
    load_catalog,
)
from handover.contexts.navigation.logger import setup_navigation_logger
from handover.utils.logger import session_log_dir

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Browse the handover guide's sections",
    invoke_without_command=True,
)

CatalogOption = typer.Option(
    None,
    "--catalog",
    "-c",
    help="Catalog YAML (defaults to SECTION_CATALOG_PATH, then the bundled catalog)",
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    # Library debug logging stays off unless a session log is requested
    logger.remove()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load(catalog_path: Optional[Path]) -> SectionCatalog:
    """Load catalog or exit with a readable error."""
    try:
        return load_catalog(catalog_path)
    except CatalogConfigError as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _echo_view(catalog: SectionCatalog, section_id) -> None:
    """Print the header of the active section, as the guide's main panel would."""
    section = catalog.get(section_id)
    typer.secho(f"\n# {section.label}", fg=typer.colors.BLUE, bold=True)
    if section.subtitle:
        typer.echo(f"  {section.subtitle}")


@app.command("sections")
def sections_command(catalog_path: Optional[Path] = CatalogOption):
    """
    List sections in sidebar order.

    The landing section is marked with '*'.
    """
    catalog = _load(catalog_path)

    typer.secho(f"\n{len(catalog)} section(s)", fg=typer.colors.BLUE, bold=True)
    width = max(len(section_id.value) for section_id in catalog.all_ids())

    for section in catalog:
        marker = "*" if section.id == catalog.landing else " "
        typer.echo(f" {marker} {section.id.value:<{width}}  {section.label}")


@app.command("show")
def show_command(
    section_id: str = typer.Argument(..., help="Section id (e.g., income)"),
    catalog_path: Optional[Path] = CatalogOption,
):
    """Show one section's title, subtitle and search keywords."""
    catalog = _load(catalog_path)

    try:
        section = catalog.get(section_id)
    except UnknownSectionError as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _echo_view(catalog, section.id)
    typer.echo(f"\n  id: {section.id.value}")
    typer.echo(f"  keywords: {', '.join(section.keywords) if section.keywords else '(none)'}")


@app.command("search")
def search_command(
    query: List[str] = typer.Argument(..., help="Search text (multiple words allowed)"),
    explain: bool = typer.Option(
        False, "--explain", "-e", help="Show which rule and text produced the match"
    ),
    catalog_path: Optional[Path] = CatalogOption,
):
    """
    Resolve a search query to a section.

    Exits with code 1 when nothing matches.

    Examples:\n

        $ guide.py search 수입

        $ guide.py search 이번달 수입 정리 --explain
    """
    catalog = _load(catalog_path)
    text = " ".join(query)

    match = explain_match(catalog, text)

    if match is None:
        typer.secho(f'No section matches "{text}"', fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{match.section_id.value}\t{catalog.label_of(match.section_id)}")
    if explain:
        typer.echo(f"  rule: {match.rule.value}")
        typer.echo(f"  matched: {match.matched_text}")


@app.command("browse")
def browse_command(
    catalog_path: Optional[Path] = CatalogOption,
    log: bool = typer.Option(
        False, "--log", help=f"Keep a session log under {LOGS_PATH}/browse_<timestamp>/"
    ),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", help="Keep a session log in this directory instead"
    ),
):
    """
    Interactive guide session.

    Type a search query to jump to a matching section, ':go ID' to open a section
    directly, ':list' to show the sidebar, or ':quit' to leave.
    """
    catalog = _load(catalog_path)

    if log and log_dir is None:
        log_dir = session_log_dir("browse", LOGS_PATH)

    if log_dir is not None:
        log_file = setup_navigation_logger(log_dir, catalog_path=catalog_path)
        typer.echo(f"Logging to {log_file}")

    session = NavigationSession(NavigationController(catalog))
    _echo_view(catalog, session.active_section)

    while True:
        try:
            line = typer.prompt("\nsearch", default="", show_default=False)
        except (EOFError, typer.Abort):
            break

        line = line.strip()
        if not line:
            continue
        if line in (":quit", ":q"):
            break

        if line == ":list":
            for section in catalog:
                marker = ">" if section.id == session.active_section else " "
                typer.echo(f" {marker} {section.id.value}  {section.label}")
            continue

        if line.startswith(":go"):
            target = line[len(":go"):].strip()
            try:
                session.set_active(target)
            except UnknownSectionError as e:
                typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
                continue
            _echo_view(catalog, session.active_section)
            continue

        if session.resolve_and_activate(line) is None:
            typer.secho(f'Not found: "{line}"', fg=typer.colors.YELLOW)
            continue

        _echo_view(catalog, session.active_section)

    typer.echo("Bye")


if __name__ == "__main__":
    app()
