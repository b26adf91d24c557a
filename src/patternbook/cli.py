"""
Patternbook Command Line Interface.

This module provides the CLI entry point for browsing the pattern
catalog, running demos and running the pattern sanity checks.
"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from patternbook.version import __version__

console = Console()

STATUS_STYLES = {
    "pass": "[green]PASS[/green]",
    "fail": "[red]FAIL[/red]",
    "error": "[yellow]ERROR[/yellow]",
}


def _configure_logging(logging_config, verbose: bool = False, debug: bool = False) -> None:
    """Configure logging from LoggingConfig.

    --verbose forces INFO and debug mode forces DEBUG when the configured
    level is quieter. The optional log file is attached to the
    ``patternbook`` logger, replacing any file handler from an earlier call.

    Raises:
        OSError: If the log file cannot be opened
    """
    level = logging_config.level.to_logging_level()
    if verbose:
        level = min(level, logging.INFO)
    if debug:
        level = logging.DEBUG

    logging.basicConfig(level=level, format=logging_config.format)

    package_logger = logging.getLogger("patternbook")
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        if isinstance(handler, logging.FileHandler):
            package_logger.removeHandler(handler)
            handler.close()

    if logging_config.file:
        file_handler = logging.FileHandler(logging_config.file)
        file_handler.setFormatter(logging.Formatter(logging_config.format))
        package_logger.addHandler(file_handler)


@click.group()
@click.version_option(version=__version__, prog_name="patternbook")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to configuration file",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Optional[str]) -> None:
    """Patternbook: a catalog of classic object-oriented design patterns.

    Browse creational, structural and behavioral patterns, read their
    write-ups, run their demos and check that each one behaves as the
    pattern says it should.
    """
    from patternbook.catalog import PatternLoadError, load_builtin_patterns, load_modules
    from patternbook.config import ConfigurationError, load_config, load_config_from_env

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    try:
        cfg = load_config(config_path) if config_path else load_config_from_env()
    except (ConfigurationError, FileNotFoundError) as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        sys.exit(1)

    try:
        _configure_logging(cfg.logging, verbose=verbose, debug=cfg.debug)
    except OSError as e:
        console.print(f"[red]Configuration error:[/red] cannot open log file: {escape(str(e))}")
        sys.exit(1)
    ctx.obj["config"] = cfg

    try:
        load_builtin_patterns()
        load_modules(cfg.catalog.extra_modules)
    except PatternLoadError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


def _enabled_entries(ctx: click.Context, category: Optional[str] = None) -> list:
    """Registered entries in enabled categories, optionally one category."""
    from patternbook.catalog import get_registry
    from patternbook.models import PatternCategory

    enabled = set(ctx.obj["config"].catalog.categories)
    entries = get_registry().list_registered(
        PatternCategory(category) if category else None
    )
    return [e for e in entries if e.category in enabled]


def _lookup(name: str):
    """Look up a pattern or exit with suggestions."""
    from patternbook.catalog import PatternNotFoundError, get_pattern

    try:
        return get_pattern(name)
    except PatternNotFoundError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        console.print("[dim]Run 'patternbook list' to see available patterns.[/dim]")
        sys.exit(1)


@main.command(name="list")
@click.option(
    "--category",
    type=click.Choice(["creational", "structural", "behavioral"]),
    default=None,
    help="Only list patterns from this category",
)
@click.pass_context
def list_patterns(ctx: click.Context, category: Optional[str]) -> None:
    """List patterns in the catalog."""
    from patternbook.models import PatternCategory

    entries = _enabled_entries(ctx, category)
    if not entries:
        console.print("[yellow]No patterns match.[/yellow]")
        return

    table = Table(title="Design Patterns", show_header=True)
    table.add_column("Pattern", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Intent", style="green")
    for entry in sorted(entries, key=lambda e: (list(PatternCategory).index(e.category), e.slug)):
        table.add_row(entry.slug, entry.category.value, entry.doc.intent)
    console.print(table)
    console.print(f"[dim]{len(entries)} patterns[/dim]")


@main.command()
@click.argument("name")
@click.option(
    "--source/--no-source",
    default=None,
    help="Include the pattern's source code",
)
@click.pass_context
def show(ctx: click.Context, name: str, source: Optional[bool]) -> None:
    """Show the write-up for a pattern.

    NAME is a pattern slug, display name or alias.
    """
    from patternbook.catalog import get_source

    entry = _lookup(name)
    doc = entry.doc
    display = ctx.obj["config"].display

    header = f"[bold blue]{doc.name}[/bold blue] [dim]({doc.category.value})[/dim]"
    if doc.aliases:
        header += f"\n[dim]Also known as: {', '.join(doc.aliases)}[/dim]"
    console.print(Panel(f"{header}\n\n{doc.intent}", title=doc.slug))

    if doc.motivation:
        console.print("[bold]Motivation[/bold]")
        console.print(f"  {doc.motivation}")
        console.print()

    if doc.participants:
        console.print("[bold]Participants[/bold]")
        for participant in doc.participants:
            console.print(f"  - {participant}")
        console.print()

    if doc.consequences:
        console.print("[bold]Consequences[/bold]")
        for consequence in doc.consequences:
            console.print(f"  - {consequence}")
        console.print()

    if doc.related:
        console.print(f"[bold]Related:[/bold] {', '.join(doc.related)}")
        console.print()

    if doc.faq:
        console.print("[bold]FAQ[/bold]")
        for item in doc.faq:
            console.print(f"  [cyan]Q:[/cyan] {item.question}")
            console.print(f"  [green]A:[/green] {item.answer}")
        console.print()

    show_source = display.show_source if source is None else source
    if show_source:
        try:
            code = get_source(entry)
        except (OSError, ValueError) as e:
            console.print(f"[yellow]Source unavailable:[/yellow] {e}")
        else:
            console.print(
                Syntax(code, "python", theme=display.theme, line_numbers=display.line_numbers)
            )


@main.command()
@click.argument("name")
@click.pass_context
def demo(ctx: click.Context, name: str) -> None:
    """Run a pattern's demo and print its output.

    NAME is a pattern slug, display name or alias.
    """
    from patternbook.catalog import run_demo

    entry = _lookup(name)
    try:
        result = run_demo(entry)
    except Exception as e:
        console.print(f"[red]Demo failed:[/red] {escape(str(e))}")
        if ctx.obj.get("verbose"):
            console.print_exception()
        sys.exit(1)

    console.print(Panel(f"[bold blue]{entry.name}[/bold blue] demo", title=entry.slug))
    for line in result.lines:
        console.print(line, highlight=False, markup=False)
    if ctx.obj.get("verbose"):
        console.print(f"[dim]{result.duration_ms:.1f} ms[/dim]")


@main.command()
@click.argument("names", nargs=-1)
@click.pass_context
def check(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Run pattern sanity checks.

    With no NAMES, checks every pattern in the enabled categories.
    Exits with status 1 if any check fails.
    """
    from patternbook.catalog import run_all_checks

    entries = [_lookup(name) for name in names] if names else _enabled_entries(ctx)
    report = run_all_checks(entries)

    table = Table(title="Pattern Checks", show_header=True)
    table.add_column("Pattern", style="cyan")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Detail", style="dim")
    for result in report.results:
        table.add_row(result.slug, result.name, STATUS_STYLES[result.status.value], escape(result.message))
    console.print(table)

    summary = f"{report.passed} passed, {report.failed} failed, {report.errored} errors"
    if report.ok:
        console.print(f"[green]{summary}[/green]")
    else:
        console.print(f"[red]{summary}[/red]")
        sys.exit(1)


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Display current configuration."""
    from patternbook.config import get_loader

    cfg = ctx.obj["config"]
    loader = get_loader()
    source = loader.loaded_from_path if loader and loader.loaded_from_path else "defaults"

    console.print(
        Panel(
            f"[bold blue]Patternbook Configuration[/bold blue]\n[dim]Loaded from: {source}[/dim]",
            title="Configuration",
        )
    )

    console.print("[bold]Catalog[/bold]")
    console.print(f"  Categories: {', '.join(c.value for c in cfg.catalog.categories) or '(none)'}")
    console.print(f"  Extra Modules: {', '.join(cfg.catalog.extra_modules) or '(none)'}")
    console.print()

    console.print("[bold]Display[/bold]")
    console.print(f"  Show Source: {cfg.display.show_source}")
    console.print(f"  Theme: {cfg.display.theme}")
    console.print(f"  Line Numbers: {cfg.display.line_numbers}")
    console.print()

    console.print("[bold]Logging[/bold]")
    console.print(f"  Level: {cfg.logging.level.value}")
    console.print(f"  File: {cfg.logging.file or '(none)'}")
    console.print()

    console.print(f"[bold]Debug:[/bold] {cfg.debug}")


if __name__ == "__main__":
    main()
