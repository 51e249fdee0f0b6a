"""CLI interface for localelint using Typer framework."""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from localelint import __description__, __version__
from localelint.config import ConfigError, LocalelintConfig, LogLevel, load_config
from localelint.discovery import read_changed_files
from localelint.report import ReportFormatError, ValidationReport, render_comment, render_load_failure
from localelint.runner import validate_paths
from localelint.validation import ValidationEngine

app = typer.Typer(
    name="localelint",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

LOG_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"localelint version {__version__}")
        raise typer.Exit()


def _configure_logging(level: str | LogLevel) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("localelint").setLevel(LOG_LEVELS[LogLevel(level).value])


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Log level: error, warn, info, debug (default: from config)")
    ] = None,
) -> None:
    """localelint - Rule-based validator for locale string-resource files."""
    if log_level is not None and log_level not in LOG_LEVELS:
        console.print(f"[red]Error:[/red] Invalid log level '{log_level}'. Must be one of: {', '.join(LOG_LEVELS)}")
        raise typer.Exit(2)

    ctx.obj = {"log_level": log_level}


def _load_config_or_exit(config: Path | None) -> LocalelintConfig:
    try:
        return load_config(config)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _build_engine(
    config: LocalelintConfig,
    enable_rule: list[str] | None,
    disable_rule: list[str] | None,
) -> ValidationEngine:
    engine = ValidationEngine(config)
    engine.create_default_rules()

    toggles = [(name, True) for name in enable_rule or []] + [(name, False) for name in disable_rule or []]
    for name, enabled in toggles:
        try:
            engine.set_enabled(name, enabled)
        except KeyError:
            valid_rules = [rule.name for rule in engine.rules]
            console.print(f"[red]Error:[/red] Unknown rule '{name}'. Must be one of: {', '.join(valid_rules)}")
            raise typer.Exit(2)

    return engine


def _print_table(report: ValidationReport) -> None:
    if not report.results:
        console.print("[yellow]No JSON files to validate[/yellow]")
        return

    status_color = "green" if report.success else "red"
    console.print(f"[{status_color}]Validation Status: {'PASS' if report.success else 'FAIL'}[/{status_color}]")
    console.print(f"Exit Code: {report.exit_code}")

    counter_table = Table()
    counter_table.add_column("Metric", style="cyan")
    counter_table.add_column("Count", style="white", justify="right")
    for key, value in report.counters.items():
        counter_table.add_row(key.title(), str(value))
    console.print(counter_table)

    results_table = Table()
    results_table.add_column("File", style="cyan")
    results_table.add_column("Status", style="white")
    results_table.add_column("Issues", style="white")

    for result in report.results:
        if result.success:
            results_table.add_row(escape(result.file), "[green]PASS[/green]", "")
        else:
            issues = "\n".join(escape(error) for error in result.errors)
            results_table.add_row(escape(result.file), "[red]FAIL[/red]", issues)

    console.print(results_table)


@app.command()
def validate(
    ctx: typer.Context,
    paths: Annotated[
        Optional[list[str]],
        typer.Argument(help="Locale files or directories to validate")
    ] = None,
    files_from: Annotated[
        Optional[str],
        typer.Option("--files-from", help="File listing changed paths, one per line ('-' for stdin)")
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Results file path (default: validation-results.json)")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json, markdown (default: table)")
    ] = "table",
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .localelint.json)")
    ] = None,
    jobs: Annotated[
        Optional[int],
        typer.Option("--jobs", "-j", help="Validate files on this many threads")
    ] = None,
    enable_rule: Annotated[
        Optional[list[str]],
        typer.Option("--enable-rule", help="Enable a rule by name (repeatable)")
    ] = None,
    disable_rule: Annotated[
        Optional[list[str]],
        typer.Option("--disable-rule", help="Disable a rule by name (repeatable)")
    ] = None,
) -> None:
    """Validate locale files and write the results file."""
    valid_formats = ["table", "json", "markdown"]

    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(2)

    if jobs is not None and jobs < 1:
        console.print("[red]Error:[/red] --jobs must be >= 1")
        raise typer.Exit(2)

    localelint_config = _load_config_or_exit(config)
    log_level = (ctx.obj or {}).get("log_level") or localelint_config.logging.level
    _configure_logging(log_level)

    engine = _build_engine(localelint_config, enable_rule, disable_rule)

    candidate_paths: list[str] = list(paths or [])
    if files_from:
        try:
            candidate_paths.extend(read_changed_files(files_from))
        except OSError as e:
            console.print(f"[red]Error:[/red] Cannot read changed files list: {escape(str(e))}")
            raise typer.Exit(1)

    report = validate_paths(candidate_paths, localelint_config, jobs=jobs, engine=engine)

    results_path = output or Path(localelint_config.output.results_file)
    try:
        report.write(results_path)
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot write results file: {escape(str(e))}")
        raise typer.Exit(1)

    if format == "json":
        typer.echo(report.to_json())
    elif format == "markdown":
        typer.echo(render_comment(report, ", ".join(localelint_config.discovery.include)))
    else:
        _print_table(report)

    raise typer.Exit(report.exit_code)


@app.command()
def rules(
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .localelint.json)")
    ] = None,
) -> None:
    """List validation rules and whether they are enabled."""
    engine = ValidationEngine(_load_config_or_exit(config))
    engine.create_default_rules()

    table = Table(title="Validation Rules")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Category", style="white")
    table.add_column("Enabled", style="white")
    table.add_column("Description", style="dim")

    for rule in engine.rules:
        enabled = "[green]yes[/green]" if rule.enabled else "[yellow]no[/yellow]"
        table.add_row(rule.name, rule.category.value, enabled, escape(rule.description))

    console.print(table)


@app.command()
def comment(
    results_file: Annotated[
        Path,
        typer.Argument(help="Results file written by 'localelint validate'")
    ] = Path("validation-results.json"),
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the comment to this file instead of stdout")
    ] = None,
    pattern: Annotated[
        str,
        typer.Option("--pattern", help="Expected file pattern shown when no files were validated")
    ] = "**/*.json",
) -> None:
    """Render the Markdown pull request comment for a results file."""
    try:
        body = render_comment(ValidationReport.load(results_file), pattern)
    except (OSError, ReportFormatError) as e:
        body = render_load_failure(e)

    if output:
        output.write_text(body, encoding="utf-8")
        console.print(f"[green]Comment written to:[/green] {output}")
    else:
        typer.echo(body)


if __name__ == "__main__":
    app()
