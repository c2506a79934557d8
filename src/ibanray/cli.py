from __future__ import annotations

import sys
import json
import logging
import pathlib
from typing import List, Optional

import typer
import structlog
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import load_config, RayConfig
from .countries import countries as supported_countries
from .engine.formatter import format_iban
from .engine.pipeline import CheckResult, check_many

console = Console(soft_wrap=True)
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="ibanray — IBAN validator and formatter")


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"ibanray {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to .ibanray.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr)
    structlog.configure(
        processors=[structlog.processors.add_log_level, structlog.processors.JSONRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO if verbose else logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
    try:
        cfg = load_config(config) if config else RayConfig()
    except (OSError, yaml.YAMLError, ValidationError) as e:
        console.print(f"[red]Invalid config {config}: {escape(str(e))}[/red]")
        raise typer.Exit(code=2)
    ctx.obj = {"config": cfg}
    if verbose:
        log.info("verbose_enabled")
    if config:
        log.info("config_loaded", path=str(config))


def _read_ibans(path: pathlib.Path) -> List[str]:
    """One IBAN per line; blank lines and '#' comments are skipped."""
    out: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            out.append(line)
    return out


def _print_text(results: List[CheckResult], show_formatted: bool) -> None:
    for r in results:
        if r.is_valid:
            shown = r.formatted if show_formatted and r.formatted else r.cleaned
            console.print(f"[green]valid[/green]   {escape(shown)}")
            continue
        console.print(f"[red]invalid[/red] {escape(r.raw)}")
        for v in r.violations:
            console.print(f"  - {escape(v.message)}")


def _as_json(results: List[CheckResult]) -> str:
    payload = [
        {
            "iban": r.raw,
            "valid": r.is_valid,
            "country": r.country.value if r.country else None,
            "formatted": r.formatted,
            "violations": [v.to_dict() for v in r.violations],
        }
        for r in results
    ]
    return json.dumps(payload, ensure_ascii=False)


@app.command()
def check(
    ctx: typer.Context,
    ibans: Optional[List[str]] = typer.Argument(None, help="IBANs to validate"),
    file: Optional[pathlib.Path] = typer.Option(
        None, "--file", exists=True, dir_okay=False, readable=True, help="Read IBANs from a file, one per line"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    report: Optional[pathlib.Path] = typer.Option(None, "--report", help="Write HTML report to this path"),
    strict: Optional[bool] = typer.Option(None, "--strict/--no-strict", help="Exit 1 if any IBAN is invalid"),
):
    """Validate IBANs and list every violation found."""
    cfg: RayConfig = ctx.obj["config"]
    inputs = list(ibans or [])
    if file:
        inputs.extend(_read_ibans(file))
    if not inputs:
        raise typer.BadParameter("give at least one IBAN or --file")

    results = check_many(inputs)
    if as_json or cfg.report.format == "json":
        typer.echo(_as_json(results))
    else:
        _print_text(results, cfg.report.show_formatted)

    if report:
        from .reporting.html import write_report
        write_report(results, report)
        console.print(f"[green]Report written:[/green] {report}")

    invalid = sum(1 for r in results if not r.is_valid)
    log.info("check_finished", total=len(results), invalid=invalid)
    if invalid and (cfg.strict if strict is None else strict):
        raise typer.Exit(code=1)


@app.command("format")
def format_cmd(iban: str = typer.Argument(..., help="IBAN to format")):
    """Print an IBAN grouped for display."""
    formatted = format_iban(iban)
    if formatted is None:
        console.print(f"[red]Unsupported country for {escape(iban)}[/red]")
        raise typer.Exit(code=1)
    typer.echo(formatted)


@app.command()
def countries():
    """List supported countries with their IBAN length and display mask."""
    table = Table(title="Supported countries")
    table.add_column("Code")
    table.add_column("Length", justify="right")
    table.add_column("Format")
    for c in supported_countries():
        table.add_row(c.value, str(c.expected_length), c.expected_format)
    console.print(table)
