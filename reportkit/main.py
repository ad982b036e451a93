#!/usr/bin/env python3
"""
Command line entry point for reportkit

Lets you try reporter settings from a shell, and check the REPORTKIT_*
environment variables a reporter built with ErrorReporter.from_env() will see.
"""

import builtins
from typing import List, Optional, Type

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from reportkit import __version__
from reportkit.config.constants import ENV_VAR_DEFINITIONS
from reportkit.config.settings import validate_all_env_vars
from reportkit.exceptions import ReportedError
from reportkit.reporter import ErrorReporter
from reportkit.types import is_error_class
from reportkit.utils.logging import setup_logging

app = typer.Typer(help="Configurable error reporting helper", no_args_is_help=True)
console = Console()
err_console = Console(stderr=True)


def resolve_error_class(name: str) -> Optional[Type[Exception]]:
    """Map a class name to ReportedError or a built-in exception class."""
    if name == ReportedError.__name__:
        return ReportedError
    candidate = getattr(builtins, name, None)
    return candidate if is_error_class(candidate) else None


def _display_fatal(error: Exception) -> None:
    """Show a raised report in a panel on stderr"""
    message = Text()
    message.append(type(error).__name__, style="bold red")
    message.append(": ")
    message.append(str(error), style="bold")

    err_console.print(Panel(
        message,
        title="[bold]Fatal Report[/bold]",
        title_align="left",
        border_style="red",
        padding=(0, 1)
    ))


@app.command()
def report(
    msg: str = typer.Argument(..., help="Message to report"),
    info: Optional[List[str]] = typer.Option(None, "--info", "-i", help="Extra info value (repeatable)"),
    fatal: Optional[bool] = typer.Option(None, "--fatal/--no-fatal", help="Raise an error after output"),
    log: Optional[bool] = typer.Option(None, "--log/--no-log", help="Include info values in output"),
    debug: Optional[bool] = typer.Option(None, "--debug/--no-debug", help="Append the full record to output"),
    error_class: str = typer.Option(
        ReportedError.__name__, "--error-class", "-e", help="Error class raised when fatal"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """Report a message using settings from the environment and flags"""
    setup_logging(verbose=verbose)

    cls = resolve_error_class(error_class)
    if cls is None:
        typer.echo(f"Error: unknown error class '{error_class}'", err=True)
        raise typer.Exit(2)

    overrides = {"fatal": fatal, "log": log, "debug": debug}
    reporter = ErrorReporter.from_env(
        error_class=cls,
        **{name: value for name, value in overrides.items() if value is not None},
    )

    try:
        reporter.report(msg, info or [])
    except cls as e:
        _display_fatal(e)
        raise typer.Exit(1) from e


@app.command("check-env")
def check_env():
    """Validate REPORTKIT_* variables and show the resolved settings"""
    errors = validate_all_env_vars()
    resolved = ErrorReporter.from_env()

    table = Table(title="Reporter settings")
    table.add_column("Variable", style="cyan")
    table.add_column("Setting")
    table.add_column("Value")
    for name, definition in ENV_VAR_DEFINITIONS.items():
        setting = definition["setting"]
        table.add_row(name, setting, str(getattr(resolved, setting)))
    console.print(table)

    for error in errors:
        err_console.print(error, style="red", markup=False)
    if errors:
        raise typer.Exit(1)


@app.command()
def version():
    """Show reportkit version"""
    typer.echo(f"reportkit version {__version__}")


def main():
    app()


if __name__ == "__main__":
    main()
