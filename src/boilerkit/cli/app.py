"""Typer CLI application for boilerkit."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
from typer import Exit, Option, Typer

import boilerkit
from boilerkit.cli._prompts import SETUP_QUESTION, prompt_setup
from boilerkit.cli._renderer import render_setup
from boilerkit.cli._types import Boilerplate, Setup

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


def _print_setups() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available setups")
    _console.print("[dim]│[/]")
    for s in Setup:
        _console.print(f"[dim]│[/]  [bold cyan]{s.value:<8}[/] [dim]{s.description}[/]")
    _console.print("[dim]│[/]")
    _console.print()


def _list_setups_callback(value: bool) -> None:
    if value:
        _print_setups()
        raise Exit()


def _report_written(boilerplate: Boilerplate, path: Path) -> None:
    _console.print(f"[bold green]✅[/] {boilerplate.label} setup created successfully!")


@app.command()
def install(
    setup_str: Annotated[
        str | None,
        Option(
            "--setup",
            "-s",
            help="Setup to install (Axios, Socket or Both). Prompts when omitted.",
            show_default=False,
        ),
    ] = None,
    root: Annotated[
        Path,
        Option("--dir", "-C", help="Project root to write into.", file_okay=False),
    ] = Path("."),
    list_setups: Annotated[
        bool,
        Option(
            "--list-setups",
            "-l",
            help="List all available setups and exit.",
            callback=_list_setups_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Install Axios and/or Socket boilerplate into ./src."""
    setup: Setup | None = None
    if setup_str is not None:
        try:
            setup = Setup(setup_str)
        except ValueError:
            valid = ", ".join(f"'{s.value}'" for s in Setup)
            _console.print()
            _console.print(f"[bold red]Error:[/] [bold]{setup_str!r}[/] is not a valid setup.")
            _console.print(f"[dim]Valid values:[/] {valid}")
            raise Exit(code=2) from None

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  boilerkit v{boilerkit.__version__}")
    _console.print("[dim]│[/]")

    if setup is None:
        setup = prompt_setup()
    else:
        _console.print(f"[bold green]◇[/]  {SETUP_QUESTION}")
        _console.print(f"[dim]│[/]  {setup.label}")
        _console.print("[dim]│[/]")

    render_setup(root, setup, on_write=_report_written)

    _console.print("[dim]│[/]")
    _console.print("[bold cyan]●[/]  Done!")
    _console.print()
