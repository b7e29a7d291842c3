"""Clack-style setup prompt using Rich + simple-term-menu."""

from __future__ import annotations

import sys

from rich.console import Console
from simple_term_menu import TerminalMenu

from boilerkit.cli._types import Setup

_console = Console()

SETUP_QUESTION = "Which setup would you like to install?"

# Question line + bar left behind by the menu
_PROMPT_HEIGHT = 2


def _erase_prompt() -> None:
    sys.stdout.write(f"\033[{_PROMPT_HEIGHT}A\033[J")
    sys.stdout.flush()


def _echo_choice(setups: list[Setup], chosen: Setup) -> None:
    """Redraw the answered question with the unpicked setups struck through."""
    _console.print(f"[bold green]◇[/]  {SETUP_QUESTION}")
    for setup in setups:
        if setup is chosen:
            _console.print(f"[dim]│[/]  [bold green]●[/] {setup.label}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{setup.label}[/]")
    _console.print("[dim]│[/]")


def prompt_setup() -> Setup:
    """Ask which boilerplate to install. Exits with status 1 if the menu is aborted."""
    setups = list(Setup)

    _console.print(f"[bold cyan]◆[/]  {SETUP_QUESTION}")
    _console.print("[dim]│[/]")

    picked = TerminalMenu(
        [s.label for s in setups],
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    ).show()
    if picked is None:
        raise SystemExit(1)

    chosen = setups[int(picked)]
    _erase_prompt()
    _echo_choice(setups, chosen)
    return chosen
