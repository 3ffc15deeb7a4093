"""Options and helpers shared by the stylecascade subcommands."""

from __future__ import annotations

import json
import sys
from typing import Any

import click

from stylecascade.errors import StyleCascadeError
from stylecascade.model.enums import Breakpoint, PseudoClass
from stylecascade.model.view import View


def view_options(func):
    """Add ``--breakpoint`` and ``--state`` options to a command."""
    func = click.option(
        "--state",
        "-s",
        type=click.Choice([p.value for p in PseudoClass]),
        default=PseudoClass.DEFAULT.value,
        show_default=True,
        help="Pseudo-state to view",
    )(func)
    func = click.option(
        "--breakpoint",
        "-b",
        type=click.Choice([b.value for b in Breakpoint]),
        default=Breakpoint.DESKTOP.value,
        show_default=True,
        help="Breakpoint to view",
    )(func)
    return func


def make_view(breakpoint: str, state: str) -> View:
    return View.parse(breakpoint, state)


def echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2))


def fail(exc: StyleCascadeError) -> None:
    """Report an engine error and exit with code 1."""
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)
