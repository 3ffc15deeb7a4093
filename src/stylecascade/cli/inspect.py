"""CLI commands: stylecascade resolve / source -- inspect the cascade at one view."""

from __future__ import annotations

import click

from stylecascade.cascade import resolve_styling, style_source
from stylecascade.cli.options import echo_json, fail, make_view, view_options
from stylecascade.compiler import compile_styling, declaration_block
from stylecascade.documents import read_element
from stylecascade.errors import StyleCascadeError


@click.command()
@click.argument("tree_file", type=click.Path(exists=True, dir_okay=False))
@view_options
@click.option("--css", "as_css", is_flag=True, help="Print compiled declarations instead of JSON")
def resolve(tree_file: str, breakpoint: str, state: str, as_css: bool) -> None:
    """Print the effective styling the editor shows at one view."""
    try:
        tree, _ = read_element(tree_file)
        styling = resolve_styling(tree, make_view(breakpoint, state))
    except StyleCascadeError as exc:
        fail(exc)
        return

    if as_css:
        properties = compile_styling(styling).properties
        if properties:
            click.echo(declaration_block(properties, indent=""))
        return
    echo_json(styling)


@click.command()
@click.argument("tree_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("path")
@view_options
def source(tree_file: str, path: str, breakpoint: str, state: str) -> None:
    """Report where PATH (e.g. ``layout.display``) is set, relative to one view."""
    try:
        tree, _ = read_element(tree_file)
        result = style_source(tree, path, make_view(breakpoint, state))
    except StyleCascadeError as exc:
        fail(exc)
        return

    echo_json(result.to_dict())
