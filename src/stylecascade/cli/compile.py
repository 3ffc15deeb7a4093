"""CLI commands: stylecascade compile / page -- print generated CSS."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import click

from stylecascade.cli.options import echo_json, fail
from stylecascade.config import CascadeConfig
from stylecascade.documents import read_element, read_json
from stylecascade.errors import StyleCascadeError
from stylecascade.model.metadata import element_id_for
from stylecascade.stylesheet import generate_output, render_element_css, render_page_css


@click.command("compile")
@click.argument("tree_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--element-id", default=None, help="Element id used in selectors")
@click.option(
    "--custom-css",
    "custom_css_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="File with custom CSS (%root% is replaced by the element selector)",
)
@click.option("--editor", is_flag=True, help="Print the live editor output as JSON instead")
@click.pass_obj
def compile_cmd(
    config: CascadeConfig,
    tree_file: str,
    element_id: str | None,
    custom_css_file: str | None,
    editor: bool,
) -> None:
    """Compile an element's style tree into its published CSS.

    TREE_FILE holds either a bare style tree or an element document with
    ``styleTree`` and ``metadata`` keys.
    """
    path = Path(tree_file)
    fallback_id = element_id_for(None, path.stem, config.element_id_prefix)
    try:
        tree, metadata = read_element(path, fallback_id)
    except StyleCascadeError as exc:
        fail(exc)
        return

    if element_id:
        metadata = dataclasses.replace(metadata, element_id=element_id)
    if custom_css_file:
        custom_css = Path(custom_css_file).read_text(encoding="utf-8")
        metadata = dataclasses.replace(metadata, custom_css=custom_css)

    if editor:
        echo_json(generate_output(tree, metadata).to_dict())
        return

    css = render_element_css(tree, metadata.element_id, metadata.custom_css)
    if css:
        click.echo(css)


@click.command()
@click.argument("nodes_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--root", "root_id", default="ROOT", show_default=True, help="Id of the root node")
@click.pass_obj
def page(config: CascadeConfig, nodes_file: str, root_id: str) -> None:
    """Print the CSS of a whole serialized page.

    NODES_FILE is the editor's node map: ``{node_id: {type, props, nodes, ...}}``.
    """
    try:
        nodes = read_json(nodes_file)
        if not isinstance(nodes, dict):
            raise click.BadParameter("expected a JSON object of nodes", param_hint="NODES_FILE")
        css = render_page_css(nodes, root_id, config.element_id_prefix)
    except StyleCascadeError as exc:
        fail(exc)
        return

    if css:
        click.echo(css)
