"""CLI command: stylecascade set -- route an edit into a style tree."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from stylecascade.cascade import apply_patch, route_mutation, route_reset
from stylecascade.cli.options import echo_json, fail, make_view, view_options
from stylecascade.documents import TREE_KEYS, load_element, read_json
from stylecascade.errors import StyleCascadeError
from stylecascade.model.enums import StyleCategory

logger = logging.getLogger(__name__)


@click.command("set")
@click.argument("tree_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("category", required=False, type=click.Choice([c.value for c in StyleCategory]))
@click.argument("value_json", required=False)
@view_options
@click.option(
    "--reset",
    is_flag=True,
    help="Remove CATEGORY (or the whole layer) at the view instead of writing it",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the updated document here instead of printing it",
)
def set_cmd(
    tree_file: str,
    category: str | None,
    value_json: str | None,
    breakpoint: str,
    state: str,
    reset: bool,
    output: str | None,
) -> None:
    """Store VALUE_JSON for CATEGORY at one view of the tree in TREE_FILE.

    Only the layer at the chosen view changes. The updated document keeps the
    shape it was read in (bare tree or element document).

    With --reset and no CATEGORY every category at the view is removed.
    """
    if reset == (value_json is not None):
        raise click.UsageError("Pass either VALUE_JSON or --reset")
    if category is None and not reset:
        raise click.UsageError("CATEGORY is required unless --reset is given")

    try:
        document = read_json(tree_file)
        tree, _ = load_element(document)
        view = make_view(breakpoint, state)
        if reset:
            patch = route_reset(view, category)
        else:
            try:
                value = json.loads(value_json)
            except json.JSONDecodeError as exc:
                raise click.BadParameter(f"not valid JSON: {exc.msg}", param_hint="VALUE_JSON") from exc
            patch = route_mutation(view, category, value)
        updated = apply_patch(tree, patch)
    except StyleCascadeError as exc:
        fail(exc)
        return

    tree_key = next((key for key in TREE_KEYS if key in document), None)
    if tree_key is None:
        document = updated.to_dict()
    else:
        document = {**document, tree_key: updated.to_dict()}

    if output:
        Path(output).write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
        logger.info("Wrote %s", output)
        click.echo(f"Updated {category or 'layer'} at {view} ({patch.kind})")
        return
    echo_json(document)
