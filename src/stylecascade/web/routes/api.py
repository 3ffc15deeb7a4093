from __future__ import annotations

import logging
from collections.abc import Mapping

from flask import Blueprint, current_app, jsonify, request

from stylecascade import __version__
from stylecascade.cascade import apply_patch, patch_to_dict, resolve_styling, route_mutation, route_reset
from stylecascade.cascade import style_source as source_of
from stylecascade.compiler import inline_style, to_style_object
from stylecascade.documents import load_element
from stylecascade.errors import StyleCascadeError
from stylecascade.model.metadata import ElementMetadata
from stylecascade.model.tree import StyleTree
from stylecascade.model.view import View
from stylecascade.stylesheet import (
    assemble_rules,
    generate_output,
    join_element_css,
    render_page_css,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


class BadRequest(Exception):
    """A request body that is missing required fields."""


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests from the browser editor."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.errorhandler(StyleCascadeError)
def engine_error(exc: StyleCascadeError):
    logger.info("Rejected request to %s: %s", request.path, exc)
    return jsonify({"error": str(exc)}), 400


@api_bp.errorhandler(BadRequest)
def bad_request(exc: BadRequest):
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------


def _body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("JSON object body required")
    return data


def _element(data: Mapping) -> tuple[StyleTree, ElementMetadata]:
    if "tree" not in data:
        raise BadRequest("tree required")
    return load_element({"tree": data["tree"], "metadata": data.get("metadata")})


def _view(data: Mapping) -> View:
    return View.parse(data.get("breakpoint"), data.get("state"))


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@api_bp.route("/health")
def health():
    return jsonify({"status": "ok", "version": __version__})


@api_bp.route("/css", methods=["POST"])
def css():
    """Published CSS for one element."""
    tree, metadata = _element(_body())
    blocks = assemble_rules(tree, metadata.element_id, metadata.custom_css)
    return jsonify({"css": "\n\n".join(blocks), "ruleBlocks": blocks})


@api_bp.route("/preview", methods=["POST"])
def preview():
    """Live editor output for one element: inline style, rule blocks, attributes.

    ``styleObject`` carries the inline style with DOM property names and
    ``styleAttribute`` the same properties as HTML attribute text.
    """
    tree, metadata = _element(_body())
    output = generate_output(tree, metadata)
    data = output.to_dict()
    data["styleObject"] = to_style_object(output.inline_style)
    data["styleAttribute"] = inline_style(output.inline_style)
    return jsonify(data)


@api_bp.route("/resolve", methods=["POST"])
def resolve():
    """Effective styling at one view."""
    data = _body()
    tree, _ = _element(data)
    return jsonify({"styling": resolve_styling(tree, _view(data))})


@api_bp.route("/mutate", methods=["POST"])
def mutate():
    """Route an edit (or a reset, when ``reset`` is true) and return the new tree.

    A reset without ``category`` clears the whole layer at the view.
    """
    data = _body()
    tree, _ = _element(data)
    view = _view(data)
    if data.get("reset"):
        patch = route_reset(view, data.get("category"))
    elif "category" not in data:
        raise BadRequest("category required")
    elif "value" in data:
        patch = route_mutation(view, data["category"], data["value"])
    else:
        raise BadRequest("value required")
    updated = apply_patch(tree, patch)
    return jsonify({"patch": patch_to_dict(patch), "tree": updated.to_dict()})


@api_bp.route("/source", methods=["POST"])
def source():
    """Provenance of one dotted property path at one view."""
    data = _body()
    path = data.get("path")
    if not path or not isinstance(path, str):
        raise BadRequest("path required")
    tree, _ = _element(data)
    return jsonify(source_of(tree, path, _view(data)).to_dict())


@api_bp.route("/page-css", methods=["POST"])
def page_css():
    """CSS for a whole page, from a serialized node map or a list of elements."""
    data = _body()
    if isinstance(data.get("nodes"), dict):
        config = current_app.extensions["stylecascade_config"]
        css_text = render_page_css(data["nodes"], data.get("root") or "ROOT", config.element_id_prefix)
        return jsonify({"css": css_text})

    elements = data.get("elements")
    if not isinstance(elements, list):
        raise BadRequest("nodes or elements required")
    loaded = []
    for index, element in enumerate(elements):
        if not isinstance(element, dict):
            raise BadRequest(f"elements[{index}] must be an object")
        loaded.append(_element(element))
    return jsonify({"css": join_element_css(loaded)})
