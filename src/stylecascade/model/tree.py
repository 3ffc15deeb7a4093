"""StyleTree: one element's styling across every breakpoint and pseudo-state.

Wire form (as persisted by the document store)::

    {
      "base": {...AdvancedStyling},
      "pseudoStates": {"hover": {...}, ...},
      "breakpoints": {
        "tablet": {...AdvancedStyling, "pseudoStates": {"hover": {...}}},
        ...
      }
    }

Trees are treated as immutable values: every write in the engine returns a new
tree built with :meth:`StyleTree.replace_layer`.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from stylecascade.errors import StyleTreeError
from stylecascade.model.enums import Breakpoint, PseudoClass
from stylecascade.model.view import View

# An AdvancedStyling layer: category name -> category settings (JSON values).
AdvancedStyling = dict[str, Any]

PSEUDO_STATES_KEY = "pseudoStates"


@dataclass(frozen=True)
class BreakpointLayer:
    """Overrides stored for one non-desktop breakpoint."""

    styling: AdvancedStyling = field(default_factory=dict)
    pseudo_states: dict[PseudoClass, AdvancedStyling] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.styling and not self.pseudo_states

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = copy.deepcopy(self.styling)
        if self.pseudo_states:
            data[PSEUDO_STATES_KEY] = {
                state.value: copy.deepcopy(layer) for state, layer in self.pseudo_states.items()
            }
        return data


@dataclass(frozen=True)
class StyleTree:
    """Per-element style tree: desktop base, desktop pseudo-states, breakpoints."""

    base: AdvancedStyling = field(default_factory=dict)
    pseudo_states: dict[PseudoClass, AdvancedStyling] = field(default_factory=dict)
    breakpoints: dict[Breakpoint, BreakpointLayer] = field(default_factory=dict)

    # --- construction ---------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> StyleTree:
        """Load a tree from its wire form, rejecting shapes the engine cannot use."""
        if data is None:
            return cls()
        _require_mapping(data, "tree")
        base = _load_layer(data.get("base"), "base")
        pseudo_states = _load_pseudo_states(data.get(PSEUDO_STATES_KEY), PSEUDO_STATES_KEY)

        breakpoints: dict[Breakpoint, BreakpointLayer] = {}
        raw_breakpoints = data.get("breakpoints")
        if raw_breakpoints is not None:
            _require_mapping(raw_breakpoints, "breakpoints")
            for name, raw in raw_breakpoints.items():
                path = f"breakpoints.{name}"
                bp = _parse_enum(Breakpoint, name, path)
                if bp.is_root:
                    raise StyleTreeError("desktop is the cascade root, not a breakpoint override", path)
                if raw is None:
                    continue
                _require_mapping(raw, path)
                styling = {k: copy.deepcopy(v) for k, v in raw.items() if k != PSEUDO_STATES_KEY}
                states = _load_pseudo_states(raw.get(PSEUDO_STATES_KEY), f"{path}.{PSEUDO_STATES_KEY}")
                breakpoints[bp] = BreakpointLayer(styling=styling, pseudo_states=states)

        return cls(
            base=base,
            pseudo_states=pseudo_states,
            breakpoints=_ordered_breakpoints(breakpoints),
        )

    @classmethod
    def from_props(cls, props: Mapping[str, Any]) -> StyleTree:
        """Load a tree from editor node props.

        Editor nodes keep the three parts under separate props:
        ``advancedStyling``, ``pseudoStateStyling`` and ``breakpointStyling``.
        An explicit ``default`` entry in the pseudo map is dropped rather than
        rejected because older nodes stored a copy of the base there.
        """
        pseudo = props.get("pseudoStateStyling")
        if isinstance(pseudo, Mapping):
            pseudo = {k: v for k, v in pseudo.items() if k != PseudoClass.DEFAULT.value}
        return cls.from_dict(
            {
                "base": props.get("advancedStyling"),
                PSEUDO_STATES_KEY: pseudo,
                "breakpoints": props.get("breakpointStyling"),
            }
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "base": copy.deepcopy(self.base),
            PSEUDO_STATES_KEY: {
                state.value: copy.deepcopy(layer) for state, layer in self.pseudo_states.items()
            },
            "breakpoints": {bp.value: layer.to_dict() for bp, layer in self.breakpoints.items()},
        }

    # --- reading --------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.base and not self.pseudo_states and not self.breakpoints

    def layer_at(self, view: View) -> AdvancedStyling | None:
        """Return the styling stored at exactly *view*, or None if the slot is absent."""
        if view.breakpoint.is_root:
            if view.pseudo_state.is_default:
                return self.base
            return self.pseudo_states.get(view.pseudo_state)
        bp_layer = self.breakpoints.get(view.breakpoint)
        if bp_layer is None:
            return None
        if view.pseudo_state.is_default:
            return bp_layer.styling
        return bp_layer.pseudo_states.get(view.pseudo_state)

    def iter_layers(self) -> Iterator[tuple[View, AdvancedStyling]]:
        """Yield every stored layer in cascade source order.

        Order: base, desktop pseudo-states, then each breakpoint (widest first)
        with its base layer before its pseudo-states. Pseudo-states follow the
        PseudoClass enumeration order.
        """
        yield View(), self.base
        for state in PseudoClass.states():
            if state in self.pseudo_states:
                yield View(Breakpoint.DESKTOP, state), self.pseudo_states[state]
        for bp in Breakpoint.responsive():
            bp_layer = self.breakpoints.get(bp)
            if bp_layer is None:
                continue
            yield View(bp), bp_layer.styling
            for state in PseudoClass.states():
                if state in bp_layer.pseudo_states:
                    yield View(bp, state), bp_layer.pseudo_states[state]

    # --- writing (returns new trees) ------------------------------------------

    def replace_layer(self, view: View, styling: AdvancedStyling | None) -> StyleTree:
        """Return a new tree with the layer at *view* replaced.

        Passing None (or an empty mapping) for a non-base view removes the slot
        and prunes any breakpoint entry left empty by the removal.
        """
        styling = dict(styling) if styling else None
        if view.is_base:
            return StyleTree(base=styling or {}, pseudo_states=self.pseudo_states, breakpoints=self.breakpoints)

        if view.breakpoint.is_root:
            states = dict(self.pseudo_states)
            _set_or_drop(states, view.pseudo_state, styling)
            return StyleTree(base=self.base, pseudo_states=states, breakpoints=self.breakpoints)

        breakpoints = dict(self.breakpoints)
        current = breakpoints.get(view.breakpoint, BreakpointLayer())
        if view.pseudo_state.is_default:
            updated = BreakpointLayer(styling=styling or {}, pseudo_states=current.pseudo_states)
        else:
            bp_states = dict(current.pseudo_states)
            _set_or_drop(bp_states, view.pseudo_state, styling)
            updated = BreakpointLayer(styling=current.styling, pseudo_states=bp_states)
        _set_or_drop(breakpoints, view.breakpoint, None if updated.is_empty else updated)
        return StyleTree(
            base=self.base,
            pseudo_states=self.pseudo_states,
            breakpoints=_ordered_breakpoints(breakpoints),
        )


# ---------------------------------------------------------------------------
# Loading helpers
# ---------------------------------------------------------------------------


def _require_mapping(value: Any, path: str) -> None:
    if not isinstance(value, Mapping):
        raise StyleTreeError(f"expected an object, got {type(value).__name__}", path)


def _parse_enum(enum_cls, name: Any, path: str):
    try:
        return enum_cls(name)
    except ValueError:
        raise StyleTreeError(f"unknown {enum_cls.__name__} {name!r}", path) from None


def _load_layer(raw: Any, path: str) -> AdvancedStyling:
    if raw is None:
        return {}
    _require_mapping(raw, path)
    if PSEUDO_STATES_KEY in raw:
        raise StyleTreeError("pseudo-states are not allowed inside a style layer", path)
    return copy.deepcopy(dict(raw))


def _load_pseudo_states(raw: Any, path: str) -> dict[PseudoClass, AdvancedStyling]:
    if raw is None:
        return {}
    _require_mapping(raw, path)
    states: dict[PseudoClass, AdvancedStyling] = {}
    for name, layer in raw.items():
        state_path = f"{path}.{name}"
        state = _parse_enum(PseudoClass, name, state_path)
        if state.is_default:
            raise StyleTreeError("'default' is not a pseudo-state key", state_path)
        if layer is None:
            continue
        states[state] = _load_layer(layer, state_path)
    return {state: states[state] for state in PseudoClass.states() if state in states}


def _ordered_breakpoints(breakpoints: dict[Breakpoint, BreakpointLayer]) -> dict[Breakpoint, BreakpointLayer]:
    return {bp: breakpoints[bp] for bp in Breakpoint.responsive() if bp in breakpoints}


def _set_or_drop(mapping: dict, key: Any, value: Any) -> None:
    if value is None:
        mapping.pop(key, None)
    else:
        mapping[key] = value
