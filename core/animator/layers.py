"""core/animator/layers.py — Layer synthesis for animator controllers.

Every builder follows the same reset-then-rebuild pattern: an existing layer
with the requested name is emptied in place (identity kept), otherwise a new
one is appended.  States are then created from the caller's clip list and
wired to controller parameters declared through :func:`ensure_parameter`.

Layer shapes
────────────
Boolean (one gate per clip, gates independent)::

    [Default] ──If(clip)──▶ [clip]
    [Default] ◀─IfNot(clip)─ [clip]

Integer (one shared selector, ``None`` slots keep their index)::

    [Any State] ──Equals(sel, 0)──▶ [0_Default]
    [Any State] ──Equals(sel, i)──▶ [i_clip]

Overlay (selector + enable flag, keyed by folder group number)::

    [Any State] ──Equals(sel, g) & If(flag)──▶ [g_clip] ──IfNot(flag)──▶ [Default]

Pure module — no I/O.  Configuration problems found while wiring are logged
and returned in the :class:`LayerBuildReport`; they are never raised.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence

from core.animator.parameters import ensure_parameter, find_parameter
from core.animator.types import (
    AnimationClip,
    ConditionMode,
    Controller,
    Layer,
    LayerBuildReport,
    NamedClip,
    OverlayItem,
    ParameterType,
    State,
)
from core.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_STATE_NAME: str = "Default"
INT_DEFAULT_STATE_NAME: str = "0_Default"

_GROUP_PREFIX = re.compile(r"^(\d+)\.")

# ---------------------------------------------------------------------------
# Shared skeleton
# ---------------------------------------------------------------------------


def reset_or_create_layer(
    controller: Controller | None,
    layer_name: str,
    *,
    default_weight: float = 1.0,
) -> Layer:
    """Return an empty layer called ``layer_name`` on ``controller``.

    An existing layer is cleared in place, so references held by the caller
    stay valid.  A new layer gets ``default_weight``.

    Raises:
        ConfigurationError: If ``controller`` is ``None`` or the name is blank.
    """
    if controller is None:
        raise ConfigurationError("Cannot build a layer: controller is None")
    if not layer_name or not layer_name.strip():
        raise ConfigurationError("Cannot build a layer with a blank name")

    layer = controller.find_layer(layer_name)
    if layer is None:
        layer = Layer(name=layer_name, default_weight=default_weight)
        controller.add_layer(layer)
    else:
        layer.clear()
    return layer


def _require_parameter(controller: Controller, name: str, parameter_type: ParameterType) -> None:
    if not name or find_parameter(controller.parameters, name, parameter_type) is None:
        raise ConfigurationError(
            f"{parameter_type.value.capitalize()} parameter {name!r} does not exist "
            f"or is not of the correct type."
        )


def _unique_state_name(layer: Layer, name: str) -> str:
    """Return ``name``, or ``"{name} {n}"`` with the lowest free ``n``."""
    if layer.find_state(name) is None:
        return name
    suffix = 0
    while layer.find_state(f"{name} {suffix}") is not None:
        suffix += 1
    return f"{name} {suffix}"


def _failed(
    layer: Layer, states_created: int, parameters: Sequence[str], exc: Exception
) -> LayerBuildReport:
    logger.error("Layer %r left unwired: %s", layer.name, exc)
    return LayerBuildReport(
        layer=layer,
        states_created=states_created,
        transitions_created=0,
        parameters=tuple(parameters),
        error=str(exc),
    )


# ---------------------------------------------------------------------------
# Boolean layers
# ---------------------------------------------------------------------------


def build_bool_layer(
    controller: Controller | None,
    layer_name: str,
    items: Sequence[NamedClip],
    *,
    default_weight: float = 1.0,
) -> LayerBuildReport:
    """Build a layer with one independently gated state per clip.

    Each clip gets a state ``s`` and a BOOL gate named after the clip, a
    transition ``Default → s`` guarded by ``If(gate)`` and ``s → Default``
    guarded by ``IfNot(gate)``.  Items without a clip are skipped; a repeated
    name is skipped with a warning (first occurrence wins).  A clip called
    ``"Default"`` gets the state ``"Default 0"``; its gate keeps the clip name.

    Args:
        controller:     Controller owning the layer and its parameters.
        layer_name:     Layer to reset or create.
        items:          Clips in display order.
        default_weight: Weight for a newly created layer.

    Returns:
        :class:`LayerBuildReport` for the layer.

    Raises:
        ConfigurationError: If ``controller`` is ``None`` or the name is blank.
    """
    layer = reset_or_create_layer(controller, layer_name, default_weight=default_weight)
    default = layer.add_state(DEFAULT_STATE_NAME)

    gated: dict[str, State] = {}
    for item in items:
        if item.clip is None:
            continue
        if item.name in gated:
            logger.warning("Skipping duplicate state %r in layer %r", item.name, layer.name)
            continue
        gated[item.name] = layer.add_state(_unique_state_name(layer, item.name), item.clip)

    transitions = 0
    for gate, state in gated.items():
        parameter = ensure_parameter(controller.parameters, gate, ParameterType.BOOL)
        if parameter.type != ParameterType.BOOL:
            logger.warning("Gate %r is declared as %s, not bool", gate, parameter.type.value)
        layer.add_transition(default, state).add_condition(ConditionMode.IF, 0, gate)
        layer.add_transition(state, default).add_condition(ConditionMode.IF_NOT, 0, gate)
        transitions += 2

    logger.info("Added layer %r", layer.name)
    return LayerBuildReport(
        layer=layer,
        states_created=len(layer.states),
        transitions_created=transitions,
        parameters=tuple(gated),
    )


def build_bool_layers(
    controller: Controller | None,
    clips: Sequence[AnimationClip | None],
    *,
    default_weight: float = 1.0,
) -> list[LayerBuildReport]:
    """Build one single-gate boolean layer per clip, each named after its clip.

    ``None`` entries are skipped.

    Raises:
        ConfigurationError: If ``controller`` is ``None``.
    """
    if controller is None:
        raise ConfigurationError("Cannot build layers: controller is None")
    return [
        build_bool_layer(
            controller, clip.name, [NamedClip.of(clip)], default_weight=default_weight
        )
        for clip in clips
        if clip is not None
    ]


# ---------------------------------------------------------------------------
# Integer layer
# ---------------------------------------------------------------------------


def build_int_layer(
    controller: Controller | None,
    layer_name: str,
    items: Sequence[NamedClip],
    *,
    parameter_name: str | None = None,
    default_weight: float = 1.0,
) -> LayerBuildReport:
    """Build a layer whose states are selected by one INT parameter.

    The default state ``0_Default`` answers to value 0; the item at 1-based
    position ``i`` becomes state ``"{i}_{name}"`` answering to value ``i``.
    Items without a clip create no state but still consume their index.

    Args:
        controller:     Controller owning the layer and its parameters.
        layer_name:     Layer to reset or create.
        items:          Clips in selector order.
        parameter_name: Selector parameter; defaults to ``layer_name``.
        default_weight: Weight for a newly created layer.

    Returns:
        :class:`LayerBuildReport`.  ``error`` is set (and no transitions exist)
        when the selector name is already taken by a non-INT parameter.

    Raises:
        ConfigurationError: If ``controller`` is ``None`` or the name is blank.
    """
    layer = reset_or_create_layer(controller, layer_name, default_weight=default_weight)
    selector = parameter_name or layer_name
    default = layer.add_state(INT_DEFAULT_STATE_NAME)

    indexed: list[tuple[int, State]] = []
    for index, item in enumerate(items, start=1):
        if item.clip is None:
            continue
        indexed.append((index, layer.add_state(f"{index}_{item.name}", item.clip)))

    ensure_parameter(controller.parameters, selector, ParameterType.INT)
    try:
        _require_parameter(controller, selector, ParameterType.INT)
    except ConfigurationError as exc:
        return _failed(layer, len(layer.states), [selector], exc)

    layer.add_any_state_transition(default).add_condition(ConditionMode.EQUALS, 0, selector)
    for index, state in indexed:
        layer.add_any_state_transition(state).add_condition(ConditionMode.EQUALS, index, selector)

    logger.info("Added layer %r", layer.name)
    return LayerBuildReport(
        layer=layer,
        states_created=len(layer.states),
        transitions_created=len(indexed) + 1,
        parameters=(selector,),
    )


# ---------------------------------------------------------------------------
# Overlay layer
# ---------------------------------------------------------------------------


def build_overlay_layer(
    controller: Controller | None,
    layer_name: str,
    selector: str,
    items: Sequence[OverlayItem],
    *,
    enable_parameter: str | None = None,
    transition_duration: float = 0.0,
    default_weight: float = 1.0,
) -> LayerBuildReport:
    """Build an overlay layer driven by an existing INT selector and a BOOL flag.

    Each item becomes state ``"{group}_{clip}"`` (write defaults on).  It is
    entered from Any State when ``selector == group`` and the flag is on, and
    left for ``Default`` when the flag goes off.  The flag (named after the
    layer unless ``enable_parameter`` is given) is declared as BOOL; the
    selector must already exist as an INT parameter.

    Returns:
        :class:`LayerBuildReport`.  A missing selector or a mistyped flag
        leaves the states in place, creates no transitions and sets ``error``.

    Raises:
        ConfigurationError: If ``controller`` is ``None`` or the name is blank.
    """
    layer = reset_or_create_layer(controller, layer_name, default_weight=default_weight)
    flag = enable_parameter or layer_name
    default = layer.add_state(DEFAULT_STATE_NAME)

    grouped: list[tuple[int, State]] = []
    for item in items:
        state_name = f"{item.group}_{item.clip.name}"
        if layer.find_state(state_name) is not None:
            logger.warning("Skipping duplicate state %r in layer %r", state_name, layer.name)
            continue
        state = layer.add_state(state_name, item.clip)
        state.write_defaults = True
        grouped.append((item.group, state))

    ensure_parameter(controller.parameters, flag, ParameterType.BOOL)
    try:
        _require_parameter(controller, selector, ParameterType.INT)
        _require_parameter(controller, flag, ParameterType.BOOL)
    except ConfigurationError as exc:
        return _failed(layer, len(layer.states), [selector, flag], exc)

    for group, state in grouped:
        enter = layer.add_any_state_transition(state)
        enter.add_condition(ConditionMode.EQUALS, group, selector)
        enter.add_condition(ConditionMode.IF, 1, flag)
        enter.duration = transition_duration

        leave = layer.add_transition(state, default)
        leave.add_condition(ConditionMode.IF_NOT, 0, flag)
        leave.duration = transition_duration

    logger.info("Added layer %r", layer.name)
    return LayerBuildReport(
        layer=layer,
        states_created=len(layer.states),
        transitions_created=2 * len(grouped),
        parameters=(selector, flag),
    )


def parse_group_number(folder_name: str) -> int | None:
    """Return the numeric prefix of ``"3.Hats"``-style folder names, else ``None``.

    Only the last path component is inspected.
    """
    base = folder_name.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]
    match = _GROUP_PREFIX.match(base)
    return int(match.group(1)) if match else None


def overlay_items_from_folders(
    folders: Mapping[str, Sequence[AnimationClip]],
) -> list[OverlayItem]:
    """Flatten a pre-scanned ``{folder: clips}`` mapping into overlay items.

    Folders without a ``"{digits}."`` prefix are ignored.  Folder and clip
    order is preserved.
    """
    items: list[OverlayItem] = []
    for folder, clips in folders.items():
        group = parse_group_number(folder)
        if group is None:
            logger.debug("Ignoring folder %r: no group number prefix", folder)
            continue
        items.extend(OverlayItem(group=group, clip=clip) for clip in clips)
    return items
