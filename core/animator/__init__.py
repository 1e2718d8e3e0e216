"""core/animator — Pure animator-controller model and layer synthesis.

Exports:
    Types:      Controller, Layer, State, Transition, Condition, ConditionMode,
                Parameter, ParameterSpace, ParameterType, AnimationClip,
                NamedClip, OverlayItem, LayerBuildReport, named_clips
    Parameters: ensure_parameter, find_parameter, int_parameter_names
    Layers:     build_bool_layer, build_bool_layers, build_int_layer,
                build_overlay_layer, reset_or_create_layer,
                parse_group_number, overlay_items_from_folders

This package contains zero I/O.  Host-side persistence, undo and asset
creation belong to the caller.
"""

from core.animator.layers import (
    DEFAULT_STATE_NAME,
    INT_DEFAULT_STATE_NAME,
    build_bool_layer,
    build_bool_layers,
    build_int_layer,
    build_overlay_layer,
    overlay_items_from_folders,
    parse_group_number,
    reset_or_create_layer,
)
from core.animator.parameters import ensure_parameter, find_parameter, int_parameter_names
from core.animator.types import (
    AnimationClip,
    Condition,
    ConditionMode,
    Controller,
    Layer,
    LayerBuildReport,
    NamedClip,
    OverlayItem,
    Parameter,
    ParameterSpace,
    ParameterType,
    State,
    Transition,
    named_clips,
)

__all__ = [
    # Types
    "AnimationClip",
    "Condition",
    "ConditionMode",
    "Controller",
    "Layer",
    "LayerBuildReport",
    "NamedClip",
    "OverlayItem",
    "Parameter",
    "ParameterSpace",
    "ParameterType",
    "State",
    "Transition",
    "named_clips",
    # Parameters
    "ensure_parameter",
    "find_parameter",
    "int_parameter_names",
    # Layers
    "DEFAULT_STATE_NAME",
    "INT_DEFAULT_STATE_NAME",
    "build_bool_layer",
    "build_bool_layers",
    "build_int_layer",
    "build_overlay_layer",
    "overlay_items_from_folders",
    "parse_group_number",
    "reset_or_create_layer",
]
