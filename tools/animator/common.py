"""Shared checks and result shaping for the layer tools."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from core.animator.types import AnimationClip, Controller, LayerBuildReport
from core.errors import ConfigurationError
from core.workspace import Workspace
from tools.base import ToolParameter, ToolResult


def require_controller(workspace: Workspace) -> Controller:
    if workspace.controller is None:
        raise ConfigurationError("No animator controller found on the workspace.")
    return workspace.controller


def require_menu(workspace: Workspace) -> None:
    if workspace.expressions_menu is None:
        raise ConfigurationError("No Expressions Menu found.")
    if workspace.expression_parameters is None:
        raise ConfigurationError("No Expression Parameters found.")


def require_layer_name(layer_name: str) -> str:
    if not layer_name.strip():
        raise ConfigurationError("layer_name must not be blank")
    return layer_name


def clip_list(values: Sequence[Any]) -> list[AnimationClip | None]:
    """Check that every entry is a clip or an empty (``None``) slot."""
    for position, value in enumerate(values):
        if value is not None and not isinstance(value, AnimationClip):
            raise ConfigurationError(
                f"clips[{position}] must be an AnimationClip or None, got {type(value).__name__}"
            )
    return list(values)


def menu_parameters(default_submenu: str) -> list[ToolParameter]:
    """The add-to-menu parameters every layer tool accepts."""
    return [
        ToolParameter(
            name="add_to_menu",
            type=bool,
            description="Also expose the layer's parameters in the expressions menu.",
            required=False,
            default=False,
        ),
        ToolParameter(
            name="submenu_name",
            type=str,
            description=(
                f"Submenu path for the new controls, '/'-separated (default {default_submenu!r}; "
                "empty string for the menu root)."
            ),
            required=False,
        ),
    ]


def layer_result(
    reports: Sequence[LayerBuildReport],
    controls_added: int,
    metadata: dict[str, Any] | None = None,
) -> ToolResult:
    """Fold layer reports into one ToolResult; any report error fails the result."""
    errors = [f"{r.layer.name}: {r.error}" for r in reports if not r.ok]
    return ToolResult(
        success=not errors,
        data={
            "layers": [r.to_dict() for r in reports],
            "menu_controls_added": controls_added,
        },
        error="; ".join(errors) if errors else None,
        metadata=metadata,
    )
