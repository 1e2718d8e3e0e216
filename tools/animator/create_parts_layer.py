"""create_parts_layer tool — Overlay clips picked by an existing int selector.

Clips come either as overlay items (group number + clip) or as a pre-scanned
``{folder: clips}`` mapping whose folder names start with ``"<group>."``,
e.g. ``"3.Hats"``.  The layer's own bool flag switches the overlay on and
off; the selector is shared with other layers and must already exist.

Use when:
  - several outfits share one "Outfit" int and a "Parts" layer adds
    per-outfit accessories that can be hidden separately.
"""

from __future__ import annotations

from typing import Any

from core.animator.layers import build_overlay_layer, overlay_items_from_folders
from core.animator.parameters import ensure_parameter, int_parameter_names
from core.animator.types import AnimationClip, OverlayItem, ParameterType
from core.errors import ConfigurationError
from core.menu.composer import add_control
from core.workspace import Workspace
from tools.animator.common import (
    layer_result,
    menu_parameters,
    require_controller,
    require_layer_name,
    require_menu,
)
from tools.base import ToolboxTool, ToolParameter, ToolResult


def _overlay_items(items: list | None, folders: dict | None) -> list[OverlayItem]:
    collected: list[OverlayItem] = []
    for position, item in enumerate(items or []):
        if not isinstance(item, OverlayItem):
            raise ConfigurationError(
                f"items[{position}] must be an OverlayItem, got {type(item).__name__}"
            )
        collected.append(item)
    if folders:
        for folder, clips in folders.items():
            if not all(isinstance(c, AnimationClip) for c in clips):
                raise ConfigurationError(f"folders[{folder!r}] must contain AnimationClips only")
        collected.extend(overlay_items_from_folders(folders))
    return collected


class CreatePartsLayer(ToolboxTool):
    """Build an overlay layer keyed by folder group numbers."""

    @property
    def name(self) -> str:
        return "create_parts_layer"

    @property
    def description(self) -> str:
        return (
            "Create an overlay layer whose clips are chosen by an existing int parameter "
            "and switched on by the layer's own bool parameter. Clip groups come from "
            "numbered folders ('3.Hats' is group 3)."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="workspace",
                type=Workspace,
                description="Controller, menu and expression parameters to edit.",
            ),
            ToolParameter(
                name="selector",
                type=str,
                description="Existing int parameter (defaults to the controller's first int).",
                required=False,
            ),
            ToolParameter(
                name="items",
                type=list,
                description="OverlayItem entries (group number + clip).",
                required=False,
            ),
            ToolParameter(
                name="folders",
                type=dict,
                description="Pre-scanned mapping of numbered folder name to its clips.",
                required=False,
            ),
            ToolParameter(
                name="layer_name",
                type=str,
                description=f"Layer name (default {self.config.parts_layer_name!r}).",
                required=False,
            ),
            ToolParameter(
                name="enable_parameter",
                type=str,
                description="Bool flag that enables the overlay (defaults to the layer name).",
                required=False,
            ),
            ToolParameter(
                name="transition_duration",
                type=(int, float),
                description="Transition duration in seconds.",
                required=False,
            ),
            *menu_parameters(self.config.parts_submenu_name),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        """Build the overlay, then add its enable toggle to the menu."""
        workspace: Workspace = kwargs["workspace"]
        controller = require_controller(workspace)
        layer_name = require_layer_name(kwargs.get("layer_name") or self.config.parts_layer_name)
        flag: str = kwargs.get("enable_parameter") or layer_name
        add_to_menu: bool = kwargs.get("add_to_menu", False)
        submenu_name: str = (
            kwargs["submenu_name"]
            if kwargs.get("submenu_name") is not None
            else self.config.parts_submenu_name
        )
        duration = kwargs.get("transition_duration")
        if duration is None:
            duration = self.config.transition_duration
        if duration < 0:
            raise ConfigurationError(f"transition_duration must be non-negative, got {duration}")

        selector = kwargs.get("selector")
        if selector is None:
            candidates = int_parameter_names(controller.parameters)
            selector = candidates[0] if candidates else ""

        if add_to_menu:
            require_menu(workspace)

        report = build_overlay_layer(
            controller,
            layer_name,
            selector,
            _overlay_items(kwargs.get("items"), kwargs.get("folders")),
            enable_parameter=flag,
            transition_duration=float(duration),
            default_weight=self.config.default_layer_weight,
        )

        controls_added = 0
        if add_to_menu and report.ok:
            ensure_parameter(workspace.expression_parameters, flag, ParameterType.BOOL)
            if add_control(
                workspace.expressions_menu,
                submenu_name,
                layer_name,
                flag,
                0.0,
                delimiter=self.config.path_delimiter,
            ):
                controls_added += 1

        return layer_result(
            [report],
            controls_added,
            metadata={"selector": selector, "enable_parameter": flag},
        )
