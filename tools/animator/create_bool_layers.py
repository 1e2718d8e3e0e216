"""create_bool_layers tool — Toggle clips on and off with boolean parameters.

Two shapes:
  - without ``layer_name``: one layer per clip, each named after its clip
    and gated by a bool parameter of the same name;
  - with ``layer_name``: a single layer holding one independently gated
    state per clip.

With ``add_to_menu`` every clip also gets a bool expression parameter and a
toggle control under ``submenu_name``.
"""

from __future__ import annotations

from typing import Any

from core.animator.layers import build_bool_layer, build_bool_layers
from core.animator.parameters import ensure_parameter
from core.animator.types import ParameterType, named_clips
from core.menu.composer import add_control
from core.workspace import Workspace
from tools.animator.common import (
    clip_list,
    layer_result,
    menu_parameters,
    require_controller,
    require_layer_name,
    require_menu,
)
from tools.base import ToolboxTool, ToolParameter, ToolResult


class CreateBoolLayers(ToolboxTool):
    """Build boolean-gated layers from a list of clips."""

    @property
    def name(self) -> str:
        return "create_bool_layers"

    @property
    def description(self) -> str:
        return (
            "Create boolean layers from animation clips. Each clip gets its own bool "
            "parameter that switches it on and off independently of the others. "
            "Optionally adds one toggle per clip to the expressions menu."
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
                name="clips",
                type=list,
                description="Animation clips in display order; None entries are skipped.",
            ),
            ToolParameter(
                name="layer_name",
                type=str,
                description="Put every clip in this single layer instead of one layer per clip.",
                required=False,
            ),
            *menu_parameters(self.config.bool_submenu_name),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        """Build the layer(s), then mirror the gates into the menu."""
        workspace: Workspace = kwargs["workspace"]
        clips = clip_list(kwargs["clips"])
        layer_name: str | None = kwargs.get("layer_name")
        add_to_menu: bool = kwargs.get("add_to_menu", False)
        submenu_name: str = (
            kwargs["submenu_name"]
            if kwargs.get("submenu_name") is not None
            else self.config.bool_submenu_name
        )

        controller = require_controller(workspace)
        if add_to_menu:
            require_menu(workspace)

        weight = self.config.default_layer_weight
        if layer_name is not None:
            reports = [
                build_bool_layer(
                    controller,
                    require_layer_name(layer_name),
                    named_clips(clips),
                    default_weight=weight,
                )
            ]
        else:
            reports = build_bool_layers(controller, clips, default_weight=weight)

        controls_added = 0
        if add_to_menu and all(r.ok for r in reports):
            for clip in clips:
                if clip is None:
                    continue
                ensure_parameter(workspace.expression_parameters, clip.name, ParameterType.BOOL)
                if add_control(
                    workspace.expressions_menu,
                    submenu_name,
                    clip.name,
                    clip.name,
                    0.0,
                    delimiter=self.config.path_delimiter,
                ):
                    controls_added += 1

        return layer_result(
            reports,
            controls_added,
            metadata={"submenu_name": submenu_name if add_to_menu else None},
        )
