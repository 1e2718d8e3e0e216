"""create_int_layer tool — Select one clip at a time with an int parameter.

State ``i_<clip>`` plays while the selector equals ``i`` (1-based position in
the clip list); ``0_Default`` plays at 0.  Empty slots keep their number so
that menu values line up with list positions.
"""

from __future__ import annotations

from typing import Any

from core.animator.layers import build_int_layer
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


class CreateIntLayer(ToolboxTool):
    """Build an integer-selected layer from a list of clips."""

    @property
    def name(self) -> str:
        return "create_int_layer"

    @property
    def description(self) -> str:
        return (
            "Create one layer whose clips are selected by a shared int parameter. "
            "Optionally adds a toggle per clip that sets the parameter to the clip's number."
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
                description="Animation clips in selector order; None entries keep their number.",
            ),
            ToolParameter(
                name="layer_name",
                type=str,
                description=f"Layer name (default {self.config.int_layer_name!r}).",
                required=False,
            ),
            ToolParameter(
                name="parameter_name",
                type=str,
                description="Selector parameter name (defaults to the layer name).",
                required=False,
            ),
            *menu_parameters(self.config.int_submenu_name),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        """Build the layer, then add one toggle per clip to the menu."""
        workspace: Workspace = kwargs["workspace"]
        clips = clip_list(kwargs["clips"])
        layer_name = require_layer_name(kwargs.get("layer_name") or self.config.int_layer_name)
        selector: str = kwargs.get("parameter_name") or layer_name
        add_to_menu: bool = kwargs.get("add_to_menu", False)
        submenu_name: str = (
            kwargs["submenu_name"]
            if kwargs.get("submenu_name") is not None
            else self.config.int_submenu_name
        )

        controller = require_controller(workspace)
        if add_to_menu:
            require_menu(workspace)

        report = build_int_layer(
            controller,
            layer_name,
            named_clips(clips),
            parameter_name=selector,
            default_weight=self.config.default_layer_weight,
        )

        controls_added = 0
        if add_to_menu and report.ok:
            ensure_parameter(workspace.expression_parameters, selector, ParameterType.INT)
            for index, clip in enumerate(clips, start=1):
                if clip is None:
                    continue
                if add_control(
                    workspace.expressions_menu,
                    submenu_name,
                    clip.name,
                    selector,
                    float(index),
                    delimiter=self.config.path_delimiter,
                ):
                    controls_added += 1

        return layer_result(
            [report],
            controls_added,
            metadata={"parameter_name": selector},
        )
