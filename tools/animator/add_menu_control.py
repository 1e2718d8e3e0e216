"""add_menu_control tool — Add one toggle to the expressions menu.

Creates the folder path on the way down ("Sounds/Cow"), moves to a new page
when the target page is full, and skips exact duplicates.  The parameter is
declared in the expression parameters if it is not there yet.
"""

from __future__ import annotations

from typing import Any

from core.animator.parameters import ensure_parameter
from core.animator.types import ParameterType
from core.menu.composer import find_last_page, insert_control, resolve_path
from core.menu.types import ToggleControl
from core.workspace import Workspace
from tools.animator.common import require_menu
from tools.base import ToolboxTool, ToolParameter, ToolResult


class AddMenuControl(ToolboxTool):
    """Insert a toggle control under a folder path."""

    @property
    def name(self) -> str:
        return "add_menu_control"

    @property
    def description(self) -> str:
        return (
            "Add a toggle to the expressions menu under a '/'-separated folder path, "
            "creating submenus and overflow pages as needed."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="workspace",
                type=Workspace,
                description="Workspace holding the expressions menu and its parameters.",
            ),
            ToolParameter(
                name="control_name",
                type=str,
                description="Label of the new toggle.",
            ),
            ToolParameter(
                name="parameter_name",
                type=str,
                description="Parameter driven by the toggle (defaults to control_name).",
                required=False,
            ),
            ToolParameter(
                name="folder_path",
                type=str,
                description="Submenu path, e.g. 'Sounds/Cow'. Empty for the menu root.",
                required=False,
                default="",
            ),
            ToolParameter(
                name="value",
                type=(int, float),
                description="Value the toggle sets while active.",
                required=False,
                default=0,
            ),
            ToolParameter(
                name="parameter_type",
                type=str,
                description="'bool', 'int' or 'float' for a newly declared parameter.",
                required=False,
                default="bool",
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        """Resolve the folder, declare the parameter, insert the toggle."""
        workspace: Workspace = kwargs["workspace"]
        control_name: str = kwargs["control_name"]
        parameter_name: str = kwargs.get("parameter_name") or control_name
        folder_path: str = kwargs.get("folder_path") or ""

        require_menu(workspace)
        if not control_name.strip():
            return ToolResult(success=False, error="control_name must not be blank")

        parameter = ensure_parameter(
            workspace.expression_parameters,
            parameter_name,
            ParameterType.parse(kwargs.get("parameter_type") or "bool"),
        )
        container = resolve_path(
            workspace.expressions_menu, folder_path, self.config.path_delimiter
        )
        toggle = ToggleControl(
            name=control_name,
            parameter_name=parameter_name,
            value=float(kwargs.get("value") or 0),
        )
        added = insert_control(container, toggle)

        return ToolResult(
            success=True,
            data={
                "added": added,
                "container": container.name,
                "page": find_last_page(container).name,
                "parameter": parameter.to_dict(),
            },
        )
