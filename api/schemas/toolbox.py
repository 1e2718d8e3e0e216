"""
Pydantic schemas for the ``/layers`` and ``/menu`` endpoints.

Every request carries the workspace it edits; every response carries the
workspace as it looks after the tool ran.  A failed wiring is not rolled
back: a reset layer and the states created before the failure stay in place.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ingestion.documents import ClipDocument, OverlayItemDocument, WorkspaceDocument


class WorkspaceRequest(BaseModel):
    """Fields shared by every toolbox request."""

    workspace: WorkspaceDocument = Field(
        default_factory=WorkspaceDocument,
        description="Controller, expressions menu and expression parameters to edit.",
    )

    def tool_params(self) -> dict[str, Any]:
        """Return the tool keyword arguments (everything but the workspace, unset fields dropped)."""
        dumped = self.model_dump(exclude={"workspace"})
        return {k: v for k, v in dumped.items() if v is not None}


class MenuOptions(BaseModel):
    add_to_menu: bool = Field(default=False, description="Mirror the new gates into the menu.")
    submenu_name: str | None = Field(
        default=None,
        description="Submenu path for the new controls. Empty string means the menu root.",
    )


class BoolLayersRequest(WorkspaceRequest, MenuOptions):
    """Request body for ``POST /layers/bool``."""

    clips: list[ClipDocument | None] = Field(..., description="Clips in display order.")
    layer_name: str | None = Field(
        default=None, description="Single layer name; omit for one layer per clip."
    )


class IntLayerRequest(WorkspaceRequest, MenuOptions):
    """Request body for ``POST /layers/int``."""

    clips: list[ClipDocument | None] = Field(..., description="Clips in selector order.")
    layer_name: str | None = None
    parameter_name: str | None = Field(
        default=None, description="Selector parameter; defaults to the layer name."
    )


class PartsLayerRequest(WorkspaceRequest, MenuOptions):
    """Request body for ``POST /layers/parts``."""

    selector: str | None = Field(default=None, description="Existing int parameter.")
    items: list[OverlayItemDocument] | None = None
    folders: dict[str, list[ClipDocument]] | None = Field(
        default=None, description="Numbered folder name ('3.Hats') to its clips."
    )
    layer_name: str | None = None
    enable_parameter: str | None = None
    transition_duration: float | None = Field(default=None, ge=0.0)


class MenuControlRequest(WorkspaceRequest):
    """Request body for ``POST /menu/controls``."""

    control_name: str = Field(..., max_length=200, description="Toggle label.")
    parameter_name: str | None = None
    folder_path: str = Field(default="", description="Submenu path, e.g. 'Sounds/Cow'.")
    value: float = 0.0
    parameter_type: str = Field(default="bool", description="'bool', 'int' or 'float'.")

    @field_validator("control_name")
    @classmethod
    def control_name_must_not_be_blank(cls, v: str) -> str:
        """Validate that the label is not empty or whitespace-only."""
        if not v.strip():
            raise ValueError("control_name must be a non-empty string")
        return v


class ToolboxResponse(BaseModel):
    """Response body for every toolbox endpoint."""

    success: bool
    data: Any = None
    error: str | None = None
    metadata: dict[str, Any] | None = None
    workspace: dict[str, Any] | None = Field(
        default=None, description="Workspace after the operation, in document form."
    )
