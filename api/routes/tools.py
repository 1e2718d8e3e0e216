"""api/routes/tools.py — Direct tool invocation endpoint.

POST /tools/call  — Execute any registered ToolboxTool by name with a params dict.
GET  /tools/list  — List all registered tools with their parameter schemas.

Thin HTTP boundary: no business logic.  Delegates to the global ToolRegistry
singleton defined in tools/registry.py.  Tool errors are encoded in the
response body (success=False, error=str); malformed documents get a 422.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, ValidationError

from api.schemas.toolbox import ToolboxResponse
from ingestion.documents import WorkspaceDocument, tool_kwargs
from tools.registry import get_registry

router = APIRouter(prefix="/tools", tags=["tools"])


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class ToolCallRequest(BaseModel):
    """POST /tools/call request body."""

    name: str
    """Tool name as returned by ToolRegistry.list_tools()['name']."""

    params: dict[str, Any] = {}
    """Keyword arguments forwarded to the tool; clips/items/folders in document form."""

    workspace: WorkspaceDocument = Field(default_factory=WorkspaceDocument)


# ---------------------------------------------------------------------------
# Shared runner
# ---------------------------------------------------------------------------


def run_tool(name: str, workspace: WorkspaceDocument, params: dict[str, Any]) -> ToolboxResponse:
    """Run a registered tool against a fresh copy of ``workspace``.

    Raises:
        HTTPException(404): Tool not registered.
        HTTPException(422): A clip/item/folder param is malformed, or a menu
            page holds more controls than the configured page capacity.
    """
    registry = get_registry()
    tool = registry.get(name)
    if tool is None:
        available = [t["name"] for t in registry.list_tools()]
        raise HTTPException(
            status_code=404,
            detail=f"Tool '{name}' not found in registry. Available tools: {available}",
        )

    try:
        kwargs = tool_kwargs(params)
    except ValidationError as exc:
        detail = exc.errors(include_url=False, include_context=False)
        raise HTTPException(status_code=422, detail=detail) from exc

    try:
        domain_workspace = workspace.to_domain(tool.config.page_capacity)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    result = tool(workspace=domain_workspace, **kwargs)
    return ToolboxResponse(
        success=result.success,
        data=result.data,
        error=result.error,
        metadata=result.metadata,
        workspace=domain_workspace.to_dict(),
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post("/call", response_model=ToolboxResponse)
def call_tool(request: ToolCallRequest) -> ToolboxResponse:
    """Execute a registered ToolboxTool by name.

    Args:
        request: Tool name, params dict and the workspace to edit.

    Returns:
        ToolboxResponse — the ToolResult fields plus the edited workspace.

    Raises:
        HTTPException(404): Tool not registered.
    """
    params = {k: v for k, v in request.params.items() if k != "workspace"}
    return run_tool(request.name, request.workspace, params)


@router.get("/list")
def list_tools() -> list[dict[str, Any]]:
    """List all registered tools with their parameter schemas.

    Returns:
        List of tool dicts — each has ``name``, ``description``,
        and ``parameters`` (list of param dicts).
    """
    return get_registry().list_tools()
