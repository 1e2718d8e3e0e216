"""api/routes/menu.py — Expressions menu editing.

POST /menu/controls — add one toggle under a folder path
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.tools import run_tool
from api.schemas.toolbox import MenuControlRequest, ToolboxResponse

router = APIRouter(prefix="/menu", tags=["menu"])


@router.post("/controls", response_model=ToolboxResponse)
def add_menu_control(request: MenuControlRequest) -> ToolboxResponse:
    """Insert a toggle, creating submenus and overflow pages as needed.

    ``data.added`` is false when an identical control already sits on the
    target page; the workspace is then returned unchanged.
    """
    return run_tool("add_menu_control", request.workspace, request.tool_params())
