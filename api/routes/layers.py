"""api/routes/layers.py — Layer generation endpoints.

POST /layers/bool   — boolean-gated layers, one gate per clip
POST /layers/int    — one layer selected by an int parameter
POST /layers/parts  — overlay layer picked by an existing int selector
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.tools import run_tool
from api.schemas.toolbox import (
    BoolLayersRequest,
    IntLayerRequest,
    PartsLayerRequest,
    ToolboxResponse,
)

router = APIRouter(prefix="/layers", tags=["layers"])


@router.post("/bool", response_model=ToolboxResponse)
def create_bool_layers(request: BoolLayersRequest) -> ToolboxResponse:
    """Create boolean layers and optionally mirror them into the menu."""
    return run_tool("create_bool_layers", request.workspace, request.tool_params())


@router.post("/int", response_model=ToolboxResponse)
def create_int_layer(request: IntLayerRequest) -> ToolboxResponse:
    """Create an int-selected layer.

    Null clip entries keep their slot number, so the menu value for a clip
    always equals its 1-based position in ``clips``.
    """
    return run_tool("create_int_layer", request.workspace, request.tool_params())


@router.post("/parts", response_model=ToolboxResponse)
def create_parts_layer(request: PartsLayerRequest) -> ToolboxResponse:
    """Create an overlay layer; a missing selector comes back as success=False."""
    return run_tool("create_parts_layer", request.workspace, request.tool_params())
