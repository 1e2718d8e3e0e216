"""
ingestion/documents.py — Pydantic models for workspace and request documents.

A workspace document is the JSON/YAML form of a :class:`core.workspace.Workspace`
(the shape produced by ``Workspace.to_dict()``).  A request document adds an
optional config block and a list of tool operations to run against it.

Validation happens here; ``to_domain()`` converts a validated document into
the mutable core objects the tools edit.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, field_validator, model_validator

from core.animator.types import (
    AnimationClip,
    Condition,
    ConditionMode,
    Controller,
    Layer,
    OverlayItem,
    Parameter,
    ParameterSpace,
    ParameterType,
    State,
    Transition,
)
from core.menu.types import (
    DEFAULT_PAGE_CAPACITY,
    Control,
    ControlType,
    ExpressionsMenu,
    SubMenuControl,
    ToggleControl,
)
from core.workspace import Workspace

# ---------------------------------------------------------------------------
# Clips and parameters
# ---------------------------------------------------------------------------


class ClipDocument(BaseModel):
    """Reference to an animation clip."""

    name: str = Field(..., min_length=1, description="Clip name, used for state names.")
    path: str = Field("", description="Host asset path (informational).")

    def to_domain(self) -> AnimationClip:
        return AnimationClip(name=self.name, path=self.path)


class OverlayItemDocument(BaseModel):
    """A clip plus the selector value (group number) that activates it."""

    group: int = Field(..., ge=0, description="Selector value for this clip.")
    clip: ClipDocument

    def to_domain(self) -> OverlayItem:
        return OverlayItem(group=self.group, clip=self.clip.to_domain())


class ParameterDocument(BaseModel):
    """A controller or expression parameter."""

    name: str = Field(..., min_length=1)
    type: ParameterType = ParameterType.FLOAT
    default_value: float = 0.0
    saved: bool = True
    network_synced: bool = True

    def to_domain(self) -> Parameter:
        return Parameter(
            name=self.name,
            type=self.type,
            default_value=self.default_value,
            saved=self.saved,
            network_synced=self.network_synced,
        )


def _parameter_space(documents: list[ParameterDocument]) -> ParameterSpace:
    return ParameterSpace(d.to_domain() for d in documents)


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------


class ConditionDocument(BaseModel):
    parameter: str
    mode: ConditionMode
    threshold: float = 0.0


class StateDocument(BaseModel):
    name: str = Field(..., min_length=1)
    motion: ClipDocument | None = None
    is_default: bool = False
    write_defaults: bool = False


class TransitionDocument(BaseModel):
    source: str | None = Field(None, description="Source state name; null for Any State.")
    destination: str
    conditions: list[ConditionDocument] = Field(default_factory=list)
    has_exit_time: bool = False
    duration: float = Field(0.0, ge=0.0)


class LayerDocument(BaseModel):
    name: str = Field(..., min_length=1)
    default_weight: float = Field(1.0, ge=0.0, le=1.0)
    states: list[StateDocument] = Field(default_factory=list)
    transitions: list[TransitionDocument] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_graph(self) -> LayerDocument:
        """State names are unique, at most one is default, transitions resolve."""
        names = [s.name for s in self.states]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Layer {self.name!r} has duplicate states {duplicates}")
        if sum(s.is_default for s in self.states) > 1:
            raise ValueError(f"Layer {self.name!r} has more than one default state")
        known = set(names)
        for t in self.transitions:
            for ref in (t.source, t.destination):
                if ref is not None and ref not in known:
                    raise ValueError(f"Layer {self.name!r}: transition references unknown state {ref!r}")
        return self

    def to_domain(self) -> Layer:
        layer = Layer(name=self.name, default_weight=self.default_weight)
        for doc in self.states:
            layer.states.append(
                State(
                    name=doc.name,
                    motion=doc.motion.to_domain() if doc.motion is not None else None,
                    is_default=doc.is_default,
                    write_defaults=doc.write_defaults,
                )
            )
        if layer.states and layer.default_state is None:
            layer.states[0].is_default = True

        by_name = {s.name: s for s in layer.states}
        for doc in self.transitions:
            layer.transitions.append(
                Transition(
                    source=by_name[doc.source] if doc.source is not None else None,
                    destination=by_name[doc.destination],
                    conditions=[
                        Condition(parameter=c.parameter, mode=c.mode, threshold=c.threshold)
                        for c in doc.conditions
                    ],
                    has_exit_time=doc.has_exit_time,
                    duration=doc.duration,
                )
            )
        return layer


class ControllerDocument(BaseModel):
    name: str = "Controller"
    layers: list[LayerDocument] = Field(default_factory=list)
    parameters: list[ParameterDocument] = Field(default_factory=list)

    @field_validator("layers")
    @classmethod
    def layer_names_unique(cls, v: list[LayerDocument]) -> list[LayerDocument]:
        names = [layer.name for layer in v]
        if len(names) != len(set(names)):
            raise ValueError("layer names must be unique")
        return v

    def to_domain(self) -> Controller:
        return Controller(
            name=self.name,
            layers=[layer.to_domain() for layer in self.layers],
            parameters=_parameter_space(self.parameters),
        )


# ---------------------------------------------------------------------------
# Menu
# ---------------------------------------------------------------------------


class ControlDocument(BaseModel):
    name: str
    type: ControlType = ControlType.TOGGLE
    parameter: str | None = None
    value: float = 0.0
    sub_menu: MenuDocument | None = None

    @model_validator(mode="after")
    def toggle_needs_parameter(self) -> ControlDocument:
        if self.type == ControlType.TOGGLE and not self.parameter:
            raise ValueError(f"Toggle control {self.name!r} needs a parameter")
        return self

    def to_domain(self, page_capacity: int | None = None) -> Control:
        if self.type == ControlType.SUB_MENU:
            return SubMenuControl(
                name=self.name,
                sub_menu=(
                    self.sub_menu.to_domain(page_capacity) if self.sub_menu is not None else None
                ),
            )
        return ToggleControl(name=self.name, parameter_name=self.parameter, value=self.value)


class MenuDocument(BaseModel):
    name: str = "Menu"
    capacity: int = Field(DEFAULT_PAGE_CAPACITY, ge=2)
    controls: list[ControlDocument] = Field(default_factory=list)

    @model_validator(mode="after")
    def within_capacity(self) -> MenuDocument:
        # an unset capacity is checked in to_domain(), once the page capacity is known
        if "capacity" in self.model_fields_set and len(self.controls) > self.capacity:
            raise ValueError(
                f"Menu {self.name!r} holds {len(self.controls)} controls, capacity {self.capacity}"
            )
        return self

    def to_domain(self, page_capacity: int | None = None) -> ExpressionsMenu:
        """Build the menu tree.

        ``page_capacity`` replaces the capacity of every page whose document
        leaves ``capacity`` unset.

        Raises:
            ValueError: If a page holds more controls than that capacity.
        """
        capacity = self.capacity
        if page_capacity is not None and "capacity" not in self.model_fields_set:
            capacity = page_capacity
        if len(self.controls) > capacity:
            raise ValueError(
                f"Menu {self.name!r} holds {len(self.controls)} controls, capacity {capacity}"
            )
        return ExpressionsMenu(
            name=self.name,
            controls=[c.to_domain(page_capacity) for c in self.controls],
            capacity=capacity,
        )


ControlDocument.model_rebuild()


# ---------------------------------------------------------------------------
# Workspace and request
# ---------------------------------------------------------------------------


class WorkspaceDocument(BaseModel):
    """JSON/YAML form of a :class:`Workspace`."""

    controller: ControllerDocument | None = Field(default_factory=ControllerDocument)
    expressions_menu: MenuDocument | None = None
    expression_parameters: list[ParameterDocument] | None = None

    def to_domain(self, page_capacity: int | None = None) -> Workspace:
        """Build the workspace; ``page_capacity`` applies to menus without their own."""
        return Workspace(
            controller=self.controller.to_domain() if self.controller is not None else None,
            expressions_menu=(
                self.expressions_menu.to_domain(page_capacity)
                if self.expressions_menu is not None
                else None
            ),
            expression_parameters=(
                _parameter_space(self.expression_parameters)
                if self.expression_parameters is not None
                else None
            ),
        )


_CLIPS = TypeAdapter(list[ClipDocument | None])
_ITEMS = TypeAdapter(list[OverlayItemDocument])
_FOLDERS = TypeAdapter(dict[str, list[ClipDocument]])


def tool_kwargs(params: dict[str, Any]) -> dict[str, Any]:
    """Convert document-level tool params into the objects tools expect.

    ``clips``, ``items`` and ``folders`` are parsed into clip and overlay
    objects; every other key is passed through unchanged.

    Raises:
        pydantic.ValidationError: If one of those keys is malformed.
    """
    kwargs = dict(params)
    if kwargs.get("clips") is not None:
        kwargs["clips"] = [
            c.to_domain() if c is not None else None for c in _CLIPS.validate_python(kwargs["clips"])
        ]
    if kwargs.get("items") is not None:
        kwargs["items"] = [i.to_domain() for i in _ITEMS.validate_python(kwargs["items"])]
    if kwargs.get("folders") is not None:
        kwargs["folders"] = {
            folder: [c.to_domain() for c in clips]
            for folder, clips in _FOLDERS.validate_python(kwargs["folders"]).items()
        }
    return kwargs


class OperationDocument(BaseModel):
    """One tool invocation."""

    tool: str = Field(..., min_length=1, description="Registered tool name.")
    params: dict[str, Any] = Field(default_factory=dict)


class RequestDocument(BaseModel):
    """A toolbox run: optional config, a workspace, and operations in order."""

    config: dict[str, Any] | None = None
    workspace: WorkspaceDocument = Field(default_factory=WorkspaceDocument)
    operations: list[OperationDocument] = Field(default_factory=list)
