"""core/menu/types.py — Paginated expression-menu model.

Hierarchy:

    ExpressionsMenu (capacity controls per page)
    ├── ToggleControl   (parameter + value)
    └── SubMenuControl  (link to a child ExpressionsMenu)
        └── "Page N" links form a chain of overflow pages

Controls are tagged variants.  Two controls are duplicates when their
``key`` — ``(name, type, parameter_name, value)`` — is equal.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

DEFAULT_PAGE_CAPACITY: int = 8

ControlKey = tuple[str, "ControlType", Union[str, None], Union[float, None]]


class ControlType(str, Enum):
    TOGGLE = "toggle"
    SUB_MENU = "sub_menu"


@dataclass(frozen=True)
class ToggleControl:
    """A menu entry that sets ``parameter_name`` to ``value`` while active."""

    name: str
    parameter_name: str
    value: float = 0.0

    type: ClassVar[ControlType] = ControlType.TOGGLE

    @property
    def key(self) -> ControlKey:
        return (self.name, self.type, self.parameter_name, float(self.value))

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type.value,
            "parameter": self.parameter_name,
            "value": self.value,
        }


@dataclass(eq=False)
class SubMenuControl:
    """A menu entry that opens ``sub_menu``.

    ``sub_menu`` can be ``None`` for a link whose target was never assigned.
    """

    name: str
    sub_menu: ExpressionsMenu | None = None

    type: ClassVar[ControlType] = ControlType.SUB_MENU

    @property
    def key(self) -> ControlKey:
        return (self.name, self.type, None, None)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type.value,
            "sub_menu": self.sub_menu.to_dict() if self.sub_menu is not None else None,
        }


Control = Union[ToggleControl, SubMenuControl]


@dataclass(eq=False)
class ExpressionsMenu:
    """One menu page: an ordered list of at most ``capacity`` controls."""

    name: str
    controls: list[Control] = field(default_factory=list)
    capacity: int = DEFAULT_PAGE_CAPACITY

    def __post_init__(self) -> None:
        if self.capacity < 2:
            raise ValueError(f"Menu capacity must be at least 2, got {self.capacity}")

    @property
    def is_full(self) -> bool:
        return len(self.controls) >= self.capacity

    def sub_menu_controls(self) -> Iterator[SubMenuControl]:
        for control in self.controls:
            if isinstance(control, SubMenuControl):
                yield control

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "capacity": self.capacity,
            "controls": [c.to_dict() for c in self.controls],
        }
