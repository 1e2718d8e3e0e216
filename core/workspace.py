"""core/workspace.py — The set of host objects a toolbox operation edits.

A workspace bundles the animator controller with the optional expression menu
and its synchronized parameter set.  Any of them may be ``None``; tools check
what they need before running.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.animator.types import Controller, ParameterSpace
from core.menu.types import ExpressionsMenu


@dataclass(eq=False)
class Workspace:
    """Mutable bundle of the objects edited by a toolbox operation."""

    controller: Controller | None = field(default_factory=Controller)
    expressions_menu: ExpressionsMenu | None = None
    expression_parameters: ParameterSpace | None = None

    def to_dict(self) -> dict:
        return {
            "controller": self.controller.to_dict() if self.controller is not None else None,
            "expressions_menu": (
                self.expressions_menu.to_dict() if self.expressions_menu is not None else None
            ),
            "expression_parameters": (
                self.expression_parameters.to_list()
                if self.expression_parameters is not None
                else None
            ),
        }
