"""
Configuration dataclass for the layer and menu toolbox.

The immutable config object decouples defaults (page capacity, path delimiter,
default layer/submenu names) from function signatures so the CLI, the API and
the tests can share one definition.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

MIN_PAGE_CAPACITY: int = 2
"""A page must hold at least one payload control plus its continuation link."""


@dataclass(frozen=True)
class ToolboxConfig:
    """
    Configuration for layer synthesis and menu composition.

    Attributes:
        page_capacity: Maximum number of controls per menu page. Defaults to 8.
            Once a continuation page exists, one slot holds the ``"Page N"``
            link, leaving ``page_capacity - 1`` payload controls.
        path_delimiter: Separator for nested submenu paths ("Sounds/Cow").
        default_layer_weight: Weight given to newly created layers.
        transition_duration: Duration used by overlay ("parts") transitions.
        bool_submenu_name: Default submenu for boolean toggles.
        int_submenu_name: Default submenu for integer selectors.
        parts_submenu_name: Default submenu for overlay toggles.
        int_layer_name: Default name of the integer layer and its parameter.
        parts_layer_name: Default name of the overlay layer and its enable flag.

    Example:
        >>> config = ToolboxConfig(page_capacity=4)
        >>> menu = ExpressionsMenu("Root", capacity=config.page_capacity)
    """

    page_capacity: int = 8
    path_delimiter: str = "/"
    default_layer_weight: float = 1.0
    transition_duration: float = 0.0
    bool_submenu_name: str = "Bools"
    int_submenu_name: str = "Int"
    parts_submenu_name: str = "Parts"
    int_layer_name: str = "Int"
    parts_layer_name: str = "Parts"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.page_capacity < MIN_PAGE_CAPACITY:
            raise ValueError(
                f"page_capacity must be at least {MIN_PAGE_CAPACITY}, got {self.page_capacity}"
            )
        if not self.path_delimiter:
            raise ValueError("path_delimiter must not be empty")
        if not 0.0 <= self.default_layer_weight <= 1.0:
            raise ValueError(
                f"default_layer_weight must be in [0, 1], got {self.default_layer_weight}"
            )
        if self.transition_duration < 0:
            raise ValueError(
                f"transition_duration must be non-negative, got {self.transition_duration}"
            )
        for name in ("int_layer_name", "parts_layer_name"):
            if not getattr(self, name).strip():
                raise ValueError(f"{name} must not be blank")

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> ToolboxConfig:
        """Build a config from a parsed YAML/JSON block.

        Args:
            data: Mapping of field name to value.  ``None`` yields the defaults.

        Returns:
            New :class:`ToolboxConfig`.

        Raises:
            ValueError: On unknown keys or invalid values.
        """
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys {unknown}, valid options: {sorted(known)}")
        return cls(**data)


DEFAULT_CONFIG = ToolboxConfig()
"""Default configuration: 8 controls per page, '/' delimiter, weight 1."""
