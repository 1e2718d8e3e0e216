"""
Tool base class and common types.

All toolbox tools inherit from ToolboxTool and implement execute().
This ensures consistent interface for tool registry, API and CLI.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from core.config import DEFAULT_CONFIG, ToolboxConfig
from core.errors import ConfigurationError


def _type_name(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__


@dataclass(frozen=True)
class ToolParameter:
    """
    Tool parameter specification.

    Attributes:
        name: Parameter name
        type: Python type, or tuple of accepted types
        description: Human-readable description
        required: Whether parameter is required
        default: Default value if not required
    """

    name: str
    type: type | tuple[type, ...]
    description: str
    required: bool = True
    default: Any = None

    def validate(self, value: Any) -> tuple[bool, str | None]:
        """
        Validate parameter value.

        Args:
            value: Value to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if value is None:
            if self.required:
                return False, f"Required parameter '{self.name}' is missing"
            return True, None

        # bool is an int subclass; only accept it where bool is expected
        expected = self.type if isinstance(self.type, tuple) else (self.type,)
        if isinstance(value, bool) and bool not in expected:
            return False, f"Parameter '{self.name}' must be {_type_name(self.type)}, got bool"

        if not isinstance(value, self.type):
            return (
                False,
                f"Parameter '{self.name}' must be {_type_name(self.type)}, "
                f"got {type(value).__name__}",
            )

        return True, None


@dataclass(frozen=True)
class ToolResult:
    """
    Result from tool execution.

    Attributes:
        success: Whether execution succeeded
        data: Result data (dict, list, str, etc.)
        error: Error message if success=False
        metadata: Optional metadata (config used, counts, etc.)
    """

    success: bool
    data: Any = None
    error: str | None = None
    metadata: dict[str, Any] | None = None


class ToolboxTool(ABC):
    """
    Abstract base class for all toolbox tools.

    A tool is one editor workflow: it edits the objects of a
    :class:`core.workspace.Workspace` in place and describes what it did.

    Subclasses must implement:
        - name: Unique tool identifier
        - description: What the tool builds
        - parameters: List of ToolParameter specs
        - execute(): Core tool logic

    Example:
        class ClearLayer(ToolboxTool):
            @property
            def name(self) -> str:
                return "clear_layer"

            def execute(self, **kwargs) -> ToolResult:
                ...
                return ToolResult(success=True, data={...})
    """

    def __init__(self, config: ToolboxConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool identifier (lowercase, underscores)."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool builds."""
        pass

    @property
    @abstractmethod
    def parameters(self) -> list[ToolParameter]:
        """
        List of parameters this tool accepts.

        Order matters — positional parameters come first.
        """
        pass

    def validate_inputs(self, **kwargs) -> tuple[bool, str | None]:
        """
        Validate all input parameters.

        Args:
            **kwargs: Parameter values to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        for param in self.parameters:
            value = kwargs.get(param.name)
            is_valid, error = param.validate(value)
            if not is_valid:
                return False, error

        return True, None

    def with_defaults(self, **kwargs) -> dict[str, Any]:
        """Return ``kwargs`` with missing optional parameters filled in."""
        resolved = dict(kwargs)
        for param in self.parameters:
            if resolved.get(param.name) is None and not param.required:
                resolved[param.name] = param.default
        return resolved

    @abstractmethod
    def execute(self, **kwargs) -> ToolResult:
        """
        Execute tool with validated parameters.

        Args:
            **kwargs: Tool parameters (already validated, defaults applied)

        Returns:
            ToolResult with success status and data
        """
        pass

    def __call__(self, **kwargs) -> ToolResult:
        """
        Execute tool with automatic validation.

        This is the main entry point — validates inputs then calls execute().
        Configuration errors become failed results; anything else propagates.

        Args:
            **kwargs: Tool parameters

        Returns:
            ToolResult (error if validation fails)
        """
        is_valid, error = self.validate_inputs(**kwargs)
        if not is_valid:
            return ToolResult(success=False, error=error)

        try:
            return self.execute(**self.with_defaults(**kwargs))
        except ConfigurationError as e:
            return ToolResult(success=False, error=f"Configuration error: {e}")

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize tool for API consumption.

        Returns dict with name, description, parameters.
        """
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [
                {
                    "name": p.name,
                    "type": _type_name(p.type),
                    "description": p.description,
                    "required": p.required,
                    "default": p.default,
                }
                for p in self.parameters
            ],
        }
