"""
Tool registry with automatic discovery.

The registry discovers all ToolboxTool subclasses and provides
lookup by name. No hardcoding — tools register themselves.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil

from core.config import DEFAULT_CONFIG, ToolboxConfig
from tools.base import ToolboxTool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Registry for all toolbox tools with automatic discovery.

    Tools are discovered by scanning the tools/ package for
    ToolboxTool subclasses. Every discovered tool shares the
    registry's config. No manual registration required.

    Usage:
        registry = ToolRegistry()
        registry.discover()  # Auto-discover all tools

        tool = registry.get("create_int_layer")
        result = tool(workspace=workspace, clips=clips)
    """

    def __init__(self, config: ToolboxConfig = DEFAULT_CONFIG):
        self.config = config
        self._tools: dict[str, ToolboxTool] = {}

    def register(self, tool: ToolboxTool) -> None:
        """
        Register a tool instance.

        Args:
            tool: ToolboxTool instance to register

        Raises:
            ValueError: If tool with same name already registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")

        self._tools[tool.name] = tool

    def get(self, name: str) -> ToolboxTool | None:
        """
        Get tool by name.

        Args:
            name: Tool name

        Returns:
            ToolboxTool instance or None if not found
        """
        return self._tools.get(name)

    def list_tools(self) -> list[dict]:
        """
        List all registered tools.

        Returns:
            List of tool dicts (name, description, parameters)
        """
        return [tool.to_dict() for tool in self._tools.values()]

    def discover(self, package_name: str = "tools") -> int:
        """
        Auto-discover all ToolboxTool subclasses in package.

        Scans all modules in the package and registers ToolboxTool
        subclasses automatically. No manual imports needed.

        Args:
            package_name: Package to scan (default: "tools")

        Returns:
            Number of tools discovered
        """
        count = 0

        try:
            package = importlib.import_module(package_name)
        except ImportError:
            logger.warning("Tool package %r could not be imported", package_name)
            return 0

        if not hasattr(package, "__path__"):
            return 0

        for _finder, module_name, _is_pkg in pkgutil.walk_packages(
            package.__path__, prefix=f"{package_name}."
        ):
            try:
                module = importlib.import_module(module_name)
            except ImportError as exc:
                logger.warning("Skipping %s: %s", module_name, exc)
                continue

            for _name, obj in inspect.getmembers(module, inspect.isclass):
                if obj is ToolboxTool or obj.__module__ != module.__name__:
                    continue

                if issubclass(obj, ToolboxTool) and not inspect.isabstract(obj):
                    tool_instance = obj(config=self.config)
                    if tool_instance.name in self._tools:
                        continue
                    self.register(tool_instance)
                    count += 1

        return count

    def __len__(self) -> int:
        """Return number of registered tools."""
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        """Check if tool is registered."""
        return name in self._tools


# Global registry instance
_registry: ToolRegistry | None = None


def get_registry() -> ToolRegistry:
    """
    Get global tool registry singleton.

    Auto-discovers tools on first call.

    Returns:
        Initialized ToolRegistry
    """
    global _registry
    if _registry is None:
        _registry = ToolRegistry()
        _registry.discover()
    return _registry
