"""Toolbox tools — one ToolboxTool subclass per editor workflow, auto-discovered by tools.registry."""
