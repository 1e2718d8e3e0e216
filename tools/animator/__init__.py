"""Layer and menu tools operating on a :class:`core.workspace.Workspace`."""
