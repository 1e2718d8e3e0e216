"""
ingestion/workspace_io.py — Read toolbox requests, write workspaces.

Request files are YAML (JSON is valid YAML, so ``.json`` files load through
the same path).  Output is always JSON in the ``Workspace.to_dict()`` shape,
which :class:`ingestion.documents.WorkspaceDocument` reads back.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml  # PyYAML

from core.workspace import Workspace
from ingestion.documents import RequestDocument, WorkspaceDocument

logger = logging.getLogger(__name__)


def _read_mapping(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")
    return data


def load_request(path: str | Path) -> RequestDocument:
    """Parse a request file into a validated :class:`RequestDocument`.

    Args:
        path: YAML or JSON file with optional ``config``, ``workspace`` and
            ``operations`` keys.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a mapping or fails validation
            (``pydantic.ValidationError`` is a ValueError).
    """
    path = Path(path)
    request = RequestDocument.model_validate(_read_mapping(path))
    logger.info("Loaded request %s (%d operations)", path.name, len(request.operations))
    return request


def load_workspace(path: str | Path) -> Workspace:
    """Read a workspace file (as written by :func:`write_workspace`)."""
    path = Path(path)
    return WorkspaceDocument.model_validate(_read_mapping(path)).to_domain()


def dump_workspace(workspace: Workspace) -> str:
    """Serialize a workspace to indented JSON."""
    return json.dumps(workspace.to_dict(), indent=2)


def write_json(data: dict[str, Any], path: str | Path) -> Path:
    """Write ``data`` as indented JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote %s", path)
    return path


def write_workspace(workspace: Workspace, path: str | Path) -> Path:
    """Write a workspace as JSON."""
    return write_json(workspace.to_dict(), path)
