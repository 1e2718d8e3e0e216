#!/usr/bin/env python
"""Avatar toolbox runner — apply a batch of tool operations to a workspace.

Usage
-----
    # Run every operation in a request file and print the workspace
    python scripts/run_toolbox.py request.yaml

    # Write the resulting workspace to a file
    python scripts/run_toolbox.py request.yaml --output out/workspace.json

    # Keep going after a failed operation
    python scripts/run_toolbox.py request.yaml --keep-going

Request file
------------
    config:              # optional, see core/config.py ToolboxConfig
      page_capacity: 8
    workspace:           # optional, Workspace.to_dict() shape
      expressions_menu: {name: Menu}
      expression_parameters: []
    operations:
      - tool: create_int_layer
        params:
          clips: [{name: Jacket}, {name: Hoodie}]
          add_to_menu: true

Exit codes
----------
    0  — every operation succeeded
    1  — at least one operation failed
    2  — the request file could not be read or validated
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to sys.path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError  # noqa: E402

from core.config import ToolboxConfig  # noqa: E402
from core.logging_setup import configure_logging  # noqa: E402
from ingestion.documents import tool_kwargs  # noqa: E402
from ingestion.workspace_io import dump_workspace, load_request, write_workspace  # noqa: E402
from tools.registry import ToolRegistry  # noqa: E402

logger = logging.getLogger("scripts.run_toolbox")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Apply toolbox operations to an avatar workspace")
    p.add_argument("request", type=Path, help="YAML or JSON request file")
    p.add_argument(
        "--output",
        metavar="OUTPUT_JSON",
        type=Path,
        default=None,
        help="Write the resulting workspace here instead of stdout",
    )
    p.add_argument(
        "--keep-going",
        action="store_true",
        help="Run the remaining operations after one fails",
    )
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr output (default: INFO)",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(getattr(logging, args.log_level))

    try:
        request = load_request(args.request)
        config = ToolboxConfig.from_mapping(request.config)
        workspace = request.workspace.to_domain(config.page_capacity)
    except (OSError, ValueError) as exc:
        logger.error("Cannot load %s: %s", args.request, exc)
        return 2

    registry = ToolRegistry(config)
    registry.discover()

    failures = 0
    for position, operation in enumerate(request.operations, start=1):
        tool = registry.get(operation.tool)
        if tool is None:
            logger.error("Operation %d: unknown tool %r", position, operation.tool)
            failures += 1
        else:
            try:
                kwargs = tool_kwargs(operation.params)
            except ValidationError as exc:
                logger.error("Operation %d (%s): invalid params: %s", position, tool.name, exc)
                failures += 1
            else:
                result = tool(workspace=workspace, **kwargs)
                if result.success:
                    logger.info("Operation %d (%s): ok", position, tool.name)
                else:
                    logger.error("Operation %d (%s): %s", position, tool.name, result.error)
                    failures += 1
        if failures and not args.keep_going:
            break

    if args.output is not None:
        write_workspace(workspace, args.output)
    else:
        print(dump_workspace(workspace))

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
