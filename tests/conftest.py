"""
Shared fixtures for the test suite.

Centralizes reusable test infrastructure so individual test files
don't need to repeat workspace and client boilerplate.
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app

# ---------------------------------------------------------------------------
# Document fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def workspace_document() -> dict:
    """Workspace document with an empty controller, menu and parameter set."""
    return {
        "controller": {"name": "FX", "layers": [], "parameters": []},
        "expressions_menu": {"name": "Menu", "controls": []},
        "expression_parameters": [],
    }


# ---------------------------------------------------------------------------
# FastAPI test client fixture
# ---------------------------------------------------------------------------


@pytest.fixture()
def api_client():
    """FastAPI ``TestClient`` bound to the toolbox app."""
    with TestClient(app) as c:
        yield c
