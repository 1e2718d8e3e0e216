"""core/errors.py — Named failures raised by the layer and menu builders.

Two categories:

    ConfigurationError  — the caller supplied an unusable setup (a required
                          handle is ``None``, a selector parameter is missing or
                          has the wrong type).  Builders catch it and report it.
    InvariantViolation  — an internal contract of the menu composer was broken.
                          Never caught inside ``core``.
"""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A required collaborator or parameter is missing or mistyped."""


class InvariantViolation(AssertionError):
    """A composer precondition that upstream code should have guaranteed."""
