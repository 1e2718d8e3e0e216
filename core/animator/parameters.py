"""core/animator/parameters.py — Idempotent parameter declaration.

``ensure_parameter`` is shared by the layer builders (controller parameters)
and the menu tools (synchronized menu parameters).  The first declaration of
a name wins: re-declaring it with another type returns the existing entry
untouched, so callers that care about the type must check the result.
"""

from __future__ import annotations

import logging

from core.animator.types import Parameter, ParameterSpace, ParameterType
from core.errors import ConfigurationError

logger = logging.getLogger(__name__)


def ensure_parameter(
    space: ParameterSpace | None,
    name: str,
    parameter_type: ParameterType | str,
) -> Parameter:
    """Return the parameter called ``name``, creating it if absent.

    Args:
        space:          Target parameter space.
        name:           Parameter name.
        parameter_type: Requested type (enum or ``"bool"``/``"int"``/``"float"``).

    Returns:
        The newly created parameter (default value 0), or the existing entry
        unchanged when the name is already declared.

    Raises:
        ConfigurationError: If ``space`` is ``None``.
    """
    if space is None:
        raise ConfigurationError(f"Cannot declare parameter {name!r}: parameter space is None")

    requested = ParameterType.parse(parameter_type)
    existing = space.get(name)
    if existing is not None:
        if existing.type != requested:
            logger.debug(
                "Parameter %r already declared as %s; ignoring %s",
                name,
                existing.type.value,
                requested.value,
            )
        return existing

    parameter = Parameter(name=name, type=requested, default_value=0.0)
    space.add(parameter)
    return parameter


def find_parameter(
    space: ParameterSpace,
    name: str,
    parameter_type: ParameterType | None = None,
) -> Parameter | None:
    """Look up ``name``, optionally requiring a specific type."""
    parameter = space.get(name)
    if parameter is None:
        return None
    if parameter_type is not None and parameter.type != parameter_type:
        return None
    return parameter


def int_parameter_names(space: ParameterSpace | None) -> list[str]:
    """Names of the INT parameters in ``space``, in declaration order.

    These are the candidates for an overlay layer's selector.
    """
    if space is None:
        return []
    return [p.name for p in space if p.type == ParameterType.INT]
