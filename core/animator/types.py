"""core/animator/types.py — Data model for animator controllers.

Hierarchy:

    Controller
    ├── ParameterSpace (name-unique parameters)
    └── Layer (N layers)
        ├── State (one default + one per clip)
        └── Transition (source state or Any State → destination)
            └── Condition (parameter, mode, threshold)

Value objects (``Parameter``, ``Condition``, ``AnimationClip``, ``NamedClip``,
``OverlayItem``, ``LayerBuildReport``) are frozen dataclasses.  Graph nodes
(``State``, ``Transition``, ``Layer``, ``Controller``) are mutable and compare
by identity: builders rewire them in place.

No I/O, no env vars, no imports from api/ or ingestion/.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ParameterType(str, Enum):
    """Kinds of parameters a parameter space can hold."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"

    @classmethod
    def parse(cls, text: str | ParameterType) -> ParameterType:
        """Parse ``"bool"`` / ``"int"`` / ``"float"`` (case-insensitive).

        Unknown text falls back to :attr:`FLOAT` with a warning.
        """
        if isinstance(text, ParameterType):
            return text
        try:
            return cls(text.strip().lower())
        except ValueError:
            logger.warning("Invalid parameter type %r. Defaulting to float", text)
            return cls.FLOAT


class ConditionMode(str, Enum):
    """Transition condition operators.

    ``IF`` / ``IF_NOT`` test a bool parameter; the rest compare numbers.
    """

    IF = "if"
    IF_NOT = "if_not"
    GREATER = "greater"
    LESS = "less"
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Parameter:
    """A named parameter.  Identity is ``name``.

    ``saved`` and ``network_synced`` only matter for the menu's synchronized
    parameter set; controller-side parameters keep the defaults.
    """

    name: str
    type: ParameterType
    default_value: float = 0.0
    saved: bool = True
    network_synced: bool = True

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type.value,
            "default_value": self.default_value,
            "saved": self.saved,
            "network_synced": self.network_synced,
        }


class ParameterSpace:
    """Ordered collection holding at most one :class:`Parameter` per name.

    Used both for a controller's parameters and for a menu's synchronized
    parameters.  Insertion order is preserved.
    """

    def __init__(self, parameters: Iterable[Parameter] = ()) -> None:
        self._parameters: dict[str, Parameter] = {}
        for parameter in parameters:
            self._parameters.setdefault(parameter.name, parameter)

    def get(self, name: str) -> Parameter | None:
        return self._parameters.get(name)

    def add(self, parameter: Parameter) -> None:
        """Insert ``parameter``.

        Raises:
            ValueError: If a parameter with the same name already exists.
        """
        if parameter.name in self._parameters:
            raise ValueError(f"Parameter {parameter.name!r} already exists")
        self._parameters[parameter.name] = parameter

    def names(self) -> list[str]:
        return list(self._parameters)

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._parameters.values())

    def __len__(self) -> int:
        return len(self._parameters)

    def __repr__(self) -> str:
        return f"ParameterSpace({list(self._parameters.values())!r})"

    def to_list(self) -> list[dict]:
        return [p.to_dict() for p in self]


# ---------------------------------------------------------------------------
# Clips
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AnimationClip:
    """Opaque reference to an animation asset owned by the host application."""

    name: str
    path: str = ""
    """Asset path as known by the host; informational only."""

    def to_dict(self) -> dict:
        return {"name": self.name, "path": self.path}


@dataclass(frozen=True)
class NamedClip:
    """One entry of a caller-supplied clip list.  ``clip`` may be ``None``."""

    name: str
    clip: AnimationClip | None = None

    @classmethod
    def of(cls, clip: AnimationClip | None) -> NamedClip:
        """Wrap a clip, naming the entry after it (``""`` for an empty slot)."""
        return cls(name=clip.name if clip is not None else "", clip=clip)


def named_clips(clips: Iterable[AnimationClip | None]) -> list[NamedClip]:
    """Wrap a plain clip list, keeping ``None`` slots in place."""
    return [NamedClip.of(clip) for clip in clips]


@dataclass(frozen=True)
class OverlayItem:
    """A pre-selected clip for an overlay layer, keyed by its group number."""

    group: int
    """Selector value that activates this clip (taken from the folder prefix)."""

    clip: AnimationClip


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Condition:
    """A transition guard: ``parameter <mode> threshold``."""

    parameter: str
    mode: ConditionMode
    threshold: float = 0.0

    def to_dict(self) -> dict:
        return {"parameter": self.parameter, "mode": self.mode.value, "threshold": self.threshold}


@dataclass(eq=False)
class State:
    """A state inside a layer.  Identity is ``name`` within the owning layer."""

    name: str
    motion: AnimationClip | None = None
    is_default: bool = False
    write_defaults: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "motion": self.motion.to_dict() if self.motion is not None else None,
            "is_default": self.is_default,
            "write_defaults": self.write_defaults,
        }


@dataclass(eq=False)
class Transition:
    """A directed edge between states.

    ``source`` is ``None`` for an Any State transition.  Transitions built by
    this package never wait for exit time: they fire on their conditions only.
    """

    source: State | None
    destination: State
    conditions: list[Condition] = field(default_factory=list)
    has_exit_time: bool = False
    duration: float = 0.0

    @property
    def is_any_state(self) -> bool:
        return self.source is None

    @property
    def immediate(self) -> bool:
        return not self.has_exit_time

    def add_condition(self, mode: ConditionMode, threshold: float, parameter: str) -> Condition:
        condition = Condition(parameter=parameter, mode=mode, threshold=threshold)
        self.conditions.append(condition)
        return condition

    def touches(self, state: State) -> bool:
        return self.source is state or self.destination is state

    def to_dict(self) -> dict:
        return {
            "source": self.source.name if self.source is not None else None,
            "destination": self.destination.name,
            "conditions": [c.to_dict() for c in self.conditions],
            "has_exit_time": self.has_exit_time,
            "duration": self.duration,
        }


@dataclass(eq=False)
class Layer:
    """A named state machine.

    The first state added becomes the default state.  Removing a state also
    removes every transition that starts or ends at it.
    """

    name: str
    default_weight: float = 1.0
    states: list[State] = field(default_factory=list)
    transitions: list[Transition] = field(default_factory=list)

    @property
    def default_state(self) -> State | None:
        for state in self.states:
            if state.is_default:
                return state
        return None

    def find_state(self, name: str) -> State | None:
        for state in self.states:
            if state.name == name:
                return state
        return None

    def add_state(self, name: str, motion: AnimationClip | None = None) -> State:
        """Append a new state.

        Raises:
            ValueError: If a state named ``name`` already exists in this layer.
        """
        if self.find_state(name) is not None:
            raise ValueError(f"State {name!r} already exists in layer {self.name!r}")
        state = State(name=name, motion=motion, is_default=self.default_state is None)
        self.states.append(state)
        return state

    def remove_state(self, state: State) -> None:
        self.states.remove(state)
        self.transitions = [t for t in self.transitions if not t.touches(state)]
        if state.is_default:
            state.is_default = False
            if self.states:
                self.states[0].is_default = True

    def clear(self) -> None:
        """Remove every state (and therefore every transition)."""
        for state in list(self.states):
            self.remove_state(state)

    def add_transition(self, source: State, destination: State) -> Transition:
        transition = Transition(source=source, destination=destination)
        self.transitions.append(transition)
        return transition

    def add_any_state_transition(self, destination: State) -> Transition:
        transition = Transition(source=None, destination=destination)
        self.transitions.append(transition)
        return transition

    def any_state_transitions(self) -> list[Transition]:
        return [t for t in self.transitions if t.is_any_state]

    def transitions_from(self, state: State) -> list[Transition]:
        return [t for t in self.transitions if t.source is state]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "default_weight": self.default_weight,
            "states": [s.to_dict() for s in self.states],
            "transitions": [t.to_dict() for t in self.transitions],
        }


@dataclass(eq=False)
class Controller:
    """An animator controller: ordered layers plus a shared parameter space."""

    name: str = "Controller"
    layers: list[Layer] = field(default_factory=list)
    parameters: ParameterSpace = field(default_factory=ParameterSpace)

    def find_layer(self, name: str) -> Layer | None:
        for layer in self.layers:
            if layer.name == name:
                return layer
        return None

    def add_layer(self, layer: Layer) -> None:
        """Append ``layer``.

        Raises:
            ValueError: If a layer with the same name already exists.
        """
        if self.find_layer(layer.name) is not None:
            raise ValueError(f"Layer {layer.name!r} already exists in {self.name!r}")
        self.layers.append(layer)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "layers": [layer.to_dict() for layer in self.layers],
            "parameters": self.parameters.to_list(),
        }


# ---------------------------------------------------------------------------
# Build report
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LayerBuildReport:
    """Outcome of one layer build.

    ``error`` is set when wiring stopped on a configuration problem; the states
    created before that point stay in the layer.
    """

    layer: Layer
    states_created: int
    transitions_created: int
    parameters: tuple[str, ...] = ()
    """Controller parameters the layer's conditions reference."""

    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "layer": self.layer.name,
            "states_created": self.states_created,
            "transitions_created": self.transitions_created,
            "parameters": list(self.parameters),
            "error": self.error,
        }
