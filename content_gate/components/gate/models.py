"""
Gate component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from content_gate.components.readiness.models import ValidationRun
from content_gate.components.transitions.models import State, TransitionAttempt


@dataclass(frozen=True)
class GateOutcome:
    """
    Result of a gated transition.

    ``attempt`` is None when the readiness run blocked a publish transition;
    nothing is recorded in that case. ``readiness`` is None for transitions
    that do not publish.
    """

    allowed: bool
    message: str
    attempt: TransitionAttempt | None = None
    readiness: ValidationRun | None = None


@dataclass(frozen=True)
class GatedTransitionInput:
    """Input for a gated transition."""

    from_state: State
    to_state: State
    content: str
    platform: str
    character_limit: int | None = None


@dataclass(frozen=True)
class NextStatesInput:
    """Input for listing legal next states."""

    state: State


@dataclass(frozen=True)
class NextStatesOutput:
    """Output for listing legal next states."""

    state: State
    next_states: tuple[State, ...]
    description: str | None = None
