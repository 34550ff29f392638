"""
Transitions component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from content_gate.domain.errors import ConfigError

State = str


# --- Rule Table ---


@dataclass(frozen=True)
class TransitionRule:
    """
    Allowed destinations for one source state.

    ``to_states`` keeps first-occurrence order with duplicates dropped.
    An empty ``to_states`` marks a terminal state.
    """

    from_state: State
    to_states: tuple[State, ...] = ()
    description: str | None = None

    def __post_init__(self) -> None:
        # A bare string would otherwise be split into one-letter states.
        if isinstance(self.to_states, str):
            raise ConfigError(
                f"Destinations for \"{self.from_state}\" must be a list of states, "
                f"got the string {self.to_states!r}"
            )
        object.__setattr__(self, "to_states", tuple(dict.fromkeys(self.to_states)))

    @property
    def is_terminal(self) -> bool:
        return not self.to_states


# --- Results ---


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of a pure transition check."""

    valid: bool
    message: str


@dataclass(frozen=True)
class TransitionAttempt:
    """Immutable transition log entry."""

    id: UUID
    timestamp: datetime
    from_state: State
    to_state: State
    success: bool
    message: str


# --- Input Models ---


@dataclass(frozen=True)
class AvailableTransitionsInput:
    """Input for listing legal next states."""

    state: State


@dataclass(frozen=True)
class ValidateTransitionInput:
    """Input for checking a transition without recording it."""

    from_state: State
    to_state: State


@dataclass(frozen=True)
class RecordTransitionInput:
    """Input for validating and recording a transition."""

    from_state: State
    to_state: State


@dataclass(frozen=True)
class HistoryInput:
    """Input for reading the transition log."""

    limit: int | None = None


# --- Output Models ---


@dataclass(frozen=True)
class AvailableTransitionsOutput:
    """Output for listing legal next states."""

    state: State
    transitions: tuple[State, ...]
    has_rule: bool
    is_terminal: bool
    description: str | None = None


@dataclass(frozen=True)
class ValidateTransitionOutput:
    """Output for a transition check."""

    valid: bool
    message: str


@dataclass(frozen=True)
class RecordTransitionOutput:
    """Output for a recorded transition."""

    attempt: TransitionAttempt
    success: bool


@dataclass(frozen=True)
class HistoryOutput:
    """Output for the transition log, newest first."""

    entries: tuple[TransitionAttempt, ...]
    total: int
