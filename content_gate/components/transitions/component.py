"""
Transitions component - validate lifecycle state changes and keep an audit trail.

Invariants:
- I1: validate() never raises for an illegal transition; the result says why
- I2: record_and_validate() appends exactly one entry per call
- I3: history is newest-first and cannot be mutated by callers
"""

from __future__ import annotations

from ._impl import TransitionEngine
from .models import (
    AvailableTransitionsInput,
    AvailableTransitionsOutput,
    HistoryInput,
    HistoryOutput,
    RecordTransitionInput,
    RecordTransitionOutput,
    ValidateTransitionInput,
    ValidateTransitionOutput,
)

TransitionsInput = (
    AvailableTransitionsInput | ValidateTransitionInput | RecordTransitionInput | HistoryInput
)
TransitionsOutput = (
    AvailableTransitionsOutput | ValidateTransitionOutput | RecordTransitionOutput | HistoryOutput
)


def run_available(
    inp: AvailableTransitionsInput,
    *,
    engine: TransitionEngine,
) -> AvailableTransitionsOutput:
    """
    List legal next states.

    A state without a rule and a terminal state both yield no transitions;
    ``has_rule`` tells them apart.
    """
    rule = engine.rule_for(inp.state)
    return AvailableTransitionsOutput(
        state=inp.state,
        transitions=tuple(engine.available_transitions(inp.state)),
        has_rule=rule is not None,
        is_terminal=engine.is_terminal(inp.state),
        description=rule.description if rule else None,
    )


def run_validate(
    inp: ValidateTransitionInput,
    *,
    engine: TransitionEngine,
) -> ValidateTransitionOutput:
    """Check a transition without recording it."""
    result = engine.validate(inp.from_state, inp.to_state)
    return ValidateTransitionOutput(valid=result.valid, message=result.message)


def run_record(
    inp: RecordTransitionInput,
    *,
    engine: TransitionEngine,
) -> RecordTransitionOutput:
    """Validate a transition and append the outcome to the history."""
    attempt = engine.record_and_validate(inp.from_state, inp.to_state)
    return RecordTransitionOutput(attempt=attempt, success=attempt.success)


def run_history(
    inp: HistoryInput,
    *,
    engine: TransitionEngine,
) -> HistoryOutput:
    """Return recorded attempts, newest first, optionally truncated to ``limit``."""
    entries = engine.history()
    total = len(entries)
    if inp.limit is not None:
        entries = entries[: max(inp.limit, 0)]
    return HistoryOutput(entries=entries, total=total)


def run(inp: TransitionsInput, *, engine: TransitionEngine) -> TransitionsOutput:
    """
    Main entry point for the transitions component.

    Dispatches to the appropriate handler based on input type.
    """
    if isinstance(inp, AvailableTransitionsInput):
        return run_available(inp, engine=engine)
    elif isinstance(inp, ValidateTransitionInput):
        return run_validate(inp, engine=engine)
    elif isinstance(inp, RecordTransitionInput):
        return run_record(inp, engine=engine)
    elif isinstance(inp, HistoryInput):
        return run_history(inp, engine=engine)
    else:
        raise TypeError(f"Unknown input type: {type(inp)}")
