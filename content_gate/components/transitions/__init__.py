"""
Transitions component - rule-table driven lifecycle state transitions.
"""

from ._impl import (
    TransitionEngine,
    check_rule_table,
    create_transition_engine,
    rules_from_mapping,
)
from .component import (
    run,
    run_available,
    run_history,
    run_record,
    run_validate,
)
from .models import (
    AvailableTransitionsInput,
    AvailableTransitionsOutput,
    HistoryInput,
    HistoryOutput,
    RecordTransitionInput,
    RecordTransitionOutput,
    State,
    TransitionAttempt,
    TransitionResult,
    TransitionRule,
    ValidateTransitionInput,
    ValidateTransitionOutput,
)
from .ports import IdPort, TimePort

__all__ = [
    # Entry points
    "run",
    "run_available",
    "run_history",
    "run_record",
    "run_validate",
    # Engine
    "TransitionEngine",
    "check_rule_table",
    "create_transition_engine",
    "rules_from_mapping",
    # Models
    "State",
    "TransitionAttempt",
    "TransitionResult",
    "TransitionRule",
    # Input models
    "AvailableTransitionsInput",
    "HistoryInput",
    "RecordTransitionInput",
    "ValidateTransitionInput",
    # Output models
    "AvailableTransitionsOutput",
    "HistoryOutput",
    "RecordTransitionOutput",
    "ValidateTransitionOutput",
    # Ports
    "IdPort",
    "TimePort",
]
