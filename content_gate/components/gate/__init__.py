"""
Gate component - composes transition validation with the publish checklist.
"""

from ._impl import PublishGate, create_publish_gate
from .component import run_attempt, run_next_states
from .models import GatedTransitionInput, GateOutcome, NextStatesInput, NextStatesOutput

__all__ = [
    "run_attempt",
    "run_next_states",
    "PublishGate",
    "create_publish_gate",
    "GateOutcome",
    "GatedTransitionInput",
    "NextStatesInput",
    "NextStatesOutput",
]
