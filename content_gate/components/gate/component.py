"""
Gate component - publish-gated lifecycle transitions.
"""

from __future__ import annotations

from ._impl import PublishGate
from .models import GatedTransitionInput, GateOutcome, NextStatesInput, NextStatesOutput


def run_next_states(inp: NextStatesInput, *, gate: PublishGate) -> NextStatesOutput:
    """List legal next states with the state's description, if configured."""
    return NextStatesOutput(
        state=inp.state,
        next_states=tuple(gate.next_states(inp.state)),
        description=gate.describe_state(inp.state),
    )


async def run_attempt(inp: GatedTransitionInput, *, gate: PublishGate) -> GateOutcome:
    """Run readiness when publishing, then validate and record the transition."""
    return await gate.attempt(
        inp.from_state,
        inp.to_state,
        inp.content,
        inp.platform,
        inp.character_limit,
    )
