"""
Readiness component - pre-publish checklist and publish gate decision.

Invariants:
- I1: items are ordered length, citations, toxicity
- I2: the returned run holds only pass/fail items
- I3: optional check failures never block publishing
- I4: a scorer failure or timeout fails the toxicity check
"""

from __future__ import annotations

from ._impl import ReadinessValidator
from .models import ProgressCallback, ValidateReadinessInput, ValidateReadinessOutput


async def run_validate(
    inp: ValidateReadinessInput,
    *,
    validator: ReadinessValidator,
    on_progress: ProgressCallback | None = None,
) -> ValidateReadinessOutput:
    """
    Run the readiness checklist.

    Args:
        inp: Content, platform and optional character limit.
        validator: Configured validator holding the toxicity scorer.
        on_progress: Optional callback receiving intermediate item snapshots.

    Returns:
        ValidateReadinessOutput with the run and gate decision.

    Raises:
        ConfigError: invalid limit, missing content, or unknown platform
            when no limit is given.
    """
    if inp.character_limit is None:
        run = await validator.validate_for_platform(
            inp.content, inp.platform, on_progress=on_progress
        )
    else:
        run = await validator.validate(
            inp.content, inp.platform, inp.character_limit, on_progress=on_progress
        )

    return ValidateReadinessOutput(run=run, can_proceed=run.can_proceed, summary=run.summary)


run = run_validate
