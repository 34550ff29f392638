"""
PublishGate - wires transition validation to the readiness checklist.

A transition into a publish state is only validated and recorded after the
readiness run passes. Other transitions go straight to the engine.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from content_gate.adapters.toxicity import KeywordToxicityScorer
from content_gate.components.readiness import (
    ReadinessConfig,
    ReadinessValidator,
    ToxicityScorerPort,
    create_readiness_validator,
)
from content_gate.components.transitions import (
    State,
    TimePort,
    TransitionEngine,
    TransitionRule,
)
from content_gate.domain.presets import PUBLISH_STATES
from content_gate.rules.models import Rules

from .models import GateOutcome

logger = logging.getLogger(__name__)


class PublishGate:
    """Composes a TransitionEngine and a ReadinessValidator."""

    def __init__(
        self,
        engine: TransitionEngine,
        validator: ReadinessValidator,
        publish_states: Iterable[State] = PUBLISH_STATES,
        state_descriptions: dict[State, str] | None = None,
    ) -> None:
        self.engine = engine
        self.validator = validator
        self.publish_states = frozenset(publish_states)
        self.state_descriptions = dict(state_descriptions or {})

    def requires_readiness(self, to_state: State) -> bool:
        return to_state in self.publish_states

    def next_states(self, state: State) -> list[State]:
        return self.engine.available_transitions(state)

    def describe_state(self, state: State) -> str | None:
        return self.state_descriptions.get(state)

    async def attempt(
        self,
        from_state: State,
        to_state: State,
        content: str,
        platform: str,
        character_limit: int | None = None,
    ) -> GateOutcome:
        """
        Gate and record a transition.

        Raises ConfigError only for invalid readiness arguments.
        """
        readiness = None
        if self.requires_readiness(to_state):
            if character_limit is None:
                readiness = await self.validator.validate_for_platform(content, platform)
            else:
                readiness = await self.validator.validate(content, platform, character_limit)

            if not readiness.can_proceed:
                logger.info(
                    "Publish blocked: %s -> %s (%s)", from_state, to_state, readiness.summary
                )
                return GateOutcome(
                    allowed=False,
                    message=f"Publishing blocked: {readiness.summary}",
                    readiness=readiness,
                )

        attempt = self.engine.record_and_validate(from_state, to_state)
        return GateOutcome(
            allowed=attempt.success,
            message=attempt.message,
            attempt=attempt,
            readiness=readiness,
        )


def create_publish_gate(
    rules: Rules | None = None,
    *,
    scorer: ToxicityScorerPort | None = None,
    time_port: TimePort | None = None,
) -> PublishGate:
    """
    Build the full gate from loaded rules.

    Uses the keyword scorer configured in ``rules.readiness.toxicity`` when no
    scorer is given.
    """
    rules = rules or Rules()
    toxicity = rules.readiness.toxicity

    engine = TransitionEngine(
        [
            TransitionRule(
                from_state=rule.from_state,
                to_states=tuple(rule.to),
                description=rule.description,
            )
            for rule in rules.workflow.transitions
        ],
        time_port=time_port,
    )

    if scorer is None:
        scorer = KeywordToxicityScorer(
            blocked_terms=tuple(toxicity.blocked_terms),
            toxic_score=toxicity.toxic_score,
            safe_score=toxicity.safe_score,
        )

    validator = create_readiness_validator(
        scorer,
        ReadinessConfig(
            toxicity_timeout_seconds=toxicity.timeout_seconds,
            platform_limits=dict(rules.platforms),
        ),
    )

    return PublishGate(
        engine=engine,
        validator=validator,
        publish_states=rules.workflow.publish_states,
        state_descriptions=rules.workflow.state_descriptions,
    )
