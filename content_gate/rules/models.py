from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt, model_validator

from content_gate.domain.presets import (
    DEFAULT_BLOCKED_TERMS,
    DEFAULT_DESCRIPTIONS,
    DEFAULT_WORKFLOW,
    PLATFORM_LIMITS,
    STATE_DESCRIPTIONS,
)


class TransitionRuleConfig(BaseModel):
    from_state: str = Field(alias="from", min_length=1)
    to: list[str] = Field(default_factory=list)
    description: str | None = None

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


def _default_transitions() -> list[TransitionRuleConfig]:
    return [
        TransitionRuleConfig(
            from_state=state,
            to=list(targets),
            description=DEFAULT_DESCRIPTIONS.get(state),
        )
        for state, targets in DEFAULT_WORKFLOW.items()
    ]


class WorkflowRules(BaseModel):
    publish_states: list[str] = Field(default_factory=lambda: ["published"])
    transitions: list[TransitionRuleConfig] = Field(default_factory=_default_transitions)
    state_descriptions: dict[str, str] = Field(default_factory=lambda: dict(STATE_DESCRIPTIONS))

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _unique_from_states(self) -> WorkflowRules:
        seen: set[str] = set()
        duplicates: list[str] = []
        for rule in self.transitions:
            if rule.from_state in seen:
                duplicates.append(rule.from_state)
            seen.add(rule.from_state)
        if duplicates:
            raise ValueError(f"duplicate transition rules for states: {sorted(set(duplicates))}")
        return self


PlatformLimits = dict[str, PositiveInt]


class ToxicityRules(BaseModel):
    timeout_seconds: PositiveFloat = 5.0
    blocked_terms: list[str] = Field(default_factory=lambda: list(DEFAULT_BLOCKED_TERMS))
    toxic_score: float = Field(default=0.8, ge=0.0, le=1.0)
    safe_score: float = Field(default=0.1, ge=0.0, le=1.0)

    model_config = ConfigDict(extra="forbid")


class ReadinessRules(BaseModel):
    toxicity: ToxicityRules = Field(default_factory=ToxicityRules)

    model_config = ConfigDict(extra="forbid")


class Rules(BaseModel):
    schema_version: int = 1
    workflow: WorkflowRules = Field(default_factory=WorkflowRules)
    platforms: PlatformLimits = Field(default_factory=lambda: dict(PLATFORM_LIMITS))
    readiness: ReadinessRules = Field(default_factory=ReadinessRules)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _supported_version(self) -> Rules:
        if self.schema_version != 1:
            raise ValueError(f"unsupported schema_version: {self.schema_version}")
        return self
