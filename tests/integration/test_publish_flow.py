"""
End-to-end publish flow using the project rules.yaml and the keyword scorer.
"""

from __future__ import annotations

import pytest

from content_gate.components.gate import create_publish_gate
from content_gate.components.readiness import CheckStatus
from content_gate.components.transitions import TransitionEngine
from content_gate.rules import Rules
from tests.mocks import MockTimePort

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_draft_to_published_journey(rules: Rules, time_port: MockTimePort) -> None:
    gate = create_publish_gate(rules, time_port=time_port)
    content = "Our Q3 report is out https://example.com/q3 #growth"

    state = "draft"
    for target in ("review", "approved", "published"):
        assert target in gate.next_states(state)
        outcome = await gate.attempt(state, target, content, "LinkedIn")
        assert outcome.allowed, outcome.message
        state = target
        time_port.advance(60)

    assert gate.next_states(state) == []
    assert [a.to_state for a in gate.engine.history()] == ["published", "approved", "review"]


@pytest.mark.asyncio
async def test_toxic_content_cannot_ship(rules: Rules) -> None:
    gate = create_publish_gate(rules)

    outcome = await gate.attempt("approved", "published", "I hate this product", "Twitter")

    assert not outcome.allowed
    assert outcome.readiness is not None
    toxicity = outcome.readiness.item("toxicity")
    assert toxicity is not None and toxicity.status is CheckStatus.FAIL
    assert gate.engine.history() == ()


@pytest.mark.asyncio
async def test_hello_test_on_twitter(rules: Rules) -> None:
    gate = create_publish_gate(rules)

    run = await gate.validator.validate("hello #test", "Twitter", 280)

    assert [i.status for i in run.items] == [CheckStatus.PASS] * 3
    assert run.item("citations").message == "Found 1 citation(s)"  # type: ignore[union-attr]
    assert run.can_proceed


@pytest.mark.asyncio
async def test_overlong_tweet(rules: Rules) -> None:
    gate = create_publish_gate(rules)

    run = await gate.validator.validate_for_platform("a" * 300, "Twitter")

    assert run.items[0].message == "300 characters (exceeds limit by 20)"
    assert not run.can_proceed


def test_reference_rule_table() -> None:
    engine = TransitionEngine.from_mapping(
        {
            "draft": ["review"],
            "review": ["draft", "approved"],
            "approved": ["published"],
            "published": [],
        }
    )

    assert engine.validate("approved", "published").valid
    rejected = engine.validate("published", "draft")
    assert not rejected.valid
    assert "none" in rejected.message
