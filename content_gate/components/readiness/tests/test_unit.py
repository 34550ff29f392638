"""
Readiness component unit tests.
"""

from __future__ import annotations

import pytest

from content_gate.components.readiness import (
    CheckStatus,
    ReadinessValidator,
    ToxicityScore,
    ValidateReadinessInput,
    run_validate,
)
from content_gate.domain.errors import ConfigError

# --- Mock Implementations ---


class MockScorer:
    """Scorer returning a fixed verdict."""

    def __init__(self, is_toxic: bool = False) -> None:
        self._is_toxic = is_toxic

    async def score(self, text: str) -> ToxicityScore:
        return ToxicityScore(is_toxic=self._is_toxic, score=0.9 if self._is_toxic else 0.05)


# --- Tests ---


@pytest.mark.asyncio
async def test_explicit_limit() -> None:
    out = await run_validate(
        ValidateReadinessInput(content="hello #test", platform="Twitter", character_limit=280),
        validator=ReadinessValidator(MockScorer()),
    )

    assert out.can_proceed
    assert out.summary == "All required checks passed"
    assert out.run.passed_count == 3


@pytest.mark.asyncio
async def test_platform_limit_fallback() -> None:
    out = await run_validate(
        ValidateReadinessInput(content="x" * 2201, platform="Instagram"),
        validator=ReadinessValidator(MockScorer()),
    )

    assert out.run.character_limit == 2200
    assert not out.can_proceed
    assert out.summary == "1 required check(s) failed"


@pytest.mark.asyncio
async def test_two_required_failures() -> None:
    out = await run_validate(
        ValidateReadinessInput(content="x" * 50, platform="Twitter", character_limit=10),
        validator=ReadinessValidator(MockScorer(is_toxic=True)),
    )

    assert out.run.required_failed_count == 2
    assert out.run.items[1].status is CheckStatus.FAIL
    assert out.summary == "2 required check(s) failed"


@pytest.mark.asyncio
async def test_progress_callback_passthrough() -> None:
    seen = []
    await run_validate(
        ValidateReadinessInput(content="hi", platform="Twitter", character_limit=280),
        validator=ReadinessValidator(MockScorer()),
        on_progress=seen.append,
    )
    assert seen[0][2].status is CheckStatus.CHECKING


@pytest.mark.asyncio
async def test_unknown_platform_without_limit() -> None:
    with pytest.raises(ConfigError):
        await run_validate(
            ValidateReadinessInput(content="hi", platform="Mastodon"),
            validator=ReadinessValidator(MockScorer()),
        )
