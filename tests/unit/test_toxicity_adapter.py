"""
Tests for the keyword toxicity scorer stand-in.
"""

from __future__ import annotations

import pytest

from content_gate.adapters import KeywordToxicityScorer


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("text", "toxic"),
    [
        ("What a lovely day", False),
        ("I HATE mondays", True),
        ("don't be stupid", True),
        ("", False),
    ],
)
async def test_default_terms(text: str, toxic: bool) -> None:
    result = await KeywordToxicityScorer().score(text)
    assert result.is_toxic is toxic
    assert result.score == (0.8 if toxic else 0.1)


@pytest.mark.asyncio
async def test_custom_terms_and_scores() -> None:
    scorer = KeywordToxicityScorer.from_terms(["Spam"], toxic_score=0.95, safe_score=0.0)

    flagged = await scorer.score("buy spam now")
    clean = await scorer.score("I hate nothing")

    assert flagged.is_toxic and flagged.score == 0.95
    assert not clean.is_toxic and clean.score == 0.0


@pytest.mark.asyncio
async def test_simulated_latency() -> None:
    scorer = KeywordToxicityScorer(delay_seconds=0.01)
    assert not (await scorer.score("fine")).is_toxic
