"""
Keyword toxicity scorer (stand-in).

Placeholder implementation of ToxicityScorerPort that flags content containing
any blocked term. It is not a language model; swap it for a real scoring
service by injecting another object with the same async ``score`` method.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from content_gate.components.readiness.models import ToxicityScore
from content_gate.domain.presets import DEFAULT_BLOCKED_TERMS

logger = logging.getLogger(__name__)


@dataclass
class KeywordToxicityScorer:
    """
    Substring-match scorer.

    Case-insensitive. Returns ``toxic_score`` when any blocked term occurs,
    ``safe_score`` otherwise. ``delay_seconds`` simulates network latency.
    """

    blocked_terms: tuple[str, ...] = DEFAULT_BLOCKED_TERMS
    toxic_score: float = 0.8
    safe_score: float = 0.1
    delay_seconds: float = 0.0
    _terms: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._terms = tuple(t.lower() for t in self.blocked_terms if t)

    @classmethod
    def from_terms(cls, terms: Iterable[str], **kwargs: float) -> KeywordToxicityScorer:
        return cls(blocked_terms=tuple(terms), **kwargs)

    async def score(self, text: str) -> ToxicityScore:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        lowered = text.lower()
        found = any(term in lowered for term in self._terms)

        logger.debug("KeywordToxicityScorer.score: length=%d toxic=%s", len(text), found)

        return ToxicityScore(
            is_toxic=found,
            score=self.toxic_score if found else self.safe_score,
        )
