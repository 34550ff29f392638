"""
Readiness component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import ToxicityScore


class ToxicityScorerPort(Protocol):
    """External toxicity scoring service. Assumed network or IO bound."""

    async def score(self, text: str) -> ToxicityScore:
        """Score ``text``; ``score`` is in 0..1."""
        ...
