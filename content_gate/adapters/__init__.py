"""
Adapters for the workflow-gating core.
"""

from .clock import SystemClock
from .toxicity import KeywordToxicityScorer

__all__ = [
    "KeywordToxicityScorer",
    "SystemClock",
]
