"""
Built-in workflow presets.

Rule tables are plain data: a mapping from state to its allowed destinations.
Terminality comes from an empty destination list, never from a state's name.
"""

from __future__ import annotations

PLATFORM_LIMITS: dict[str, int] = {
    "Twitter": 280,
    "LinkedIn": 3000,
    "Facebook": 5000,
    "Instagram": 2200,
    "TikTok": 300,
}

# draft -> review -> approved -> published
DEFAULT_WORKFLOW: dict[str, list[str]] = {
    "draft": ["review"],
    "review": ["draft", "approved"],
    "approved": ["published", "review"],
    "published": [],
}

DEFAULT_DESCRIPTIONS: dict[str, str] = {
    "draft": "Submit for review",
    "review": "Send back to draft or approve",
    "approved": "Publish or send back for review",
    "published": "Final state - no transitions allowed",
}

EXTENDED_WORKFLOW: dict[str, list[str]] = {
    "draft": ["review", "trash"],
    "review": ["draft", "approved", "rejected"],
    "approved": ["published", "review", "scheduled"],
    "scheduled": ["published", "approved"],
    "published": ["archived"],
    "rejected": ["draft", "trash"],
    "archived": [],
    "trash": ["draft"],
}

EXTENDED_DESCRIPTIONS: dict[str, str] = {
    "draft": "Submit for review or move to trash",
    "review": "Send back, approve, or reject",
    "approved": "Publish, review again, or schedule",
    "scheduled": "Publish or move back to approved",
    "published": "Archive published content",
    "rejected": "Send back to draft or trash",
    "archived": "Final state - archived content",
    "trash": "Restore from trash to draft",
}

STATE_DESCRIPTIONS: dict[str, str] = {
    "draft": "Content is being created or edited",
    "review": "Content is under review by stakeholders",
    "approved": "Content has been approved and ready to publish",
    "published": "Content is live and published",
}

PUBLISH_STATES: frozenset[str] = frozenset({"published"})

DEFAULT_BLOCKED_TERMS: tuple[str, ...] = ("hate", "stupid", "idiot", "kill", "die")
