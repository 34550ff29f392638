"""
Readiness component input/output models.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class CheckStatus(str, Enum):
    """Lifecycle of a checklist item within one validation run."""

    PENDING = "pending"
    CHECKING = "checking"
    PASS = "pass"
    FAIL = "fail"

    @property
    def is_resolved(self) -> bool:
        return self in (CheckStatus.PASS, CheckStatus.FAIL)


# --- Checklist ---


@dataclass(frozen=True)
class ChecklistItem:
    """One independent check. Frozen; a new run yields new items."""

    id: str
    label: str
    status: CheckStatus
    required: bool
    description: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class ToxicityScore:
    """Result from the toxicity scoring collaborator."""

    is_toxic: bool
    score: float


@dataclass(frozen=True)
class ValidationRun:
    """
    Items produced by one validate() call.

    Aggregates are folds over ``items``; nothing is tracked separately.
    """

    items: tuple[ChecklistItem, ...]
    platform: str
    character_limit: int
    content_length: int

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def passed_count(self) -> int:
        return sum(1 for item in self.items if item.status is CheckStatus.PASS)

    @property
    def failed_count(self) -> int:
        return sum(1 for item in self.items if item.status is CheckStatus.FAIL)

    @property
    def required_failed_count(self) -> int:
        return sum(
            1 for item in self.items if item.required and item.status is CheckStatus.FAIL
        )

    @property
    def is_complete(self) -> bool:
        return all(item.status.is_resolved for item in self.items)

    @property
    def can_proceed(self) -> bool:
        return self.is_complete and self.required_failed_count == 0

    @property
    def progress(self) -> float:
        """Percentage of items that passed."""
        return (self.passed_count / self.total) * 100 if self.total else 0.0

    @property
    def warnings(self) -> tuple[ChecklistItem, ...]:
        """Failed optional items - advisory only."""
        return tuple(
            item for item in self.items if not item.required and item.status is CheckStatus.FAIL
        )

    @property
    def summary(self) -> str:
        if self.can_proceed:
            return "All required checks passed"
        if not self.is_complete:
            return "Checks in progress"
        return f"{self.required_failed_count} required check(s) failed"

    def item(self, item_id: str) -> ChecklistItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None


ProgressCallback = Callable[[tuple[ChecklistItem, ...]], None]


# --- Input Models ---


@dataclass(frozen=True)
class ValidateReadinessInput:
    """Input for a readiness run.

    ``character_limit`` falls back to the validator's platform table when None.
    """

    content: str
    platform: str
    character_limit: int | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ValidateReadinessOutput:
    """Output for a readiness run."""

    run: ValidationRun
    can_proceed: bool
    summary: str
