"""
ReadinessValidator - pre-publish checklist.

Runs a fixed battery of independent checks against a content snapshot and
folds them into a publish/block decision.

Checks (in order):
1. length    - required, synchronous
2. citations - optional, synchronous (a failure is a warning)
3. toxicity  - required, awaits the injected scorer with a bounded timeout

Key behaviors:
- Synchronous checks finish before the scorer is awaited
- Scorer errors and timeouts fail the toxicity item; they never escape
- Cancelling validate() cancels the in-flight scorer call
- No state is shared between runs and nothing is cached
"""

from __future__ import annotations

import asyncio
import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from content_gate.domain.errors import ConfigError
from content_gate.domain.presets import PLATFORM_LIMITS

from .models import (
    CheckStatus,
    ChecklistItem,
    ProgressCallback,
    ToxicityScore,
    ValidationRun,
)
from .ports import ToxicityScorerPort

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"https?://[^\s]+")
MENTION_PATTERN = re.compile(r"@\w+")
HASHTAG_PATTERN = re.compile(r"#\w+")

LENGTH_CHECK_ID = "length"
CITATIONS_CHECK_ID = "citations"
TOXICITY_CHECK_ID = "toxicity"


# --- Configuration ---


@dataclass(frozen=True)
class ReadinessConfig:
    """Validator configuration from rules."""

    toxicity_timeout_seconds: float = 5.0
    platform_limits: Mapping[str, int] = field(default_factory=lambda: dict(PLATFORM_LIMITS))

    def __post_init__(self) -> None:
        errors: list[str] = []

        timeout = self.toxicity_timeout_seconds
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            errors.append(f"toxicity_timeout_seconds must be a number, got {timeout!r}")
        elif not math.isfinite(timeout) or timeout <= 0:
            errors.append(
                f"toxicity_timeout_seconds must be positive and finite, got {timeout!r}"
            )

        for platform, limit in self.platform_limits.items():
            if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
                errors.append(
                    f"Character limit for \"{platform}\" must be a positive integer, got {limit!r}"
                )

        if errors:
            raise ConfigError(errors)


DEFAULT_CONFIG = ReadinessConfig()


# --- Argument Checks ---


def _check_arguments(content: object, character_limit: object) -> None:
    errors: list[str] = []
    if content is None:
        errors.append("content must not be None")
    elif not isinstance(content, str):
        errors.append(f"content must be a string, got {type(content).__name__}")

    if isinstance(character_limit, bool) or not isinstance(character_limit, int):
        errors.append(f"character_limit must be an integer, got {character_limit!r}")
    elif character_limit <= 0:
        errors.append(f"character_limit must be positive, got {character_limit}")

    if errors:
        raise ConfigError(errors)


# --- Pure Checks ---


def count_citations(content: str) -> int:
    """Count URLs, @mentions and #hashtags."""
    return (
        len(URL_PATTERN.findall(content))
        + len(MENTION_PATTERN.findall(content))
        + len(HASHTAG_PATTERN.findall(content))
    )


def check_length(content: str, character_limit: int) -> ChecklistItem:
    length = len(content)
    within = length <= character_limit
    return ChecklistItem(
        id=LENGTH_CHECK_ID,
        label="Character Length",
        description=f"Content must be within {character_limit} characters",
        status=CheckStatus.PASS if within else CheckStatus.FAIL,
        message=(
            f"{length} characters (within limit)"
            if within
            else f"{length} characters (exceeds limit by {length - character_limit})"
        ),
        required=True,
    )


def check_citations(content: str) -> ChecklistItem:
    count = count_citations(content)
    return ChecklistItem(
        id=CITATIONS_CHECK_ID,
        label="Citations & References",
        description="Content should include citations, links, or references",
        status=CheckStatus.PASS if count > 0 else CheckStatus.FAIL,
        message=f"Found {count} citation(s)" if count > 0 else "No citations found (recommended)",
        required=False,
    )


def toxicity_item(
    status: CheckStatus = CheckStatus.PENDING,
    message: str | None = None,
) -> ChecklistItem:
    return ChecklistItem(
        id=TOXICITY_CHECK_ID,
        label="Toxicity Check",
        description="Content must pass toxicity screening",
        status=status,
        message=message,
        required=True,
    )


def resolve_toxicity(item: ChecklistItem, result: ToxicityScore) -> ChecklistItem:
    if result.is_toxic:
        return replace(
            item,
            status=CheckStatus.FAIL,
            message=f"Content may be toxic (score: {result.score:.2f})",
        )
    return replace(
        item,
        status=CheckStatus.PASS,
        message=f"Content is safe (toxicity score: {result.score:.2f})",
    )


# --- Validator ---


class ReadinessValidator:
    """Runs the pre-publish checklist against a content snapshot."""

    def __init__(
        self,
        scorer: ToxicityScorerPort,
        config: ReadinessConfig | None = None,
    ) -> None:
        self._scorer = scorer
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> ReadinessConfig:
        return self._config

    def limit_for(self, platform: str) -> int:
        try:
            return self._config.platform_limits[platform]
        except KeyError:
            raise ConfigError(
                f"No character limit configured for platform \"{platform}\""
            ) from None

    async def validate(
        self,
        content: str,
        platform: str,
        character_limit: int,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> ValidationRun:
        """
        Run all checks and return a run containing only resolved items.

        ``character_limit`` must be an ``int``. Floats such as ``280.0`` are
        rejected rather than truncated.

        Raises ConfigError for a None/non-string content or a non-integer or
        non-positive limit.
        """
        _check_arguments(content, character_limit)

        items = [check_length(content, character_limit), check_citations(content)]
        checking = toxicity_item(CheckStatus.CHECKING)
        if on_progress is not None:
            on_progress((*items, checking))

        items.append(await self._score_toxicity(content, checking))

        run = ValidationRun(
            items=tuple(items),
            platform=platform,
            character_limit=character_limit,
            content_length=len(content),
        )
        if on_progress is not None:
            on_progress(run.items)

        logger.info(
            "Readiness %s: %s (%d/%d passed)",
            platform,
            "pass" if run.can_proceed else "blocked",
            run.passed_count,
            run.total,
        )
        return run

    async def validate_for_platform(
        self,
        content: str,
        platform: str,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> ValidationRun:
        """Validate using the configured character limit for ``platform``."""
        return await self.validate(
            content, platform, self.limit_for(platform), on_progress=on_progress
        )

    async def _score_toxicity(self, content: str, item: ChecklistItem) -> ChecklistItem:
        timeout = self._config.toxicity_timeout_seconds
        try:
            result = await asyncio.wait_for(self._scorer.score(content), timeout=timeout)
            return resolve_toxicity(item, result)
        except TimeoutError:
            logger.warning("Toxicity check timed out after %ss", timeout)
            return replace(
                item,
                status=CheckStatus.FAIL,
                message=f"Toxicity check timed out after {timeout}s",
            )
        except Exception as e:
            logger.warning("Toxicity check failed: %s", e)
            return replace(
                item,
                status=CheckStatus.FAIL,
                message=f"Failed to check toxicity: {e}",
            )


def create_readiness_validator(
    scorer: ToxicityScorerPort,
    config: ReadinessConfig | None = None,
) -> ReadinessValidator:
    """Factory for ReadinessValidator."""
    return ReadinessValidator(scorer=scorer, config=config)
