"""
Readiness component - pre-publish checklist.
"""

from ._impl import (
    CITATIONS_CHECK_ID,
    LENGTH_CHECK_ID,
    TOXICITY_CHECK_ID,
    ReadinessConfig,
    ReadinessValidator,
    check_citations,
    check_length,
    count_citations,
    create_readiness_validator,
    resolve_toxicity,
    toxicity_item,
)
from .component import run, run_validate
from .models import (
    CheckStatus,
    ChecklistItem,
    ProgressCallback,
    ToxicityScore,
    ValidateReadinessInput,
    ValidateReadinessOutput,
    ValidationRun,
)
from .ports import ToxicityScorerPort

__all__ = [
    # Entry points
    "run",
    "run_validate",
    # Validator
    "ReadinessConfig",
    "ReadinessValidator",
    "create_readiness_validator",
    # Checks
    "CITATIONS_CHECK_ID",
    "LENGTH_CHECK_ID",
    "TOXICITY_CHECK_ID",
    "check_citations",
    "check_length",
    "count_citations",
    "resolve_toxicity",
    "toxicity_item",
    # Models
    "CheckStatus",
    "ChecklistItem",
    "ProgressCallback",
    "ToxicityScore",
    "ValidateReadinessInput",
    "ValidateReadinessOutput",
    "ValidationRun",
    # Ports
    "ToxicityScorerPort",
]
