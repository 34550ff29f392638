"""
Rules - load and validate the rules.yaml configuration.
"""

from .loader import (
    DEFAULT_RULES_PATH,
    RulesValidationError,
    load_rules,
    parse_rules,
    resolve_rules_path,
)
from .models import (
    PlatformLimits,
    ReadinessRules,
    Rules,
    ToxicityRules,
    TransitionRuleConfig,
    WorkflowRules,
)

__all__ = [
    "DEFAULT_RULES_PATH",
    "PlatformLimits",
    "ReadinessRules",
    "Rules",
    "RulesValidationError",
    "ToxicityRules",
    "TransitionRuleConfig",
    "WorkflowRules",
    "load_rules",
    "parse_rules",
    "resolve_rules_path",
]
