from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from content_gate.domain.errors import ConfigError
from content_gate.rules.models import Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = "rules.yaml"


class RulesValidationError(ConfigError):
    """Raised when the rules file is missing, unparsable, or fails schema validation."""


def resolve_rules_path(
    rules_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """
    Pick the rules file: explicit path, then RULES_PATH, then ./rules.yaml.
    """
    if rules_path is not None:
        return Path(rules_path)

    env = os.environ if env is None else env
    env_path = env.get("RULES_PATH")
    if env_path:
        return Path(env_path)

    return Path.cwd() / DEFAULT_RULES_PATH


def _strip_fences(content: str) -> str:
    # Accept a ```yaml block embedded in a markdown document.
    yaml_lines: list[str] = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def parse_rules(content: str, source: str = "<string>") -> Rules:
    """
    Parse and validate rules from YAML text.
    Raises RulesValidationError on bad YAML or schema violations.
    """
    try:
        data = yaml.safe_load(_strip_fences(content))
    except yaml.YAMLError as e:
        raise RulesValidationError(f"Invalid YAML syntax in {source}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RulesValidationError(f"Rules in {source} must be a mapping")

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        ]
        raise RulesValidationError(errors) from e


def load_rules(path: Path | str | None = None) -> Rules:
    """
    Load and validate the rules file.
    Raises RulesValidationError if the file is missing or invalid.
    """
    rules_path = resolve_rules_path(path)
    if not rules_path.exists():
        raise RulesValidationError(f"Rules file not found at: {rules_path}")

    with open(rules_path) as f:
        content = f.read()

    rules = parse_rules(content, source=str(rules_path))
    logger.info(
        "Rules loaded from %s (%d transition rules, %d platforms)",
        rules_path,
        len(rules.workflow.transitions),
        len(rules.platforms),
    )
    return rules
