"""
TransitionEngine - rule-table driven lifecycle transitions.

Answers "is X -> Y legal", lists legal next states, and keeps an append-only
log of recorded attempts.

Key behaviors:
- The rule table is data; no state name has built-in meaning
- A state with an empty destination list is terminal
- A state with no rule has no legal transitions (reported differently)
- Duplicate source states make the table ambiguous and are rejected
- History is newest-first and handed out as an immutable tuple
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from uuid import uuid4

from content_gate.adapters.clock import SystemClock
from content_gate.domain.errors import ConfigError

from .models import State, TransitionAttempt, TransitionResult, TransitionRule
from .ports import IdPort, TimePort

logger = logging.getLogger(__name__)


# --- Rule Table Helpers ---


def rules_from_mapping(
    mapping: Mapping[State, Iterable[State]],
    descriptions: Mapping[State, str] | None = None,
) -> list[TransitionRule]:
    """Build a rule table from ``{state: [destinations]}`` data."""
    descriptions = descriptions or {}
    return [
        TransitionRule(
            from_state=state,
            # TransitionRule rejects a bare string rather than splitting it.
            to_states=targets if isinstance(targets, str) else tuple(targets),  # type: ignore
            description=descriptions.get(state),
        )
        for state, targets in mapping.items()
    ]


def check_rule_table(rules: Iterable[TransitionRule]) -> list[str]:
    """Pure validation logic - returns a list of problems (empty if valid)."""
    errors: list[str] = []
    seen: set[State] = set()

    for rule in rules:
        if not isinstance(rule.from_state, str) or not rule.from_state.strip():
            errors.append(f"Rule source state must be a non-empty string: {rule.from_state!r}")
            continue

        if rule.from_state in seen:
            errors.append(f"Duplicate transition rule for state \"{rule.from_state}\"")
        seen.add(rule.from_state)

        for target in rule.to_states:
            if not isinstance(target, str) or not target.strip():
                errors.append(
                    f"Rule for \"{rule.from_state}\" has an invalid destination: {target!r}"
                )

    return errors


def _format_allowed(rule: TransitionRule) -> str:
    return ", ".join(rule.to_states) if rule.to_states else "none"


# --- Engine ---


class TransitionEngine:
    """
    Validates state transitions against an injected rule table.

    ``validate`` is pure. ``record_and_validate`` is the only operation that
    touches the history; it is safe to call from several threads.
    """

    def __init__(
        self,
        rules: Iterable[TransitionRule] | None = None,
        *,
        time_port: TimePort | None = None,
        id_factory: IdPort | None = None,
    ) -> None:
        self._time = time_port or SystemClock()
        self._new_id = id_factory or uuid4
        self._rules: dict[State, TransitionRule] = {}
        self._history: tuple[TransitionAttempt, ...] = ()
        self._lock = threading.Lock()

        if rules is not None:
            self.configure(rules)

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[State, Iterable[State]],
        descriptions: Mapping[State, str] | None = None,
        *,
        time_port: TimePort | None = None,
        id_factory: IdPort | None = None,
    ) -> TransitionEngine:
        return cls(
            rules_from_mapping(mapping, descriptions),
            time_port=time_port,
            id_factory=id_factory,
        )

    # --- Configuration ---

    def configure(self, rules: Iterable[TransitionRule]) -> None:
        """
        Replace the active rule table.

        Raises ConfigError if the table is ambiguous or malformed; the previous
        table stays active in that case. History is kept.
        """
        rules = list(rules)
        errors = check_rule_table(rules)
        if errors:
            raise ConfigError(errors)

        table = {rule.from_state: rule for rule in rules}
        with self._lock:
            self._rules = table

        logger.info("Transition rules configured: %d rules", len(table))

    def rules(self) -> tuple[TransitionRule, ...]:
        return tuple(self._rules.values())

    def rule_for(self, state: State) -> TransitionRule | None:
        return self._rules.get(state)

    def states(self) -> list[State]:
        """Every state named in the table, in order of first appearance."""
        ordered: dict[State, None] = {}
        for rule in self._rules.values():
            ordered.setdefault(rule.from_state)
            for target in rule.to_states:
                ordered.setdefault(target)
        return list(ordered)

    def is_terminal(self, state: State) -> bool:
        rule = self._rules.get(state)
        return rule is not None and rule.is_terminal

    # --- Queries ---

    def available_transitions(self, state: State) -> list[State]:
        rule = self._rules.get(state)
        return list(rule.to_states) if rule else []

    def validate(self, from_state: State, to_state: State) -> TransitionResult:
        rule = self._rules.get(from_state)

        if rule is None:
            result = TransitionResult(
                valid=False,
                message=f"No transition rules defined for state \"{from_state}\"",
            )
        elif to_state not in rule.to_states:
            result = TransitionResult(
                valid=False,
                message=(
                    f"Invalid transition: \"{from_state}\" -> \"{to_state}\". "
                    f"Allowed transitions: {_format_allowed(rule)}"
                ),
            )
        else:
            result = TransitionResult(
                valid=True,
                message=f"Valid transition: \"{from_state}\" -> \"{to_state}\"",
            )

        logger.debug("validate %s -> %s: %s", from_state, to_state, result.valid)
        return result

    # --- History ---

    def record_and_validate(self, from_state: State, to_state: State) -> TransitionAttempt:
        result = self.validate(from_state, to_state)

        attempt = TransitionAttempt(
            id=self._new_id(),
            timestamp=self._time.now_utc(),
            from_state=from_state,
            to_state=to_state,
            success=result.valid,
            message=result.message,
        )

        with self._lock:
            self._history = (attempt, *self._history)

        logger.info(
            "Transition recorded: %s -> %s success=%s", from_state, to_state, attempt.success
        )
        return attempt

    def history(self) -> tuple[TransitionAttempt, ...]:
        """Newest-first snapshot of recorded attempts."""
        return self._history


def create_transition_engine(
    rules: Iterable[TransitionRule] | Mapping[State, Iterable[State]] | None = None,
    time_port: TimePort | None = None,
) -> TransitionEngine:
    """Factory for TransitionEngine. Accepts a rule list or a mapping."""
    if isinstance(rules, Mapping):
        rules = rules_from_mapping(rules)
    return TransitionEngine(rules, time_port=time_port)
