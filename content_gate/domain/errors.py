"""
Configuration errors.

Validation outcomes (illegal transitions, failed checks) are returned as data.
Only caller-programming mistakes are raised.
"""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised for malformed rule tables and invalid validator arguments."""

    def __init__(self, errors: list[str] | str) -> None:
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        super().__init__("; ".join(errors))
