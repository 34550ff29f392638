from __future__ import annotations

from pathlib import Path

import pytest

from content_gate.rules import Rules, load_rules
from tests.mocks import MockTimePort, StaticScorer

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def time_port() -> MockTimePort:
    return MockTimePort()


@pytest.fixture
def rules() -> Rules:
    """Load the real rules.yaml from the project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def safe_scorer() -> StaticScorer:
    return StaticScorer(is_toxic=False, score=0.1)


@pytest.fixture
def toxic_scorer() -> StaticScorer:
    return StaticScorer(is_toxic=True, score=0.8)
