"""Shared fixtures for localized_format tests."""

from __future__ import annotations

import pytest

from localized_format import SubstitutionEngine


def one_other(count, _locale):
    """Deterministic classifier: 1 is "one", everything else "other"."""
    return "one" if count == 1 else "other"


@pytest.fixture
def engine() -> SubstitutionEngine:
    return SubstitutionEngine("en", one_other)


@pytest.fixture
def horses() -> dict[str, str]:
    return {"one": "1 horse", "other": "%{horses_count} horses"}
