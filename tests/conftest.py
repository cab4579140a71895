"""Shared fixtures for the sharecheck tests."""
from __future__ import annotations

import pytest

from sharecheck.shares import Share


@pytest.fixture
def line_shares():
    """Points on y = 3x with share "4" corrupted from 12 to 11."""
    return [Share("1", 1, 3), Share("2", 2, 6), Share("3", 3, 9), Share("4", 4, 11)]


@pytest.fixture
def sample_document():
    """Samples of y = x**2 + 3 in mixed bases."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }
