"""Recover Shamir secrets from integer shares and flag the corrupted ones."""

from __future__ import annotations

from sharecheck.consensus import ConsensusResolver, Result, solve
from sharecheck.errors import (
    ConfigurationError,
    DuplicateEvaluationPointError,
    DuplicateShareIdError,
    InsufficientSharesError,
    InvalidShareError,
    NoConsensusError,
    SearchSpaceTooLargeError,
    ShareCheckError,
    ShareFormatError,
)
from sharecheck.interpolate import lagrange_at_zero, lagrange_at_zero_exact
from sharecheck.rational import ExactRational
from sharecheck.shares import Share
from sharecheck.subsets import SubsetEnumerator

__all__ = [
    "ConsensusResolver",
    "Result",
    "solve",
    "lagrange_at_zero",
    "lagrange_at_zero_exact",
    "ExactRational",
    "Share",
    "SubsetEnumerator",
    "ShareCheckError",
    "ConfigurationError",
    "InsufficientSharesError",
    "DuplicateEvaluationPointError",
    "DuplicateShareIdError",
    "InvalidShareError",
    "ShareFormatError",
    "SearchSpaceTooLargeError",
    "NoConsensusError",
]
