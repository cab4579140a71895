"""Exception hierarchy shared by every sharecheck component."""
from __future__ import annotations


class ShareCheckError(Exception):
    """Base class for all errors raised by sharecheck."""


class ConfigurationError(ShareCheckError, ArithmeticError):
    """Raised for a zero denominator or an invalid resolver policy."""


class InsufficientSharesError(ShareCheckError, ValueError):
    """Raised when fewer shares than the threshold are supplied."""


class DuplicateEvaluationPointError(ShareCheckError, ZeroDivisionError):
    """Raised when two shares use the same x-coordinate."""


class DuplicateShareIdError(ShareCheckError, ValueError):
    """Raised when two shares carry the same identifier."""


class InvalidShareError(ShareCheckError, ValueError):
    """Raised when a share is evaluated at x == 0."""


class ShareFormatError(ShareCheckError, ValueError):
    """Raised when a share document cannot be parsed or decoded."""


class SearchSpaceTooLargeError(ShareCheckError, RuntimeError):
    """Raised when C(n, k) exceeds the configured subset limit."""


class NoConsensusError(ShareCheckError, ValueError):
    """Raised when strict mode rejects every subset."""


__all__ = [
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
