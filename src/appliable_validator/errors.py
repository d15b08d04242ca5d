"""Exceptions raised for incorrect use of the validator API.

These are distinct from validation failures, which are never raised and are
only delivered through the failure continuation.
"""

from __future__ import annotations

__all__ = [
    "ValidatorUsageError",
    "NullErrorCodeError",
    "DuplicateSuccessHandlerError",
    "MissingSuccessHandlerError",
    "InvalidValidatorConfigError",
]


class ValidatorUsageError(Exception):
    """Base class for programmer-misuse errors."""


class NullErrorCodeError(ValidatorUsageError, TypeError):
    """Raised when a validator is created with ``None`` as its null value code."""


class DuplicateSuccessHandlerError(ValidatorUsageError):
    """Raised when ``on_success`` is called a second time on one validator."""


class MissingSuccessHandlerError(ValidatorUsageError):
    """Raised when the terminal operation runs before ``on_success``."""


class InvalidValidatorConfigError(ValidatorUsageError, ValueError):
    """Raised when ``create`` receives arguments of the wrong type."""
