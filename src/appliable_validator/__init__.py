"""Fluent, single-error validation chains that evaluate to a value."""

from appliable_validator.acceptable import AcceptableValidator
from appliable_validator.appliable import AppliableValidator
from appliable_validator.config import NO_ERROR_CODE, NULL_VALUE_MESSAGE, ValidatorConfig
from appliable_validator.core import AbstractValidator
from appliable_validator.errors import (
    DuplicateSuccessHandlerError,
    InvalidValidatorConfigError,
    MissingSuccessHandlerError,
    NullErrorCodeError,
    ValidatorUsageError,
)
from appliable_validator.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)
from appliable_validator.results import CheckFailure
from appliable_validator.rich_observers import RichConsoleObserver
from appliable_validator.trace import TraceEntry, TraceObserver, ValidationTrace

__all__ = [
    # Validators
    "AbstractValidator",
    "AppliableValidator",
    "AcceptableValidator",
    # Configuration
    "ValidatorConfig",
    "NO_ERROR_CODE",
    "NULL_VALUE_MESSAGE",
    # Failure slot
    "CheckFailure",
    # Usage errors
    "ValidatorUsageError",
    "NullErrorCodeError",
    "DuplicateSuccessHandlerError",
    "MissingSuccessHandlerError",
    "InvalidValidatorConfigError",
    # Observer pattern
    "ObservableMixin",
    "ValidationEvent",
    "ValidationEventType",
    "ValidationObserver",
    # Tracing
    "TraceEntry",
    "TraceObserver",
    "ValidationTrace",
    # Rich observers
    "RichConsoleObserver",
]

__version__ = "0.1.0"
