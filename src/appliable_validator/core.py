"""Validation core shared by all fluent validators.

Provides AbstractValidator, which holds the value under validation, the
single failure slot, and the fail-fast policy, and implements the check
operations every concrete validator chains on.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import ValidationError

from appliable_validator.config import (
    NO_ERROR_CODE,
    NULL_ERROR_CODE_MESSAGE,
    ValidatorConfig,
)
from appliable_validator.errors import (
    DuplicateSuccessHandlerError,
    InvalidValidatorConfigError,
    MissingSuccessHandlerError,
    NullErrorCodeError,
)
from appliable_validator.events import ObservableMixin, ValidationEventType
from appliable_validator.results import CheckFailure

if TYPE_CHECKING:
    from collections.abc import Callable

    from appliable_validator.events import ValidationObserver

__all__ = ["AbstractValidator"]

T = TypeVar("T")
V = TypeVar("V", bound="AbstractValidator[Any]")


class AbstractValidator(ObservableMixin, ABC, Generic[T]):
    """Abstract base class for fluent validators.

    Generic over T, the type of the value being validated. The validator
    starts out valid and can only move to invalid. At most one failure is
    held at a time: under fail-fast policy the first failure stops further
    predicates from running, otherwise every check runs and the last
    failing check's code and message are the ones kept.

    A None value is detected automatically by every check and by the
    terminal operation, and recorded with the configured null value code.
    Predicates are never called with None.

    Subclasses supply the terminal operation.
    """

    def __init__(self, value: T | None, config: ValidatorConfig) -> None:
        """Initialize the validator.

        Prefer the ``create`` and ``from_config`` class methods.

        Args:
            value: The value to validate. May be None.
            config: Construction-time policy.
        """
        self._value = value
        self._config = config
        self._failure: CheckFailure | None = None
        self._success_handler: Callable[[T], Any] | None = None
        self._check_count = 0
        self._start_time = time.perf_counter()

    @classmethod
    def create(
        cls: type[V],
        value: Any,
        null_value_code: str | bool = NO_ERROR_CODE,
        fast_validate: bool = False,
    ) -> V:
        """Create a validator around a value.

        Accepts ``create(value)``, ``create(value, fast_validate)`` and
        ``create(value, null_value_code, fast_validate)``. A bool in the
        second position is taken as ``fast_validate``.

        Args:
            value: The value to validate. May be None.
            null_value_code: Error code recorded when value is None.
                Defaults to NO_ERROR_CODE.
            fast_validate: If True, stop evaluating checks after the first
                failure. Defaults to False (run all checks).

        Returns:
            A new validator in the valid state.

        Raises:
            NullErrorCodeError: If null_value_code is None.
            InvalidValidatorConfigError: If the arguments have the wrong types.
        """
        if null_value_code is None:
            raise NullErrorCodeError(NULL_ERROR_CODE_MESSAGE)
        if isinstance(null_value_code, bool):
            null_value_code, fast_validate = NO_ERROR_CODE, null_value_code
        try:
            config = ValidatorConfig(null_value_code=null_value_code, fast_validate=fast_validate)
        except ValidationError as e:
            raise InvalidValidatorConfigError(str(e)) from e
        return cls(value, config)

    @classmethod
    def from_config(cls: type[V], value: Any, config: ValidatorConfig) -> V:
        """Create a validator around a value using an existing config."""
        return cls(value, config)

    @property
    def config(self) -> ValidatorConfig:
        """Construction-time policy of this validator."""
        return self._config

    def observe(self: V, observer: ValidationObserver) -> V:
        """Add an observer and return the validator for chaining."""
        self.add_observer(observer)
        return self

    # -------------------------------------------------------------------------
    # Checks
    # -------------------------------------------------------------------------

    def not_null(
        self: V,
        mapper: Callable[[T], Any],
        message: str,
        code: str = NO_ERROR_CODE,
    ) -> V:
        """Fail when a property derived from the value is None.

        Args:
            mapper: Function extracting the property to test.
            message: Error message recorded on failure.
            code: Error code recorded on failure.

        Returns:
            Self for method chaining.
        """
        return self._run_check("not_null", lambda value: mapper(value) is None, message, code)

    def on(
        self: V,
        predicate: Callable[[T], bool],
        message: str,
        code: str = NO_ERROR_CODE,
    ) -> V:
        """Fail when the predicate holds.

        The predicate describes the failing condition, not the passing one.

        Args:
            predicate: Failing condition.
            message: Error message recorded on failure.
            code: Error code recorded on failure.

        Returns:
            Self for method chaining.
        """
        return self._run_check("on", predicate, message, code)

    def on_if(
        self: V,
        predicate: Callable[[T], bool],
        message: str,
        code: str = NO_ERROR_CODE,
        *,
        condition: Callable[[T], bool],
    ) -> V:
        """Fail when both the condition and the predicate hold.

        The predicate is not evaluated when the condition is false.

        Args:
            predicate: Failing condition.
            message: Error message recorded on failure.
            code: Error code recorded on failure.
            condition: Whether this check applies to the value at all.

        Returns:
            Self for method chaining.
        """
        return self._run_check("on_if", predicate, message, code, condition=condition)

    def _run_check(
        self: V,
        check: str,
        failing: Callable[[T], Any],
        message: str,
        code: str,
        condition: Callable[[T], Any] | None = None,
    ) -> V:
        index = self._check_count
        self._check_count += 1

        self._check_value()
        if self._value is None:
            self.emit(
                ValidationEventType.CHECK_SKIPPED, check=check, index=index, reason="null_value"
            )
            return self
        if not self._keep_validating():
            self.emit(
                ValidationEventType.CHECK_SKIPPED, check=check, index=index, reason="fail_fast"
            )
            return self
        if condition is not None and not condition(self._value):
            self.emit(
                ValidationEventType.CHECK_SKIPPED, check=check, index=index, reason="condition"
            )
            return self

        if failing(self._value):
            self._set_error(code, message)
            self.emit(
                ValidationEventType.CHECK_FAILED,
                check=check,
                index=index,
                code=code,
                message=message,
            )
        else:
            self.emit(ValidationEventType.CHECK_PASSED, check=check, index=index)
        return self

    # -------------------------------------------------------------------------
    # State primitives
    # -------------------------------------------------------------------------

    def _check_value(self) -> None:
        """Record the null value failure once, if the value is None."""
        if self._value is None and self._failure is None:
            self._set_error(self._config.null_value_code, self._config.null_value_message)
            self.emit(
                ValidationEventType.NULL_VALUE_DETECTED,
                code=self._config.null_value_code,
                message=self._config.null_value_message,
            )

    def _keep_validating(self) -> bool:
        """Whether the next predicate should be evaluated."""
        if self._config.fast_validate:
            return self._is_valid
        return True

    def _set_error(self, code: str, message: str) -> None:
        """Record a failure, replacing any previous one."""
        previous = self._failure
        self._failure = CheckFailure(code=code, message=message)
        if previous is not None:
            self.emit(
                ValidationEventType.ERROR_OVERWRITTEN,
                previous_code=previous.code,
                previous_message=previous.message,
                code=code,
                message=message,
            )

    @property
    def _is_valid(self) -> bool:
        return self._failure is None

    @property
    def _error_message(self) -> str | None:
        return self._failure.message if self._failure else None

    @property
    def _error_code(self) -> str | None:
        return self._failure.code if self._failure else None

    # -------------------------------------------------------------------------
    # Terminal support
    # -------------------------------------------------------------------------

    def _assign_success_handler(self, handler: Callable[[T], Any]) -> None:
        if self._success_handler is not None:
            raise DuplicateSuccessHandlerError("The success handler must be unique.")
        self._success_handler = handler

    def _require_success_handler(self) -> Callable[[T], Any]:
        if self._success_handler is None:
            raise MissingSuccessHandlerError(
                "on_success() must be called before on_failure()."
            )
        return self._success_handler

    def _finish(self) -> bool:
        """Run the final null check, emit completion, and return validity."""
        self._check_value()
        self.emit(
            ValidationEventType.VALIDATION_COMPLETED,
            is_valid=self._is_valid,
            code=self._error_code,
            message=self._error_message,
            check_count=self._check_count,
            duration_ms=(time.perf_counter() - self._start_time) * 1000,
        )
        return self._is_valid

    @abstractmethod
    def on_failure(self, handler: Any) -> Any:
        """Terminal operation: decide between the success and failure paths."""
        ...

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(value={self._value!r}, valid={self._is_valid}, "
            f"fast_validate={self._config.fast_validate})"
        )
