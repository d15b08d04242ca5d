"""Validator with a value-producing success and failure continuation.

Provides AppliableValidator, the fluent validator whose chain evaluates to
the result of either the success transform or the failure handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from appliable_validator.core import AbstractValidator

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["AppliableValidator"]

T = TypeVar("T")
U = TypeVar("U")


class AppliableValidator(AbstractValidator[T], Generic[T, U]):
    """Fluent validator that evaluates to a result.

    Generic over T, the type of the value being validated, and U, the type
    of the result produced by the chain. Exactly one of the two
    continuations runs, and its return value is the chain's result.

    Example:
        from appliable_validator import AppliableValidator

        doubled = (
            AppliableValidator.create(42)
            .on(lambda v: v < 0, "must be non-negative")
            .on_success(lambda v: v * 2)
            .on_failure(lambda v, msg: -1)
        )
        # doubled == 84
    """

    def on_success(self, handler: Callable[[T], U]) -> AppliableValidator[T, U]:
        """Set the transform applied to the value when validation passes.

        Args:
            handler: Function mapping the validated value to the result.

        Returns:
            Self for method chaining.

        Raises:
            DuplicateSuccessHandlerError: If a success handler is already set.
        """
        self._assign_success_handler(handler)
        return self

    def on_failure(self, handler: Callable[[T | None, str], U]) -> U:
        """Evaluate the chain.

        Args:
            handler: Function called with the value and the recorded error
                message when validation failed.

        Returns:
            The success handler's result if the value is valid, otherwise
            the failure handler's result.

        Raises:
            MissingSuccessHandlerError: If ``on_success`` was never called.
        """
        success_handler = self._require_success_handler()
        if self._finish():
            return success_handler(self._value)  # type: ignore[no-any-return, arg-type]
        return handler(self._value, self._error_message)  # type: ignore[arg-type]
