"""Validator with side-effecting success and failure consumers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from appliable_validator.core import AbstractValidator

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["AcceptableValidator"]

T = TypeVar("T")


class AcceptableValidator(AbstractValidator[T]):
    """Fluent validator whose continuations consume the value.

    Same checks and misuse rules as AppliableValidator, but the chain
    produces no result: the terminal operation calls exactly one consumer
    and returns None.

    Example:
        (
            AcceptableValidator.create(user, "ERR_USER", True)
            .not_null(lambda u: u.email, "email is required", "ERR_EMAIL")
            .on_success(repository.save)
            .on_failure(lambda u, msg: rejected.append(msg))
        )
    """

    def on_success(self, consumer: Callable[[T], Any]) -> AcceptableValidator[T]:
        """Set the consumer called with the value when validation passes.

        Raises:
            DuplicateSuccessHandlerError: If a success consumer is already set.
        """
        self._assign_success_handler(consumer)
        return self

    def on_failure(self, consumer: Callable[[T | None, str], Any]) -> None:
        """Evaluate the chain, calling the matching consumer.

        Raises:
            MissingSuccessHandlerError: If ``on_success`` was never called.
        """
        success_consumer = self._require_success_handler()
        if self._finish():
            success_consumer(self._value)  # type: ignore[arg-type]
        else:
            consumer(self._value, self._error_message)  # type: ignore[arg-type]
