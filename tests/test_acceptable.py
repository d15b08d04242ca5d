"""Tests for AcceptableValidator."""

from __future__ import annotations

from typing import Any

import pytest

from appliable_validator import (
    NULL_VALUE_MESSAGE,
    AcceptableValidator,
    DuplicateSuccessHandlerError,
    MissingSuccessHandlerError,
)

from .conftest import Address


class TestAcceptableValidator:
    """Unit tests for the consumer-style validator."""

    def test_success_consumer_called(self, address: Address) -> None:
        """Test a passing chain calls only the success consumer."""
        saved: list[Any] = []
        rejected: list[str] = []

        result = (
            AcceptableValidator.create(address)
            .not_null(lambda a: a.city, "city required")
            .on_success(saved.append)
            .on_failure(lambda a, msg: rejected.append(msg))
        )

        assert result is None
        assert saved == [address]
        assert rejected == []

    def test_failure_consumer_called(self) -> None:
        """Test a failing chain calls only the failure consumer."""
        saved: list[Any] = []
        rejected: list[tuple[Any, str]] = []

        AcceptableValidator.create(-1, "E_NULL", True).on(
            lambda v: v < 0, "must be non-negative", "E_NEG"
        ).on_success(saved.append).on_failure(lambda v, msg: rejected.append((v, msg)))

        assert saved == []
        assert rejected == [(-1, "must be non-negative")]

    def test_none_value(self) -> None:
        """Test a None value reaches the failure consumer with the null message."""
        rejected: list[str] = []

        AcceptableValidator.create(None).on_success(print).on_failure(
            lambda v, msg: rejected.append(msg)
        )

        assert rejected == [NULL_VALUE_MESSAGE]

    def test_duplicate_on_success_raises(self) -> None:
        """Test the duplicate-handler rule applies to consumers."""
        validator = AcceptableValidator.create(1).on_success(print)

        with pytest.raises(DuplicateSuccessHandlerError):
            validator.on_success(print)

    def test_missing_success_consumer_raises(self) -> None:
        """Test the missing-handler rule applies to consumers."""
        with pytest.raises(MissingSuccessHandlerError):
            AcceptableValidator.create(1).on_failure(lambda v, msg: None)

    def test_checks_return_acceptable_validator(self) -> None:
        """Test chained checks keep the concrete validator type."""
        validator = AcceptableValidator.create(1).on(lambda v: False, "m")

        assert isinstance(validator, AcceptableValidator)
