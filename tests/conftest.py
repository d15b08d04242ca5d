"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import strategies as st

from appliable_validator import AppliableValidator, TraceObserver, ValidationEvent

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for error codes (letters, numbers and underscores)
error_codes = st.text(
    min_size=1,
    max_size=20,
    alphabet=st.characters(whitelist_categories=("Lu", "Nd"), whitelist_characters="_"),
)

# Strategy for messages
messages = st.text(min_size=1, max_size=100)

# Strategy for present (non-None) values
present_values = st.one_of(
    st.integers(),
    st.text(max_size=50),
    st.booleans(),
    st.lists(st.integers(), max_size=5),
)

# Strategy for a chain outcome: each entry says whether that check fails
check_outcomes = st.lists(st.booleans(), max_size=10)


# -----------------------------------------------------------------------------
# Test Helpers
# -----------------------------------------------------------------------------


class CountingPredicate:
    """Predicate that counts its calls and returns a fixed result."""

    def __init__(self, result: bool) -> None:
        self.result = result
        self.calls = 0

    def __call__(self, value: Any) -> bool:
        self.calls += 1
        return self.result


class RecordingObserver:
    """Observer that records all events for testing."""

    def __init__(self) -> None:
        self.events: list[ValidationEvent] = []

    def on_event(self, event: ValidationEvent) -> None:
        self.events.append(event)

    @property
    def event_names(self) -> list[str]:
        return [e.event_type.name for e in self.events]


class Address:
    """Plain object with optional attributes for not_null checks."""

    def __init__(self, city: str | None = None, zip_code: str | None = None) -> None:
        self.city = city
        self.zip_code = zip_code


def identity_or_message(validator: AppliableValidator[Any, Any]) -> Any:
    """Finish a chain returning the value on success and the message on failure."""
    return validator.on_success(lambda v: v).on_failure(lambda v, msg: msg)


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def recording_observer() -> RecordingObserver:
    """Create a fresh RecordingObserver."""
    return RecordingObserver()


@pytest.fixture
def trace_observer() -> TraceObserver:
    """Create a TraceObserver with an empty trace."""
    return TraceObserver()


@pytest.fixture
def address() -> Address:
    """Create an Address with every attribute set."""
    return Address(city="Springfield", zip_code="12345")
