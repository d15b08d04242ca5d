"""Observer pattern implementation for validation events.

Provides event types, observer protocol, and mixin for adding observer
support to validators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "ValidationEventType",
    "ValidationEvent",
    "ValidationObserver",
    "ObservableMixin",
]


class ValidationEventType(Enum):
    """Types of validation events that can be observed."""

    CHECK_PASSED = auto()
    """Emitted when a check ran and its failing condition did not hold."""

    CHECK_FAILED = auto()
    """Emitted when a check records a failure."""

    CHECK_SKIPPED = auto()
    """Emitted when a check did not evaluate its predicate."""

    NULL_VALUE_DETECTED = auto()
    """Emitted when the value under validation is found to be None."""

    ERROR_OVERWRITTEN = auto()
    """Emitted when a new failure replaces the one already recorded."""

    VALIDATION_COMPLETED = auto()
    """Emitted when the terminal operation decides between success and failure."""


@dataclass
class ValidationEvent:
    """A validation event that can be observed.

    Attributes:
        event_type: The type of event that occurred.
        source: The validator that emitted the event.
        data: Event-specific data dictionary.

    Example:
        event = ValidationEvent(
            event_type=ValidationEventType.CHECK_FAILED,
            source=validator,
            data={"check": "on", "index": 0, "code": "E1", "message": "negative"},
        )
    """

    event_type: ValidationEventType
    source: object
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class ValidationObserver(Protocol):
    """Protocol for validation event observers.

    Implement this protocol to receive validation events. Observers
    can be used for tracing, metrics collection, console output, etc.

    Example:
        class PrintingObserver:
            def on_event(self, event: ValidationEvent) -> None:
                print(f"{event.event_type.name}: {event.data}")
    """

    def on_event(self, event: ValidationEvent) -> None:
        """Handle a validation event.

        Args:
            event: The validation event to handle.
        """
        ...


class ObservableMixin:
    """Mixin class to add observer support to any class.

    Provides methods to add, remove, and notify observers of validation
    events. Observers are called synchronously, in registration order.
    """

    _observers: list[ValidationObserver]

    def _ensure_observers(self) -> None:
        """Ensure the observers list is initialized."""
        if not hasattr(self, "_observers") or self._observers is None:
            self._observers = []

    def add_observer(self, observer: ValidationObserver) -> None:
        """Add an observer to receive validation events.

        Args:
            observer: An object implementing the ValidationObserver protocol.
        """
        self._ensure_observers()
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: ValidationObserver) -> None:
        """Remove an observer from receiving validation events.

        Args:
            observer: The observer to remove.
        """
        self._ensure_observers()
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: ValidationEvent) -> None:
        """Notify all observers of a validation event.

        Args:
            event: The validation event to broadcast to observers.
        """
        self._ensure_observers()
        for observer in self._observers:
            observer.on_event(event)

    def emit(self, event_type: ValidationEventType, **data: Any) -> None:
        """Build an event with this object as source and notify observers.

        Nothing is built when no observer is registered.

        Args:
            event_type: The type of event to emit.
            **data: Event-specific data.
        """
        self._ensure_observers()
        if not self._observers:
            return
        self.notify(ValidationEvent(event_type=event_type, source=self, data=data))

    @property
    def observers(self) -> list[ValidationObserver]:
        """Get a copy of the current observers list."""
        self._ensure_observers()
        return self._observers.copy()

    def clear_observers(self) -> None:
        """Remove all observers."""
        self._ensure_observers()
        self._observers.clear()
