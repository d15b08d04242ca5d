"""Recording of validation events into pydantic models.

Provides TraceEntry and ValidationTrace, and TraceObserver which fills a
trace from the events a validator emits.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from appliable_validator.events import ValidationEvent, ValidationEventType, ValidationObserver

__all__ = ["TraceEntry", "ValidationTrace", "TraceObserver"]


class TraceEntry(BaseModel):
    """A single recorded validation event.

    Attributes:
        event: Name of the ValidationEventType.
        check: Kind of check ("on", "on_if", "not_null") if the event is about a check.
        index: Zero-based position of the check in the chain, if applicable.
        code: Error code carried by the event, if any.
        message: Error message carried by the event, if any.
        timestamp: ISO format timestamp of when the event was recorded.
        context: Remaining event data.
    """

    event: str
    check: str | None = None
    index: int | None = None
    code: str | None = None
    message: str | None = None
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())
    context: dict[str, Any] = Field(default_factory=dict)


class ValidationTrace(BaseModel):
    """Ordered record of the events emitted by one or more validators."""

    entries: list[TraceEntry] = Field(default_factory=list)

    @property
    def failures(self) -> list[TraceEntry]:
        """Entries for checks that recorded a failure, in chain order."""
        return [e for e in self.entries if e.event == ValidationEventType.CHECK_FAILED.name]

    @property
    def evaluated_count(self) -> int:
        """Number of checks whose predicate was evaluated."""
        evaluated = {ValidationEventType.CHECK_PASSED.name, ValidationEventType.CHECK_FAILED.name}
        return sum(1 for e in self.entries if e.event in evaluated)

    def events(self) -> list[str]:
        """Event names in the order they were recorded."""
        return [e.event for e in self.entries]

    def as_records(self) -> list[dict[str, Any]]:
        """Export entries as dicts suitable for pd.DataFrame()."""
        return [e.model_dump() for e in self.entries]


class TraceObserver(ValidationObserver):
    """Observer that records every event into a ValidationTrace.

    Example:
        observer = TraceObserver()
        AppliableValidator.create(-5).observe(observer).on(
            lambda v: v < 0, "must be non-negative", "ERR_NEG"
        ).on_success(str).on_failure(lambda v, msg: msg)

        observer.trace.failures[0].code  # "ERR_NEG"
    """

    def __init__(self, trace: ValidationTrace | None = None) -> None:
        self.trace = trace if trace is not None else ValidationTrace()

    def on_event(self, event: ValidationEvent) -> None:
        data = dict(event.data)
        self.trace.entries.append(
            TraceEntry(
                event=event.event_type.name,
                check=data.pop("check", None),
                index=data.pop("index", None),
                code=data.pop("code", None),
                message=data.pop("message", None),
                context=data,
            )
        )
