"""Rich-based observer for printing validation events.

Requires the 'rich' package: pip install rich
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from appliable_validator.events import (
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ["RichConsoleObserver"]

_STYLES = {
    ValidationEventType.CHECK_PASSED: "green",
    ValidationEventType.CHECK_FAILED: "red",
    ValidationEventType.CHECK_SKIPPED: "dim",
    ValidationEventType.NULL_VALUE_DETECTED: "bold red",
    ValidationEventType.ERROR_OVERWRITTEN: "yellow",
    ValidationEventType.VALIDATION_COMPLETED: "bold cyan",
}


class RichConsoleObserver(ValidationObserver):
    """Print one line per validation event to a Rich console.

    Example:
        observer = RichConsoleObserver(verbose=True)
        validator = AppliableValidator.create(order).observe(observer)

    Args:
        console: Rich Console instance. If None, creates a new one.
        verbose: If False, passed and skipped checks are not printed.
    """

    def __init__(self, console: Console | None = None, verbose: bool = False) -> None:
        # Import Rich here to keep it optional for callers that never print
        from rich.console import Console

        self._console = console or Console()
        self._verbose = verbose

    def on_event(self, event: ValidationEvent) -> None:
        """Render the event if it is shown at the current verbosity."""
        if not self._verbose and event.event_type in (
            ValidationEventType.CHECK_PASSED,
            ValidationEventType.CHECK_SKIPPED,
        ):
            return
        from rich.text import Text

        text = Text()
        text.append(f"{event.event_type.name:<22}", style=_STYLES[event.event_type])
        text.append(self._describe(event))
        self._console.print(text)

    @staticmethod
    def _describe(event: ValidationEvent) -> str:
        data = event.data
        kind = event.event_type
        if kind == ValidationEventType.VALIDATION_COMPLETED:
            if data.get("is_valid"):
                outcome = "valid"
            else:
                outcome = f"[{data.get('code')}] {data.get('message')}"
            checks = data.get("check_count", 0)
            return f"{outcome} after {checks} checks ({data.get('duration_ms', 0.0):.2f} ms)"
        if kind == ValidationEventType.ERROR_OVERWRITTEN:
            return (
                f"[{data.get('previous_code')}] {data.get('previous_message')} -> "
                f"[{data.get('code')}] {data.get('message')}"
            )
        if kind == ValidationEventType.CHECK_SKIPPED:
            return f"#{data.get('index')} {data.get('check')} ({data.get('reason')})"
        if kind == ValidationEventType.NULL_VALUE_DETECTED:
            return f"[{data.get('code')}] {data.get('message')}"
        prefix = f"#{data.get('index')} {data.get('check')}"
        if kind == ValidationEventType.CHECK_FAILED:
            return f"{prefix} [{data.get('code')}] {data.get('message')}"
        return prefix
