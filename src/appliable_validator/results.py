"""Recorded check failure.

A validator keeps at most one of these at a time.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckFailure:
    """The single failure currently held by a validator."""

    code: str
    message: str
