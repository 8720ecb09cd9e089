"""Debug-line formatting and ready-made diagnostic sinks."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from switchyard.types import DiagnosticSink, Event, State

DEFAULT_NAME = "FSM"


def display_name(data: Any) -> str:
    """Machine name for diagnostics, taken from ``data`` when it carries one."""
    if isinstance(data, Mapping):
        name = data.get("name")
    else:
        name = getattr(data, "name", None)
    return DEFAULT_NAME if name is None else str(name)


def format_transition(
    name: str,
    event: Event,
    previous: State,
    new: State,
    has_event_data: bool,
    has_callback: bool,
) -> str:
    """Build the one-line description of a dispatch.

    >>> format_transition("door", "open", "closed", "opened", False, True)
    'door: open: closed -> opened; with callback'
    """
    parts = [f"{name}: ", f"{event}: ", f"{previous} -> {new}"]
    if has_event_data:
        parts.append("; with event data")
    if has_callback:
        parts.append("; with callback")
    return "".join(parts)


def logging_sink(
    logger: logging.Logger | None = None, level: int = logging.DEBUG,
) -> DiagnosticSink:
    """Return a sink that writes each line to ``logger`` at ``level``."""
    target = logger if logger is not None else logging.getLogger("switchyard")

    def sink(line: str) -> None:
        target.log(level, line)

    return sink


class CollectingSink:
    """Sink that keeps every emitted line in ``lines``."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()


def collecting_sink() -> CollectingSink:
    return CollectingSink()
