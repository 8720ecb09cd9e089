"""switchyard - A table-driven finite state machine engine."""

from switchyard.diagnostics import CollectingSink, collecting_sink, logging_sink
from switchyard.machine import StateMachine
from switchyard.types import Callback, DiagnosticSink, Event, State, Transition, TransitionUndefined

__all__ = [
    "StateMachine",
    "Transition",
    "TransitionUndefined",
    "State",
    "Event",
    "Callback",
    "DiagnosticSink",
    "CollectingSink",
    "collecting_sink",
    "logging_sink",
]
