"""Shared type aliases, the transition rule record, and the engine error."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

State = Hashable
Event = Hashable

if TYPE_CHECKING:
    from switchyard.machine import StateMachine

Callback = Callable[["StateMachine", Any], Any]
DiagnosticSink = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class Transition:
    """A rule: optional callback plus optional target state.

    ``next_state=None`` means "no explicit target": the rule keeps the
    machine in whatever state it is resolved against.
    """

    callback: Callback | None = None
    next_state: State | None = None

    def target(self, state: State) -> State:
        return state if self.next_state is None else self.next_state


class TransitionUndefined(LookupError):
    """Raised when no specific, wildcard or default rule matches."""

    def __init__(self, event: Event, state: State) -> None:
        self.event = event
        self.state = state
        super().__init__(f"Transition is undefined: ({event}, {state})")
