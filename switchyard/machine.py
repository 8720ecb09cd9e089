"""StateMachine - rule tables, lookup precedence, and event dispatch."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from switchyard.diagnostics import display_name, format_transition
from switchyard.types import (
    Callback,
    DiagnosticSink,
    Event,
    State,
    Transition,
    TransitionUndefined,
)

logger = logging.getLogger(__name__)


def _as_list(ids: Any) -> list[Any]:
    # Strings are identifiers, not collections of one-character identifiers.
    if isinstance(ids, (str, bytes)) or not isinstance(ids, Iterable):
        return [ids]
    return list(ids)


class StateMachine:
    """Table-driven finite state machine.

    Rules are looked up in three tiers, first match wins:

    1. specific rules keyed by ``(event, state)``
    2. wildcard rules keyed by ``event`` alone
    3. the default rule

    A rule without a ``next_state`` keeps the machine in the state it was
    in when the event arrived.

    Dispatch is synchronous and not re-entrant: a callback must not call
    :meth:`dispatch` on the machine that invoked it. Instances are not
    thread-safe; hosts sharing one across threads must lock around it.
    """

    def __init__(
        self,
        initial_state: State,
        data: Any = None,
        *,
        debug: bool = False,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self._state = initial_state
        self._data = data
        self._transitions: dict[tuple[Event, State], Transition] = {}
        self._any_state: dict[Event, Transition] = {}
        self._default: Transition | None = None
        self._action: Callback | None = None
        self.debug = debug
        self.sink = sink

    @property
    def state(self) -> State:
        return self._state

    @property
    def data(self) -> Any:
        return self._data

    @property
    def action(self) -> Callback | None:
        """Callback of the most recent successful dispatch, if it had one."""
        return self._action

    @property
    def has_default(self) -> bool:
        return self._default is not None

    # --- Registration ---

    def register_transition(
        self,
        events: Event | Iterable[Event],
        states: State | Iterable[State],
        callback: Callback | None = None,
        next_state: State | None = None,
    ) -> None:
        """Install a rule for every (event, state) pair. Overwrites existing."""
        rule = Transition(callback, next_state)
        state_list = _as_list(states)
        for event in _as_list(events):
            for state in state_list:
                self._transitions[(event, state)] = rule

    def register_wildcard_transition(
        self,
        events: Event | Iterable[Event],
        callback: Callback | None = None,
        next_state: State | None = None,
    ) -> None:
        """Install a rule that applies to ``events`` from any state."""
        rule = Transition(callback, next_state)
        for event in _as_list(events):
            self._any_state[event] = rule

    def set_default_transition(
        self,
        callback: Callback | None = None,
        next_state: State | None = None,
    ) -> None:
        """Replace the fallback rule used when nothing else matches."""
        self._default = Transition(callback, next_state)

    # --- Lookup ---

    def _find(self, event: Event, state: State) -> Transition | None:
        rule = self._transitions.get((event, state))
        if rule is None:
            rule = self._any_state.get(event)
        if rule is None:
            rule = self._default
        return rule

    def resolve_transition(
        self, event: Event, state: State,
    ) -> tuple[Callback | None, State]:
        """Return ``(callback, next_state)`` for ``event`` arriving in ``state``.

        Raises TransitionUndefined if no tier matches.
        """
        rule = self._find(event, state)
        if rule is None:
            raise TransitionUndefined(event, state)
        return rule.callback, rule.target(state)

    def can_dispatch(self, event: Event) -> bool:
        return self._find(event, self._state) is not None

    def events(self) -> list[Event]:
        """Events with a specific rule for the current state or a wildcard rule."""
        found = [e for (e, s) in self._transitions if s == self._state]
        found.extend(e for e in self._any_state if e not in found)
        return found

    # --- Dispatch ---

    def dispatch(self, event: Event, event_data: Any = None) -> None:
        """Send ``event`` to the machine.

        The state is updated before the callback runs, so the callback sees
        the new state. If the callback raises, the machine stays in the new
        state and the exception propagates.
        """
        callback, new_state = self.resolve_transition(event, self._state)

        if self.debug:
            self._emit(event, self._state, new_state, event_data, callback)

        self._action = callback
        self._state = new_state
        if callback is not None:
            callback(self, event_data)

    def _emit(
        self,
        event: Event,
        previous: State,
        new: State,
        event_data: Any,
        callback: Callback | None,
    ) -> None:
        if self.sink is None:
            return
        line = format_transition(
            display_name(self._data), event, previous, new,
            event_data is not None, callback is not None,
        )
        try:
            self.sink(line)
        except Exception:
            logger.exception("diagnostic sink failed for %r", line)

    def __repr__(self) -> str:
        return f"StateMachine(name={display_name(self._data)!r}, state={self._state!r})"
