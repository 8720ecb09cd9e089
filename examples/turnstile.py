"""Coin-operated turnstile -- the classic two-state machine.

Demonstrates:
- Specific transitions keyed by (event, state)
- A rule with no next state (pushing a locked turnstile)
- A wildcard rule catching extra coins from any state
- Debug output routed through the standard logging module

Run: python -m examples.turnstile
"""

import logging

from switchyard import StateMachine, logging_sink


def take_coin(machine: StateMachine, amount: int) -> None:
    machine.data["takings"] += amount
    print(f"  took {amount}c, total {machine.data['takings']}c, now {machine.state}")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="  [%(name)s] %(message)s")
    print("=== Turnstile ===\n")

    gate = StateMachine(
        "locked",
        {"name": "turnstile", "takings": 0},
        debug=True,
        sink=logging_sink(),
    )
    gate.register_transition("coin", "locked", take_coin, "unlocked")
    gate.register_transition("push", "unlocked", None, "locked")
    gate.register_transition("push", "locked")
    gate.register_wildcard_transition("coin", take_coin)

    gate.dispatch("push")
    gate.dispatch("coin", 25)
    gate.dispatch("coin", 10)
    gate.dispatch("push")

    print(f"\nDone. Gate is {gate.state}, takings {gate.data['takings']}c.")


if __name__ == "__main__":
    main()
