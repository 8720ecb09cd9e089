"""Document review workflow -- defaults and undefined transitions.

Demonstrates:
- Registering one rule for several states at once
- A default rule sending unknown events back to draft
- Checking what the machine accepts with can_dispatch() and events()
- Catching TransitionUndefined when no rule applies

Run: python -m examples.review_workflow
"""

from switchyard import StateMachine, TransitionUndefined, collecting_sink


def notify(machine: StateMachine, reviewer: str | None) -> None:
    print(f"  {machine.data['name']} is now {machine.state} (reviewer: {reviewer})")


def main() -> None:
    print("=== Review workflow ===\n")

    lines = collecting_sink()
    doc = StateMachine("draft", {"name": "rfc-42"}, debug=True, sink=lines)
    doc.register_transition("submit", "draft", notify, "review")
    doc.register_transition("approve", "review", notify, "published")
    doc.register_transition("withdraw", ["review", "published"], notify, "draft")

    doc.dispatch("submit", "ana")
    print(f"  accepts now: {doc.events()}")
    doc.dispatch("withdraw")

    try:
        doc.dispatch("approve")
    except TransitionUndefined as exc:
        print(f"  rejected: {exc}")

    doc.set_default_transition(notify, "draft")
    print(f"  with a default, can approve: {doc.can_dispatch('approve')}")
    doc.dispatch("approve")

    print("\nTrace:")
    for line in lines.lines:
        print(f"  {line}")


if __name__ == "__main__":
    main()
