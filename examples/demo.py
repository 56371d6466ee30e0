#!/usr/bin/env python3
"""
inconsequential-thinking demo: a short thinking session.

No server needed. No API keys. Just run it.
"""

from inconsequential_thinking import ThinkingEngine
from inconsequential_thinking.observability import setup_logging


def header(text):
    print(f"\n{'='*64}")
    print(f"  {text}")
    print(f"{'='*64}\n")


def show(response):
    if not response.recommended_commands:
        print("  (no recommendations)")
    for rec in response.recommended_commands:
        n = int(rec.confidence * 20)
        bar = "█" * n + "░" * (20 - n)
        print(f"    {rec.priority}. {bar} {rec.confidence:.2f} | {rec.command}")
    print(f"\n  CONTEXT: {response.context_summary}")
    for hint in response.next_step_suggestions:
        print(f"  NEXT:    {hint}")
    print()


THOUGHTS = [
    "I need to plan the architecture for a new feature",
    "First I should understand the structure of the codebase",
    "xyz qwe",
    "fix the css layout alignment on this component",
    "The code is ready, time to open a pull request for review",
]


def main():
    setup_logging("WARNING")
    engine = ThinkingEngine(memory_limit=3)

    header("INCONSEQUENTIAL THINKING: Session Demo")
    print(f"  Memory limit: {engine.history.memory_limit} thoughts.")
    print(f"  Available commands: {len(engine.catalog)}\n")

    for i, thought in enumerate(THOUGHTS, start=1):
        header(f"THOUGHT {i}/{len(THOUGHTS)} — {thought}")
        show(engine.think(thought, i, len(THOUGHTS), i < len(THOUGHTS)))

    header("HISTORY")
    for t in engine.history:
        print(f"    #{t.number} {t.text[:55]}")
    print(f"\n  {len(THOUGHTS) - len(engine.history)} oldest thought(s) evicted.\n")


if __name__ == "__main__":
    main()
