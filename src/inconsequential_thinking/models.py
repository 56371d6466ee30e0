"""Core data models. An Action is catalog data. A Thought is history. The rest is derived."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Action:
    """A slash command the engine can recommend."""

    name: str                   # e.g. "/plan:create"
    description: str
    use_when: str               # when the command applies
    keywords: tuple[str, ...] = ()  # lowercase, order irrelevant

    @property
    def rationale(self) -> str:
        return f"{self.description}. {self.use_when}"


@dataclass(frozen=True)
class Thought:
    """Un pensamiento registrado. Inmutable una vez guardado."""

    text: str
    number: int                 # posición declarada por el caller
    total_estimate: int         # estimación del total de pensamientos
    timestamp: float = field(default_factory=time.time)


@dataclass
class Recommendation:
    command: str
    confidence: float           # 0.0-1.0
    rationale: str
    priority: int               # 1 = best

    def to_dict(self) -> dict:
        return {
            "command": self.command,
            "confidence": self.confidence,
            "rationale": self.rationale,
            "priority": self.priority,
        }


@dataclass
class ThinkingResponse:
    """What one invocation returns. Built fresh every time, never stored."""

    recommended_commands: list[Recommendation] = field(default_factory=list)
    context_summary: str = ""
    next_step_suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "recommended_commands": [r.to_dict() for r in self.recommended_commands],
            "context_summary": self.context_summary,
            "next_step_suggestions": list(self.next_step_suggestions),
        }
