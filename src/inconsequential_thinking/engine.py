"""ThinkingEngine: the core. Records thoughts and ranks catalog commands against them."""

from __future__ import annotations

import threading
import time
from typing import Sequence

import structlog

from inconsequential_thinking.catalog import SLASH_COMMANDS
from inconsequential_thinking.config import (
    DEFAULT_CONTEXT_THRESHOLD,
    DEFAULT_MEMORY_LIMIT,
    DEFAULT_RECENT_WINDOW,
    DEFAULT_RELEVANCE_THRESHOLD,
    DEFAULT_TOP_K,
)
from inconsequential_thinking.history import History
from inconsequential_thinking.keywords import extract_keywords
from inconsequential_thinking.models import Action, Recommendation, ThinkingResponse
from inconsequential_thinking.relevance import calculate_relevance

logger = structlog.get_logger(__name__)

NEW_SESSION_SUMMARY = "Starting a new sequential thinking session."
ACCUMULATED_CONTEXT_HINT = (
    "You have accumulated context from previous thoughts - "
    "use this to inform your next step."
)


def rank_actions(tokens: Sequence[str], catalog: Sequence[Action],
                 threshold: float = DEFAULT_RELEVANCE_THRESHOLD,
                 top_k: int = DEFAULT_TOP_K) -> list[Recommendation]:
    """Score, filter, sort and truncate.

    Only confidences strictly above ``threshold`` survive. The sort is
    stable, so ties keep catalog order.
    """
    scored = [(calculate_relevance(tokens, action.keywords), action)
              for action in catalog]
    scored = [(conf, action) for conf, action in scored if conf > threshold]
    scored.sort(key=lambda x: x[0], reverse=True)

    return [
        Recommendation(
            command=action.name,
            confidence=conf,
            rationale=action.rationale,
            priority=i + 1,
        )
        for i, (conf, action) in enumerate(scored[:top_k])
    ]


def summarize_context(history: History,
                      recent_window: int = DEFAULT_RECENT_WINDOW) -> str:
    if recent_window < 1:
        raise ValueError(f"recent_window must be >= 1, got {recent_window}")
    # Empty only when analyze() runs before anything was recorded
    if history.recent(recent_window):
        return (
            f"Based on {len(history)} previous thought(s), you are working "
            f"through a sequential problem-solving process."
        )
    return NEW_SESSION_SUMMARY


def suggest_next_steps(recommendations: Sequence[Recommendation],
                       history_size: int,
                       context_threshold: int = DEFAULT_CONTEXT_THRESHOLD) -> list[str]:
    suggestions = []
    if recommendations:
        suggestions.append(f"Consider using {recommendations[0].command} to proceed.")
    if history_size > context_threshold:
        suggestions.append(ACCUMULATED_CONTEXT_HINT)
    return suggestions


class ThinkingEngine:
    """Un motor de pensamiento secuencial. Una instancia = un historial.

    API:
        engine.think(thought, n, total, next_needed)  — registrar y recomendar
        engine.analyze(text)                          — recomendar sin registrar
        engine.history                                — el historial vivo
    """

    def __init__(self, catalog: Sequence[Action] = SLASH_COMMANDS,
                 memory_limit: int | None = None,
                 relevance_threshold: float = DEFAULT_RELEVANCE_THRESHOLD,
                 top_k: int = DEFAULT_TOP_K,
                 recent_window: int = DEFAULT_RECENT_WINDOW,
                 context_threshold: int = DEFAULT_CONTEXT_THRESHOLD,
                 history: History | None = None) -> None:
        if not 0.0 <= relevance_threshold <= 1.0:
            raise ValueError(
                f"relevance_threshold must be within [0.0, 1.0], got {relevance_threshold}")
        if top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {top_k}")
        if recent_window < 1:
            raise ValueError(f"recent_window must be >= 1, got {recent_window}")
        if history is not None and memory_limit is not None:
            raise ValueError("pass either history or memory_limit, not both")
        if history is None:
            history = History(
                DEFAULT_MEMORY_LIMIT if memory_limit is None else memory_limit)

        self._catalog = tuple(catalog)
        self._history = history
        self._threshold = relevance_threshold
        self._top_k = top_k
        self._recent_window = recent_window
        self._context_threshold = context_threshold
        self._lock = threading.Lock()

    # ── think ──────────────────────────────────────────────────────────

    def think(self, thought: str, thought_number: int, total_thoughts: int,
              next_thought_needed: bool = True) -> ThinkingResponse:
        """Registra el pensamiento y luego lo analiza.

        ``next_thought_needed`` is accepted for the caller's own sequencing;
        it does not change the ranking.
        """
        with self._lock:
            self._history.record(thought, thought_number, total_thoughts)
            return self.analyze(thought, thought_number=thought_number,
                                next_thought_needed=next_thought_needed)

    # ── analyze ────────────────────────────────────────────────────────

    def analyze(self, text: str, *, thought_number: int | None = None,
                next_thought_needed: bool | None = None) -> ThinkingResponse:
        """Rank the catalog against text and narrate the current history.

        The keyword-only arguments only annotate the log event.
        """
        t0 = time.time()
        tokens = extract_keywords(text)
        recommendations = rank_actions(tokens, self._catalog,
                                       threshold=self._threshold,
                                       top_k=self._top_k)

        response = ThinkingResponse(
            recommended_commands=recommendations,
            context_summary=summarize_context(self._history, self._recent_window),
            next_step_suggestions=suggest_next_steps(
                recommendations, len(self._history), self._context_threshold),
        )

        logger.info(
            "thought.analyzed",
            tokens=len(tokens),
            recommendations=len(recommendations),
            top=recommendations[0].command if recommendations else None,
            history=len(self._history),
            duration_ms=round((time.time() - t0) * 1000, 3),
            thought_number=thought_number,
            next_thought_needed=next_thought_needed,
        )
        return response

    # ── utilidades ─────────────────────────────────────────────────────

    @property
    def history(self) -> History:
        return self._history

    @property
    def catalog(self) -> tuple[Action, ...]:
        return self._catalog

    def reset(self) -> None:
        """Olvida todo el historial."""
        with self._lock:
            self._history.clear()

    def __repr__(self) -> str:
        return (f"ThinkingEngine(thoughts={len(self._history)}, "
                f"commands={len(self._catalog)})")
