"""Relevance scoring. How much of a thought a command's keywords cover."""

from __future__ import annotations

from typing import Iterable

# Cap on the absolute-count bonus; each match is worth 1 / BONUS_DIVISOR
MAX_BONUS = 0.3
BONUS_DIVISOR = 5


def token_matches(token: str, keywords: Iterable[str]) -> bool:
    """Bidirectional substring match: 'arch' hits 'architecture' and vice versa."""
    return any(kw in token or token in kw for kw in keywords)


def calculate_relevance(tokens: Iterable[str], keywords: Iterable[str]) -> float:
    """Confidence in [0.0, 1.0] that keywords describe the tokens.

    Fórmula: matched / total + min(matched / 5, 0.3), capped at 1.0.
    Tokens count with multiplicity. Zero matches short-circuit to 0.0, so an
    empty token list never reaches the division.
    """
    tokens = list(tokens)
    keywords = tuple(keywords)

    match_count = sum(1 for t in tokens if token_matches(t, keywords))
    if match_count == 0:
        return 0.0

    percentage = match_count / len(tokens)
    bonus = min(match_count / BONUS_DIVISOR, MAX_BONUS)
    return min(percentage + bonus, 1.0)
