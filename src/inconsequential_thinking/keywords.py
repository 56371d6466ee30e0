"""Keyword extraction. Lowercase word runs, minus stop words and short tokens."""

from __future__ import annotations

import re

_WORD_RE = re.compile(r"\w+")

# Palabras funcionales del inglés que no aportan nada al matching
STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "is", "was", "are", "be", "been", "being", "have", "has", "had",
    "do", "does", "did", "will", "would", "should", "could", "may", "might",
    "must", "can", "this", "that", "these", "those", "i", "you", "we", "they",
    "it",
})

MIN_TOKEN_LENGTH = 3


def extract_keywords(text: str) -> list[str]:
    """Tokenize text for matching.

    Keeps left-to-right order and duplicates: a word repeated in the thought
    counts once per repetition when scoring.
    """
    words = _WORD_RE.findall(text.lower())
    return [w for w in words
            if w not in STOP_WORDS and len(w) >= MIN_TOKEN_LENGTH]
