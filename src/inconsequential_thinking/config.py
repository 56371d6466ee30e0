"""Tunables. Named defaults for code, Settings for the environment."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MEMORY_LIMIT = 50           # thoughts kept before FIFO eviction
DEFAULT_RELEVANCE_THRESHOLD = 0.2   # exclusive: exactly 0.2 is dropped
DEFAULT_TOP_K = 3                   # recommendations returned at most
DEFAULT_RECENT_WINDOW = 5           # thoughts consulted for the context summary
DEFAULT_CONTEXT_THRESHOLD = 3       # history longer than this earns a hint

ENV_PREFIX = "INCONSEQUENTIAL_THINKING_"


class Settings(BaseSettings):
    """Environment-driven configuration for the server process.

    Every field reads ``INCONSEQUENTIAL_THINKING_<FIELD>`` from the
    environment or a local ``.env`` file.
    """

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_file=".env",
                                      extra="ignore")

    memory_limit: int = Field(DEFAULT_MEMORY_LIMIT)
    relevance_threshold: float = Field(DEFAULT_RELEVANCE_THRESHOLD)
    top_k: int = Field(DEFAULT_TOP_K)
    recent_window: int = Field(DEFAULT_RECENT_WINDOW)
    context_threshold: int = Field(DEFAULT_CONTEXT_THRESHOLD)

    log_level: str = Field("INFO")
    log_format: str = Field("console")

    @field_validator("memory_limit", "top_k", "recent_window")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be >= 1")
        return v

    @field_validator("context_threshold")
    @classmethod
    def _non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must be >= 0")
        return v

    @field_validator("relevance_threshold")
    @classmethod
    def _unit_interval(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("must be within [0.0, 1.0]")
        return v

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "console"):
            raise ValueError("must be 'json' or 'console'")
        return v

    def engine_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ThinkingEngine."""
        return {
            "memory_limit": self.memory_limit,
            "relevance_threshold": self.relevance_threshold,
            "top_k": self.top_k,
            "recent_window": self.recent_window,
            "context_threshold": self.context_threshold,
        }
