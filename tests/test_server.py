"""Tests for configuration and the MCP boundary."""

import asyncio

import pytest
from pydantic import ValidationError

from inconsequential_thinking import ThinkingEngine
from inconsequential_thinking import server
from inconsequential_thinking.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """No stray .env or exported variables leak into Settings."""
    monkeypatch.chdir(tmp_path)
    for var in ("MEMORY_LIMIT", "RELEVANCE_THRESHOLD", "TOP_K", "RECENT_WINDOW",
                "CONTEXT_THRESHOLD", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"INCONSEQUENTIAL_THINKING_{var}", raising=False)


@pytest.fixture
def engine(monkeypatch):
    e = ThinkingEngine()
    monkeypatch.setattr(server, "_engine", e)
    return e


# ── Settings ───────────────────────────────────────────────────────────


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.memory_limit == 50
        assert s.relevance_threshold == 0.2
        assert s.top_k == 3
        assert s.log_format == "console"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("INCONSEQUENTIAL_THINKING_MEMORY_LIMIT", "7")
        monkeypatch.setenv("INCONSEQUENTIAL_THINKING_TOP_K", "1")
        s = Settings()
        assert s.memory_limit == 7
        engine = ThinkingEngine(**s.engine_kwargs())
        assert engine.history.memory_limit == 7

    def test_rejects_bad_values(self, monkeypatch):
        monkeypatch.setenv("INCONSEQUENTIAL_THINKING_MEMORY_LIMIT", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_rejects_threshold_out_of_range(self):
        with pytest.raises(ValidationError):
            Settings(relevance_threshold=1.2)

    def test_init_engine(self, monkeypatch):
        monkeypatch.setattr(server, "_engine", None)
        engine = server.init_engine(Settings(memory_limit=4))
        assert server._get_engine() is engine
        assert engine.history.memory_limit == 4


# ── Boundary ───────────────────────────────────────────────────────────


class TestProcessThought:
    def test_dict_payload(self, engine):
        data = server.process_thought(engine, {
            "thought": "I need to plan the architecture for a new feature",
            "thought_number": 1,
            "total_thoughts": 3,
            "next_thought_needed": True,
        })
        assert data["recommended_commands"][0]["command"] == "/plan:create"
        assert data["recommended_commands"][0]["priority"] == 1
        assert len(engine.history) == 1

    def test_rejects_non_positive(self, engine):
        with pytest.raises(ValidationError):
            server.process_thought(engine, {
                "thought": "x", "thought_number": 0,
                "total_thoughts": 1, "next_thought_needed": False,
            })
        assert len(engine.history) == 0

    def test_rejects_missing_field(self, engine):
        with pytest.raises(ValidationError):
            server.process_thought(engine, {"thought": "x", "thought_number": 1})

    def test_empty_thought_allowed(self, engine):
        data = server.process_thought(engine, server.ThinkingInput(
            thought="", thought_number=1, total_thoughts=1, next_thought_needed=False,
        ))
        assert data["recommended_commands"] == []
        assert data["context_summary"]


class TestTool:
    def test_tool_function(self, engine):
        data = server.inconsequential_thinking(
            thought="fix the css layout alignment on this component",
            thought_number=1,
            total_thoughts=1,
            next_thought_needed=False,
        )
        names = [r["command"] for r in data["recommended_commands"]]
        assert "/style:layout:fix" in names
        assert "/style:style:unify" in names
        assert len(engine.history) == 1

    def test_tool_registered(self):
        tools = asyncio.run(server.mcp.list_tools())
        tool = next(t for t in tools if t.name == server.TOOL_NAME)
        assert set(tool.inputSchema["properties"]) == {
            "thought", "thought_number", "total_thoughts", "next_thought_needed",
        }
