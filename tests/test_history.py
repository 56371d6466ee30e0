"""Tests for the bounded thought history."""

import time

import pytest

from inconsequential_thinking import History, Thought
from inconsequential_thinking.config import DEFAULT_MEMORY_LIMIT


@pytest.fixture
def history():
    return History(memory_limit=3)


class TestRecord:
    def test_default_limit(self):
        assert History().memory_limit == DEFAULT_MEMORY_LIMIT == 50

    def test_record_returns_thought(self, history):
        before = time.time()
        t = history.record("first", 1, 3)
        assert isinstance(t, Thought)
        assert t.text == "first"
        assert t.number == 1
        assert t.total_estimate == 3
        assert t.timestamp >= before
        assert len(history) == 1

    def test_insertion_order(self, history):
        for i in range(1, 4):
            history.record(f"t{i}", i, 3)
        assert [t.text for t in history] == ["t1", "t2", "t3"]

    def test_empty_is_falsy(self, history):
        assert not history
        history.record("x", 1, 1)
        assert history

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            History(memory_limit=0)


class TestEviction:
    def test_overflow_evicts_oldest(self, history):
        for i in range(1, 5):
            history.record(f"t{i}", i, 4)
        assert len(history) == 3
        texts = [t.text for t in history]
        assert "t1" not in texts
        assert texts[0] == "t2"

    def test_fifty_five_into_fifty(self):
        h = History()
        for i in range(1, 56):
            h.record(f"thought {i}", i, 55)
        assert len(h) == 50
        assert [t.number for t in h] == list(range(6, 56))

    def test_never_exceeds_limit(self, history):
        for i in range(100):
            history.record("x", i + 1, 100)
            assert len(history) <= history.memory_limit


class TestWindow:
    def test_recent(self):
        h = History()
        for i in range(1, 9):
            h.record(f"t{i}", i, 8)
        assert [t.number for t in h.recent(5)] == [4, 5, 6, 7, 8]

    def test_recent_larger_than_history(self, history):
        history.record("only", 1, 1)
        assert [t.text for t in history.recent(5)] == ["only"]

    def test_recent_zero(self, history):
        history.record("only", 1, 1)
        assert history.recent(0) == []

    def test_clear(self, history):
        history.record("a", 1, 2)
        history.record("b", 2, 2)
        history.clear()
        assert len(history) == 0
