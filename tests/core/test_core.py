import json
import tempfile
from pathlib import Path

import pytest

from maze_search.core.deadline import Deadline
from maze_search.core.frontier import Frontier
from maze_search.core.persistence import ResultStore


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestDeadline:
    def test_expires_after_budget(self):
        clock = FakeClock()
        deadline = Deadline(10, clock=clock)
        assert not deadline.is_expired()
        clock.now = 0.009
        assert not deadline.is_expired()
        assert deadline.remaining_ms() == pytest.approx(1.0)
        clock.now = 0.010
        assert deadline.is_expired()
        assert deadline.remaining_ms() == 0.0

    def test_zero_budget_is_expired_immediately(self):
        assert Deadline(0).is_expired()

    def test_none_never_expires(self):
        clock = FakeClock()
        deadline = Deadline(None, clock=clock)
        clock.now = 1e9
        assert not deadline.is_expired()
        assert deadline.remaining_ms() == float("inf")

    def test_negative_budget_rejected(self):
        with pytest.raises(ValueError):
            Deadline(-1)


class TestFrontier:
    def test_pops_highest_key_first(self):
        frontier = Frontier(key=lambda item: item[0])
        for item in [(3, "c"), (9, "a"), (1, "d"), (5, "b")]:
            frontier.push(item)
        assert len(frontier) == 4
        assert frontier.peek() == (9, "a")
        assert [frontier.pop()[1] for _ in range(4)] == ["a", "b", "c", "d"]
        assert not frontier

    def test_nodes_are_never_compared(self):
        # dicts are unorderable; equal keys must not fall through to them
        frontier = Frontier(key=lambda item: item["score"])
        frontier.push({"score": 1})
        frontier.push({"score": 1})
        assert frontier.pop() == {"score": 1}

    def test_empty_frontier_raises(self):
        frontier = Frontier(key=lambda item: item)
        with pytest.raises(IndexError):
            frontier.pop()
        with pytest.raises(IndexError):
            frontier.peek()


class TestResultStore:
    def test_json_roundtrip(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ResultStore(tmp_dir)
            path = store.save_json({"mean_score": 12.5, "scores": {"0": 12, "1": 13}}, "summary")
            assert path.exists()
            assert store.load_json("summary")["mean_score"] == 12.5

    def test_store_holds_only_json_summaries(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ResultStore(Path(tmp_dir) / "results")
            store.save_json({"mean_score": 3.0}, "greedy")
            assert [p.name for p in store.root_dir.iterdir()] == ["greedy.json"]
            assert json.loads((store.root_dir / "greedy.json").read_text()) == {"mean_score": 3.0}
            assert not hasattr(store, "save_state")
