"""Tests for engine/: Recorder, compare, Stepper."""

import pytest

from engine import Recorder, Stepper, StepperState, compare
from search import MalformedCollaborator, SearchConfig, Step
from tests.conftest import DictSpace

TWO_AWAY = (1, 2, 3, 4, 5, 6, 0, 7, 8)


def record(space, start, config=None, name=""):
    rec = Recorder()
    rec.start(start, space.is_goal, space.successors, space.heuristic, heuristic_name=name, config=config)
    rec.run_to_completion()
    return rec


# ========== Recorder ==========

def test_recorder_metrics(abcd):
    rec = record(abcd, "A", name="table")
    m = rec.get_metrics()
    assert m.path_found
    assert not m.exhausted
    assert (m.expanded, m.generated, m.distinct) == (2, 3, 4)
    assert m.path_length == 2
    assert m.total_steps == 4
    assert m.heuristic == "table"
    assert rec.path == ["A", "B", "D"]


def test_recorder_exhausted_run():
    sp = DictSpace(edges={"A": ["B"]}, h={}, goal="Z")
    rec = record(sp, "A")
    assert rec.metrics.exhausted
    assert not rec.metrics.path_found
    assert rec.steps[-1].event == "exhausted"
    assert rec.path == []


def test_recorder_budget_hit(abcd):
    rec = record(abcd, "A", config=SearchConfig(max_expansions=1))
    assert rec.metrics.budget_exceeded
    assert not rec.metrics.path_found
    assert rec.metrics.expanded == 1


def test_recorder_propagates_malformed_collaborator(abcd):
    rec = Recorder()
    rec.start("A", abcd.is_goal, lambda s: None, abcd.heuristic)
    with pytest.raises(MalformedCollaborator):
        rec.run_to_completion()


def test_recorder_requires_start():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_export_is_plain_data(abcd):
    rec = record(abcd, "A")
    data = rec.export()
    assert data["path"] == ["A", "B", "D"]
    assert data["metrics"]["expanded"] == 2
    assert [s["event"] for s in data["steps"]] == ["init", "expand", "expand", "goal"]
    assert data["steps"][1]["children"] == [["B", "new"], ["C", "new"]]


def test_compare_heuristics(puzzle3):
    recs = []
    for name in ("manhattan", "zero"):
        rec = Recorder()
        rec.start(TWO_AWAY, puzzle3.is_goal, puzzle3.successors, getattr(puzzle3, name), heuristic_name=name)
        rec.run_to_completion()
        recs.append(rec)
    result = compare(*recs)
    assert result.winner_expanded == "manhattan"
    assert result.winner_path == "tie"
    assert result.left.expanded == 2


def test_compare_when_only_one_found(abcd):
    found = record(abcd, "A", name="ok")
    lost = record(DictSpace(edges={}, h={}, goal="Z"), "A", name="lost")
    assert compare(found, lost).winner_path == "ok"


# ========== Stepper ==========

def steps(n):
    for i in range(n):
        yield Step(step_number=i, is_final=i == n - 1)


def test_stepper_navigation():
    seen = []
    st = Stepper(on_step=seen.append)
    st.start(steps(3))
    assert st.current_step.step_number == 0
    assert st.next_step() and st.next_step()
    assert st.current_step.is_final
    assert not st.next_step()
    assert st.is_finished
    assert st.prev_step()
    assert st.current_step.step_number == 1
    st.rewind()
    assert not st.prev_step()
    assert [s.step_number for s in seen] == [0, 1, 2, 1, 0]


def test_stepper_goto_pulls_lazily():
    st = Stepper()
    st.start(steps(5))
    assert len(st.steps) == 1
    assert st.goto_step(3)
    assert len(st.steps) == 4
    assert not st.goto_step(10)
    assert st.state == StepperState.FINISHED


def test_stepper_over_search(abcd):
    from search import BestFirstSearch

    st = Stepper()
    st.start(BestFirstSearch("A", abcd.is_goal, abcd.successors, abcd.heuristic))
    st.jump_to_end()
    assert st.current_step.path == ["A", "B", "D"]
    st.reset()
    assert st.state == StepperState.IDLE
    assert st.current_step is None
