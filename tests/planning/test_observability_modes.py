import glob
import os

import pytest

from gridroute.config import PlannerConfig
from gridroute.types import Point
from gridroute.planning.planners import AStarRoutePlanner, a_star
from gridroute.planning.errors import InvalidInputError
from gridroute.visualization.observers import EfficientObserver, ExperimentObserver, DebugObserver


@pytest.fixture
def planner_setup():
    planner = AStarRoutePlanner(6, 6)
    planner.set_obstacles([Point(2, 0), Point(2, 1), Point(2, 2), Point(2, 3)])
    start = Point(0, 0)
    goal = Point(5, 0)
    return planner, start, goal


def test_efficient_mode(planner_setup, capsys):
    planner, start, goal = planner_setup
    observer = EfficientObserver()

    path = planner.plan(start, goal, debugger=observer)

    assert path
    assert not hasattr(observer, 'expanded_nodes')
    assert not hasattr(observer, 'open_set_history')

    observer.log("boom", level='ERROR')
    observer.log("quiet", level='WARN')
    out = capsys.readouterr().out
    assert "[ERROR] boom" in out
    assert "quiet" not in out


def test_experiment_mode(planner_setup):
    planner, start, goal = planner_setup
    observer = ExperimentObserver()

    path = planner.plan(start, goal, debugger=observer)

    assert observer.map_info is planner.grid_map
    assert observer.expanded_nodes[0] == start
    # 种子节点 + 每个新建节点各一条记录
    assert observer.open_set_history[0] == (0, 0, 0, 0)
    assert all(len(entry) == 4 for entry in observer.open_set_history)
    assert len(observer.edges) > 0
    # 路径上相邻两格一定记录过对应的父子边 (终点除外)
    edges = set(observer.edges)
    for parent, child in zip(path[:-2], path[1:-1]):
        assert (parent, child) in edges


def test_planner_log_messages(planner_setup):
    planner, start, goal = planner_setup
    observer = ExperimentObserver()

    path = planner.plan(start, goal, debugger=observer)
    found = [m for m in observer.messages if m[1].startswith("Route found")]
    assert found and found[0][2]['length'] == len(path)

    observer.messages.clear()
    planner.set_obstacles([Point(2, 4), Point(2, 5)])
    assert planner.plan(start, goal, debugger=observer) == []
    assert any("no path found" in m[1] for m in observer.messages)


def test_iteration_cap_is_logged_as_warning():
    planner = AStarRoutePlanner(10, 10, config=PlannerConfig(max_iterations=2))
    observer = ExperimentObserver()
    planner.plan(Point(0, 0), Point(9, 9), debugger=observer)
    assert ('WARN', "Max iterations reached, path not found.", {'max_iterations': 2}) in observer.messages


def test_debug_mode(planner_setup, tmp_path):
    planner, start, goal = planner_setup
    log_dir = str(tmp_path / "planning_debug")

    observer = DebugObserver(log_dir=log_dir)
    planner.plan(start, goal, debugger=observer)
    observer.close()

    # 1. Compatible with Experiment Mode (can retrieve expanded_nodes)
    assert len(observer.expanded_nodes) > 0
    assert observer.map_info is planner.grid_map

    # 2. Check Log File
    log_files = glob.glob(os.path.join(log_dir, "*.log"))
    assert len(log_files) == 1

    with open(log_files[0], 'r', encoding='utf-8') as f:
        content = f.read()
    assert "Plan requested" in content
    assert "Route found" in content
    assert "Expanding: 0_0" in content
    assert "Parent: 1_0 <- 0_0" in content


def test_debug_mode_from_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    planner = AStarRoutePlanner(4, 4, config=PlannerConfig(debug_mode=True))

    planner.plan(Point(0, 0), Point(3, 3))

    assert glob.glob(os.path.join("logs", "planning_debug", "*.log"))


def test_experiment_summary_and_reset(planner_setup):
    planner, start, goal = planner_setup
    observer = ExperimentObserver()
    planner.plan(start, goal, debugger=observer)

    summary = observer.summary()
    assert summary['expansions'] == len(observer.expanded_nodes) > 0
    assert summary['unique_expansions'] == summary['expansions']
    assert summary['open_pushes'] == len(observer.open_set_history)

    observer.reset()
    assert observer.summary() == {'expansions': 0, 'unique_expansions': 0, 'open_pushes': 0, 'relaxations': 0}
    assert observer.map_info is None


@pytest.fixture
def tracked_debug_observers(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    created = []

    class TrackingDebugObserver(DebugObserver):
        def __init__(self):
            super().__init__()
            created.append(self)

    monkeypatch.setattr(a_star, "DebugObserver", TrackingDebugObserver)
    return created


def test_debug_mode_uses_fresh_observer_per_plan(tracked_debug_observers):
    planner = AStarRoutePlanner(3, 3, config=PlannerConfig(debug_mode=True))

    first = planner.plan(Point(0, 0), Point(2, 2))
    second = planner.plan(Point(0, 0), Point(2, 2))

    assert first == second
    assert len(tracked_debug_observers) == 2
    one, two = tracked_debug_observers
    assert len(one.expanded_nodes) == len(two.expanded_nodes) > 0
    # 文件句柄在每次调用结束时关闭
    assert not one.logger.handlers and not two.logger.handlers


def test_debug_mode_closes_log_on_invalid_input(tracked_debug_observers):
    planner = AStarRoutePlanner(3, 3, config=PlannerConfig(debug_mode=True))

    with pytest.raises(InvalidInputError):
        planner.plan(Point(0, 0), Point(5, 5))

    assert len(tracked_debug_observers) == 1
    assert not tracked_debug_observers[0].logger.handlers
