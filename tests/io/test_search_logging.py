# tests/io/test_search_logging.py
import io
import json
import logging

import pytest

from proxpath.domain.entities.geography import Node, Position
from proxpath.domain.graph import ProximityGraph
from proxpath.io.search_logging import SearchLogging, _JsonFormatter
from proxpath.search.dijkstra import pathfind


@pytest.fixture
def json_log():
    buf = io.StringIO()
    logger = logging.getLogger("proxpath.test")
    logger.handlers.clear()
    h = logging.StreamHandler(buf)
    h.setFormatter(_JsonFormatter())
    logger.addHandler(h)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger, buf
    logger.handlers.clear()


def _lines(buf):
    return [json.loads(line) for line in buf.getvalue().splitlines()]


def _line3():
    return [Node(i, Position(4.0 * i, 0.0, 0.0)) for i in range(3)]


def test_path_found_is_logged_with_cost(json_log):
    logger, buf = json_log
    hooks = SearchLogging(run_id="r1", logger=logger)
    nodes = _line3()
    g = ProximityGraph(hooks=hooks).build(nodes)
    pathfind(g, nodes[0], nodes[2], hooks=hooks)

    recs = _lines(buf)
    built = next(r for r in recs if r["msg"] == "graph_built")
    assert built["nodes"] == 3 and built["connections"] == 6 and built["threshold"] == 8.0
    found = next(r for r in recs if r["msg"] == "path_found")
    assert found["run_id"] == "r1"
    assert found["start"] == 0 and found["goal"] == 2
    assert found["hops"] == 1 and found["cost"] == 8.0
    assert found["outcome"] == "goal_found"
    assert found["level"] == "INFO"


def test_no_path_is_a_warning(json_log):
    logger, buf = json_log
    hooks = SearchLogging(logger=logger)
    a, b = Node(0, Position(0.0, 0.0, 0.0)), Node(1, Position(30.0, 0.0, 0.0))
    pathfind(ProximityGraph().build([a, b]), a, b, hooks=hooks)
    (miss,) = [r for r in _lines(buf) if r["msg"] == "no_path"]
    assert miss["level"] == "WARNING"
    assert miss["outcome"] == "exhausted"
    assert "hops" not in miss


def test_expansions_only_logged_in_debug_and_sampled(json_log):
    logger, buf = json_log
    nodes = [Node(i, Position(2.0 * i, 0.0, 0.0)) for i in range(6)]
    g = ProximityGraph(threshold=2.0).build(nodes)

    pathfind(g, nodes[0], nodes[5], hooks=SearchLogging(logger=logger, debug=False))
    assert not [r for r in _lines(buf) if r["msg"] == "expand"]

    pathfind(g, nodes[0], nodes[5], hooks=SearchLogging(logger=logger, debug=True, sample_every=2))
    expands = [r for r in _lines(buf) if r["msg"] == "expand"]
    # five nodes expanded before the goal, every second one logged
    assert [r["node"] for r in expands] == [1, 3]


def test_goal_changed_record(json_log):
    logger, buf = json_log
    a, b = _line3()[:2]
    SearchLogging(run_id="g", logger=logger).goal_changed(start=a, goal=b)
    (rec,) = _lines(buf)
    assert rec == {
        "level": "INFO",
        "msg": "goal_changed",
        "logger": "proxpath.test",
        "run_id": "g",
        "start": 0,
        "goal": 1,
    }
