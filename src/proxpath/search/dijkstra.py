# search/dijkstra.py
import time
from enum import Enum

from proxpath.domain.entities.geography import Connection, Node
from proxpath.domain.graph import ProximityGraph
from proxpath.search.frontier import OpenList, PathfindingList
from proxpath.search.hooks import NoopHooks, SearchHooks
from proxpath.search.records import NodeRecord


class SearchOutcome(str, Enum):
    GOAL_FOUND = "goal_found"
    EXHAUSTED = "exhausted"


def pathfind(
    graph: ProximityGraph,
    start: Node,
    goal: Node,
    *,
    hooks: SearchHooks | None = None,
) -> list[Connection] | None:
    """
    Dijkstra search from `start` to `goal`.

    Returns the connections of a cheapest path in start->goal order, an empty
    list when start is goal, or None when the goal cannot be reached.
    """
    hooks = hooks or NoopHooks()
    t0 = time.perf_counter()
    hooks.search_start(start=start, goal=goal)

    open_ = OpenList()
    closed = PathfindingList()
    open_.add(NodeRecord(start, connection=None, cost_so_far=0.0))

    outcome = SearchOutcome.EXHAUSTED
    current: NodeRecord | None = None
    expanded = 0

    while len(open_) > 0:
        current = open_.extract_minimum()

        # The goal record stays in open and never enters closed.
        if current.node is goal:
            outcome = SearchOutcome.GOAL_FOUND
            break

        expanded += 1
        hooks.expand(
            current.node,
            cost_so_far=current.cost_so_far,
            open_size=len(open_),
            closed_size=len(closed),
        )

        for connection in graph.get_connections(current.node):
            end_node = connection.to_node
            end_cost = current.cost_so_far + connection.cost

            if closed.contains(end_node):
                continue

            end_record = open_.find(end_node)
            if end_record is not None:
                # ties keep the route found first
                if end_record.cost_so_far <= end_cost:
                    continue
                end_record.cost_so_far = end_cost
                end_record.connection = connection
                open_.update(end_record)
            else:
                open_.add(NodeRecord(end_node, connection=connection, cost_so_far=end_cost))

        open_.remove(current)
        closed.add(current)

    path = _reconstruct(current, closed) if outcome is SearchOutcome.GOAL_FOUND else None
    hooks.search_end(
        start=start,
        goal=goal,
        outcome=outcome.value,
        expanded=expanded,
        path=path,
        wall_ms=(time.perf_counter() - t0) * 1000,
    )
    return path


def _reconstruct(goal_record: NodeRecord, closed: PathfindingList) -> list[Connection]:
    # Every ancestor of the goal was closed before the goal was extracted,
    # so the walk looks predecessors up in closed and never the goal itself.
    path: list[Connection] = []
    current = goal_record
    while current.connection is not None:
        path.append(current.connection)
        current = closed.find(current.connection.from_node)
    path.reverse()
    return path


def path_cost(path: list[Connection] | None) -> float:
    if path is None:
        return float("inf")
    return sum((c.cost for c in path), 0.0)
