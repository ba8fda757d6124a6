# nav/navigator.py
from collections.abc import Sequence

import numpy as np

from proxpath.domain.entities.geography import Connection, Node, Position
from proxpath.domain.graph import ProximityGraph
from proxpath.search.dijkstra import pathfind
from proxpath.search.hooks import NoopHooks, SearchHooks


def waypoints_for(path: list[Connection], goal: Node) -> list[Position]:
    """Positions to visit in order: each connection's origin, then the goal."""
    return [c.from_node.position for c in path] + [goal.position]


class Navigator:
    """
    Cycles an agent between random goals on a proximity graph.
    Steering is left to the caller: it reads `waypoints` and reports the
    agent's position through `update`.
    """

    def __init__(
        self,
        graph: ProximityGraph,
        nodes: Sequence[Node],
        start: Node,
        *,
        rng: np.random.Generator,
        target_threshold: float = 0.1,
        hooks: SearchHooks | None = None,
    ):
        self.graph = graph
        self.nodes = list(nodes)
        if len(self.nodes) < 2:
            raise ValueError("navigator needs at least two nodes to pick a goal")
        if not any(n is start for n in self.nodes):
            raise ValueError(f"start {start!r} is not one of the navigator's nodes")
        self.rng = rng
        self.target_threshold = target_threshold
        self._hooks = hooks or NoopHooks()

        self.start = start
        self.goal = self.choose_goal(exclude=start)
        self.path: list[Connection] | None = None
        self.waypoints: list[Position] = []
        self._hooks.goal_changed(start=self.start, goal=self.goal)
        self.compute_path()

    def choose_goal(self, exclude: Node) -> Node:
        candidates = [n for n in self.nodes if n is not exclude]
        return candidates[int(self.rng.integers(0, len(candidates)))]

    def compute_path(self) -> list[Connection] | None:
        self.path = pathfind(self.graph, self.start, self.goal, hooks=self._hooks)
        self.waypoints = [] if self.path is None else waypoints_for(self.path, self.goal)
        return self.path

    def reached(self, position: Position) -> bool:
        return position.distance_to(self.goal.position) < self.target_threshold

    def advance(self) -> Node:
        self.start = self.goal
        self.goal = self.choose_goal(exclude=self.start)
        self._hooks.goal_changed(start=self.start, goal=self.goal)
        self.compute_path()
        return self.goal

    def update(self, position: Position) -> bool:
        if not self.reached(position):
            return False
        self.advance()
        return True
