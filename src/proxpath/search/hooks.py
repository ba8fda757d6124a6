# search/hooks.py
from typing import Protocol

from proxpath.domain.entities.geography import Connection, Node


class SearchHooks(Protocol):
    def graph_built(self, *, nodes: int, connections: int, threshold: float): ...
    def search_start(self, *, start: Node, goal: Node): ...
    def expand(self, node: Node, *, cost_so_far: float, open_size: int, closed_size: int): ...
    def search_end(
        self,
        *,
        start: Node,
        goal: Node,
        outcome: str,
        expanded: int,
        path: list[Connection] | None,
        wall_ms: float,
    ): ...
    def goal_changed(self, *, start: Node, goal: Node): ...


class NoopHooks:
    def graph_built(self, **_):
        pass

    def search_start(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def search_end(self, **_):
        pass

    def goal_changed(self, **_):
        pass
