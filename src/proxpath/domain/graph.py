# domain/graph.py
from collections.abc import Iterable, Sequence

import numpy as np

from proxpath.domain.entities.geography import Connection, Node
from proxpath.search.hooks import NoopHooks, SearchHooks

DEFAULT_THRESHOLD = 8.0


class ProximityGraph:
    """
    Directed graph over a snapshot of nodes.
    Every ordered pair closer than (or exactly at) `threshold` gets a connection
    weighted by euclidean distance. Immutable between calls to `build`; callers
    own freshness and must rebuild when the node set changes.
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD, hooks: SearchHooks | None = None):
        if threshold < 0:
            raise ValueError(f"threshold must be >= 0, got {threshold}")
        self.threshold = float(threshold)
        self._hooks = hooks or NoopHooks()
        self._nodes: tuple[Node, ...] = ()
        self._connections: list[Connection] = []
        # node -> outgoing connections, same relative order as self._connections
        self._outgoing: dict[Node, list[Connection]] = {}

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._nodes

    @property
    def connections(self) -> Sequence[Connection]:
        return tuple(self._connections)

    def __len__(self) -> int:
        return len(self._connections)

    def build(self, nodes: Iterable[Node]) -> "ProximityGraph":
        self._nodes = tuple(nodes)
        self._connections = []
        self._outgoing = {}

        n = len(self._nodes)
        if n >= 2:
            pos = np.array([nd.position.as_tuple() for nd in self._nodes], dtype=float)
            diff = pos[None, :, :] - pos[:, None, :]
            dist = np.sqrt((diff**2).sum(axis=-1))
            within = dist <= self.threshold
            np.fill_diagonal(within, False)

            # row-major walk keeps the (i, j) pair order of a nested loop
            for i, j in zip(*np.nonzero(within)):
                a, b = self._nodes[int(i)], self._nodes[int(j)]
                c = Connection(a, b, float(dist[i, j]))
                self._connections.append(c)
                self._outgoing.setdefault(a, []).append(c)

        self._hooks.graph_built(nodes=n, connections=len(self._connections), threshold=self.threshold)
        return self

    def get_connections(self, node: Node) -> list[Connection]:
        return list(self._outgoing.get(node, ()))
