# search/frontier.py
import heapq
import itertools

from proxpath.domain.entities.geography import Node
from proxpath.search.records import NodeRecord

_REMOVED = object()  # placeholder for an invalidated heap entry


class PathfindingList:
    """Records keyed by node identity. Used as the closed list."""

    def __init__(self):
        self._records: dict[Node, NodeRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, node: Node) -> bool:
        return node in self._records

    def add(self, record: NodeRecord) -> None:
        self._records[record.node] = record

    def remove(self, record: NodeRecord) -> None:
        self._records.pop(record.node, None)

    def contains(self, node: Node) -> bool:
        return node in self._records

    def find(self, node: Node) -> NodeRecord | None:
        return self._records.get(node)

    def extract_minimum(self) -> NodeRecord:
        if not self._records:
            raise IndexError("extract_minimum from an empty list")
        # min() keeps the first of equal keys, i.e. insertion order
        return min(self._records.values(), key=lambda r: r.cost_so_far)


class OpenList(PathfindingList):
    """
    Open list backed by a binary heap with lazy invalidation.

    Heap entries are [cost, seq, record]. Decrease-key marks the old entry as
    removed and pushes a fresh one, so equal costs are ordered by when the
    record received its current cost.
    """

    def __init__(self):
        super().__init__()
        self._heap: list[list] = []
        self._entries: dict[Node, list] = {}
        self._seq = itertools.count()

    def _push(self, record: NodeRecord) -> None:
        entry = [record.cost_so_far, next(self._seq), record]
        self._entries[record.node] = entry
        heapq.heappush(self._heap, entry)

    def _invalidate(self, node: Node) -> None:
        entry = self._entries.pop(node, None)
        if entry is not None:
            entry[-1] = _REMOVED

    def add(self, record: NodeRecord) -> None:
        super().add(record)
        self._invalidate(record.node)
        self._push(record)

    def update(self, record: NodeRecord) -> None:
        """Re-key a record whose cost_so_far was lowered in place."""
        if record.node not in self._records:
            raise KeyError(f"{record.node!r} is not in the open list")
        self._invalidate(record.node)
        self._push(record)

    def remove(self, record: NodeRecord) -> None:
        super().remove(record)
        self._invalidate(record.node)

    def extract_minimum(self) -> NodeRecord:
        # Peek only: the caller decides when the record leaves the list.
        while self._heap and self._heap[0][-1] is _REMOVED:
            heapq.heappop(self._heap)
        if not self._heap:
            raise IndexError("extract_minimum from an empty list")
        return self._heap[0][-1]
