from dataclasses import dataclass

from proxpath.domain.entities.geography import Connection, Node


@dataclass(eq=False)
class NodeRecord:
    node: Node
    connection: Connection | None = None  # None only for the start record
    cost_so_far: float = 0.0
