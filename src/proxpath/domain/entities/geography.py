import math
from dataclasses import dataclass


# Core geometry types used by the graph builder
@dataclass(frozen=True)
class Position:
    x: float  # world length units
    y: float
    z: float = 0.0

    def distance_to(self, other: "Position") -> float:
        return math.hypot(other.x - self.x, other.y - self.y, other.z - self.z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True, eq=False)
class Node:
    """Point of interest supplied by the environment.

    Equality and hashing are by identity: two nodes sitting on the same
    position are still distinct nodes.
    """

    id: int
    position: Position

    def __repr__(self) -> str:
        p = self.position
        return f"Node(id={self.id}, position=({p.x}, {p.y}, {p.z}))"


@dataclass(frozen=True)
class Connection:
    from_node: Node
    to_node: Node
    cost: float  # euclidean distance at build time
