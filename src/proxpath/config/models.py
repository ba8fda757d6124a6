from math import isfinite
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from proxpath.domain.entities.geography import Node, Position


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- GRAPH ---------------------


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    threshold: float = Field(default=8.0, ge=0.0)  # max connection length, inclusive


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int
    position: tuple[float, float, float]

    @field_validator("position")
    @classmethod
    def _finite(cls, v):
        if not all(isfinite(c) for c in v):
            raise ValueError(f"node position must be finite, got {v}")
        return v

    def to_node(self) -> Node:
        return Node(self.id, Position(*self.position))


# ----------------- NAVIGATION ---------------------


class NavigatorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    seed: int = 123
    target_threshold: float = Field(default=0.1, gt=0.0)
    start: int | None = None  # node id; None => first node


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    graph: GraphModel = GraphModel()
    nodes: list[NodeModel] = Field(default_factory=list)
    navigator: NavigatorModel = NavigatorModel()

    @model_validator(mode="after")
    def _check_nodes(self):
        ids = [n.id for n in self.nodes]
        if len(set(ids)) != len(ids):
            dupes = sorted({i for i in ids if ids.count(i) > 1})
            raise ValueError(f"node ids must be unique; duplicated: {dupes}")
        start = self.navigator.start
        if start is not None and start not in ids:
            raise ValueError(f"navigator.start {start} is not a known node id")
        return self
