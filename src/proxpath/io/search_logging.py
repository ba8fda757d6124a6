# io/search_logging.py
import json
import logging
import sys

from proxpath.search.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="proxpath", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


def _node_ref(node) -> int | None:
    return getattr(node, "id", None)


class SearchLogging(NoopHooks):
    """
    Structured JSON logs for graph builds, searches and goal changes.
    Node expansions are only emitted in debug mode, one every `sample_every`.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._expanded = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def graph_built(self, *, nodes: int, connections: int, threshold: float):
        self._emit("INFO", "graph_built", nodes=nodes, connections=connections, threshold=threshold)

    def search_start(self, *, start, goal):
        self._emit("DEBUG", "search_start", start=_node_ref(start), goal=_node_ref(goal))

    def expand(self, node, *, cost_so_far: float, open_size: int, closed_size: int):
        self._expanded += 1
        if self.debug and (self._expanded % self.sample_every) == 0:
            self._emit(
                "DEBUG",
                "expand",
                node=_node_ref(node),
                cost_so_far=cost_so_far,
                open_size=open_size,
                closed_size=closed_size,
            )

    def search_end(self, *, start, goal, outcome: str, expanded: int, path, wall_ms: float):
        extra = {
            "start": _node_ref(start),
            "goal": _node_ref(goal),
            "outcome": outcome,
            "expanded": expanded,
            "wall_ms": round(wall_ms, 3),
        }
        if path is None:
            self._emit("WARNING", "no_path", **extra)
            return
        extra["hops"] = len(path)
        extra["cost"] = sum((c.cost for c in path), 0.0)
        self._emit("INFO", "path_found", **extra)

    def goal_changed(self, *, start, goal):
        self._emit("INFO", "goal_changed", start=_node_ref(start), goal=_node_ref(goal))
