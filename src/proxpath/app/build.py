# proxpath/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from proxpath.config.models import ScenarioModel
from proxpath.domain.entities.geography import Node
from proxpath.domain.graph import ProximityGraph
from proxpath.io.search_logging import SearchLogging  # JSON logs
from proxpath.nav.navigator import Navigator
from proxpath.search.hooks import NoopHooks
from proxpath.sim.rng import RNGRegistry


@dataclass
class App:
    nodes: list[Node]
    graph: ProximityGraph
    rng: RNGRegistry
    navigator: Navigator | None


def build(cfg: ScenarioModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks & RNG
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    rng_registry = RNGRegistry(model.navigator.seed, scenario=model.name)

    # 2) Node snapshot & graph
    nodes = [n.to_node() for n in model.nodes]
    graph = ProximityGraph(threshold=model.graph.threshold, hooks=hooks).build(nodes)

    # 3) Navigator (needs somewhere to go)
    navigator = None
    if len(nodes) >= 2:
        start_id = model.navigator.start
        start = nodes[0] if start_id is None else next(n for n in nodes if n.id == start_id)
        navigator = Navigator(
            graph,
            nodes,
            start,
            rng=rng_registry.stream("goals"),
            target_threshold=model.navigator.target_threshold,
            hooks=hooks,
        )

    return App(nodes, graph, rng_registry, navigator)
