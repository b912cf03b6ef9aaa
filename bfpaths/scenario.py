"""Scenario: a graph snapshot plus the endpoint and mode selection to run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from bfpaths.algorithms.bellman_ford import bellman_ford
from bfpaths.config import EngineConfig
from bfpaths.dsl.loader import load_graph_yaml
from bfpaths.graph.model import Edge, GraphModel, Node
from bfpaths.logging import get_logger
from bfpaths.types.base import NodeID, OptimizationMode
from bfpaths.types.dto import BellmanFordResult

START_ATTR = "is_start"
END_ATTR = "is_end"


def _role_node(graph: GraphModel, attr: str) -> Optional[NodeID]:
    """Return the single node flagged with ``attr``, or None if none is."""
    flagged = graph.nodes_with_attr(attr)
    if len(flagged) > 1:
        raise ValueError(
            f"More than one node has '{attr}: true': {', '.join(map(str, flagged))}"
        )
    return flagged[0] if flagged else None


@dataclass
class Scenario:
    """A graph together with its source, target and optimization mode.

    Endpoints not given explicitly fall back to the nodes whose metadata
    carries ``is_start: true`` / ``is_end: true``. If neither is present the
    endpoint stays undesignated and `run` raises ``MissingEndpoints``.

    Typical usage example:

        scenario = Scenario.from_yaml(path.read_text())
        result = scenario.run()
    """

    graph: GraphModel
    source: Optional[NodeID] = None
    target: Optional[NodeID] = None
    mode: OptimizationMode = OptimizationMode.MINIMIZE

    _logger = get_logger(__name__)

    def run(
        self,
        config: Optional[EngineConfig] = None,
        source: Optional[NodeID] = None,
        target: Optional[NodeID] = None,
        mode: Optional[Union[OptimizationMode, str]] = None,
    ) -> BellmanFordResult:
        """Run the engine, with optional per-call overrides of the selection."""
        run_source = source if source is not None else self.source
        run_target = target if target is not None else self.target
        run_mode = mode if mode is not None else self.mode
        self._logger.debug(
            f"Scenario run: source={run_source!r} target={run_target!r} mode={run_mode}"
        )
        return bellman_ford(self.graph, run_source, run_target, run_mode, config)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> Scenario:
        """Construct a Scenario from a graph YAML string.

        Top-level keys:
          - graph: ``nodes`` mapping (id -> metadata) and ``edges`` list
          - source / target: optional node ids
          - mode: optional ``minimize`` (default) or ``maximize``

        Raises:
            ValueError: If the YAML is malformed, has unknown keys, flags more
                than one start or end node, or names an unknown mode.
            InvalidGraph: If the graph breaks a structural invariant.
            jsonschema.ValidationError: If the file violates the schema.
        """
        return cls.from_dict(load_graph_yaml(yaml_str))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Scenario:
        """Construct a Scenario from a validated graph-file dictionary."""
        graph_section = data.get("graph") or {}
        nodes = [
            Node(id=node_id, attrs=dict(attrs or {}))
            for node_id, attrs in (graph_section.get("nodes") or {}).items()
        ]
        edges = [
            Edge(source=e["source"], target=e["target"], weight=e["weight"])
            for e in graph_section.get("edges") or []
        ]
        graph = GraphModel(nodes, edges)

        source = data.get("source")
        if source is None:
            source = _role_node(graph, START_ATTR)
        target = data.get("target")
        if target is None:
            target = _role_node(graph, END_ATTR)

        mode_value = data.get("mode")
        mode = (
            OptimizationMode.from_string(mode_value)
            if mode_value is not None
            else OptimizationMode.MINIMIZE
        )
        return cls(graph=graph, source=source, target=target, mode=mode)
