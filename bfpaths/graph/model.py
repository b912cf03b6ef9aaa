"""Immutable graph snapshot consumed by the path engine.

`GraphModel` holds nodes and directed weighted edges in a fixed,
caller-determined order. It enforces:
  - Every edge endpoint references an existing node.
  - At most one edge per ordered (source, target) pair.
  - Node ids are unique.
  - Edge weights are finite real numbers.

Violations raise `InvalidGraph`. The snapshot offers no mutation; edits made
by an editor produce a new snapshot.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Sequence,
    Tuple,
    Union,
)

from bfpaths.exceptions import InvalidGraph
from bfpaths.types.base import Cost, NodeID


@dataclass(frozen=True)
class Node:
    """A node and its caller-supplied metadata.

    Attributes:
        id: Unique node identifier.
        attrs: Opaque metadata (position, start/end role, ...). Not used by
            the engine.
    """

    id: NodeID
    attrs: Mapping[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Edge:
    """A directed weighted edge, identified by ``(source, target)``."""

    source: NodeID
    target: NodeID
    weight: Cost

    @property
    def key(self) -> Tuple[NodeID, NodeID]:
        return (self.source, self.target)


@dataclass
class NodeMap:
    """Bidirectional mapping between node ids and contiguous indices.

    Indices follow the graph's node order, so working tables indexed by them
    are deterministic for a given snapshot.

    Attributes:
        to_index: Maps node ids to integer indices.
        to_name: Maps integer indices back to node ids.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[NodeID, int] = field(default_factory=dict)
    to_name: Dict[int, NodeID] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: Sequence[NodeID]) -> "NodeMap":
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


NodeLike = Union[Node, NodeID]
EdgeLike = Union[Edge, Tuple[NodeID, NodeID, Cost]]


def _as_node(item: NodeLike) -> Node:
    if isinstance(item, Node):
        return item
    return Node(id=item)


def _as_edge(item: EdgeLike) -> Edge:
    if isinstance(item, Edge):
        return item
    try:
        source, target, weight = item
    except (TypeError, ValueError):
        raise InvalidGraph(
            f"Edge must be an Edge or a (source, target, weight) tuple, got {item!r}"
        ) from None
    return Edge(source=source, target=target, weight=weight)


class GraphModel:
    """Read-only snapshot of nodes and directed weighted edges.

    Typical usage example:

        graph = GraphModel(["A", "B", "C"], [("A", "B", 2), ("B", "C", 1)])
        graph.node("A")
        for edge in graph.edges:
            ...
    """

    __slots__ = ("_nodes", "_edges", "_node_index", "_edge_index", "_node_map")

    def __init__(
        self,
        nodes: Iterable[NodeLike],
        edges: Iterable[EdgeLike] = (),
        validate: bool = True,
    ) -> None:
        """Build a snapshot.

        Args:
            nodes: Nodes in canonical order, as `Node` objects or bare ids.
            edges: Edges in canonical visitation order, as `Edge` objects or
                ``(source, target, weight)`` tuples.
            validate: Check structural invariants and raise `InvalidGraph`.

        Raises:
            InvalidGraph: If ``validate`` is True and an invariant is broken.
        """
        self._nodes: Tuple[Node, ...] = tuple(_as_node(n) for n in nodes)
        self._edges: Tuple[Edge, ...] = tuple(_as_edge(e) for e in edges)
        try:
            self._node_index: Dict[NodeID, Node] = {n.id: n for n in self._nodes}
            self._edge_index: Dict[Tuple[NodeID, NodeID], Edge] = {
                e.key: e for e in self._edges
            }
        except TypeError as exc:
            raise InvalidGraph(f"Node ids must be hashable: {exc}") from exc
        self._node_map = NodeMap.from_names([n.id for n in self._nodes])
        if validate:
            self.validate()

    def validate(self) -> None:
        """Check the snapshot invariants.

        Raises:
            InvalidGraph: On duplicate node ids, dangling edge endpoints,
                duplicate ordered edges, or non-finite/non-numeric weights.
        """
        if len(self._node_index) != len(self._nodes):
            seen = set()
            for node in self._nodes:
                if node.id in seen:
                    raise InvalidGraph(f"Duplicate node '{node.id}'")
                seen.add(node.id)

        seen_edges = set()
        for edge in self._edges:
            for endpoint in (edge.source, edge.target):
                if endpoint not in self._node_index:
                    raise InvalidGraph(
                        f"Edge {edge.source!r} -> {edge.target!r} references "
                        f"unknown node {endpoint!r}"
                    )
            if edge.key in seen_edges:
                raise InvalidGraph(
                    f"Duplicate edge {edge.source!r} -> {edge.target!r}; "
                    "at most one edge per ordered pair is allowed"
                )
            seen_edges.add(edge.key)
            weight = edge.weight
            if (
                isinstance(weight, bool)
                or not isinstance(weight, Real)
                or not math.isfinite(weight)
            ):
                raise InvalidGraph(
                    f"Edge {edge.source!r} -> {edge.target!r} has invalid "
                    f"weight {weight!r}; weights must be finite numbers"
                )

    #
    # Lookup
    #
    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._nodes

    @property
    def node_ids(self) -> List[NodeID]:
        return [n.id for n in self._nodes]

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """All edges in canonical visitation order."""
        return self._edges

    @property
    def node_map(self) -> NodeMap:
        return self._node_map

    def node(self, node_id: NodeID) -> Node:
        """Return the node with the given id.

        Raises:
            KeyError: If the node does not exist.
        """
        try:
            return self._node_index[node_id]
        except KeyError:
            raise KeyError(f"Node '{node_id}' is not in the graph.") from None

    def edge(self, source: NodeID, target: NodeID) -> Edge:
        """Return the edge ``source -> target``.

        Raises:
            KeyError: If no such edge exists.
        """
        try:
            return self._edge_index[(source, target)]
        except KeyError:
            raise KeyError(f"No edge '{source}' -> '{target}' in the graph.") from None

    def has_edge(self, source: NodeID, target: NodeID) -> bool:
        return (source, target) in self._edge_index

    def path_weight(self, path: Sequence[NodeID]) -> Cost:
        """Sum edge weights along a node sequence, left to right from 0.

        Raises:
            KeyError: If consecutive nodes are not joined by an edge.
        """
        total: Cost = 0
        for u, v in zip(path, path[1:]):
            total = total + self.edge(u, v).weight
        return total

    def nodes_with_attr(self, attr: str) -> List[NodeID]:
        """Return ids of nodes whose metadata has a truthy ``attr``."""
        return [n.id for n in self._nodes if n.attrs.get(attr)]

    def __contains__(self, node_id: object) -> bool:
        try:
            return node_id in self._node_index
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.node_ids)

    def __repr__(self) -> str:
        return f"GraphModel(nodes={len(self._nodes)}, edges={len(self._edges)})"

    #
    # Serialization
    #
    @classmethod
    def from_dict(cls, data: Mapping[str, Any], validate: bool = True) -> GraphModel:
        """Build a snapshot from ``{"nodes": [...], "edges": [...]}``.

        Nodes are ids or mappings with an ``id`` key plus metadata. Edges are
        mappings with ``source``/``target`` (or ``from``/``to``) and ``weight``.

        Raises:
            InvalidGraph: If the data is malformed or breaks an invariant.
        """
        nodes: List[Node] = []
        for entry in data.get("nodes", ()):
            if isinstance(entry, Mapping):
                if "id" not in entry:
                    raise InvalidGraph(f"Node entry without 'id': {dict(entry)!r}")
                attrs = {k: v for k, v in entry.items() if k != "id"}
                nodes.append(Node(id=entry["id"], attrs=attrs))
            else:
                nodes.append(Node(id=entry))

        edges: List[Edge] = []
        for entry in data.get("edges", ()):
            if not isinstance(entry, Mapping):
                raise InvalidGraph(f"Edge entry must be a mapping, got {entry!r}")
            source = entry.get("source", entry.get("from"))
            target = entry.get("target", entry.get("to"))
            if source is None or target is None or "weight" not in entry:
                raise InvalidGraph(
                    f"Edge entry needs source/target (or from/to) and weight: "
                    f"{dict(entry)!r}"
                )
            edges.append(Edge(source=source, target=target, weight=entry["weight"]))

        return cls(nodes, edges, validate=validate)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [{"id": n.id, **dict(n.attrs)} for n in self._nodes],
            "edges": [
                {"source": e.source, "target": e.target, "weight": e.weight}
                for e in self._edges
            ],
        }
