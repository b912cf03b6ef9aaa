"""Conversion between `GraphModel` and NetworkX directed graphs.

Node and edge order are preserved in both directions: NetworkX keeps
insertion order, which becomes the snapshot's canonical edge order.
"""

from __future__ import annotations

from typing import Any, List

import networkx as nx

from bfpaths.exceptions import InvalidGraph
from bfpaths.graph.model import Edge, GraphModel, Node


def to_networkx(graph: GraphModel, weight_attr: str = "weight") -> nx.DiGraph:
    """Convert a snapshot to a NetworkX DiGraph.

    Node metadata becomes node attributes; edge weights are stored under
    ``weight_attr``.

    Args:
        graph: The snapshot to convert.
        weight_attr: Edge attribute name for the weight.

    Returns:
        A new ``nx.DiGraph``.
    """
    nx_graph = nx.DiGraph()
    for node in graph.nodes:
        nx_graph.add_node(node.id, **dict(node.attrs))
    for edge in graph.edges:
        nx_graph.add_edge(edge.source, edge.target, **{weight_attr: edge.weight})
    return nx_graph


def from_networkx(
    nx_graph: Any,
    weight_attr: str = "weight",
    default_weight: Any = None,
) -> GraphModel:
    """Build a snapshot from a NetworkX DiGraph.

    Args:
        nx_graph: A ``nx.DiGraph``. Multigraphs and undirected graphs are
            rejected.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight for edges lacking ``weight_attr``. When None,
            such edges raise `InvalidGraph`.

    Returns:
        A validated `GraphModel`.

    Raises:
        TypeError: If ``nx_graph`` is not a NetworkX graph.
        InvalidGraph: For multigraphs, undirected graphs or missing weights.
    """
    if not isinstance(nx_graph, nx.Graph):
        raise TypeError(f"Expected a NetworkX graph, got {type(nx_graph).__name__}")
    if nx_graph.is_multigraph():
        raise InvalidGraph(
            "Multigraphs are not supported; keep one edge per ordered node pair"
        )
    if not nx_graph.is_directed():
        raise InvalidGraph("Undirected graphs are not supported; use nx.DiGraph")

    nodes: List[Node] = [
        Node(id=node_id, attrs=dict(data)) for node_id, data in nx_graph.nodes(data=True)
    ]
    edges: List[Edge] = []
    for u, v, data in nx_graph.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        if weight is None:
            raise InvalidGraph(f"Edge {u!r} -> {v!r} has no '{weight_attr}' attribute")
        edges.append(Edge(source=u, target=v, weight=weight))
    return GraphModel(nodes, edges)
