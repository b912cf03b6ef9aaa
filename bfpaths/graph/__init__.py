"""Graph snapshot primitives and helpers.

This package provides the immutable `GraphModel` snapshot and helpers for
NetworkX conversion (`convert`).
"""

from bfpaths.graph.model import Edge, GraphModel, Node, NodeMap

__all__ = ["Edge", "GraphModel", "Node", "NodeMap"]
