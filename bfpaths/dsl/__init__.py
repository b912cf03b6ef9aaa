"""Graph file parsing and validation."""

from bfpaths.dsl.loader import load_graph_schema, load_graph_yaml

__all__ = ["load_graph_schema", "load_graph_yaml"]
