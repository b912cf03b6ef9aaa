"""YAML loader + schema validation for graph files.

Parses a YAML string with every mapping key kept as a string, normalizes
edge and endpoint references that YAML 1.1 may have turned into booleans or
numbers, validates against the packaged JSON schema, and returns a canonical
dictionary for `bfpaths.scenario.Scenario`.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

import jsonschema

from bfpaths.utils.yaml_utils import load_yaml_with_string_keys, normalize_node_ref

RECOGNIZED_KEYS = {"graph", "source", "target", "mode"}


@lru_cache(maxsize=1)
def load_graph_schema() -> Dict[str, Any]:
    """Return the packaged graph-file JSON schema."""
    with (
        resources.files("bfpaths")
        .joinpath("schemas/graph.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_graph_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load, normalize, and validate a graph YAML string.

    Returns:
        Dictionary with keys ``graph`` (``nodes`` mapping and ``edges``
        list) and, when present, ``source``, ``target`` and ``mode``.

    Raises:
        ValueError: If the document is not a mapping, has unknown top-level
            keys, or is structurally malformed.
        jsonschema.ValidationError: If the document violates the schema.
        yaml.YAMLError: If the text is not valid YAML, or two keys of one
            mapping name the same string (``yes`` and ``true``).
    """
    data = load_yaml_with_string_keys(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(data) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in graph file: {', '.join(sorted(extra))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    # Early shape checks give clearer messages than the schema errors
    graph_section = data.get("graph")
    if not isinstance(graph_section, dict):
        raise ValueError("'graph' must be a mapping with 'nodes' and 'edges'")
    nodes = graph_section.get("nodes")
    if nodes is None:
        nodes = {}
    if not isinstance(nodes, dict):
        raise ValueError("'nodes' must be a mapping of node id to attributes")
    graph_section["nodes"] = nodes

    edges = graph_section.get("edges")
    if edges is None:
        edges = []
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")
    for entry in edges:
        if not isinstance(entry, dict):
            raise ValueError(
                "Each edge definition must be a mapping with 'source', 'target' and 'weight'"
            )
        for key in ("source", "target"):
            if key in entry:
                entry[key] = normalize_node_ref(entry[key])
    graph_section["edges"] = edges

    for key in ("source", "target"):
        if data.get(key) is not None:
            data[key] = normalize_node_ref(data[key])

    jsonschema.validate(data, load_graph_schema())
    return data
