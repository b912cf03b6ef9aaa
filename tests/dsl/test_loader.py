from __future__ import annotations

import jsonschema
import pytest
import yaml

from bfpaths.dsl.loader import load_graph_schema, load_graph_yaml


def test_schema_is_packaged():
    schema = load_graph_schema()
    assert schema["title"] == "bfpaths graph file"
    assert "graph" in schema["required"]


def test_load_minimal_graph():
    data = load_graph_yaml(
        """
graph:
  nodes:
    A: {x: 0, y: 0, is_start: true}
    B:
  edges:
    - {source: A, target: B, weight: -2.5}
source: A
target: B
mode: maximize
"""
    )
    assert data["graph"]["nodes"] == {
        "A": {"x": 0, "y": 0, "is_start": True},
        "B": None,
    }
    assert data["graph"]["edges"] == [{"source": "A", "target": "B", "weight": -2.5}]
    assert data["mode"] == "maximize"


def test_yaml_scalars_become_string_ids():
    data = load_graph_yaml(
        """
graph:
  nodes:
    1: {}
    yes: {}
  edges:
    - {source: 1, target: yes, weight: 1}
source: 1
target: yes
"""
    )
    assert list(data["graph"]["nodes"]) == ["1", "True"]
    assert data["graph"]["edges"][0]["source"] == "1"
    assert data["graph"]["edges"][0]["target"] == "True"
    assert data["source"] == "1"
    assert data["target"] == "True"


def test_empty_document_requires_graph():
    with pytest.raises(ValueError, match="'graph' must be a mapping"):
        load_graph_yaml("")


def test_top_level_must_be_mapping():
    with pytest.raises(ValueError, match="dictionary at top-level"):
        load_graph_yaml("- a\n- b\n")


def test_unknown_top_level_key():
    with pytest.raises(ValueError, match="Unrecognized top-level key"):
        load_graph_yaml("graph: {nodes: {A: {}}}\nworkflow: []\n")


def test_nodes_must_be_mapping():
    with pytest.raises(ValueError, match="'nodes' must be a mapping"):
        load_graph_yaml("graph: {nodes: [A, B]}\n")


def test_edges_must_be_list_of_mappings():
    with pytest.raises(ValueError, match="'edges' must be a list"):
        load_graph_yaml("graph: {nodes: {A: {}}, edges: {A: B}}\n")
    with pytest.raises(ValueError, match="Each edge definition"):
        load_graph_yaml("graph: {nodes: {A: {}}, edges: [A]}\n")


def test_schema_rejects_non_numeric_weight():
    with pytest.raises(jsonschema.ValidationError):
        load_graph_yaml(
            "graph:\n"
            "  nodes: {A: {}, B: {}}\n"
            "  edges: [{source: A, target: B, weight: x}]\n"
        )


def test_schema_rejects_unknown_edge_key():
    with pytest.raises(jsonschema.ValidationError):
        load_graph_yaml(
            "graph:\n"
            "  nodes: {A: {}, B: {}}\n"
            "  edges: [{source: A, target: B, weight: 1, capacity: 2}]\n"
        )


def test_schema_rejects_missing_weight():
    with pytest.raises(jsonschema.ValidationError):
        load_graph_yaml("graph: {nodes: {A: {}}, edges: [{source: A, target: A}]}\n")


def test_invalid_yaml():
    with pytest.raises(yaml.YAMLError):
        load_graph_yaml("graph: {nodes: [\n")


def test_float_and_int_node_ids_stay_separate():
    data = load_graph_yaml(
        "graph:\n"
        "  nodes: {1: {is_start: true}, 1.0: {is_end: true}}\n"
        "  edges: [{source: 1, target: 1.0, weight: 1}]\n"
    )
    assert data["graph"]["nodes"] == {
        "1": {"is_start": True},
        "1.0": {"is_end": True},
    }
    assert data["graph"]["edges"][0]["target"] == "1.0"


def test_node_ids_naming_the_same_string_rejected():
    with pytest.raises(yaml.YAMLError, match="both resolve to 'True'"):
        load_graph_yaml("graph:\n  nodes: {yes: {}, on: {}}\n")
