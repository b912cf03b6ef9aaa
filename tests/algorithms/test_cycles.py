from __future__ import annotations

import logging

from bfpaths.algorithms.cycles import detect_improving_cycle
from bfpaths.algorithms.relaxation import relax
from bfpaths.algorithms.trace import StepTrace
from bfpaths.graph.model import GraphModel
from bfpaths.types.base import OptimizationMode, StepKind
from bfpaths.types.distance import Distance, Objective


def _run(graph, source, mode=OptimizationMode.MINIMIZE):
    objective = Objective(mode)
    trace = StepTrace()
    state = relax(graph, source, objective, trace)
    detected = detect_improving_cycle(graph, state, objective, trace)
    return detected, state, trace


def test_no_cycle_on_tree(triangle_graph):
    detected, _, trace = _run(triangle_graph, "A")
    assert not detected
    assert trace.count(StepKind.CYCLE_WITNESS) == 0


def test_negative_cycle_witness(negative_cycle_graph):
    detected, _, trace = _run(negative_cycle_graph, "A")

    assert detected
    witnesses = [s for s in trace if s.kind == StepKind.CYCLE_WITNESS]
    assert [(s.iteration, s.node, s.chosen_predecessor) for s in witnesses] == [
        (3, "B", "A")
    ]
    assert witnesses[0].description == (
        "Improving cycle detected: A -> B still improves to -1"
    )


def test_detection_does_not_modify_state(negative_cycle_graph):
    objective = Objective(OptimizationMode.MINIMIZE)
    trace = StepTrace()
    state = relax(negative_cycle_graph, "A", objective, trace)
    before = (list(state.distances), [list(p) for p in state.predecessors])

    detect_improving_cycle(negative_cycle_graph, state, objective, trace)

    assert (state.distances, state.predecessors) == before


def test_every_violating_edge_is_logged():
    #   A ──[1]──► B ◄──[-4]──┐
    #              │          │
    #              └───[1]──► C ──[1]──► D
    graph = GraphModel(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("B", "C", 1), ("C", "B", -4), ("C", "D", 1)],
    )
    detected, _, trace = _run(graph, "A")

    assert detected
    witnesses = [s for s in trace if s.kind == StepKind.CYCLE_WITNESS]
    assert len(witnesses) >= 1
    assert all(s.iteration == len(graph) for s in witnesses)


def test_positive_cycle_under_maximize(positive_cycle_graph):
    detected, _, trace = _run(positive_cycle_graph, "A", OptimizationMode.MAXIMIZE)

    assert detected
    witness = list(trace)[-1]
    assert witness.kind == StepKind.CYCLE_WITNESS
    assert witness.distance == Distance(6)


def test_zero_weight_cycle_is_not_improving(zero_cycle_graph):
    for mode in OptimizationMode:
        detected, _, _ = _run(zero_cycle_graph, "A", mode)
        assert not detected


def test_detection_logs_info(negative_cycle_graph, caplog):
    with caplog.at_level(logging.INFO, logger="bfpaths"):
        _run(negative_cycle_graph, "A")
    messages = [r.message for r in caplog.records]
    assert any("Improving cycle reachable from 'A'" in m for m in messages)
