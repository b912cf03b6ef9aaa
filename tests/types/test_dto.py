from __future__ import annotations

import json

from bfpaths.types.base import OptimizationMode, StepKind
from bfpaths.types.distance import UNREACHED, Distance
from bfpaths.types.dto import AlgorithmStep, BellmanFordResult


def _result(**overrides) -> BellmanFordResult:
    fields = dict(
        source="A",
        target="D",
        mode=OptimizationMode.MINIMIZE,
        distances={
            "A": Distance(0),
            "B": Distance(1),
            "D": Distance(2),
            "Z": UNREACHED,
        },
        predecessors={"A": (), "B": ("A",), "D": ("B", "A"), "Z": ()},
        steps=(
            AlgorithmStep(1, "B", Distance(1), "A", StepKind.IMPROVEMENT, "b"),
        ),
        cycle_detected=False,
        optimal_distance=Distance(2),
        optimal_paths=(("A", "B", "D"), ("A", "D")),
        rounds=2,
    )
    fields.update(overrides)
    return BellmanFordResult(**fields)


def test_step_edge():
    step = AlgorithmStep(1, "B", Distance(1), "A", StepKind.IMPROVEMENT, "")
    assert step.edge == ("A", "B")
    assert AlgorithmStep(1, "B", Distance(1), None, StepKind.TIE, "").edge is None


def test_path_edges_first_seen_order():
    result = _result()
    assert result.path_edges() == [("A", "B"), ("B", "D"), ("A", "D")]
    assert result.has_paths


def test_to_dict_is_json_ready():
    data = _result().to_dict()

    assert data["mode"] == "minimize"
    assert data["optimal_distance"] == 2
    assert data["optimal_paths"] == [["A", "B", "D"], ["A", "D"]]
    assert data["distances"]["Z"] is None
    assert data["predecessors"]["D"] == ["B", "A"]
    assert data["steps"][0]["kind"] == "improvement"
    assert json.loads(json.dumps(data)) == data


def test_to_dict_without_optimum():
    data = _result(
        cycle_detected=True, optimal_distance=None, optimal_paths=()
    ).to_dict()
    assert data["cycle_detected"] is True
    assert data["optimal_distance"] is None
    assert data["optimal_paths"] == []
