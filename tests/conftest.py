"""Shared graph fixtures for the test suite.

Each fixture returns a `GraphModel` whose edge order is fixed, so relaxation
order, step traces and tied-predecessor order are deterministic.
"""

from __future__ import annotations

import pytest

from bfpaths.graph.model import GraphModel


@pytest.fixture
def triangle_graph() -> GraphModel:
    #        [2]
    #   A ────────► B
    #    \          │
    # [5] \         │ [1]
    #      ▼        ▼
    #       ──────► C
    return GraphModel(
        ["A", "B", "C"],
        [("A", "B", 2), ("A", "C", 5), ("B", "C", 1)],
    )


@pytest.fixture
def diamond_graph() -> GraphModel:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   A                   D
    #   └────────►C─────────┘
    #       [1]        [1]
    return GraphModel(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)],
    )


@pytest.fixture
def negative_cycle_graph() -> GraphModel:
    #   A ──[1]──► B ──[1]──► C
    #   ▲                     │
    #   └────────[-3]─────────┘
    return GraphModel(
        ["A", "B", "C"],
        [("A", "B", 1), ("B", "C", 1), ("C", "A", -3)],
    )


@pytest.fixture
def unreachable_graph() -> GraphModel:
    #   A ──[1]──► B        C
    return GraphModel(["A", "B", "C"], [("A", "B", 1)])


@pytest.fixture
def positive_cycle_graph() -> GraphModel:
    #   A ──[1]──► B ──[1]──► C
    #              ▲          │
    #              └───[1]────┘
    return GraphModel(
        ["A", "B", "C"],
        [("A", "B", 1), ("B", "C", 1), ("C", "B", 1)],
    )


@pytest.fixture
def zero_cycle_graph() -> GraphModel:
    #                [0]
    #   A ──[1]──► B ◄──► C ──[1]──► D
    #                [0]
    return GraphModel(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("B", "C", 0), ("C", "B", 0), ("C", "D", 1)],
    )


@pytest.fixture
def negative_dag_graph() -> GraphModel:
    #        [4]
    #   A ────────► B ──[1]──► D
    #   │           ▲
    #   │ [2]       │ [-3]
    #   ▼           │
    #   C ──────────┘
    return GraphModel(
        ["A", "B", "C", "D"],
        [("A", "B", 4), ("A", "C", 2), ("C", "B", -3), ("B", "D", 1)],
    )


@pytest.fixture
def ladder_graph() -> GraphModel:
    #        [1]       [1]        [1]       [1]
    #   ┌──────►B1──────┐    ┌──────►D1──────┐
    #   A               C────┤               E
    #   └──────►B2──────┘    └──────►D2──────┘
    #        [1]       [1]        [1]       [1]
    return GraphModel(
        ["A", "B1", "B2", "C", "D1", "D2", "E"],
        [
            ("A", "B1", 1),
            ("A", "B2", 1),
            ("B1", "C", 1),
            ("B2", "C", 1),
            ("C", "D1", 1),
            ("C", "D2", 1),
            ("D1", "E", 1),
            ("D2", "E", 1),
        ],
    )


@pytest.fixture
def source_loop_graph() -> GraphModel:
    #        [0]
    #   A ◄──────► B
    #        [0]
    return GraphModel(["A", "B"], [("A", "B", 0), ("B", "A", 0)])
