from __future__ import annotations

import pytest

from bfpaths.types.base import OptimizationMode, StepKind


@pytest.mark.parametrize(
    "text,expected",
    [
        ("minimize", OptimizationMode.MINIMIZE),
        ("MAXIMIZE", OptimizationMode.MAXIMIZE),
        ("min", OptimizationMode.MINIMIZE),
        (" Max ", OptimizationMode.MAXIMIZE),
    ],
)
def test_optimization_mode_from_string(text, expected):
    assert OptimizationMode.from_string(text) is expected


def test_optimization_mode_from_string_invalid():
    with pytest.raises(ValueError) as exc_info:
        OptimizationMode.from_string("longest")
    assert "Valid values are: minimize, maximize" in str(exc_info.value)


def test_step_kind_values_are_stable():
    assert [k.name for k in StepKind] == ["IMPROVEMENT", "TIE", "CYCLE_WITNESS"]
