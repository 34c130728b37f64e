import pytest

from gridfilter.lib.conditions import CellValue, Condition, OperationError, UnknownOperationError
from gridfilter.lib.operations import (
    OperationRegistry,
    conjunction,
    create_default_operation_registry,
    disjunction,
    disjunction_with_extra_condition,
)

TRUE = Condition("t", (), lambda cell: True)
FALSE = Condition("f", (), lambda cell: False)
CELL = CellValue("v")


@pytest.mark.parametrize(
    "conditions,expected",
    [([TRUE, TRUE], True), ([TRUE, FALSE], False), ([FALSE], False)],
)
def test_conjunction(conditions, expected):
    assert conjunction(conditions, CELL) is expected


@pytest.mark.parametrize(
    "conditions,expected",
    [([FALSE, TRUE], True), ([FALSE, FALSE], False), ([TRUE], True)],
)
def test_disjunction(conditions, expected):
    assert disjunction(conditions, CELL) is expected


@pytest.mark.parametrize(
    "conditions,expected",
    [
        ([FALSE, TRUE, TRUE], True),
        ([FALSE, FALSE, TRUE], False),
        ([TRUE, FALSE, FALSE], False),
        ([TRUE, TRUE, FALSE, TRUE], True),
    ],
)
def test_disjunction_with_extra_condition(conditions, expected):
    assert disjunction_with_extra_condition(conditions, CELL) is expected


def test_disjunction_with_extra_condition_requires_three_conditions():
    with pytest.raises(OperationError):
        disjunction_with_extra_condition([TRUE, TRUE], CELL)


def test_default_registry_knows_builtin_operations():
    reg = create_default_operation_registry()
    assert reg.operation_types() == (
        "conjunction",
        "disjunction",
        "disjunctionWithExtraCondition",
    )
    assert reg.resolve("disjunction") is disjunction
    assert reg.label("conjunction") == "All"


def test_resolve_unknown_operation_lists_known_ones():
    reg = create_default_operation_registry()
    with pytest.raises(UnknownOperationError) as ei:
        reg.resolve("xor")
    assert ei.value.operation == "xor"
    assert "conjunction" in str(ei.value)


def test_register_custom_operation():
    reg = OperationRegistry()
    reg.register("none_of", lambda conditions, cell: not disjunction(conditions, cell))
    assert "none_of" in reg
    assert reg.resolve("none_of")([FALSE], CELL) is True
    with pytest.raises(OperationError):
        reg.register("none_of", conjunction)
