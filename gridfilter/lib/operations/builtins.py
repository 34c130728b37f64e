from collections.abc import Sequence

from gridfilter.lib.conditions.exceptions import OperationError
from gridfilter.lib.conditions.models import CellValue, Condition
from gridfilter.lib.constants import (
    OPERATION_CONJUNCTION,
    OPERATION_DISJUNCTION,
    OPERATION_DISJUNCTION_WITH_EXTRA_CONDITION,
)
from gridfilter.lib.operations.registry import OperationRegistry


def conjunction(conditions: Sequence[Condition], value: CellValue) -> bool:
    """Verdadeiro se **todas** as condições aceitam o valor."""
    return all(condition(value) for condition in conditions)


def disjunction(conditions: Sequence[Condition], value: CellValue) -> bool:
    """Verdadeiro se **alguma** condição aceita o valor."""
    return any(condition(value) for condition in conditions)


def disjunction_with_extra_condition(
    conditions: Sequence[Condition], value: CellValue
) -> bool:
    """Alguma das primeiras condições **e** a última condição.

    A última condição é a "extra" (ex.: ``by_value``) aplicada sobre o
    resultado da disjunção das demais.

    Raises:
        OperationError: com menos de três condições.
    """
    if len(conditions) < 3:
        raise OperationError(
            "Operação disjunctionWithExtraCondition exige ao menos três condições."
        )
    *alternatives, extra = conditions
    return disjunction(alternatives, value) and extra(value)


BUILTIN_OPERATIONS = {
    OPERATION_CONJUNCTION: (conjunction, "All"),
    OPERATION_DISJUNCTION: (disjunction, "At least one"),
    OPERATION_DISJUNCTION_WITH_EXTRA_CONDITION: (
        disjunction_with_extra_condition,
        "At least one and the extra condition",
    ),
}


def register_builtin_operations(registry: OperationRegistry) -> None:
    for operation, (func, label) in BUILTIN_OPERATIONS.items():
        registry.register(operation, func, label=label)
