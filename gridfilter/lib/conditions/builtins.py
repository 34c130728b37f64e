from collections.abc import Sequence
from typing import Any

import pandas as pd

from gridfilter.lib.conditions.models import CellValue
from gridfilter.lib.conditions.registry import ConditionRegistry
from gridfilter.lib.conditions.utils import (
    is_empty,
    is_number,
    stringify,
    to_number,
    to_timestamp,
)
from gridfilter.lib.constants import CELL_TYPE_DATE, CELL_TYPE_NUMERIC

# -----------------------------------------------------------------------------
# Helpers de comparação
# -----------------------------------------------------------------------------
def _text(value: Any) -> str:
    return stringify(value).lower()


def _coerce(cell: CellValue, *args: Any) -> tuple[Any, ...]:
    """Converte valor da célula e argumentos para um domínio comparável.

    Numérico quando a célula é ``numeric`` ou quando todos os lados parecem
    números; caso contrário, texto em minúsculas.
    """
    values = (cell.value, *args)
    if cell.type == CELL_TYPE_NUMERIC or all(is_number(v) for v in values):
        return tuple(to_number(v) for v in values)
    return tuple(_text(v) for v in values)


def _dates(cell: CellValue, *args: Any) -> tuple[pd.Timestamp | None, ...]:
    fmt = cell.date_format
    return tuple(to_timestamp(v, fmt) for v in (cell.value, *args))


def _today() -> pd.Timestamp:
    return pd.Timestamp.today().normalize()


def _same_day(cell: CellValue, day: pd.Timestamp) -> bool:
    (value,) = _dates(cell)
    if value is None:
        return False
    return value.normalize() == day


# -----------------------------------------------------------------------------
# Condições nativas: func(cell, args) -> bool
# -----------------------------------------------------------------------------
def condition_none(cell: CellValue, args: Sequence[Any]) -> bool:
    return True


def condition_empty(cell: CellValue, args: Sequence[Any]) -> bool:
    return is_empty(cell.value)


def condition_not_empty(cell: CellValue, args: Sequence[Any]) -> bool:
    return not is_empty(cell.value)


def condition_eq(cell: CellValue, args: Sequence[Any]) -> bool:
    return _text(cell.value) == _text(args[0])


def condition_neq(cell: CellValue, args: Sequence[Any]) -> bool:
    return not condition_eq(cell, args)


def condition_contains(cell: CellValue, args: Sequence[Any]) -> bool:
    return _text(args[0]) in _text(cell.value)


def condition_not_contains(cell: CellValue, args: Sequence[Any]) -> bool:
    return not condition_contains(cell, args)


def condition_begins_with(cell: CellValue, args: Sequence[Any]) -> bool:
    return _text(cell.value).startswith(_text(args[0]))


def condition_ends_with(cell: CellValue, args: Sequence[Any]) -> bool:
    return _text(cell.value).endswith(_text(args[0]))


def condition_gt(cell: CellValue, args: Sequence[Any]) -> bool:
    value, arg = _coerce(cell, args[0])
    return value > arg


def condition_gte(cell: CellValue, args: Sequence[Any]) -> bool:
    value, arg = _coerce(cell, args[0])
    return value >= arg


def condition_lt(cell: CellValue, args: Sequence[Any]) -> bool:
    value, arg = _coerce(cell, args[0])
    return value < arg


def condition_lte(cell: CellValue, args: Sequence[Any]) -> bool:
    value, arg = _coerce(cell, args[0])
    return value <= arg


def condition_between(cell: CellValue, args: Sequence[Any]) -> bool:
    """Intervalo fechado ``[from, to]``; limites invertidos são trocados."""
    if cell.type == CELL_TYPE_DATE:
        value, low, high = _dates(cell, args[0], args[1])
        if value is None or low is None or high is None:
            return False
    else:
        value, low, high = _coerce(cell, args[0], args[1])
    if low > high:
        low, high = high, low
    return low <= value <= high


def condition_not_between(cell: CellValue, args: Sequence[Any]) -> bool:
    return not condition_between(cell, args)


def condition_by_value(cell: CellValue, args: Sequence[Any]) -> bool:
    (accepted,) = args
    return _text(cell.value) in accepted


def by_value_args(args: Sequence[Any]) -> tuple[frozenset[str]]:
    """Transforma a lista de valores aceitos em um conjunto de textos."""
    values = args[0] if args else ()
    return (frozenset(_text(v) for v in values),)


def condition_date_after(cell: CellValue, args: Sequence[Any]) -> bool:
    value, arg = _dates(cell, args[0])
    if value is None or arg is None:
        return False
    return value >= arg


def condition_date_before(cell: CellValue, args: Sequence[Any]) -> bool:
    value, arg = _dates(cell, args[0])
    if value is None or arg is None:
        return False
    return value <= arg


def condition_date_today(cell: CellValue, args: Sequence[Any]) -> bool:
    return _same_day(cell, _today())


def condition_date_tomorrow(cell: CellValue, args: Sequence[Any]) -> bool:
    return _same_day(cell, _today() + pd.Timedelta(days=1))


def condition_date_yesterday(cell: CellValue, args: Sequence[Any]) -> bool:
    return _same_day(cell, _today() - pd.Timedelta(days=1))


# nome -> (função, rótulo, nº de argumentos)
BUILTIN_CONDITIONS = {
    "none": (condition_none, "None", 0),
    "empty": (condition_empty, "Is empty", 0),
    "not_empty": (condition_not_empty, "Is not empty", 0),
    "eq": (condition_eq, "Is equal to", 1),
    "neq": (condition_neq, "Is not equal to", 1),
    "contains": (condition_contains, "Contains", 1),
    "not_contains": (condition_not_contains, "Does not contain", 1),
    "begins_with": (condition_begins_with, "Begins with", 1),
    "ends_with": (condition_ends_with, "Ends with", 1),
    "gt": (condition_gt, "Greater than", 1),
    "gte": (condition_gte, "Greater than or equal to", 1),
    "lt": (condition_lt, "Less than", 1),
    "lte": (condition_lte, "Less than or equal to", 1),
    "between": (condition_between, "Is between", 2),
    "not_between": (condition_not_between, "Is not between", 2),
    "date_after": (condition_date_after, "After", 1),
    "date_before": (condition_date_before, "Before", 1),
    "date_today": (condition_date_today, "Today", 0),
    "date_tomorrow": (condition_date_tomorrow, "Tomorrow", 0),
    "date_yesterday": (condition_date_yesterday, "Yesterday", 0),
}


def register_builtin_conditions(registry: ConditionRegistry) -> None:
    for name, (func, label, inputs_count) in BUILTIN_CONDITIONS.items():
        registry.register(name, func, label=label, inputs_count=inputs_count)
    registry.register(
        "by_value",
        condition_by_value,
        label="By value",
        inputs_count=0,
        show_operators=False,
        args_decorator=by_value_args,
    )
