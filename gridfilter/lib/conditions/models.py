"""Data models for conditions."""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from gridfilter.lib.constants import META_DATE_FORMAT, META_TYPE


@dataclass(frozen=True)
class CellValue:
    """Par ``(valor, metadados)`` avaliado pelas condições.

    Attributes:
        value: valor bruto da célula.
        meta: metadados da célula (ex.: ``{"type": "numeric"}``).
    """

    value: Any
    meta: Mapping[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> str | None:
        return self.meta.get(META_TYPE)

    @property
    def date_format(self) -> str | None:
        return self.meta.get(META_DATE_FORMAT)


Predicate = Callable[[CellValue], bool]


@dataclass(frozen=True)
class Condition:
    """Condição já resolvida para uma coluna.

    Attributes:
        name: nome da condição no registry (ex.: ``"contains"``).
        args: argumentos normalizados (strings em minúsculas).
        predicate: função derivada de ``name`` + ``args`` no momento da adição.
    """

    name: str
    args: tuple[Any, ...]
    predicate: Predicate = field(compare=False, repr=False)

    def __call__(self, cell: CellValue) -> bool:
        return bool(self.predicate(cell))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "args": copy.deepcopy(list(self.args))}


@dataclass(frozen=True)
class ConditionDescriptor:
    """Descrição de uma condição registrada."""

    name: str
    label: str
    inputs_count: int = 1
    show_operators: bool = True
    args_decorator: Callable[[Sequence[Any]], Sequence[Any]] | None = None


@dataclass(slots=True)
class ColumnConditions:
    """Operação e condições (ordem de inserção) de uma coluna."""

    operation: str
    conditions: list[Condition] = field(default_factory=list)


Combinator = Callable[[Sequence[Condition], CellValue], bool]


class ConditionLookup(Protocol):
    def resolve(self, name: str, args: Sequence[Any]) -> Predicate: ...


class OperationLookup(Protocol):
    def resolve(self, operation: str) -> Combinator: ...

    def operation_types(self) -> tuple[str, ...]: ...
