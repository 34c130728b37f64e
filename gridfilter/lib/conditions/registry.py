"""Registry of filter conditions (name -> predicate factory)."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any

from gridfilter.lib.conditions.exceptions import ConditionError, UnknownConditionError
from gridfilter.lib.conditions.models import CellValue, ConditionDescriptor, Predicate

ConditionFunc = Callable[[CellValue, Sequence[Any]], bool]


class ConditionRegistry:
    """Serviço de busca de condições injetado na ``ConditionCollection``.

    Cada condição é uma função ``func(cell, args) -> bool`` registrada sob um
    nome único, acompanhada de um :class:`ConditionDescriptor`. ``resolve``
    fixa os argumentos e devolve o predicado ``predicate(cell) -> bool``.

    Use :func:`create_default_condition_registry` para obter um registry já
    preenchido com as condições nativas.
    """

    def __init__(self) -> None:
        self._conditions: dict[str, tuple[ConditionFunc, ConditionDescriptor]] = {}

    def register(
        self,
        name: str,
        func: ConditionFunc,
        *,
        label: str | None = None,
        inputs_count: int = 1,
        show_operators: bool = True,
        args_decorator: Callable[[Sequence[Any]], Sequence[Any]] | None = None,
        overwrite: bool = False,
    ) -> None:
        if not isinstance(name, str) or not name:
            raise ConditionError("Nome da condição deve ser uma string não vazia")
        if not callable(func):
            raise ConditionError(f"Condição '{name}' deve ser chamável")
        if not overwrite and name in self._conditions:
            raise ConditionError(f"Condição '{name}' já registrada")
        descriptor = ConditionDescriptor(
            name=name,
            label=label or name,
            inputs_count=inputs_count,
            show_operators=show_operators,
            args_decorator=args_decorator,
        )
        self._conditions[name] = (func, descriptor)

    def unregister(self, name: str) -> None:
        if name not in self._conditions:
            raise UnknownConditionError(name)
        del self._conditions[name]

    def resolve(self, name: str, args: Sequence[Any]) -> Predicate:
        try:
            func, descriptor = self._conditions[name]
        except KeyError:
            raise UnknownConditionError(name) from None

        condition_args: Sequence[Any] = tuple(args)
        if descriptor.args_decorator is not None:
            condition_args = descriptor.args_decorator(condition_args)

        def predicate(cell: CellValue) -> bool:
            return func(cell, condition_args)

        return predicate

    def descriptor(self, name: str) -> ConditionDescriptor:
        try:
            return self._conditions[name][1]
        except KeyError:
            raise UnknownConditionError(name) from None

    def names(self) -> tuple[str, ...]:
        return tuple(self._conditions)

    def __contains__(self, name: object) -> bool:
        return name in self._conditions

    def __iter__(self) -> Iterator[str]:
        return iter(self._conditions)

    def __len__(self) -> int:
        return len(self._conditions)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._conditions)!r})"


def create_default_condition_registry() -> ConditionRegistry:
    """Novo registry com todas as condições nativas registradas."""
    from gridfilter.lib.conditions.builtins import register_builtin_conditions

    registry = ConditionRegistry()
    register_builtin_conditions(registry)
    return registry
