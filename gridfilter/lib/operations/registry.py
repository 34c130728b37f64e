"""Registry of logical operations (operation id -> combinator)."""

from __future__ import annotations

from collections.abc import Iterator

from gridfilter.lib.conditions.exceptions import OperationError, UnknownOperationError
from gridfilter.lib.conditions.models import Combinator


class OperationRegistry:
    """Serviço de busca de operações lógicas.

    Um combinador recebe a sequência de condições de uma coluna e o valor
    candidato e decide se o valor passa (``conjunction`` = todas,
    ``disjunction`` = alguma, ...). ``operation_types()`` enumera os tipos
    conhecidos, usados pela coleção para validar a operação de uma coluna.
    """

    def __init__(self) -> None:
        self._operations: dict[str, tuple[Combinator, str]] = {}

    def register(
        self,
        operation: str,
        func: Combinator,
        *,
        label: str | None = None,
        overwrite: bool = False,
    ) -> None:
        if not isinstance(operation, str) or not operation:
            raise OperationError("Nome da operação deve ser uma string não vazia")
        if not callable(func):
            raise OperationError(f"Operação '{operation}' deve ser chamável")
        if not overwrite and operation in self._operations:
            raise OperationError(f"Operação '{operation}' já registrada")
        self._operations[operation] = (func, label or operation)

    def resolve(self, operation: str) -> Combinator:
        try:
            return self._operations[operation][0]
        except (KeyError, TypeError):
            raise UnknownOperationError(operation, self.operation_types()) from None

    def label(self, operation: str) -> str:
        try:
            return self._operations[operation][1]
        except (KeyError, TypeError):
            raise UnknownOperationError(operation, self.operation_types()) from None

    def operation_types(self) -> tuple[str, ...]:
        return tuple(self._operations)

    def __contains__(self, operation: object) -> bool:
        try:
            return operation in self._operations
        except TypeError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._operations)!r})"


def create_default_operation_registry() -> OperationRegistry:
    """Novo registry com ``conjunction``, ``disjunction`` e
    ``disjunctionWithExtraCondition``."""
    from gridfilter.lib.operations.builtins import register_builtin_operations

    registry = OperationRegistry()
    register_builtin_operations(registry)
    return registry
