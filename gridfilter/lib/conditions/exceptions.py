"""Exceções específicas do pacote conditions.

Mantém as definições de exceção separadas para evitar importações circulares
entre a coleção, os registries e as operações.
"""

from __future__ import annotations

from collections.abc import Hashable


class ConditionError(Exception):
    """Erro genérico ao construir ou avaliar condições."""


class InvalidConditionError(ConditionError):
    """Definição de condição (ou registro de importação) mal formada."""


class UnknownConditionError(ConditionError):
    """Lançado quando o nome da condição não está registrado."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Condição de filtro '{name}' não existe.")
        self.name = name


class OperationError(ConditionError):
    """Uso inválido de uma operação lógica."""


class UnknownOperationError(OperationError):
    """Lançado quando a operação lógica não está registrada."""

    def __init__(self, operation: str, known: tuple[str, ...] = ()) -> None:
        msg = f"Operação inesperada '{operation}'."
        if known:
            msg += f" Operações possíveis: {', '.join(known)}."
        super().__init__(msg)
        self.operation = operation


class OperationConflictError(OperationError):
    """Coluna já possui condições com outro tipo de operação."""

    def __init__(
        self, column: Hashable, current_operation: str, requested_operation: str
    ) -> None:
        super().__init__(
            f"A coluna {column!r} já possui condições com a operação "
            f"'{current_operation}' e não aceita '{requested_operation}'. "
            "Use remove_conditions para limpar as condições atuais antes de "
            "adicionar novas; não é possível misturar operações na mesma coluna."
        )
        self.column = column
        self.current_operation = current_operation
        self.requested_operation = requested_operation


class CollectionDestroyedError(ConditionError):
    """Operação chamada sobre uma ConditionCollection já destruída."""
