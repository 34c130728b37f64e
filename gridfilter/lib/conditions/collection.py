from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from gridfilter.lib.conditions.exceptions import (
    CollectionDestroyedError,
    InvalidConditionError,
    OperationConflictError,
    UnknownOperationError,
)
from gridfilter.lib.conditions.models import (
    CellValue,
    ColumnConditions,
    Condition,
    ConditionLookup,
    OperationLookup,
)
from gridfilter.lib.conditions.registry import create_default_condition_registry
from gridfilter.lib.constants import (
    COLLECTION_EVENTS,
    DEFAULT_OPERATION,
    EVENT_AFTER_ADD,
    EVENT_AFTER_CLEAN,
    EVENT_AFTER_CLEAR,
    EVENT_AFTER_REMOVE,
    EVENT_BEFORE_ADD,
    EVENT_BEFORE_CLEAN,
    EVENT_BEFORE_CLEAR,
    EVENT_BEFORE_REMOVE,
)
from gridfilter.lib.hooks import LocalHooks
from gridfilter.lib.operations.registry import create_default_operation_registry

logger = logging.getLogger(__name__)

ConditionRecord = dict[str, Any]


class ConditionCollection:
    """Coleção de condições por coluna, agrupadas por operação lógica.

    Regras:
      - Cada coluna usa **uma única** operação (``conjunction``,
        ``disjunction``, ...) enquanto tiver condições; misturar operações
        lança :class:`OperationConflictError`.
      - Argumentos ``str`` são normalizados para minúsculas antes de derivar o
        predicado; os demais passam inalterados.
      - ``order_stack`` guarda as colunas na ordem em que receberam condições
        e dirige a ordem de exportação.
      - ``is_match(value)`` sem coluna é o AND entre todas as colunas.

    Args:
        condition_registry: serviço ``resolve(name, args) -> predicate``.
            Padrão: registry novo com as condições nativas.
        operation_registry: serviço ``resolve(operation) -> combinator`` com
            ``operation_types()``. Padrão: registry novo com as operações
            nativas.

    Eventos (ver :meth:`add_local_hook`): ``beforeAdd``/``afterAdd``,
    ``beforeRemove``/``afterRemove``, ``beforeClear``/``afterClear`` recebem a
    coluna; ``beforeClean``/``afterClean`` não recebem argumentos. Os eventos
    ``after*`` disparam com o estado já consolidado.

    Notas:
      - Não é *thread-safe*: mutações concorrentes devem ser serializadas pelo
        chamador.
      - Após :meth:`destroy`, qualquer chamada lança
        :class:`CollectionDestroyedError`.
    """

    def __init__(
        self,
        condition_registry: ConditionLookup | None = None,
        operation_registry: OperationLookup | None = None,
    ) -> None:
        if condition_registry is None:
            condition_registry = create_default_condition_registry()
        if operation_registry is None:
            operation_registry = create_default_operation_registry()
        self._condition_registry = condition_registry
        self._operation_registry = operation_registry
        self._hooks = LocalHooks(COLLECTION_EVENTS)
        self._columns: dict[Hashable, ColumnConditions] = {}
        self._order_stack: list[Hashable] = []
        self._destroyed = False

    # --- Consultas -----------------------------------------------------------
    def is_empty(self) -> bool:
        """``True`` se nenhuma coluna está na pilha de ordem."""
        self._ensure_alive()
        return not self._order_stack

    @property
    def order_stack(self) -> tuple[Hashable, ...]:
        self._ensure_alive()
        return tuple(self._order_stack)

    @property
    def column_types(self) -> Mapping[Hashable, str]:
        """Mapeamento somente leitura ``coluna -> operação``."""
        self._ensure_alive()
        return MappingProxyType(
            {column: entry.operation for column, entry in self._columns.items()}
        )

    def get_operation(self, column: Hashable) -> str | None:
        self._ensure_alive()
        entry = self._columns.get(column)
        return entry.operation if entry is not None else None

    def get_conditions(self, column: Hashable) -> Sequence[Condition]:
        """Condições da coluna.

        Devolve a lista *viva* (mutações da coleção se refletem nela) se a
        coluna possui operação registrada; caso contrário, uma tupla vazia.
        """
        self._ensure_alive()
        entry = self._columns.get(column)
        if entry is None:
            return ()
        return entry.conditions

    def has_conditions(self, column: Hashable, name: str | None = None) -> bool:
        """Verifica se a coluna possui condições (opcionalmente, com ``name``)."""
        self._ensure_alive()
        entry = self._columns.get(column)
        if entry is None:
            return False
        if name:
            return any(condition.name == name for condition in entry.conditions)
        return len(entry.conditions) > 0

    def conditions_by_operation(self) -> dict[str, dict[Hashable, tuple[Condition, ...]]]:
        """Condições agrupadas por operação e depois por coluna.

        Sempre contém um *bucket* (possivelmente vazio) por operação conhecida.
        """
        self._ensure_alive()
        buckets: dict[str, dict[Hashable, tuple[Condition, ...]]] = {
            operation: {} for operation in self._operation_registry.operation_types()
        }
        for column, entry in self._columns.items():
            buckets.setdefault(entry.operation, {})[column] = tuple(entry.conditions)
        return buckets

    # --- Avaliação -----------------------------------------------------------
    def is_match(self, value: Any, column: Hashable | None = None) -> bool:
        """Verifica se ``value`` satisfaz as condições.

        Args:
            value: :class:`CellValue` ou valor bruto (recebe ``meta`` vazio).
            column: coluna a avaliar. Se ``None``, avalia todas as colunas com
                operação registrada e combina com AND (para no primeiro falso).
        """
        self._ensure_alive()
        cell = _as_cell(value)

        if column is None:
            for entry in list(self._columns.values()):
                if not self.is_match_in_conditions(entry.conditions, cell, entry.operation):
                    return False
            return True

        entry = self._columns.get(column)
        operation = entry.operation if entry is not None else DEFAULT_OPERATION
        return self.is_match_in_conditions(self.get_conditions(column), cell, operation)

    def is_match_in_conditions(
        self,
        conditions: Sequence[Condition],
        value: Any,
        operation: str = DEFAULT_OPERATION,
    ) -> bool:
        """Aplica o combinador de ``operation`` sobre ``conditions``.

        Uma sequência vazia nunca rejeita o valor.
        """
        if not conditions:
            return True
        combinator = self._operation_registry.resolve(operation)
        return bool(combinator(conditions, _as_cell(value)))

    # --- Mutações ------------------------------------------------------------
    def add_condition(
        self,
        column: Hashable,
        condition: Mapping[str, Any] | Any,
        operation: str = DEFAULT_OPERATION,
    ) -> None:
        """Adiciona uma condição à coluna.

        Args:
            column: identificador da coluna.
            condition: ``{"name": ..., "args": [...]}`` ou
                ``{"command": {"key": name}, "args": [...]}``.
            operation: operação lógica da coluna (padrão ``conjunction``).

        Raises:
            InvalidConditionError: definição sem nome ou com ``args`` inválido.
            OperationConflictError: a coluna já usa outra operação.
            UnknownOperationError: operação desconhecida na primeira condição.
            UnknownConditionError: nome não registrado (vem do registry).

        Uma chamada que falha não altera a coleção.

        Com ``disjunctionWithExtraCondition`` a coluna precisa de ao menos três
        condições antes de ser avaliada; com menos, :meth:`is_match` lança
        :class:`OperationError`.
        """
        self._ensure_alive()
        name, raw_args = _parse_definition(condition)
        args = tuple(
            arg.lower() if isinstance(arg, str) else copy.deepcopy(arg) for arg in raw_args
        )

        self._hooks.run(EVENT_BEFORE_ADD, column)

        entry = self._columns.get(column)
        if entry is not None:
            if entry.operation != operation:
                raise OperationConflictError(column, entry.operation, operation)
        else:
            self._check_operation(operation)

        predicate = self._condition_registry.resolve(name, args)

        if entry is None:
            entry = ColumnConditions(operation)
            self._columns[column] = entry
            # coluna limpa com clear_conditions volta para o fim da pilha
            if column in self._order_stack:
                self._order_stack.remove(column)
            self._order_stack.append(column)
        entry.conditions.append(Condition(name, args, predicate))

        logger.debug(
            "add_condition: coluna=%r, condição=%s, operação=%s, total=%d",
            column,
            name,
            operation,
            len(entry.conditions),
        )
        self._hooks.run(EVENT_AFTER_ADD, column)

    def remove_conditions(self, column: Hashable) -> None:
        """Remove a coluna da pilha de ordem e limpa suas condições.

        Eventos: ``beforeRemove``, ``beforeClear``, ``afterClear``,
        ``afterRemove``. Os dois ``before*`` disparam antes de qualquer
        mutação; se um deles falhar, a coluna fica intacta.
        """
        self._ensure_alive()
        self._hooks.run(EVENT_BEFORE_REMOVE, column)
        self._hooks.run(EVENT_BEFORE_CLEAR, column)
        if column in self._order_stack:
            self._order_stack.remove(column)
        self._clear(column)
        self._hooks.run(EVENT_AFTER_CLEAR, column)
        self._hooks.run(EVENT_AFTER_REMOVE, column)

    def clear_conditions(self, column: Hashable) -> None:
        """Esvazia as condições da coluna **sem** alterar a pilha de ordem.

        A lista devolvida antes por :meth:`get_conditions` é esvaziada no
        lugar e a operação da coluna é descartada.
        """
        self._ensure_alive()
        self._hooks.run(EVENT_BEFORE_CLEAR, column)
        self._clear(column)
        self._hooks.run(EVENT_AFTER_CLEAR, column)

    def clean(self) -> None:
        """Remove todas as condições e reinicia a pilha de ordem."""
        self._ensure_alive()
        self._hooks.run(EVENT_BEFORE_CLEAN)
        self._columns = {}
        self._order_stack.clear()
        logger.debug("clean: coleção reiniciada")
        self._hooks.run(EVENT_AFTER_CLEAN)

    def destroy(self) -> None:
        """Libera o estado interno e desliga todos os hooks."""
        if self._destroyed:
            return
        self._hooks.clear()
        self._columns = None  # type: ignore[assignment]
        self._order_stack = None  # type: ignore[assignment]
        self._destroyed = True

    # --- Exportação / importação ---------------------------------------------
    def export_all_conditions(self) -> list[ConditionRecord]:
        """Exporta as condições na ordem da pilha, sem os predicados.

        Returns:
            ``[{"column": c, "operation": op, "conditions": [{"name", "args"}]}]``
            apenas para colunas que possuem condições.
        """
        self._ensure_alive()
        result: list[ConditionRecord] = []
        for column in self._order_stack:
            entry = self._columns.get(column)
            if entry is None or not entry.conditions:
                continue
            result.append(
                {
                    "column": column,
                    "operation": entry.operation,
                    "conditions": [condition.to_dict() for condition in entry.conditions],
                }
            )
        return result

    def import_all_conditions(self, records: Iterable[Mapping[str, Any]]) -> None:
        """Substitui o conteúdo da coleção pelos registros exportados.

        Os registros são validados antes de qualquer mudança; em seguida a
        coleção é limpa (:meth:`clean`) e cada condição é reaplicada via
        :meth:`add_condition`, o que re-deriva os predicados e dispara os
        eventos de adição normalmente.

        Raises:
            InvalidConditionError: registro mal formado.
            UnknownOperationError: operação desconhecida em algum registro.
            OperationConflictError: a mesma coluna aparece com operações
                diferentes.
        """
        self._ensure_alive()
        parsed = [self._parse_record(record) for record in records]
        operations: dict[Hashable, str] = {}
        for column, operation, _ in parsed:
            if operations.setdefault(column, operation) != operation:
                raise OperationConflictError(column, operations[column], operation)

        self.clean()
        for column, operation, conditions in parsed:
            if column not in self._order_stack:
                self._order_stack.append(column)
            for condition in conditions:
                self.add_condition(column, condition, operation)

        logger.debug("import_all_conditions: %d colunas importadas", len(parsed))

    # --- Hooks ---------------------------------------------------------------
    def add_local_hook(self, name: str, callback: Callable[..., Any]) -> None:
        self._ensure_alive()
        self._hooks.add(name, callback)

    def remove_local_hook(self, name: str, callback: Callable[..., Any]) -> None:
        self._ensure_alive()
        self._hooks.remove(name, callback)

    def clear_local_hooks(self) -> None:
        self._ensure_alive()
        self._hooks.clear()

    def __repr__(self) -> str:
        if self._destroyed:
            return f"{self.__class__.__name__}(<destroyed>)"
        return f"{self.__class__.__name__}({self._order_stack!r})"

    # --- Internos ------------------------------------------------------------
    def _ensure_alive(self) -> None:
        if self._destroyed:
            raise CollectionDestroyedError("ConditionCollection já foi destruída")

    def _clear(self, column: Hashable) -> None:
        entry = self._columns.pop(column, None)
        if entry is not None:
            entry.conditions.clear()
            logger.debug("clear_conditions: coluna=%r", column)

    def _check_operation(self, operation: str) -> None:
        known = self._operation_registry.operation_types()
        if operation not in known:
            raise UnknownOperationError(operation, known)

    def _parse_record(
        self, record: Mapping[str, Any]
    ) -> tuple[Hashable, str, list[Mapping[str, Any] | Any]]:
        if not isinstance(record, Mapping) or "column" not in record:
            raise InvalidConditionError(
                f"Registro inválido: esperado mapeamento com 'column', recebido {record!r}"
            )
        operation = record.get("operation") or DEFAULT_OPERATION
        self._check_operation(operation)
        conditions = record.get("conditions") or []
        if isinstance(conditions, (str, bytes, Mapping)) or not isinstance(conditions, Iterable):
            raise InvalidConditionError(
                f"Registro inválido para a coluna {record['column']!r}: "
                "'conditions' deve ser uma lista"
            )
        conditions = list(conditions)
        for condition in conditions:
            _parse_definition(condition)
        return record["column"], operation, conditions


def _as_cell(value: Any) -> CellValue:
    return value if isinstance(value, CellValue) else CellValue(value)


def _parse_definition(definition: Mapping[str, Any] | Any) -> tuple[str, tuple[Any, ...]]:
    """Extrai ``(name, args)`` de uma definição de condição."""
    if isinstance(definition, Mapping):
        name = definition.get("name")
        command = definition.get("command")
        args = definition.get("args")
    else:
        name = getattr(definition, "name", None)
        command = getattr(definition, "command", None)
        args = getattr(definition, "args", None)

    if not name and command is not None:
        if isinstance(command, Mapping):
            name = command.get("key")
        else:
            name = getattr(command, "key", None)

    if not isinstance(name, str) or not name:
        raise InvalidConditionError(
            f"Definição de condição sem nome: {definition!r}. "
            "Use {'name': ..., 'args': [...]} ou {'command': {'key': ...}, 'args': [...]}"
        )
    if args is None:
        return name, ()
    if isinstance(args, (str, bytes, Mapping)) or not isinstance(args, Iterable):
        raise InvalidConditionError(
            f"Argumentos da condição '{name}' devem ser uma sequência, recebido {args!r}"
        )
    return name, tuple(args)
