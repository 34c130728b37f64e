"""Operações lógicas (combinadores) aplicadas às condições de uma coluna."""

from __future__ import annotations

from gridfilter.lib.operations.builtins import (
    BUILTIN_OPERATIONS,
    conjunction,
    disjunction,
    disjunction_with_extra_condition,
)
from gridfilter.lib.operations.registry import (
    OperationRegistry,
    create_default_operation_registry,
)

__all__ = [
    "BUILTIN_OPERATIONS",
    "OperationRegistry",
    "conjunction",
    "create_default_operation_registry",
    "disjunction",
    "disjunction_with_extra_condition",
]
