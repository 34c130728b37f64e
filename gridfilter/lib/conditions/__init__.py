"""Motor de condições por coluna.

Exporta a API pública usada pelos consumidores do motor:
- ConditionCollection: coleção de condições agrupadas por coluna/operação
- ConditionRegistry: serviço de busca ``nome -> predicado``
- Modelos: CellValue, Condition, ConditionDescriptor
- Exceções: ConditionError e derivadas

Exemplo:

    from gridfilter.lib.conditions import ConditionCollection

    collection = ConditionCollection()
    collection.add_condition("city", {"name": "contains", "args": ["LIS"]})
    collection.is_match("Lisboa", "city")  # True

"""

from gridfilter.lib.conditions.exceptions import (
    CollectionDestroyedError,
    ConditionError,
    InvalidConditionError,
    OperationConflictError,
    OperationError,
    UnknownConditionError,
    UnknownOperationError,
)
from gridfilter.lib.conditions.models import CellValue, Condition, ConditionDescriptor
from gridfilter.lib.conditions.registry import (
    ConditionRegistry,
    create_default_condition_registry,
)
from gridfilter.lib.conditions.collection import ConditionCollection

__all__ = [
    "CellValue",
    "CollectionDestroyedError",
    "Condition",
    "ConditionCollection",
    "ConditionDescriptor",
    "ConditionError",
    "ConditionRegistry",
    "InvalidConditionError",
    "OperationConflictError",
    "OperationError",
    "UnknownConditionError",
    "UnknownOperationError",
    "create_default_condition_registry",
]
