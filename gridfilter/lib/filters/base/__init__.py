"""Pacote de utilitários base para filtros de tabela.

Exporta a API pública usada pelos módulos de filtros:
- CellFilter: classe abstrata de filtro avaliado célula a célula
- Exceções específicas: FilterError, MissingColumnsError

    from gridfilter.lib.filters.base import CellFilter

"""

from .base import CellFilter
from .exceptions import FilterError, MissingColumnsError
from .utils import _ensure_bool_series

__all__ = [
    "CellFilter",
    "FilterError",
    "MissingColumnsError",
    "_ensure_bool_series",
]
