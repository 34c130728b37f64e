from __future__ import annotations

from .base import CellFilter, FilterError, MissingColumnsError
from .conditions import ConditionCollectionFilter, infer_cell_meta
from .view import TableView

__all__ = [
    "CellFilter",
    "ConditionCollectionFilter",
    "FilterError",
    "MissingColumnsError",
    "TableView",
    "infer_cell_meta",
]
