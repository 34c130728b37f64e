from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

import pandas as pd

from gridfilter.lib.conditions import CellValue, ConditionCollection
from gridfilter.lib.constants import (
    CELL_TYPE_DATE,
    CELL_TYPE_NUMERIC,
    CELL_TYPE_TEXT,
    META_TYPE,
)

from .base import CellFilter


def infer_cell_meta(series: pd.Series) -> dict[str, Any]:
    """Deduz o ``type`` da célula a partir do dtype da coluna."""
    if pd.api.types.is_bool_dtype(series):
        return {META_TYPE: CELL_TYPE_TEXT}
    if pd.api.types.is_numeric_dtype(series):
        return {META_TYPE: CELL_TYPE_NUMERIC}
    if pd.api.types.is_datetime64_any_dtype(series):
        return {META_TYPE: CELL_TYPE_DATE}
    return {META_TYPE: CELL_TYPE_TEXT}


class ConditionCollectionFilter(CellFilter):
    """Mantém as linhas cujas células satisfazem a ``ConditionCollection``.

    Cada coluna com condições é avaliada com a sua própria operação; o
    resultado entre colunas é combinado com AND. Colunas sem condições não
    restringem nada.

    Args:
        collection: coleção de condições (lida no momento de ``mask``).
        columns: mapeia a coluna da coleção para a coluna do DataFrame.
            Ausente = mesmo nome.
        meta: metadados por coluna da coleção (ex.: ``{"type": "date",
            "date_format": "%d/%m/%Y"}``), sobrepostos aos deduzidos do dtype.
    """

    def __init__(
        self,
        collection: ConditionCollection,
        columns: Mapping[Hashable, str] | None = None,
        meta: Mapping[Hashable, Mapping[str, Any]] | None = None,
    ) -> None:
        self.collection = collection
        self.columns = dict(columns or {})
        self.meta = {k: dict(v) for k, v in (meta or {}).items()}

    def targets(self) -> list[tuple[Hashable, Any]]:
        return [
            (column, self.columns.get(column, column))
            for column in self.collection.order_stack
            if self.collection.has_conditions(column)
        ]

    def match_cell(self, column: Hashable, cell: CellValue) -> bool:
        return self.collection.is_match(cell, column)

    def cell_meta(self, column: Hashable, series: pd.Series) -> dict[str, Any]:
        return {**infer_cell_meta(series), **self.meta.get(column, {})}
