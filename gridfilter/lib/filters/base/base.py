from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping
from typing import Any

import pandas as pd

from gridfilter.lib.conditions import CellValue

from .exceptions import MissingColumnsError
from .utils import _ensure_bool_series


# -----------------------------------------------------------------------------
# CellFilter: filtro de linhas avaliado célula a célula
# -----------------------------------------------------------------------------
class CellFilter(ABC):
    """Filtro de linhas que decide cada célula como um :class:`CellValue`.

    Regras:
      - :meth:`targets` devolve pares ``(coluna lógica, coluna do DataFrame)``
        que restringem as linhas; colunas fora dessa lista não filtram nada.
      - :meth:`match_cell` decide uma célula da coluna lógica.
      - :meth:`cell_meta` fornece os metadados de cada coluna (``type``,
        ``date_format``); o padrão é vazio.
      - A máscara final é o AND das colunas-alvo.
    """

    @abstractmethod
    def targets(self) -> list[tuple[Hashable, Any]]:
        raise NotImplementedError

    @abstractmethod
    def match_cell(self, column: Hashable, cell: CellValue) -> bool:
        raise NotImplementedError

    def cell_meta(self, column: Hashable, series: pd.Series) -> Mapping[str, Any]:
        return {}

    @property
    def required_columns(self) -> tuple[Any, ...]:
        return tuple(name for _, name in self.targets())

    def mask(self, df: pd.DataFrame) -> pd.Series:
        """Máscara booleana alinhada ao índice do ``df``.

        Raises:
            MissingColumnsError: se alguma coluna-alvo não existir no ``df``.
        """
        targets = self.targets()
        self._check_columns(df, [name for _, name in targets])
        m = pd.Series(True, index=df.index, dtype=bool)
        for column, name in targets:
            serie = df[name]
            meta = dict(self.cell_meta(column, serie))
            matched = serie.map(
                lambda v, c=column, mt=meta: self.match_cell(c, CellValue(v, mt))
            )
            m &= matched.astype(bool)
        return m

    def apply(self, df: pd.DataFrame) -> pd.DataFrame:
        """Aplica o filtro e retorna um *novo* DataFrame filtrado."""
        m = self.mask(df)
        _ensure_bool_series(m, df)
        return df.loc[m].copy()

    @staticmethod
    def _check_columns(df: pd.DataFrame, names: list[Any]) -> None:
        missing = [c for c in names if c not in df.columns]
        if missing:
            raise MissingColumnsError(f"Colunas ausentes no DataFrame: {missing}")
