from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence, List, Any, Union
from collections.abc import Iterable

import pandas as pd

from .base import CellFilter, _ensure_bool_series

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# TableView: visão lazy sobre o DataFrame
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TableView:
    """*Wrapper* imutável e *lazy* para aplicar filtros a uma tabela.

    Args:
        base_df: DataFrame base.
        filters: lista de filtros a aplicar, combinados com AND. Para OR entre
                 valores de uma coluna, use ``disjunction`` na própria coleção.

    Notas:
      - ``filter(...)`` devolve **uma nova** ``TableView`` (imutável).
      - ``compute()`` materializa e retorna um *novo* DataFrame.
    """

    base_df: pd.DataFrame
    filters: Sequence[CellFilter] = field(default_factory=tuple)

    def filter(self, flt: Union[CellFilter, Sequence[CellFilter]]) -> "TableView":
        """Retorna nova view com filtros adicionais (lazy)."""
        new_filters: List[CellFilter] = list(self.filters)
        if isinstance(flt, Iterable) and not isinstance(flt, CellFilter):
            new_filters.extend(flt)  # type: ignore[arg-type]
        else:
            new_filters.append(flt)  # type: ignore[arg-type]
        return TableView(self.base_df, tuple(new_filters))

    def mask(self) -> pd.Series:
        """Máscara combinada (AND) de todos os filtros."""
        mask = pd.Series(True, index=self.base_df.index, dtype=bool)
        for f in self.filters:
            fm = f.mask(self.base_df)
            _ensure_bool_series(fm, self.base_df)
            mask &= fm
        return mask

    def compute(self) -> pd.DataFrame:
        """Materializa a view aplicando todos os filtros.

        Returns:
            Um novo DataFrame com as linhas aprovadas por **todos** os filtros.
        """
        if not self.filters:
            return self.base_df.copy()
        mask = self.mask()
        logger.debug(
            "TableView.compute: filtros=%d, linhas=%d/%d",
            len(self.filters),
            int(mask.sum()),
            len(mask),
        )
        return self.base_df.loc[mask].copy()

    def row_indices(self) -> list[Any]:
        """Rótulos de índice das linhas aprovadas, na ordem original."""
        return list(self.compute().index)

    # Conveniências com materialização
    def head(self, n: int = 5) -> pd.DataFrame:
        return self.compute().head(n)

    def to_csv(self, path: str, **kwargs: Any) -> None:
        self.compute().to_csv(path, index=False, **kwargs)
