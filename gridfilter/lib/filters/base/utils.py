import pandas as pd

from .exceptions import FilterError


def _ensure_bool_series(mask: pd.Series, df: pd.DataFrame) -> None:
    """Garante que a série ``mask`` seja booleana e alinhada ao ``df``."""
    if not isinstance(mask, pd.Series):
        raise FilterError("Máscara deve ser uma pandas.Series")
    if mask.dtype != bool:
        raise FilterError(f"Máscara deve ser booleana, recebido dtype {mask.dtype}")
    if not mask.index.equals(df.index):
        raise FilterError("Índice da máscara não corresponde ao índice do DataFrame")
