import math
from typing import Any

import pandas as pd


def stringify(value: Any) -> str:
    """Converte ``value`` em texto comparável.

    ``None``/``NaN``/``NaT`` viram ``""`` e floats inteiros perdem o ``.0``
    (``1.0`` -> ``"1"``), o que mantém ``eq`` estável entre colunas numéricas
    lidas como ``int`` ou ``float``.
    """
    if is_empty(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_empty(value: Any) -> bool:
    if value is None or (isinstance(value, str) and value == ""):
        return True
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # arrays: pd.isna devolve vetor
        return False


def to_number(value: Any) -> float:
    """Converte para ``float``; valores não numéricos viram ``NaN``."""
    if isinstance(value, bool):
        return float(value)
    if is_empty(value):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def is_number(value: Any) -> bool:
    return not math.isnan(to_number(value))


def to_timestamp(value: Any, date_format: str | None = None) -> pd.Timestamp | None:
    """Interpreta ``value`` como data; devolve ``None`` se não for possível.

    Datas com fuso são convertidas para UTC sem fuso, para que possam ser
    comparadas com argumentos ingênuos (ex.: ``"2024-01-01"``).
    """
    if is_empty(value):
        return None
    if isinstance(value, pd.Timestamp):
        ts = value
    else:
        ts = pd.to_datetime(value, format=date_format, errors="coerce")
        if pd.isna(ts):
            return None
        ts = pd.Timestamp(ts)
    if ts.tzinfo is not None:
        ts = ts.tz_convert(None)
    return ts
