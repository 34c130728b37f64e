"""Exceções específicas do pacote filters.base.

Mantém as definições de exceção separadas para evitar importações circulares
entre os módulos base e utils.
"""


class FilterError(Exception):
    """Erro genérico ao construir ou aplicar filtros sobre um DataFrame."""


class MissingColumnsError(FilterError):
    """Lançado quando o DataFrame não possui colunas obrigatórias para um filtro."""
