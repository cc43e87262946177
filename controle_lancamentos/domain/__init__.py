"""Entidades, exceções e serviços de domínio."""

from .entidades import Lancamento, ResultadoValidacao, SaldoConta
from .excecoes import (
    ContaSemLancamentosError,
    ControleLancamentosError,
    IdiomaNaoSuportadoError,
)

__all__ = [
    'Lancamento',
    'SaldoConta',
    'ResultadoValidacao',
    'ControleLancamentosError',
    'ContaSemLancamentosError',
    'IdiomaNaoSuportadoError',
]
