"""
Controle de Lançamentos

Validação de lançamentos financeiros vinculados a um CPF e cálculo de
saldos, extremos e rankings por CPF.
"""

from controle_lancamentos.casos_uso import GerenciadorLancamentos
from controle_lancamentos.domain import (
    ContaSemLancamentosError,
    ControleLancamentosError,
    IdiomaNaoSuportadoError,
    Lancamento,
    ResultadoValidacao,
    SaldoConta,
)
from controle_lancamentos.domain.servicos import (
    AgregadorSaldos,
    AgrupadorLancamentos,
    NormalizadorDados,
    ValidadorCPF,
    ValidadorLancamento,
)

__version__ = "1.0.0"

__all__ = [
    "GerenciadorLancamentos",
    "Lancamento",
    "SaldoConta",
    "ResultadoValidacao",
    "ControleLancamentosError",
    "ContaSemLancamentosError",
    "IdiomaNaoSuportadoError",
    "ValidadorCPF",
    "NormalizadorDados",
    "ValidadorLancamento",
    "AgrupadorLancamentos",
    "AgregadorSaldos",
]
