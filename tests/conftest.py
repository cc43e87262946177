"""Fixtures compartilhadas pelos testes."""

import pytest

from controle_lancamentos.domain.entidades import Lancamento
from controle_lancamentos.domain.servicos import ValidadorLancamento

CPF_VALIDO = "12345678909"
CPF_VALIDO_2 = "11144477735"
CPF_VALIDO_3 = "52998224725"
CPF_VALIDO_4 = "11111111111"


@pytest.fixture
def validador() -> ValidadorLancamento:
    """Validador com os limites padrão e mensagens em inglês."""
    return ValidadorLancamento(valor_minimo=-2000, valor_maximo=15000, idioma="en")


@pytest.fixture
def lancamentos_variados():
    """Lançamentos de quatro CPFs, intercalados."""
    return [
        Lancamento(CPF_VALIDO, 100.0),
        Lancamento(CPF_VALIDO_2, 5000.0),
        Lancamento(CPF_VALIDO, -50.0),
        Lancamento(CPF_VALIDO_3, 300.0),
        Lancamento(CPF_VALIDO_4, 10.0),
        Lancamento(CPF_VALIDO_3, 900.0),
        Lancamento(CPF_VALIDO_2, -1000.0),
    ]
