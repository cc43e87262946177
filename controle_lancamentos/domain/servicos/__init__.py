"""Inicializa módulo de serviços de domínio."""

from .validador_cpf import ValidadorCPF
from .normalizador_dados import NormalizadorDados
from .validador_lancamento import ValidadorLancamento
from .agrupador_lancamentos import AgrupadorLancamentos
from .agregador_saldos import AgregadorSaldos

__all__ = [
    'ValidadorCPF',
    'NormalizadorDados',
    'ValidadorLancamento',
    'AgrupadorLancamentos',
    'AgregadorSaldos',
]
