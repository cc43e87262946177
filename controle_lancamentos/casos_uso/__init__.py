"""Casos de uso do controle de lançamentos."""

from .gerenciar_lancamentos import GerenciadorLancamentos

__all__ = [
    'GerenciadorLancamentos',
]
