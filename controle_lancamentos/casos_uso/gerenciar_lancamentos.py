"""Caso de Uso: Gerenciar Lançamentos em Memória.

Responsável por aceitar apenas lançamentos válidos no conjunto de trabalho e
disponibilizar as consultas de saldos, extremos e rankings sobre ele.
"""

from typing import List, Optional, Tuple

from controle_lancamentos.domain.entidades import Lancamento, ResultadoValidacao, SaldoConta
from controle_lancamentos.domain.servicos import (
    AgregadorSaldos,
    NormalizadorDados,
    ValidadorCPF,
    ValidadorLancamento,
)
from controle_lancamentos.infraestrutura.logger import get_logger

logger = get_logger(__name__)


class GerenciadorLancamentos:
    """Mantém os lançamentos aceitos e executa as consultas sobre eles."""

    def __init__(self, validador: Optional[ValidadorLancamento] = None):
        self.validador = validador or ValidadorLancamento()
        self._lancamentos: List[Lancamento] = []

    @property
    def lancamentos(self) -> Tuple[Lancamento, ...]:
        """Cópia imutável dos lançamentos aceitos, na ordem de registro."""
        return tuple(self._lancamentos)

    def registrar(self, lancamento: Lancamento) -> ResultadoValidacao:
        """Valida e, se válido, registra o lançamento.

        Args:
            lancamento: Lançamento digitado pelo usuário

        Returns:
            None se o lançamento foi aceito, senão as mensagens de validação
        """
        mensagem_validacao = self.validador.validar(lancamento)
        if mensagem_validacao is not None:
            motivos = mensagem_validacao.strip().replace("\n", " | ")
            logger.warning(f"Lançamento recusado para CPF {lancamento.cpf!r}: {motivos}")
            return mensagem_validacao

        # Armazena o valor já convertido para número
        valor = NormalizadorDados.parse_valor(lancamento.valor)
        self._lancamentos.append(Lancamento(cpf=lancamento.cpf, valor=valor))
        logger.debug(f"Lançamento registrado: CPF {lancamento.cpf} valor {lancamento.valor}")
        return None

    def saldos_por_conta(self) -> List[SaldoConta]:
        return AgregadorSaldos.saldos_por_conta(self.lancamentos)

    def menor_maior_lancamentos(self, cpf: str) -> List[SaldoConta]:
        """Menor e maior lançamento do CPF (aceita CPF formatado)."""
        cpf_limpo = ValidadorCPF.limpar(cpf) or cpf
        return AgregadorSaldos.menor_maior_lancamentos(cpf_limpo, self.lancamentos)

    def maiores_saldos(self) -> List[SaldoConta]:
        return AgregadorSaldos.maiores_saldos(self.lancamentos)

    def maiores_medias(self) -> List[SaldoConta]:
        return AgregadorSaldos.maiores_medias(self.lancamentos)
