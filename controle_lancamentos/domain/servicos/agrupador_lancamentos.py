"""Serviço de Domínio para Agrupamento de Lançamentos por CPF."""

from typing import Dict, Iterable, List

from controle_lancamentos.domain.entidades import Lancamento


class AgrupadorLancamentos:
    """Agrupa os valores dos lançamentos pelo CPF."""

    @staticmethod
    def agrupar_por_cpf(lancamentos: Iterable[Lancamento]) -> Dict[str, List[float]]:
        """Agrupa os valores de cada CPF, sem validar os lançamentos.

        As chaves seguem a ordem da primeira ocorrência de cada CPF e os valores
        de cada CPF mantêm a ordem relativa dos lançamentos recebidos.

        Args:
            lancamentos: Todos os lançamentos registrados

        Returns:
            Dicionário CPF -> lista de valores
        """
        agrupado: Dict[str, List[float]] = {}
        for lancamento in lancamentos:
            agrupado.setdefault(lancamento.cpf, []).append(lancamento.valor)
        return agrupado
