"""
Serviço responsável pela agregação dos lançamentos por CPF.
Centraliza o cálculo de saldos, médias, extremos e rankings.
"""
from typing import Iterable, List, Optional

import pandas as pd

from controle_lancamentos.config import TAMANHO_RANKING
from controle_lancamentos.domain.entidades import Lancamento, SaldoConta
from controle_lancamentos.domain.excecoes import ContaSemLancamentosError
from controle_lancamentos.infraestrutura.logger import get_logger

from .agrupador_lancamentos import AgrupadorLancamentos

logger = get_logger(__name__)


class AgregadorSaldos:
    """Agrega e calcula estatísticas dos lançamentos de cada CPF"""

    @staticmethod
    def saldos_por_conta(lancamentos: Iterable[Lancamento]) -> List[SaldoConta]:
        """
        Calcula o saldo (soma dos valores) de cada CPF.

        A soma usa a soma compensada do pandas (Kahan), então o resultado pode
        diferir nos últimos bits de uma soma simples da esquerda para a direita
        (0.1 + 0.2 + 0.3 resulta em 0.6).

        Args:
            lancamentos: Todos os lançamentos registrados

        Returns:
            Um saldo por CPF, na ordem em que os CPFs foram lançados
        """
        resumo = AgregadorSaldos._resumir(lancamentos)
        if resumo is None:
            return []
        return AgregadorSaldos._para_saldos(resumo, "total")

    @staticmethod
    def menor_maior_lancamentos(cpf: str, lancamentos: Iterable[Lancamento]) -> List[SaldoConta]:
        """
        Recupera o menor e o maior lançamento do CPF especificado.

        Args:
            cpf: CPF já validado, somente com números
            lancamentos: Todos os lançamentos registrados

        Returns:
            [menor, maior], sempre nesta ordem

        Raises:
            ContaSemLancamentosError: Se o CPF não possui lançamentos
        """
        valores = AgrupadorLancamentos.agrupar_por_cpf(lancamentos).get(cpf)
        if not valores:
            raise ContaSemLancamentosError(cpf)

        minimo, maximo = pd.Series(valores).agg(["min", "max"]).tolist()
        return [SaldoConta(cpf=cpf, valor=minimo), SaldoConta(cpf=cpf, valor=maximo)]

    @staticmethod
    def maiores_saldos(
        lancamentos: Iterable[Lancamento],
        quantidade: int = TAMANHO_RANKING,
    ) -> List[SaldoConta]:
        """
        Recupera os CPFs com maiores saldos, do maior para o menor.

        Empates mantêm a ordem em que os CPFs foram lançados (ordenação estável).
        """
        return AgregadorSaldos._ranking(lancamentos, "total", quantidade)

    @staticmethod
    def maiores_medias(
        lancamentos: Iterable[Lancamento],
        quantidade: int = TAMANHO_RANKING,
    ) -> List[SaldoConta]:
        """
        Recupera os CPFs com maiores médias de lançamento, da maior para a menor.

        Empates mantêm a ordem em que os CPFs foram lançados (ordenação estável).
        """
        return AgregadorSaldos._ranking(lancamentos, "media", quantidade)

    @staticmethod
    def _resumir(lancamentos: Iterable[Lancamento]) -> Optional[pd.DataFrame]:
        """Monta total, média e quantidade de lançamentos por CPF"""
        agrupado = AgrupadorLancamentos.agrupar_por_cpf(lancamentos)
        if not agrupado:
            return None

        cpfs = list(agrupado)

        # Agrupa pela posição do CPF; a chave original (mesmo None) é recolocada depois
        df = pd.DataFrame(
            [(posicao, valor) for posicao, valores in enumerate(agrupado.values()) for valor in valores],
            columns=["posicao", "valor"],
        )

        resumo = df.groupby("posicao", sort=True).agg(
            total=("valor", "sum"),
            media=("valor", "mean"),
            qtd=("valor", "size"),
        ).reset_index()
        resumo["cpf"] = [cpfs[posicao] for posicao in resumo["posicao"].tolist()]

        logger.debug(f"{len(df)} lançamentos agrupados em {len(resumo)} CPFs")
        return resumo

    @staticmethod
    def _ranking(lancamentos: Iterable[Lancamento], coluna: str, quantidade: int) -> List[SaldoConta]:
        resumo = AgregadorSaldos._resumir(lancamentos)
        if resumo is None or quantidade <= 0:
            return []

        ranking = resumo.sort_values(coluna, ascending=False, kind="stable").head(quantidade)
        return AgregadorSaldos._para_saldos(ranking, coluna)

    @staticmethod
    def _para_saldos(df: pd.DataFrame, coluna: str) -> List[SaldoConta]:
        # tolist() devolve tipos nativos do Python (int/float)
        return [
            SaldoConta(cpf=cpf, valor=valor)
            for cpf, valor in zip(df["cpf"].tolist(), df[coluna].tolist())
        ]
