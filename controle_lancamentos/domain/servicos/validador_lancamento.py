"""
Serviço responsável pela validação dos dados de entrada de um lançamento.
Cada regra é avaliada de forma independente e, quando não atendida, acrescenta
sua mensagem ao resultado, na ordem fixa em que as regras estão declaradas.
"""
from typing import Callable, List, Optional, Tuple

from controle_lancamentos.config import IDIOMA_MENSAGENS, VALOR_MAXIMO, VALOR_MINIMO
from controle_lancamentos.domain.entidades import Lancamento, ResultadoValidacao
from controle_lancamentos.infraestrutura.logger import get_logger

from . import mensagens
from .normalizador_dados import NormalizadorDados
from .validador_cpf import ValidadorCPF

logger = get_logger(__name__)

# (cpf informado, valor convertido) -> regra violada?
Predicado = Callable[[Optional[str], Optional[float]], bool]


class ValidadorLancamento:
    """Valida CPF e valor de um lançamento antes de aceitá-lo"""

    def __init__(
        self,
        valor_minimo: float = VALOR_MINIMO,
        valor_maximo: float = VALOR_MAXIMO,
        idioma: str = IDIOMA_MENSAGENS,
    ):
        self.valor_minimo = valor_minimo
        self.valor_maximo = valor_maximo
        self.idioma = idioma
        catalogo = mensagens.obter_catalogo(idioma)

        self._regras: List[Tuple[str, Predicado]] = [
            (catalogo[mensagens.CPF_NAO_NUMERICO], self._cpf_nao_numerico),
            (catalogo[mensagens.CPF_DIGITOS_INVALIDOS], self._cpf_digitos_invalidos),
            (catalogo[mensagens.VALOR_NAO_NUMERICO], self._valor_ausente),
            (
                catalogo[mensagens.VALOR_ABAIXO_MINIMO].format(
                    limite=mensagens.formatar_limite(valor_minimo, idioma)
                ),
                self._valor_abaixo_minimo,
            ),
            (
                catalogo[mensagens.VALOR_ACIMA_MAXIMO].format(
                    limite=mensagens.formatar_limite(valor_maximo, idioma)
                ),
                self._valor_acima_maximo,
            ),
        ]

    def validar(self, lancamento: Lancamento) -> ResultadoValidacao:
        """
        Valida um lançamento.

        Args:
            lancamento: Lançamento com CPF e valor informados pelo usuário

        Returns:
            None se todas as regras forem atendidas, senão as mensagens das
            regras violadas, cada uma terminada por quebra de linha
        """
        cpf = lancamento.cpf
        valor = NormalizadorDados.parse_valor(lancamento.valor)

        mensagem_validacao = "".join(
            f"{mensagem}\n" for mensagem, violada in self._regras if violada(cpf, valor)
        )

        if mensagem_validacao:
            logger.debug(f"Lançamento rejeitado ({cpf!r}, {lancamento.valor!r}): {mensagem_validacao!r}")
            return mensagem_validacao

        return None

    @staticmethod
    def _cpf_nao_numerico(cpf: Optional[str], valor: Optional[float]) -> bool:
        if not cpf:
            return True
        # Tabela ASCII: apenas 48 ('0') a 57 ('9')
        return any(ord(c) < 48 or ord(c) > 57 for c in str(cpf))

    @staticmethod
    def _cpf_digitos_invalidos(cpf: Optional[str], valor: Optional[float]) -> bool:
        # CPF ausente já é reportado pela regra de caracteres numéricos
        if not cpf:
            return False
        return not ValidadorCPF.validar(cpf)

    @staticmethod
    def _valor_ausente(cpf: Optional[str], valor: Optional[float]) -> bool:
        # Zero é tratado como valor ausente
        return not valor

    def _valor_abaixo_minimo(self, cpf: Optional[str], valor: Optional[float]) -> bool:
        return bool(valor) and valor < self.valor_minimo

    def _valor_acima_maximo(self, cpf: Optional[str], valor: Optional[float]) -> bool:
        return bool(valor) and valor > self.valor_maximo
