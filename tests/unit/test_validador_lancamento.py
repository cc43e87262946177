"""
Testes para ValidadorLancamento

Verifica:
1. Regras de CPF (caracteres numéricos e dígitos verificadores)
2. Regras de valor (presença, limite inferior, limite superior)
3. Ordem fixa e independência das mensagens
4. Catálogo pt_BR e limites configurados
"""

import math

import pytest

from controle_lancamentos.domain.entidades import Lancamento
from controle_lancamentos.domain.excecoes import IdiomaNaoSuportadoError
from controle_lancamentos.domain.servicos import ValidadorLancamento
from tests.conftest import CPF_VALIDO

MSG_CPF_NAO_NUMERICO = "document must contain only numeric characters.\n"
MSG_CPF_DIGITOS = "check digits of the document must be valid.\n"
MSG_VALOR = "value must be numeric.\n"
MSG_MINIMO = "value cannot be less than -2000.00.\n"
MSG_MAXIMO = "value cannot be greater than 15000.00.\n"


class TestRegrasCPF:
    """Regras 1 e 2"""

    def test_lancamento_valido_retorna_none(self, validador: ValidadorLancamento) -> None:
        assert validador.validar(Lancamento(CPF_VALIDO, 100.0)) is None

    def test_digitos_invalidos(self, validador: ValidadorLancamento) -> None:
        assert validador.validar(Lancamento("12345678900", 100.0)) == MSG_CPF_DIGITOS

    def test_cpf_nao_numerico_reporta_as_duas_regras(self, validador: ValidadorLancamento) -> None:
        """CPF com pontuação falha em caracteres e dígitos verificadores"""
        resultado = validador.validar(Lancamento("123.456.789-09", 100.0))
        assert resultado == MSG_CPF_NAO_NUMERICO + MSG_CPF_DIGITOS

    def test_mensagem_de_caracteres_apenas_uma_vez(self, validador: ValidadorLancamento) -> None:
        """Vários caracteres inválidos geram uma única mensagem"""
        resultado = validador.validar(Lancamento("abcdefghijk", 100.0))
        assert resultado.count(MSG_CPF_NAO_NUMERICO) == 1

    @pytest.mark.parametrize("cpf", [None, ""])
    def test_cpf_ausente(self, validador: ValidadorLancamento, cpf) -> None:
        """CPF ausente reporta somente a regra de caracteres numéricos"""
        assert validador.validar(Lancamento(cpf, 100.0)) == MSG_CPF_NAO_NUMERICO

    def test_cpf_numerico_tamanho_errado(self, validador: ValidadorLancamento) -> None:
        assert validador.validar(Lancamento("123", 100.0)) == MSG_CPF_DIGITOS

    def test_cpf_zerado(self, validador: ValidadorLancamento) -> None:
        assert validador.validar(Lancamento("00000000000", 100.0)) == MSG_CPF_DIGITOS


class TestRegrasValor:
    """Regras 3, 4 e 5"""

    @pytest.mark.parametrize("valor", [None, 0, 0.0, "", "   ", math.nan, "abc"])
    def test_valor_ausente_ou_nao_numerico(self, validador: ValidadorLancamento, valor) -> None:
        """Ausente, zero, NaN e vazio são reportados como não numéricos"""
        assert validador.validar(Lancamento(CPF_VALIDO, valor)) == MSG_VALOR

    def test_zero_rejeitado(self, validador: ValidadorLancamento) -> None:
        """Lançamento de valor zero é rejeitado"""
        assert validador.validar(Lancamento(CPF_VALIDO, 0)) == "value must be numeric.\n"

    def test_limites_exatos_sao_validos(self, validador: ValidadorLancamento) -> None:
        assert validador.validar(Lancamento(CPF_VALIDO, -2000)) is None
        assert validador.validar(Lancamento(CPF_VALIDO, 15000)) is None

    def test_abaixo_do_minimo(self, validador: ValidadorLancamento) -> None:
        assert validador.validar(Lancamento(CPF_VALIDO, -2000.01)) == MSG_MINIMO

    def test_acima_do_maximo(self, validador: ValidadorLancamento) -> None:
        assert validador.validar(Lancamento(CPF_VALIDO, 15000.01)) == MSG_MAXIMO

    def test_valor_texto_numerico(self, validador: ValidadorLancamento) -> None:
        """Strings numéricas são convertidas antes das regras de limite"""
        assert validador.validar(Lancamento(CPF_VALIDO, "1.234,56")) is None
        assert validador.validar(Lancamento(CPF_VALIDO, "20000")) == MSG_MAXIMO

    def test_valor_negativo_dentro_da_faixa(self, validador: ValidadorLancamento) -> None:
        assert validador.validar(Lancamento(CPF_VALIDO, -0.01)) is None


class TestOrdemMensagens:
    """Concatenação na ordem fixa das regras"""

    def test_todas_as_falhas_de_cpf_e_valor(self, validador: ValidadorLancamento) -> None:
        resultado = validador.validar(Lancamento("12a", None))
        assert resultado == MSG_CPF_NAO_NUMERICO + MSG_CPF_DIGITOS + MSG_VALOR

    def test_cpf_invalido_e_valor_acima(self, validador: ValidadorLancamento) -> None:
        resultado = validador.validar(Lancamento("12345678900", 99999))
        assert resultado == MSG_CPF_DIGITOS + MSG_MAXIMO

    def test_cada_mensagem_termina_com_quebra_de_linha(self, validador: ValidadorLancamento) -> None:
        resultado = validador.validar(Lancamento("x", -5000))
        linhas = resultado.split("\n")
        assert linhas[-1] == ""
        assert len(linhas) - 1 == 3

    def test_validacao_sem_estado_entre_chamadas(self, validador: ValidadorLancamento) -> None:
        """Uma validação com falha não afeta a seguinte"""
        validador.validar(Lancamento("x", None))
        assert validador.validar(Lancamento(CPF_VALIDO, 10)) is None


class TestConfiguracao:
    """Idioma e limites configuráveis"""

    def test_mensagens_pt_br(self) -> None:
        validador = ValidadorLancamento(valor_minimo=-2000, valor_maximo=15000, idioma="pt_BR")
        resultado = validador.validar(Lancamento("123.456.789-09", -3000))
        assert resultado == (
            "CPF deve conter apenas caracteres numéricos.\n"
            "Os dígitos verificadores do CPF devem ser válidos.\n"
            "Valor não pode ser inferior a -2000,00.\n"
        )

    def test_pt_br_limite_superior(self) -> None:
        validador = ValidadorLancamento(valor_minimo=-2000, valor_maximo=15000, idioma="pt_BR")
        resultado = validador.validar(Lancamento(CPF_VALIDO, 15000.5))
        assert resultado == "Valor não pode ser superior a 15000,00.\n"

    def test_limites_personalizados(self) -> None:
        validador = ValidadorLancamento(valor_minimo=-10, valor_maximo=10, idioma="en")
        assert validador.validar(Lancamento(CPF_VALIDO, 11)) == "value cannot be greater than 10.00.\n"
        assert validador.validar(Lancamento(CPF_VALIDO, -11)) == "value cannot be less than -10.00.\n"

    def test_idioma_nao_suportado(self) -> None:
        with pytest.raises(IdiomaNaoSuportadoError, match="fr"):
            ValidadorLancamento(idioma="fr")

    def test_idioma_nao_suportado_e_value_error(self) -> None:
        with pytest.raises(ValueError):
            ValidadorLancamento(idioma="xx")


class TestValoresExtremos:
    """Valores fora da faixa de float não interrompem a validação"""

    def test_inteiro_enorme_positivo(self, validador: ValidadorLancamento) -> None:
        assert validador.validar(Lancamento(CPF_VALIDO, 10**400)) == MSG_MAXIMO

    def test_inteiro_enorme_negativo(self, validador: ValidadorLancamento) -> None:
        assert validador.validar(Lancamento(CPF_VALIDO, -(10**400))) == MSG_MINIMO
