"""Catálogo de mensagens de validação por idioma."""

from typing import Dict

from controle_lancamentos.domain.excecoes import IdiomaNaoSuportadoError

CPF_NAO_NUMERICO = "cpf_nao_numerico"
CPF_DIGITOS_INVALIDOS = "cpf_digitos_invalidos"
VALOR_NAO_NUMERICO = "valor_nao_numerico"
VALOR_ABAIXO_MINIMO = "valor_abaixo_minimo"
VALOR_ACIMA_MAXIMO = "valor_acima_maximo"

MENSAGENS: Dict[str, Dict[str, str]] = {
    "en": {
        CPF_NAO_NUMERICO: "document must contain only numeric characters.",
        CPF_DIGITOS_INVALIDOS: "check digits of the document must be valid.",
        VALOR_NAO_NUMERICO: "value must be numeric.",
        VALOR_ABAIXO_MINIMO: "value cannot be less than {limite}.",
        VALOR_ACIMA_MAXIMO: "value cannot be greater than {limite}.",
    },
    "pt_BR": {
        CPF_NAO_NUMERICO: "CPF deve conter apenas caracteres numéricos.",
        CPF_DIGITOS_INVALIDOS: "Os dígitos verificadores do CPF devem ser válidos.",
        VALOR_NAO_NUMERICO: "Valor deve ser numérico.",
        VALOR_ABAIXO_MINIMO: "Valor não pode ser inferior a {limite}.",
        VALOR_ACIMA_MAXIMO: "Valor não pode ser superior a {limite}.",
    },
}


def formatar_limite(limite: float, idioma: str) -> str:
    """Formata um limite com duas casas decimais (vírgula decimal em pt_BR)."""
    texto = f"{limite:.2f}"
    if idioma == "pt_BR":
        texto = texto.replace(".", ",")
    return texto


def obter_catalogo(idioma: str) -> Dict[str, str]:
    """Retorna o catálogo de mensagens do idioma informado."""
    try:
        return MENSAGENS[idioma]
    except KeyError:
        raise IdiomaNaoSuportadoError(idioma) from None
