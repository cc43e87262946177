"""
Exceções de domínio
"""


class ControleLancamentosError(Exception):
    """Erro base do controle de lançamentos"""


class ContaSemLancamentosError(ControleLancamentosError, LookupError):
    """Consulta de extremos para um CPF sem nenhum lançamento registrado"""

    def __init__(self, cpf: str):
        self.cpf = cpf
        super().__init__(f"no entries for document {cpf}")


class IdiomaNaoSuportadoError(ControleLancamentosError, ValueError):
    """Idioma de mensagens sem catálogo disponível"""

    def __init__(self, idioma: str):
        self.idioma = idioma
        super().__init__(f"Idioma de mensagens não suportado: {idioma}")
