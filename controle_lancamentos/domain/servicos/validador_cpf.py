"""Serviço de Domínio para Validação de CPF."""

import re
from typing import Optional

TAMANHO_CPF = 11
CPF_ZERADO = "0" * TAMANHO_CPF


class ValidadorCPF:
    """Valida CPFs conforme o cálculo dos dígitos verificadores da Receita Federal."""

    @staticmethod
    def formato_valido(cpf: Optional[str]) -> bool:
        """Verifica se o CPF tem exatamente 11 dígitos ASCII (0-9)."""
        if not isinstance(cpf, str) or len(cpf) != TAMANHO_CPF:
            return False
        return all(48 <= ord(c) <= 57 for c in cpf)

    @staticmethod
    def validar(cpf: Optional[str]) -> bool:
        """Verifica os dois dígitos verificadores do CPF.

        Args:
            cpf: CPF somente com números (11 caracteres)

        Returns:
            True se os dois dígitos verificadores conferem. CPFs fora do
            formato e o CPF zerado ("00000000000") retornam False.
        """
        if not ValidadorCPF.formato_valido(cpf):
            return False

        if cpf == CPF_ZERADO:
            return False

        digitos = [int(c) for c in cpf]

        # Primeiro dígito verificador (pesos 10..2 sobre os 9 primeiros dígitos)
        if ValidadorCPF._calcular_digito(digitos[:9]) != digitos[9]:
            return False

        # Segundo dígito verificador (pesos 11..2 sobre os 10 primeiros dígitos)
        return ValidadorCPF._calcular_digito(digitos[:10]) == digitos[10]

    @staticmethod
    def _calcular_digito(digitos: list) -> int:
        """Calcula um dígito verificador a partir dos dígitos anteriores."""
        peso_inicial = len(digitos) + 1
        soma = sum(d * (peso_inicial - i) for i, d in enumerate(digitos))
        resto = (soma * 10) % 11
        return 0 if resto in (10, 11) else resto

    @staticmethod
    def limpar(valor: Optional[str]) -> Optional[str]:
        """Remove formatação e retorna apenas os dígitos do CPF.

        Args:
            valor: CPF formatado ("123.456.789-09") ou não

        Returns:
            CPF com 11 dígitos ou None se inválido
        """
        if valor is None:
            return None

        digitos = re.sub(r"[^0-9]", "", str(valor))
        return digitos if len(digitos) == TAMANHO_CPF else None

    @staticmethod
    def formatar(cpf: str) -> str:
        """Formata um CPF de 11 dígitos como 000.000.000-00."""
        if not ValidadorCPF.formato_valido(cpf):
            raise ValueError(f"CPF deve conter 11 dígitos numéricos: {cpf!r}")
        return f"{cpf[:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:]}"
