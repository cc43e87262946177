"""Serviço de Domínio para Normalização de Dados."""

import math
import re
import pandas as pd
from typing import Any, Optional

_NUMERO_BR = re.compile(r"^-?\d{1,3}(\.\d{3})*,\d+$|^-?\d+,\d+$")


class NormalizadorDados:
    """Normaliza valores informados para lançamentos."""

    @staticmethod
    def parse_valor(valor: Any) -> Optional[float]:
        """Converte o valor informado para float.

        Aceita números, strings no formato "1234.56" e no formato brasileiro
        "1.234,56".

        Args:
            valor: Valor a converter

        Returns:
            Float ou None se ausente (None, NaN, vazio) ou não numérico
        """
        if valor is None or isinstance(valor, bool):
            return None

        if isinstance(valor, str):
            texto = valor.strip()
            if texto == "":
                return None
            if _NUMERO_BR.match(texto):
                # Remove separador de milhares (.) e converte , em .
                texto = texto.replace(".", "").replace(",", ".")
            try:
                convertido = float(texto)
            except ValueError:
                return None
        else:
            try:
                convertido = float(valor)
            except (TypeError, ValueError):
                return None
            except OverflowError:
                # Inteiro grande demais para float: vira infinito com o mesmo sinal
                convertido = math.inf if valor > 0 else -math.inf

        if pd.isna(convertido):
            return None
        return convertido
