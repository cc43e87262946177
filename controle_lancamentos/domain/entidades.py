"""
Entidades de domínio para controle de lançamentos
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

# None quando todas as regras são atendidas, senão as mensagens concatenadas
ResultadoValidacao = Optional[str]


@dataclass(frozen=True)
class Lancamento:
    """Representa um lançamento financeiro associado a um CPF"""
    cpf: Optional[str]
    valor: Any

    @classmethod
    def de_dict(cls, dados: Mapping[str, Any]) -> "Lancamento":
        """Cria um lançamento a partir de um dicionário {'cpf': ..., 'valor': ...}"""
        return cls(cpf=dados.get('cpf'), valor=dados.get('valor'))


@dataclass(frozen=True)
class SaldoConta:
    """Valor agregado (saldo, média ou extremo) de um CPF"""
    cpf: str
    valor: float

    def para_dict(self) -> Dict[str, Any]:
        return {'cpf': self.cpf, 'valor': self.valor}
