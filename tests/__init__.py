"""
Testes do Controle de Lançamentos

Contém:
- tests/unit/ : testes unitários dos serviços de domínio e casos de uso
"""
