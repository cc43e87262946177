"""
Configurações - Controle de Lançamentos
"""

import os
from dotenv import load_dotenv

load_dotenv()

DEBUG = os.getenv('DEBUG', 'False') == 'True'

# Idioma das mensagens de validação ('en' ou 'pt_BR')
IDIOMA_MENSAGENS = os.getenv('IDIOMA_MENSAGENS', 'en')

# Faixa aceita para o valor de um lançamento
VALOR_MINIMO = float(os.getenv('VALOR_MINIMO', '-2000'))
VALOR_MAXIMO = float(os.getenv('VALOR_MAXIMO', '15000'))

# Quantidade de contas retornadas pelos rankings
TAMANHO_RANKING = int(os.getenv('TAMANHO_RANKING', '3'))

# Logs (sem LOG_DIR apenas o console é utilizado)
LOG_DIR = os.getenv('LOG_DIR') or None
LOG_LEVEL = 'DEBUG' if DEBUG else os.getenv('LOG_LEVEL', 'INFO').upper()
