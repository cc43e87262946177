"""
Sistema de logging centralizado para o projeto
"""

import os
import logging
from typing import Optional

from controle_lancamentos.config import LOG_DIR, LOG_LEVEL

NOME_LOGGER_RAIZ = 'controle_lancamentos'


class LoggerConfig:
    _logger = None
    _log_dir = LOG_DIR
    _initialized = False

    @classmethod
    def set_log_dir(cls, log_dir: Optional[str]):
        """Define o diretório de logs e reinicializa o logger"""
        cls._log_dir = log_dir
        cls._initialized = False  # Forçar reinicialização
        cls._logger = None

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """Retorna o logger raiz do pacote configurado"""
        if cls._logger is None or not cls._initialized:
            cls._configurar_logger()
        return cls._logger

    @classmethod
    def _configurar_logger(cls):
        """Configura o logger com handlers para console e, opcionalmente, arquivo"""
        cls._logger = logging.getLogger(NOME_LOGGER_RAIZ)
        cls._logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

        # Limpar handlers existentes
        for handler in cls._logger.handlers[:]:
            cls._logger.removeHandler(handler)
            handler.close()

        # Handler para arquivo somente quando há diretório configurado
        if cls._log_dir:
            os.makedirs(cls._log_dir, exist_ok=True)
            formato_detalhado = logging.Formatter(
                '%(asctime)s | %(levelname)-8s | %(filename)s:%(lineno)d | %(funcName)s() | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            arquivo_log = os.path.join(cls._log_dir, 'aplicacao.log')
            fh = logging.FileHandler(arquivo_log, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(formato_detalhado)
            cls._logger.addHandler(fh)

        # Handler para console (menos detalhado)
        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)
        formatter_console = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%H:%M:%S'
        )
        ch.setFormatter(formatter_console)
        cls._logger.addHandler(ch)

        cls._initialized = True


def get_logger(nome: Optional[str] = None) -> logging.Logger:
    """Retorna um logger filho do logger do pacote"""
    raiz = LoggerConfig.get_logger()
    if not nome:
        return raiz
    if nome.startswith(NOME_LOGGER_RAIZ + '.'):
        nome = nome[len(NOME_LOGGER_RAIZ) + 1:]
    return raiz.getChild(nome)
