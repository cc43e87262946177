"""Infraestrutura transversal (logging)."""

from .logger import LoggerConfig, get_logger

__all__ = [
    'LoggerConfig',
    'get_logger',
]
