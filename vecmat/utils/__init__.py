# vecmat/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger      – объект logging.Logger пакета ("vecmat")
    * init_logger – включить вывод логов в консоль
    * Config      – JSON‑конфигурация (epsilon, log_level)
"""

from .logger import logger, init_logger, set_level
from .config import Config

__all__ = ["logger", "init_logger", "set_level", "Config"]
