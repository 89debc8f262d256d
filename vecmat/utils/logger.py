# vecmat/utils/logger.py
# ---------------------------------------------------------------
# Логгер пакета. Библиотека сама ничего не печатает: на импорте
# вешаем NullHandler, а консольный вывод включается init_logger().
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "vecmat"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def set_level(level) -> None:
    """Уровень логгера: имя ("INFO") или число (logging.INFO)."""
    if isinstance(level, str):
        name = level.upper()
        if name not in _LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        level = getattr(logging, name)
    logger.setLevel(level)


def init_logger(level=None) -> logging.Logger:
    """
    Включить вывод в консоль.
    Если `level` не задан – берётся из конфигурации (ключ "log_level").
    """
    if level is None:
        # импорт здесь: config сам пишет в этот логгер
        from vecmat.utils.config import Config
        level = Config()["log_level"]
    logging.basicConfig(format=LOG_FORMAT)
    set_level(level)
    return logger
