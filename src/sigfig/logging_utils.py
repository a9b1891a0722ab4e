"""
Logging utilities для sigfig.

Библиотечный код пишет только в logging.getLogger(__name__) и ничего не
настраивает сам. get_logger() — удобная точка настройки для приложений,
встраивающих движок (UI, скрипты, ноутбуки).
"""

import logging
import sys
from typing import Optional, TextIO, Union


def get_logger(
    name: str = "sigfig",
    level: Union[int, str] = logging.INFO,
    stream: Optional[TextIO] = None,
    fmt: str = "%(levelname)s %(name)s: %(message)s",
    datefmt: Optional[str] = None,
    propagate: bool = False,
) -> logging.Logger:
    """
    Настройка и получение логгера пакета.

    Повторные вызовы не добавляют дублирующих handler'ов на тот же stream:
    существующий handler перенастраивается.

    Args:
        name: Имя логгера (default: "sigfig")
        level: Уровень логирования (int или строка, например "DEBUG")
        stream: Поток вывода (default: sys.stderr)
        fmt: Формат сообщений
        datefmt: Формат даты (optional)
        propagate: Пропагировать записи в родительские логгеры

    Returns:
        Настроенный logging.Logger
    """
    logger = logging.getLogger(name)

    if stream is None:
        stream = sys.stderr

    # Строковый уровень → int; неизвестные строки → INFO
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)
    logger.propagate = propagate

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and getattr(handler, "stream", None) is stream:
            handler.setLevel(level)
            handler.setFormatter(formatter)
            return logger

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
