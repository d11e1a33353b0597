"""
Настройка логирования.

Единый формат логов для CLI и сессии.
"""

import logging
import sys
from typing import Final, Optional


DEFAULT_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "WARNING",
    format_string: Optional[str] = None
) -> None:
    """
    Настройка корневого логгера.

    Логи пишутся в stderr, чтобы не смешиваться с результатами в stdout.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
        format_string: Формат записи (по умолчанию DEFAULT_FORMAT)

    Raises:
        ValueError: Если уровень неизвестен
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format=format_string or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Логгер модуля (обычно name=__name__)."""
    return logging.getLogger(name)
