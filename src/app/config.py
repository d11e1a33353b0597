"""Конфигурация сессии и CLI."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SessionConfig:
    """Конфигурация NaturalNumberSession и CLI.

    - log_level: уровень логирования для setup_logging
    - prompt: приглашение интерактивного режима
    - json_indent: отступ JSON вывода (None — одна строка)
    """
    log_level: str = "WARNING"
    prompt: str = "> "
    json_indent: Optional[int] = 2
