"""
Infrastructure — сквозные сервисы (логирование).
"""

from src.infrastructure.logging import get_logger, setup_logging

__all__ = ["setup_logging", "get_logger"]
