"""App — пользовательские поверхности над NaturalNumber (сессия и CLI).

- NaturalNumberSession: состояние "текущего числа" и результаты операций
- cli: однократный и интерактивный режимы командной строки
"""

from .config import SessionConfig
from .session import (
    CreateResult,
    DigitResult,
    InputFeedback,
    InputState,
    NaturalNumberSession,
    OperationStatus,
    ReverseResult,
    ZerosResult,
)

__all__ = [
    "SessionConfig",
    "NaturalNumberSession",
    "InputState",
    "OperationStatus",
    "InputFeedback",
    "CreateResult",
    "ZerosResult",
    "DigitResult",
    "ReverseResult",
]
