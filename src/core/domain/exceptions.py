"""
Исключения доменного слоя натуральных чисел.

Все ошибки возникают синхронно при создании NaturalNumber.
Остальные операции значения не бросают исключений.
"""

from typing import Any


class NaturalNumberError(Exception):
    """Базовое исключение для ошибок натуральных чисел."""


class NaturalNumberValidationError(NaturalNumberError, ValueError):
    """
    Входное значение не является натуральным числом.

    Бросается для строк, не совпадающих с шаблоном ^[1-9][0-9]*$,
    и для чисел, которые не являются целыми положительными.

    Attributes:
        input_value: Исходное (необрезанное) значение
    """

    def __init__(self, message: str, input_value: Any):
        super().__init__(message)
        self.input_value = input_value


class UnsupportedInputError(NaturalNumberError, TypeError):
    """
    Неподдерживаемый тип входных данных (ожидается str или int).

    Attributes:
        input_type: Тип переданного значения
    """

    def __init__(self, input_type: type):
        super().__init__(
            f"Unsupported input type: {input_type.__name__}. Expected str or int."
        )
        self.input_type = input_type
