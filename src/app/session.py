"""NaturalNumberSession — адаптер пользовательского ввода для NaturalNumber.

Хранит "текущее число" и введённый текст, вызывает операции NaturalNumber
и возвращает результаты в виде immutable dataclass-ов. Собственной доменной
логики не содержит: валидация, индексация и разворот выполняются NaturalNumber.

Состояния:
- нет числа: операции над числом возвращают NO_NUMBER
- есть число: count_zeros / get_digit / reverse_new / reverse_in_place
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Final, Optional

from src.core.contracts import validate_natural_number
from src.core.domain.exceptions import NaturalNumberError
from src.core.domain.natural_number import NaturalNumber, trim_input
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# СООБЩЕНИЯ
# =============================================================================
MSG_VALID_INPUT: Final[str] = "Valid natural number"
MSG_INVALID_INPUT: Final[str] = (
    "Invalid natural number. Enter a positive number without leading zeros."
)
MSG_INVALID_INDEX: Final[str] = "Enter a valid index (a number)"
MSG_NO_NUMBER: Final[str] = "No number has been created"

# Целый префикс строки: "  12abc" → 12, "-3" → -3
_INDEX_PREFIX: Final = re.compile(r"^\s*([+-]?[0-9]+)")


# =============================================================================
# RESULTS
# =============================================================================


class InputState(str, Enum):
    """Состояние проверки вводимого текста."""
    EMPTY = "EMPTY"
    VALID = "VALID"
    INVALID = "INVALID"


class OperationStatus(str, Enum):
    """Итог операции сессии."""
    OK = "OK"
    CLEARED = "CLEARED"      # пустой ввод, текущее число сброшено
    NO_NUMBER = "NO_NUMBER"  # операция недоступна без числа
    ERROR = "ERROR"


@dataclass(frozen=True)
class InputFeedback:
    """Результат проверки ввода "на лету"."""

    state: InputState
    message: str


@dataclass(frozen=True)
class CreateResult:
    """Результат создания текущего числа."""

    status: OperationStatus
    digits: Optional[str]
    length: Optional[int]
    message: str


@dataclass(frozen=True)
class ZerosResult:
    """Результат подсчёта нулей."""

    status: OperationStatus
    zero_count: Optional[int]
    message: str


@dataclass(frozen=True)
class DigitResult:
    """Результат получения цифры по индексу.

    Индекс вне диапазона не является ошибкой: digit == 0, in_range == False.
    """

    status: OperationStatus
    index: Optional[int]
    digit: Optional[int]
    in_range: bool
    message: str


@dataclass(frozen=True)
class ReverseResult:
    """Результат разворота (нового или на месте)."""

    status: OperationStatus
    digits: Optional[str]
    in_place: bool
    message: str


def parse_index(text: str) -> Optional[int]:
    """
    Разбор индекса из текста.

    Берётся целый префикс строки (ведущие пробелы и знак допускаются),
    остальное игнорируется.

    Args:
        text: Введённый индекс

    Returns:
        Целое число или None, если префикса нет
    """
    match = _INDEX_PREFIX.match(text or "")
    if match is None:
        return None
    return int(match.group(1))


# =============================================================================
# SESSION
# =============================================================================


class NaturalNumberSession:
    """Сессия работы с одним текущим натуральным числом.

    Каждая операция выполняется синхронно до конца и возвращает результат.
    Ошибки NaturalNumber перехватываются здесь и превращаются в ERROR-результаты.
    """

    def __init__(self):
        self._current: Optional[NaturalNumber] = None
        self._input_text: str = ""

    @property
    def current_number(self) -> Optional[NaturalNumber]:
        return self._current

    @property
    def has_number(self) -> bool:
        return self._current is not None

    @property
    def input_text(self) -> str:
        return self._input_text

    # -------------------------------------------------------------------------
    # Ввод
    # -------------------------------------------------------------------------

    def check_input(self, text: str) -> InputFeedback:
        """Проверка ввода без создания числа."""
        if not text or not trim_input(text):
            return InputFeedback(state=InputState.EMPTY, message="")

        if NaturalNumber.is_valid_natural_number(text):
            return InputFeedback(state=InputState.VALID, message=MSG_VALID_INPUT)

        return InputFeedback(state=InputState.INVALID, message=MSG_INVALID_INPUT)

    def create_number(self, text: str) -> CreateResult:
        """
        Создание текущего числа из введённого текста.

        Пустой текст сбрасывает текущее число. При ошибке текущее число
        также сбрасывается, а сообщение исключения попадает в результат.

        Args:
            text: Введённый текст

        Returns:
            CreateResult
        """
        self._input_text = text

        if not text or not trim_input(text):
            self._current = None
            return CreateResult(
                status=OperationStatus.CLEARED, digits=None, length=None, message=""
            )

        try:
            number = NaturalNumber(text)
        except NaturalNumberError as e:
            logger.warning("Rejected input %r: %s", text, e)
            self._current = None
            return CreateResult(
                status=OperationStatus.ERROR, digits=None, length=None, message=str(e)
            )

        self._current = number
        logger.debug("Created number %s (%d digits)", number, number.length)
        return CreateResult(
            status=OperationStatus.OK,
            digits=number.value,
            length=number.length,
            message=f"Created number: {number}",
        )

    # -------------------------------------------------------------------------
    # Операции над числом
    # -------------------------------------------------------------------------

    def count_zeros(self) -> ZerosResult:
        if self._current is None:
            return ZerosResult(
                status=OperationStatus.NO_NUMBER, zero_count=None, message=MSG_NO_NUMBER
            )

        zero_count = self._current.count_zeros()
        logger.debug("count_zeros(%s) = %d", self._current, zero_count)
        return ZerosResult(
            status=OperationStatus.OK,
            zero_count=zero_count,
            message=f"Zeros: {zero_count}",
        )

    def get_digit(self, index_text: str) -> DigitResult:
        """
        Цифра текущего числа по введённому индексу.

        Args:
            index_text: Индекс в виде текста

        Returns:
            DigitResult (ERROR если индекс не разобран)
        """
        if self._current is None:
            return DigitResult(
                status=OperationStatus.NO_NUMBER,
                index=None,
                digit=None,
                in_range=False,
                message=MSG_NO_NUMBER,
            )

        index = parse_index(index_text)
        if index is None:
            return DigitResult(
                status=OperationStatus.ERROR,
                index=None,
                digit=None,
                in_range=False,
                message=MSG_INVALID_INDEX,
            )

        digit = self._current.get_digit(index)
        in_range = 0 <= index < self._current.length
        logger.debug("get_digit(%s, %d) = %d", self._current, index, digit)
        return DigitResult(
            status=OperationStatus.OK,
            index=index,
            digit=digit,
            in_range=in_range,
            message=f"Digit at index {index}: {digit}",
        )

    def reverse_new(self) -> ReverseResult:
        """Новое развёрнутое число; текущее не меняется."""
        if self._current is None:
            return ReverseResult(
                status=OperationStatus.NO_NUMBER,
                digits=None,
                in_place=False,
                message=MSG_NO_NUMBER,
            )

        reversed_number = self._current.reversed()
        return ReverseResult(
            status=OperationStatus.OK,
            digits=reversed_number.value,
            in_place=False,
            message=f"Reversed number: {reversed_number}",
        )

    def reverse_in_place(self) -> ReverseResult:
        """Разворот текущего числа; введённый текст заменяется новыми цифрами."""
        if self._current is None:
            return ReverseResult(
                status=OperationStatus.NO_NUMBER,
                digits=None,
                in_place=True,
                message=MSG_NO_NUMBER,
            )

        before = self._current.value
        self._current.reverse_in_place()
        self._input_text = self._current.value
        logger.debug("reverse_in_place: %s -> %s", before, self._current)
        return ReverseResult(
            status=OperationStatus.OK,
            digits=self._current.value,
            in_place=True,
            message=f"Updated number: {self._current}",
        )

    # -------------------------------------------------------------------------
    # Экспорт
    # -------------------------------------------------------------------------

    def export(self) -> Optional[Dict[str, Any]]:
        """
        JSON контракт текущего числа.

        Returns:
            dict по схеме natural_number или None, если числа нет

        Raises:
            jsonschema.ValidationError: Если снимок не соответствует схеме
        """
        if self._current is None:
            return None

        data = self._current.snapshot().model_dump()
        validate_natural_number(data)
        return data
