"""
NaturalNumber — натуральное число произвольной длины в виде строки цифр

Значение хранится как каноническая строка десятичных цифр:
- строка не пустая
- только символы '0'-'9'
- без ведущих нулей (первая цифра 1-9)

Объект изменяемый только через reverse_in_place(), остальные операции
не меняют состояние. Индексация цифр идёт от старшего разряда (слева).
"""

import math
import re
from typing import Any, Final, Optional, Union

from pydantic import BaseModel, Field, field_validator

from src.core.domain.exceptions import (
    NaturalNumberValidationError,
    UnsupportedInputError,
)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================
# Первая цифра 1-9, затем любые цифры 0-9
NATURAL_NUMBER_PATTERN: Final[re.Pattern] = re.compile(r"^[1-9][0-9]*$")

# Нормализованное значение для пустой строки или строки из одних нулей
ZERO_DIGITS: Final[str] = "0"

# Пробельные символы, обрезаемые по краям ввода:
# TAB VT FF SP NBSP, категория Zs, BOM, LF CR LS PS.
# \x1c-\x1f и \x85 не обрезаются, BOM обрезается (в отличие от str.strip()).
TRIM_CHARACTERS: Final[str] = (
    "\t\v\f \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u202f\u205f\u3000\ufeff"
    "\n\r\u2028\u2029"
)

# Порция цифр при переводе больших int в строку (ниже лимита int -> str)
_INT_CHUNK_DIGITS: Final[int] = 1000
_INT_CHUNK: Final[int] = 10**_INT_CHUNK_DIGITS


def trim_input(text: str) -> str:
    """Обрезка пробельных символов TRIM_CHARACTERS по краям."""
    return text.strip(TRIM_CHARACTERS)


def int_to_digits(number: int) -> str:
    """
    Десятичная запись неотрицательного int любой длины.

    str(int) ограничен sys.get_int_max_str_digits(), поэтому число
    переводится порциями по _INT_CHUNK_DIGITS цифр.

    Args:
        number: Неотрицательное целое

    Returns:
        Строка цифр без ведущих нулей
    """
    chunks = []
    while number >= _INT_CHUNK:
        number, low = divmod(number, _INT_CHUNK)
        chunks.append(str(low).zfill(_INT_CHUNK_DIGITS))
    chunks.append(str(number))
    return "".join(chunks[::-1])


# =============================================================================
# NATURAL NUMBER
# =============================================================================


class NaturalNumber:
    """
    Натуральное число, представленное строкой цифр.

    Создание:
    - NaturalNumber("123")  — из строки (пробелы по краям обрезаются)
    - NaturalNumber(123)    — из целого положительного числа

    Два экземпляра равны, если совпадают их строки цифр.
    Экземпляры изменяемы (reverse_in_place), поэтому не хэшируются.
    """

    __slots__ = ("_digits",)

    def __init__(self, value: Union[str, int, float]):
        """
        Args:
            value: Строка с натуральным числом или целое положительное число

        Raises:
            NaturalNumberValidationError: Если значение не натуральное число
            UnsupportedInputError: Если тип значения не str и не число
        """
        # bool — подкласс int, но числом здесь не считается
        if isinstance(value, str):
            self._digits = self._from_string(value)
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            self._digits = self._from_number(value)
        else:
            raise UnsupportedInputError(type(value))

    # -------------------------------------------------------------------------
    # Статические помощники
    # -------------------------------------------------------------------------

    @staticmethod
    def is_valid_natural_number(text: Any) -> bool:
        """
        Проверка строки на натуральное число.

        Args:
            text: Проверяемое значение

        Returns:
            True если обрезанная строка совпадает с ^[1-9][0-9]*$
        """
        if not text or not isinstance(text, str):
            return False

        trimmed = trim_input(text)
        if not trimmed:
            return False

        return NATURAL_NUMBER_PATTERN.match(trimmed) is not None

    @staticmethod
    def strip_leading_zeros(text: Optional[str]) -> str:
        """
        Удаление ведущих нулей.

        Args:
            text: Строка цифр (может начинаться с нулей)

        Returns:
            Строка без ведущих нулей или "0", если ничего не осталось
        """
        if not text:
            return ZERO_DIGITS

        return text.lstrip("0") or ZERO_DIGITS

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @staticmethod
    def _from_string(text: str) -> str:
        trimmed = trim_input(text)

        if not NaturalNumber.is_valid_natural_number(trimmed):
            raise NaturalNumberValidationError(
                f'Invalid natural number: "{text}". '
                f"A natural number must be positive without leading zeros.",
                input_value=text,
            )

        return trimmed

    @staticmethod
    def _from_number(number: Union[int, float]) -> str:
        if isinstance(number, float):
            is_whole = math.isfinite(number) and number.is_integer()
        else:
            is_whole = True

        if not is_whole or number <= 0:
            if isinstance(number, float):
                shown = str(number)
            else:
                shown = "-" * (number < 0) + int_to_digits(abs(number))
            raise NaturalNumberValidationError(
                f"Invalid natural number: {shown}. "
                f"A natural number must be a positive integer.",
                input_value=number,
            )

        return int_to_digits(int(number))

    @classmethod
    def _from_canonical(cls, digits: str) -> "NaturalNumber":
        # digits уже нормализованы, повторная валидация не нужна
        instance = cls.__new__(cls)
        instance._digits = digits
        return instance

    # -------------------------------------------------------------------------
    # Доступ к значению
    # -------------------------------------------------------------------------

    @property
    def length(self) -> int:
        """Количество цифр."""
        return len(self._digits)

    @property
    def value(self) -> str:
        """Каноническая строка цифр."""
        return self._digits

    def to_text(self) -> str:
        return self._digits

    def get_digit(self, index: int) -> int:
        """
        Цифра по индексу (0 — старший разряд).

        Индекс вне [0, length) не является ошибкой: возвращается 0,
        в том числе для отрицательных индексов.

        Args:
            index: Позиция цифры слева направо

        Returns:
            Цифра 0-9
        """
        if index < 0 or index >= len(self._digits):
            return 0
        return int(self._digits[index])

    def count_zeros(self) -> int:
        """Количество цифр '0' в числе."""
        return self._digits.count("0")

    # -------------------------------------------------------------------------
    # Обращение
    # -------------------------------------------------------------------------

    def _reversed_digits(self) -> str:
        # Хвостовые нули после разворота становятся ведущими и отбрасываются
        return NaturalNumber.strip_leading_zeros(self._digits[::-1])

    def reversed(self) -> "NaturalNumber":
        """
        Новое число с цифрами в обратном порядке.

        Текущий объект не изменяется. "120" → "21".

        Returns:
            Новый экземпляр NaturalNumber
        """
        return NaturalNumber._from_canonical(self._reversed_digits())

    def reverse_in_place(self) -> "NaturalNumber":
        """
        Разворот цифр на месте.

        Returns:
            self (для цепочек вызовов)
        """
        self._digits = self._reversed_digits()
        return self

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def snapshot(self) -> "NaturalNumberSnapshot":
        """Immutable снимок текущего значения для экспорта."""
        return NaturalNumberSnapshot(
            digits=self._digits,
            length=self.length,
            zero_count=self.count_zeros(),
        )

    @classmethod
    def from_snapshot(cls, snapshot: "NaturalNumberSnapshot") -> "NaturalNumber":
        return cls(snapshot.digits)

    # -------------------------------------------------------------------------
    # Протоколы Python
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._digits)

    def __str__(self) -> str:
        return self._digits

    def __repr__(self) -> str:
        return f"NaturalNumber({self._digits!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NaturalNumber):
            return NotImplemented
        return self._digits == other._digits

    __hash__ = None  # type: ignore[assignment]


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class NaturalNumberSnapshot(BaseModel):
    """
    Снимок натурального числа.

    Immutable модель (frozen=True). Совместима с JSON Schema
    (src/core/contracts/schema/natural_number.json).
    """

    digits: str = Field(
        ..., pattern=r"^[1-9][0-9]*$", description="Каноническая строка цифр"
    )
    length: int = Field(..., ge=1, description="Количество цифр")
    zero_count: int = Field(..., ge=0, description="Количество нулей")

    model_config = {"frozen": True}

    @field_validator("length")
    @classmethod
    def validate_length(cls, v: int, info) -> int:
        """length должен совпадать с длиной digits"""
        if "digits" in info.data and v != len(info.data["digits"]):
            raise ValueError(
                f"length {v} does not match digits length {len(info.data['digits'])}"
            )
        return v

    @field_validator("zero_count")
    @classmethod
    def validate_zero_count(cls, v: int, info) -> int:
        """zero_count должен совпадать с количеством '0' в digits"""
        if "digits" in info.data and v != info.data["digits"].count("0"):
            raise ValueError(
                f"zero_count {v} does not match zeros in digits "
                f"({info.data['digits'].count('0')})"
            )
        return v
