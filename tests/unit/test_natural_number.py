"""
Тесты для значения NaturalNumber

Проверяет:
1. Создание из строки и из числа, ошибки валидации и типа
2. Статические помощники is_valid_natural_number / strip_leading_zeros
3. get_digit (индексация от старшего разряда, 0 вне диапазона)
4. count_zeros
5. reversed / reverse_in_place (отбрасывание ведущих нулей, цепочки)
6. Равенство, строковое представление, снимок pydantic
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    NaturalNumber,
    NaturalNumberError,
    NaturalNumberSnapshot,
    NaturalNumberValidationError,
    UnsupportedInputError,
    int_to_digits,
    trim_input,
)


def _digits_to_int(digits: str) -> int:
    """int из длинной строки цифр (int(str) тоже ограничен по длине)"""
    number = 0
    for start in range(0, len(digits), 1000):
        chunk = digits[start:start + 1000]
        number = number * 10 ** len(chunk) + int(chunk)
    return number


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestConstructionFromString:
    """Создание из строки"""

    @pytest.mark.parametrize("text", ["1", "7", "10", "123", "1002003", "9" * 200])
    def test_valid_text_preserved(self, text: str) -> None:
        """Валидная строка сохраняется без изменений"""
        assert NaturalNumber(text).to_text() == text

    def test_whitespace_trimmed(self) -> None:
        """Пробелы по краям обрезаются"""
        number = NaturalNumber("  42\t\n")
        assert number.value == "42"
        assert number.length == 2

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "0", "000", "0123", "-5", "+5", "12a", "1.5", "1 2", "١٢", "²"],
    )
    def test_invalid_text_rejected(self, text: str) -> None:
        """Невалидная строка отклоняется NaturalNumberValidationError"""
        with pytest.raises(NaturalNumberValidationError):
            NaturalNumber(text)

    def test_error_carries_untrimmed_input(self) -> None:
        """Сообщение содержит исходный (необрезанный) ввод"""
        with pytest.raises(NaturalNumberValidationError) as exc_info:
            NaturalNumber(" 012 ")
        assert '" 012 "' in str(exc_info.value)
        assert exc_info.value.input_value == " 012 "

    def test_validation_error_is_value_error(self) -> None:
        """Ошибка валидации совместима с ValueError"""
        with pytest.raises(ValueError):
            NaturalNumber("abc")


class TestConstructionFromNumber:
    """Создание из числа"""

    @pytest.mark.parametrize("value", [1, 9, 10, 120, 10**40])
    def test_positive_int(self, value: int) -> None:
        """Положительное целое → десятичная запись"""
        assert NaturalNumber(value).to_text() == str(value)

    def test_int_beyond_str_conversion_limit(self) -> None:
        """int длиннее лимита str(int) переводится полностью"""
        assert NaturalNumber(10**5000).to_text() == "1" + "0" * 5000
        assert NaturalNumber(10**5000 + 7).to_text() == "1" + "0" * 4999 + "7"

    def test_large_int_matches_string_construction(self) -> None:
        """Оба конструктора дают одно и то же значение"""
        digits = "123456789" * 1000 + "1"
        assert NaturalNumber(_digits_to_int(digits)) == NaturalNumber(digits)

    def test_large_negative_int_rejected(self) -> None:
        with pytest.raises(NaturalNumberValidationError) as exc_info:
            NaturalNumber(-(10**5000))
        assert "-1" + "0" * 5000 in str(exc_info.value)

    def test_integral_float_accepted(self) -> None:
        """Целое значение float принимается"""
        assert NaturalNumber(5.0).value == "5"

    @pytest.mark.parametrize("value", [0, -1, -100, 0.0, 1.5, -2.0])
    def test_non_positive_or_fractional_rejected(self, value) -> None:
        """Ноль, отрицательные и дробные отклоняются"""
        with pytest.raises(NaturalNumberValidationError) as exc_info:
            NaturalNumber(value)
        assert str(value) in str(exc_info.value)
        assert exc_info.value.input_value == value

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value: float) -> None:
        """NaN и бесконечности отклоняются"""
        with pytest.raises(NaturalNumberValidationError):
            NaturalNumber(value)


class TestUnsupportedInput:
    """Неподдерживаемые типы"""

    @pytest.mark.parametrize("value", [None, True, False, [1], b"12", {"digits": "1"}])
    def test_unsupported_types(self, value) -> None:
        """Типы кроме str и числа отклоняются UnsupportedInputError"""
        with pytest.raises(UnsupportedInputError) as exc_info:
            NaturalNumber(value)
        assert exc_info.value.input_type is type(value)

    def test_unsupported_is_type_error(self) -> None:
        """UnsupportedInputError совместим с TypeError и базовой ошибкой"""
        with pytest.raises(TypeError):
            NaturalNumber(None)
        with pytest.raises(NaturalNumberError):
            NaturalNumber(None)


# =============================================================================
# STATIC HELPERS
# =============================================================================


class TestIsValidNaturalNumber:
    """Тесты is_valid_natural_number"""

    @pytest.mark.parametrize("text", ["1", "42", " 42 ", "1000000000000000000000"])
    def test_valid(self, text: str) -> None:
        assert NaturalNumber.is_valid_natural_number(text) is True

    @pytest.mark.parametrize("text", [None, 42, "", "  ", "0", "007", "-1", "4x2"])
    def test_invalid(self, text) -> None:
        assert NaturalNumber.is_valid_natural_number(text) is False

    @pytest.mark.parametrize(
        "text", ["1", " 5 ", "0", "", "  ", "01", "10", "abc", "-3", "3.0", "99999"]
    )
    def test_agrees_with_construction(self, text: str) -> None:
        """Валидатор совпадает с успехом создания из строки"""
        try:
            NaturalNumber(text)
            constructed = True
        except NaturalNumberValidationError:
            constructed = False
        assert NaturalNumber.is_valid_natural_number(text) is constructed


class TestStripLeadingZeros:
    """Тесты strip_leading_zeros"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            (None, "0"),
            ("", "0"),
            ("0", "0"),
            ("0000", "0"),
            ("021", "21"),
            ("001", "1"),
            ("100", "100"),
            ("123", "123"),
        ],
    )
    def test_strip(self, text, expected: str) -> None:
        assert NaturalNumber.strip_leading_zeros(text) == expected


class TestTrimInput:
    """Обрезка пробельных символов ввода"""

    @pytest.mark.parametrize(
        "text",
        ["\ufeff12", "\u300012\u2028", "\u00a012\u2029", "\v12\f", "\r\n12"],
    )
    def test_trimmed(self, text: str) -> None:
        assert trim_input(text) == "12"
        assert NaturalNumber.is_valid_natural_number(text) is True
        assert NaturalNumber(text).value == "12"

    @pytest.mark.parametrize("text", ["\x1c12", "12\x1f", "\x8512"])
    def test_separators_not_trimmed(self, text: str) -> None:
        """Разделители \\x1c-\\x1f и NEL не считаются пробелами"""
        assert NaturalNumber.is_valid_natural_number(text) is False
        with pytest.raises(NaturalNumberValidationError):
            NaturalNumber(text)


class TestIntToDigits:
    """Тесты int_to_digits"""

    @pytest.mark.parametrize("number", [0, 1, 10**999, 10**1000, 10**1000 - 1, 10**2000 + 1])
    def test_small_and_boundary(self, number: int) -> None:
        assert int_to_digits(number) == str(number)

    def test_inner_chunk_zero_padded(self) -> None:
        """Порции с ведущими нулями дополняются до полной длины"""
        number = 10**3001 + 5
        assert int_to_digits(number) == "1" + "0" * 3000 + "5"


# =============================================================================
# ACCESSORS
# =============================================================================


class TestGetDigit:
    """Тесты get_digit"""

    def test_in_range_most_significant_first(self) -> None:
        """Индекс 0 — старший разряд"""
        number = NaturalNumber("42")
        assert number.get_digit(0) == 4
        assert number.get_digit(1) == 2

    @pytest.mark.parametrize("index", [-1, -2, 2, 5, 10**6])
    def test_out_of_range_returns_zero(self, index: int) -> None:
        """Индекс вне диапазона возвращает 0 (не ошибка)"""
        assert NaturalNumber("42").get_digit(index) == 0

    def test_returns_int(self) -> None:
        digit = NaturalNumber("907").get_digit(1)
        assert digit == 0
        assert isinstance(digit, int)


class TestCountZeros:
    """Тесты count_zeros"""

    @pytest.mark.parametrize(
        "text,expected",
        [("1002003", 4), ("102003", 3), ("123", 0), ("100", 2), ("10101", 2)],
    )
    def test_count(self, text: str, expected: int) -> None:
        assert NaturalNumber(text).count_zeros() == expected


class TestLengthAndText:
    """Длина и строковое представление"""

    def test_length_and_len(self) -> None:
        number = NaturalNumber("12345")
        assert number.length == 5
        assert len(number) == 5

    def test_str_value_to_text(self) -> None:
        number = NaturalNumber(" 77 ")
        assert str(number) == number.value == number.to_text() == "77"

    def test_repr(self) -> None:
        assert repr(NaturalNumber("12")) == "NaturalNumber('12')"


# =============================================================================
# REVERSAL
# =============================================================================


class TestReversed:
    """Тесты reversed"""

    def test_simple(self) -> None:
        assert NaturalNumber("123").reversed().to_text() == "321"

    def test_double_reversal_restores(self) -> None:
        """Двойной разворот без нулей на конце возвращает исходное"""
        original = NaturalNumber("123")
        assert original.reversed().reversed().to_text() == original.to_text()

    def test_trailing_zero_dropped(self) -> None:
        """120 → 021 → 21"""
        assert NaturalNumber("120").reversed().to_text() == "21"

    def test_multiple_trailing_zeros_dropped(self) -> None:
        """100 → 001 → 1"""
        assert NaturalNumber("100").reversed().to_text() == "1"

    def test_internal_zeros_kept(self) -> None:
        assert NaturalNumber("1002003").reversed().to_text() == "3002001"

    def test_receiver_unchanged(self) -> None:
        """reversed не меняет исходный объект"""
        number = NaturalNumber("120")
        result = number.reversed()
        assert number.to_text() == "120"
        assert result is not number
        assert isinstance(result, NaturalNumber)


class TestReverseInPlace:
    """Тесты reverse_in_place"""

    def test_mutates_and_returns_self(self) -> None:
        """500 → 5, возвращается тот же объект"""
        number = NaturalNumber("500")
        returned = number.reverse_in_place()
        assert returned is number
        assert number.to_text() == "5"
        assert number.length == 1

    def test_chaining(self) -> None:
        number = NaturalNumber("1230")
        assert number.reverse_in_place().reverse_in_place() is number
        # "1230" → "321" → "123"
        assert number.to_text() == "123"

    def test_same_result_as_reversed(self) -> None:
        for text in ["1", "10", "1002003", "987650"]:
            assert NaturalNumber(text).reverse_in_place() == NaturalNumber(text).reversed()


# =============================================================================
# EQUALITY & SNAPSHOT
# =============================================================================


class TestEquality:
    """Равенство по строке цифр"""

    def test_equal_by_digits(self) -> None:
        assert NaturalNumber("12") == NaturalNumber(12)
        assert NaturalNumber("12") != NaturalNumber("21")

    def test_not_equal_to_plain_string(self) -> None:
        assert NaturalNumber("12") != "12"

    def test_unhashable(self) -> None:
        """Изменяемое значение не хэшируется"""
        with pytest.raises(TypeError):
            hash(NaturalNumber("12"))


class TestSnapshot:
    """Снимок NaturalNumberSnapshot"""

    def test_snapshot_fields(self) -> None:
        snapshot = NaturalNumber("1002003").snapshot()
        assert snapshot.digits == "1002003"
        assert snapshot.length == 7
        assert snapshot.zero_count == 4

    def test_snapshot_frozen(self) -> None:
        snapshot = NaturalNumber("12").snapshot()
        with pytest.raises(ValidationError):
            snapshot.digits = "13"

    def test_snapshot_independent_of_mutation(self) -> None:
        number = NaturalNumber("120")
        snapshot = number.snapshot()
        number.reverse_in_place()
        assert snapshot.digits == "120"

    def test_from_snapshot(self) -> None:
        snapshot = NaturalNumberSnapshot(digits="305", length=3, zero_count=1)
        assert NaturalNumber.from_snapshot(snapshot) == NaturalNumber("305")

    def test_snapshot_json(self) -> None:
        snapshot = NaturalNumber("10").snapshot()
        restored = NaturalNumberSnapshot.model_validate_json(snapshot.model_dump_json())
        assert restored == snapshot

    @pytest.mark.parametrize(
        "data",
        [
            {"digits": "012", "length": 3, "zero_count": 1},
            {"digits": "12", "length": 3, "zero_count": 0},
            {"digits": "12", "length": 2, "zero_count": 1},
            {"digits": "", "length": 0, "zero_count": 0},
        ],
    )
    def test_inconsistent_snapshot_rejected(self, data: dict) -> None:
        with pytest.raises(ValidationError):
            NaturalNumberSnapshot(**data)
