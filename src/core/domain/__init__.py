"""
Domain models and value objects.

Contains the NaturalNumber value type and its error kinds.
"""

from src.core.domain.exceptions import (
    NaturalNumberError,
    NaturalNumberValidationError,
    UnsupportedInputError,
)
from src.core.domain.natural_number import (
    NATURAL_NUMBER_PATTERN,
    TRIM_CHARACTERS,
    ZERO_DIGITS,
    NaturalNumber,
    NaturalNumberSnapshot,
    int_to_digits,
    trim_input,
)

__all__ = [
    # Value type
    "NATURAL_NUMBER_PATTERN",
    "TRIM_CHARACTERS",
    "ZERO_DIGITS",
    "NaturalNumber",
    "NaturalNumberSnapshot",
    "trim_input",
    "int_to_digits",
    # Exceptions
    "NaturalNumberError",
    "NaturalNumberValidationError",
    "UnsupportedInputError",
]
