"""
Contract Validation Module

Модуль для валидации JSON контрактов экспортируемых значений.
"""

from .validators import (
    ContractValidator,
    NaturalNumberValidator,
    SchemaLoader,
    validate_natural_number,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NaturalNumberValidator",
    # Functions
    "validate_natural_number",
]
