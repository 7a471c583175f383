"""
Contract Validation Module

Модуль для валидации JSON контрактов состояния счётчика.
"""

from .validators import (
    ContractValidator,
    CounterStateValidator,
    SchemaLoader,
    validate_counter_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CounterStateValidator",
    # Functions
    "validate_counter_state",
]
