"""
Core math modules

Целочисленные примитивы: счётчик со смешанным основанием.
"""

from src.core.math.mixed_radix import (
    # Configuration
    DEFAULT_COUNTER_CONFIG,
    DEFAULT_DIGIT_BITS,
    CounterConfig,
    # Exceptions
    CounterError,
    CounterOverflow,
    InvalidLimit,
    LengthMismatch,
    ValueOutOfRange,
    # Counter
    MixedRadixCounter,
    # Validation
    validate_limits,
    validate_values,
)

__all__ = [
    # Configuration
    "DEFAULT_COUNTER_CONFIG",
    "DEFAULT_DIGIT_BITS",
    "CounterConfig",
    # Exceptions
    "CounterError",
    "CounterOverflow",
    "InvalidLimit",
    "LengthMismatch",
    "ValueOutOfRange",
    # Counter
    "MixedRadixCounter",
    # Validation
    "validate_limits",
    "validate_values",
]
