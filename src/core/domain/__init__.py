"""
Domain models and value objects.

Contains the immutable snapshot model of a mixed-radix counter.
"""

from src.core.domain.counter_state import CounterState

__all__ = [
    "CounterState",
]
