"""
CounterState — Снапшот состояния счётчика со смешанным основанием

Immutable Pydantic модель, представляющая состояние MixedRadixCounter.
Полная совместимость с JSON Schema (contracts/schema/counter_state.json).
"""

from pydantic import BaseModel, Field, field_validator, model_validator


class CounterState(BaseModel):
    """
    Снапшот счётчика: цифры, пределы и ширина цифры.

    Порядок разрядов как у счётчика: индекс 0 — старший разряд.
    """

    values: list[int] = Field(..., description="Текущие цифры (старший разряд первым)")
    limits: list[int] = Field(..., description="Исключающие пределы разрядов")
    digit_bits: int = Field(64, gt=0, description="Нативная ширина цифры (биты)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("values", "limits")
    @classmethod
    def validate_non_negative_entries(cls, v: list[int]) -> list[int]:
        """Цифры и пределы беззнаковые."""
        for index, item in enumerate(v):
            if item < 0:
                raise ValueError(f"entry [{index}] must be non-negative, got {item}")
        return v

    @model_validator(mode="after")
    def validate_ranges(self) -> "CounterState":
        """
        Проверка инвариантов счётчика:
        - len(values) == len(limits)
        - 1 <= limits[i] <= 2**digit_bits - 1
        - values[i] < limits[i]
        """
        if len(self.values) != len(self.limits):
            raise ValueError(
                f"values and limits must have equal length, "
                f"got {len(self.values)} and {len(self.limits)}"
            )

        digit_max = (1 << self.digit_bits) - 1
        for index, (value, limit) in enumerate(zip(self.values, self.limits)):
            if limit == 0 or limit > digit_max:
                raise ValueError(f"limits[{index}] must be in [1, {digit_max}], got {limit}")
            if value >= limit:
                raise ValueError(f"values[{index}] must be < {limit}, got {value}")

        return self

    @property
    def width(self) -> int:
        """Количество разрядов."""
        return len(self.limits)
