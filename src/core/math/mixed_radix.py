"""
Mixed-Radix Counter — счётчик со смешанным основанием

Модуль реализует счётчик-«одометр»: фиксированная последовательность цифр,
каждая со своим исключающим пределом (основанием). Пример: секунды
переполняются на 60, минуты на 60, часы на 24, дни на 365.

Порядок разрядов: индекс 0 — старший разряд, индекс N-1 — младший.
    limits = [3, 4, 5], values = [0, 1, 4]  --increment-->  [0, 2, 0]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(values) == len(limits)
2. 0 <= values[i] < limits[i] для каждого i
3. 1 <= limits[i] <= digit_max (нативная беззнаковая ширина цифры)
4. Переполнение атомарно: CounterOverflow, состояние счётчика не меняется
5. add(k) эквивалентен k вызовам increment() (если нет переполнения)
"""

import logging
from dataclasses import dataclass
from typing import Final, Iterable, Iterator, Optional

from src.core.domain.counter_state import CounterState

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Нативная ширина цифры по умолчанию (u64)
DEFAULT_DIGIT_BITS: Final[int] = 64


@dataclass(frozen=True)
class CounterConfig:
    """Конфигурация счётчика.

    digit_bits задаёт нативную беззнаковую ширину одной цифры: пределы,
    значения и amount для add() не могут превышать 2**digit_bits - 1.
    """

    digit_bits: int = DEFAULT_DIGIT_BITS

    def __post_init__(self) -> None:
        if isinstance(self.digit_bits, bool) or not isinstance(self.digit_bits, int):
            raise ValueError(f"digit_bits must be an integer, got {self.digit_bits!r}")
        if self.digit_bits <= 0:
            raise ValueError(f"digit_bits must be positive, got {self.digit_bits}")

    @property
    def digit_max(self) -> int:
        """Максимальное значение цифры (2**digit_bits - 1)."""
        return (1 << self.digit_bits) - 1


DEFAULT_COUNTER_CONFIG: Final[CounterConfig] = CounterConfig()


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CounterError(ValueError):
    """Базовая ошибка счётчика со смешанным основанием."""


class LengthMismatch(CounterError):
    """Последовательности values и limits имеют разную длину."""

    def __init__(self, values_len: int, limits_len: int):
        self.values_len = values_len
        self.limits_len = limits_len
        super().__init__(
            f"values and limits must have equal length, "
            f"got {values_len} values and {limits_len} limits"
        )


class InvalidLimit(CounterError):
    """
    Недопустимый предел разряда.

    Предел 0 не допускает ни одного значения цифры, поэтому такой счётчик
    не может быть построен. Также отвергаются нецелые пределы и пределы
    шире нативной ширины цифры.
    """

    def __init__(self, index: int, limit: object, reason: str = "must be >= 1"):
        self.index = index
        self.limit = limit
        super().__init__(f"limits[{index}] {reason}, got {limit!r}")


class ValueOutOfRange(CounterError):
    """Начальное значение цифры вне диапазона [0, limit)."""

    def __init__(self, index: int, value: object, limit: int):
        self.index = index
        self.value = value
        self.limit = limit
        super().__init__(
            f"values[{index}] must be an integer in [0, {limit}), got {value!r}"
        )


class CounterOverflow(CounterError):
    """
    Перенос вышел за старший разряд.

    carry — величина переноса, который не поместился в счётчик
    (1 для increment(), total // limit старшего разряда для add()).
    Счётчик при этом остаётся в состоянии до вызова.
    """

    def __init__(self, carry: int):
        self.carry = carry
        super().__init__(f"counter overflow: carry {carry} past the most significant digit")


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _is_unsigned(value: object) -> bool:
    # bool — подкласс int, но цифрой не является
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_limits(limits: Iterable[int], config: CounterConfig = DEFAULT_COUNTER_CONFIG) -> tuple[int, ...]:
    """
    Валидация пределов разрядов.

    Args:
        limits: Пределы (исключающие) для каждого разряда
        config: Конфигурация ширины цифры

    Returns:
        Пределы в виде кортежа

    Raises:
        InvalidLimit: Если предел не целое число в [1, digit_max]
    """
    limits = tuple(limits)
    digit_max = config.digit_max

    for index, limit in enumerate(limits):
        if not _is_unsigned(limit):
            raise InvalidLimit(index, limit, reason="must be a non-negative integer")
        if limit == 0:
            raise InvalidLimit(index, limit)
        if limit > digit_max:
            raise InvalidLimit(index, limit, reason=f"must be <= {digit_max}")

    return limits


def validate_values(values: Iterable[int], limits: tuple[int, ...]) -> tuple[int, ...]:
    """
    Валидация значений цифр против уже проверенных пределов.

    Raises:
        LengthMismatch: Если длины не совпадают
        ValueOutOfRange: Если values[i] не в [0, limits[i])
    """
    values = tuple(values)

    if len(values) != len(limits):
        raise LengthMismatch(len(values), len(limits))

    for index, (value, limit) in enumerate(zip(values, limits)):
        if not _is_unsigned(value) or value >= limit:
            raise ValueOutOfRange(index, value, limit)

    return values


# =============================================================================
# MIXED-RADIX COUNTER
# =============================================================================


class MixedRadixCounter:
    """
    Счётчик со смешанным основанием.

    Хранит две последовательности одинаковой длины: values (текущие цифры)
    и limits (исключающий предел каждой цифры). Пределы и длина неизменны
    после создания; increment() и add() меняют values на месте.

    Политика переполнения: атомарная. Если перенос выходит за старший
    разряд, поднимается CounterOverflow и values не меняются.

    Потокобезопасность не обеспечивается: при совместном использовании
    вызывающий код сам сериализует increment()/add().

    Examples:
        >>> counter = MixedRadixCounter([3, 4, 5], values=[0, 1, 4])
        >>> counter.increment()
        >>> counter.values
        (0, 2, 0)
    """

    __slots__ = ("_values", "_limits", "_config")

    def __init__(
        self,
        limits: Iterable[int],
        values: Optional[Iterable[int]] = None,
        config: CounterConfig = DEFAULT_COUNTER_CONFIG,
    ):
        """
        Args:
            limits: Исключающие пределы разрядов (старший разряд первым)
            values: Начальные значения цифр (default: все нули)
            config: Конфигурация ширины цифры

        Raises:
            LengthMismatch: Если len(values) != len(limits)
            InvalidLimit: Если какой-либо предел равен 0 или вне ширины цифры
            ValueOutOfRange: Если values[i] >= limits[i] или отрицательно
        """
        if values is not None:
            values = tuple(values)
            limits = tuple(limits)
            # Длины проверяются раньше пределов
            if len(values) != len(limits):
                raise LengthMismatch(len(values), len(limits))

        checked_limits = validate_limits(limits, config)

        if values is None:
            checked_values = (0,) * len(checked_limits)
        else:
            checked_values = validate_values(values, checked_limits)

        self._limits: tuple[int, ...] = checked_limits
        self._values: list[int] = list(checked_values)
        self._config = config

    @classmethod
    def from_limits(
        cls,
        limits: Iterable[int],
        config: CounterConfig = DEFAULT_COUNTER_CONFIG,
    ) -> "MixedRadixCounter":
        """Счётчик с нулевыми цифрами."""
        return cls(limits, config=config)

    @classmethod
    def from_values(
        cls,
        values: Iterable[int],
        limits: Iterable[int],
        config: CounterConfig = DEFAULT_COUNTER_CONFIG,
    ) -> "MixedRadixCounter":
        """Счётчик с явно заданными цифрами."""
        return cls(limits, values=values, config=config)

    @classmethod
    def from_state(cls, state: CounterState) -> "MixedRadixCounter":
        """
        Восстановление счётчика из снапшота.

        Проходит ту же валидацию, что и конструктор.
        """
        return cls(
            state.limits,
            values=state.values,
            config=CounterConfig(digit_bits=state.digit_bits),
        )

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def values(self) -> tuple[int, ...]:
        """Текущие цифры (только чтение)."""
        return tuple(self._values)

    @property
    def limits(self) -> tuple[int, ...]:
        """Пределы разрядов (только чтение)."""
        return self._limits

    @property
    def config(self) -> CounterConfig:
        return self._config

    @property
    def capacity(self) -> int:
        """Количество представимых состояний: произведение пределов."""
        result = 1
        for limit in self._limits:
            result *= limit
        return result

    def to_int(self) -> int:
        """
        Закодированное значение счётчика.

        Returns:
            sum(values[i] * prod(limits[i+1:])), в диапазоне [0, capacity)

        Examples:
            >>> MixedRadixCounter([24, 60, 60], values=[1, 2, 3]).to_int()
            3723
        """
        result = 0
        for value, limit in zip(self._values, self._limits):
            result = result * limit + value
        return result

    def is_max(self) -> bool:
        """True если следующий increment() переполнит счётчик."""
        return all(value == limit - 1 for value, limit in zip(self._values, self._limits))

    def snapshot(self) -> CounterState:
        """Immutable снапшот текущего состояния."""
        return CounterState(
            values=list(self._values),
            limits=list(self._limits),
            digit_bits=self._config.digit_bits,
        )

    def copy(self) -> "MixedRadixCounter":
        """Независимая копия счётчика."""
        return type(self)(self._limits, values=self._values, config=self._config)

    __copy__ = copy

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def increment(self) -> None:
        """
        Увеличение на 1 с переносом.

        Младший разряд, достигший предела, обнуляется, и перенос уходит
        в следующий старший разряд.

        Raises:
            CounterOverflow: Если все разряды на максимуме (carry=1).
                Счётчик не меняется. Пустой счётчик переполняется всегда.
        """
        values = self._values
        limits = self._limits

        # Младший разряд, который ещё может вырасти без переноса
        for i in range(len(values) - 1, -1, -1):
            if values[i] + 1 < limits[i]:
                break
        else:
            logger.debug("increment overflow: values=%s limits=%s", values, limits)
            raise CounterOverflow(1)

        values[i] += 1
        for j in range(i + 1, len(values)):
            values[j] = 0

    def add(self, amount: int) -> None:
        """
        Прибавление произвольной величины за O(N).

        Для каждого разряда от младшего к старшему:
            total = value + carry
            value = total % limit
            carry = total // limit

        Результат совпадает с amount вызовами increment().

        Args:
            amount: Неотрицательное целое, не шире нативной ширины цифры

        Raises:
            ValueError: Если amount отрицательный, нецелый или > digit_max
            CounterOverflow: Если после старшего разряда остался перенос.
                Счётчик не меняется.

        Examples:
            >>> c = MixedRadixCounter([2**64 - 1, 365, 24, 60, 60])
            >>> c.add(69_413_798)
            >>> c.values
            (2, 73, 9, 36, 38)
        """
        if not _is_unsigned(amount):
            raise ValueError(f"amount must be a non-negative integer, got {amount!r}")
        if amount > self._config.digit_max:
            raise ValueError(f"amount must be <= {self._config.digit_max}, got {amount}")

        values = list(self._values)
        carry = amount

        for i in range(len(values) - 1, -1, -1):
            if carry == 0:
                break
            carry, values[i] = divmod(values[i] + carry, self._limits[i])

        if carry != 0:
            logger.debug(
                "add overflow: amount=%d carry=%d values=%s limits=%s",
                amount,
                carry,
                self._values,
                self._limits,
            )
            raise CounterOverflow(carry)

        self._values = values

    # -------------------------------------------------------------------------
    # Sequence protocol over values
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._limits)

    def __getitem__(self, index):
        return self.values[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    # -------------------------------------------------------------------------
    # Comparison: лексикографически по (values, limits)
    # -------------------------------------------------------------------------

    def _key(self) -> tuple[tuple[int, ...], tuple[int, ...]]:
        return (tuple(self._values), self._limits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MixedRadixCounter):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MixedRadixCounter):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, MixedRadixCounter):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, MixedRadixCounter):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, MixedRadixCounter):
            return NotImplemented
        return self._key() >= other._key()

    # Мутабельный объект
    __hash__ = None

    def __repr__(self) -> str:
        return f"MixedRadixCounter(limits={list(self._limits)}, values={self._values})"
