"""Base class and type tags for moving averages."""

import abc
from enum import Enum

from streamdesk.indicators.base import InvalidConfiguration


class MovingAverageType(str, Enum):
    """Tags selecting a moving-average variant."""

    SIMPLE = "SIMPLE"
    EXPONENTIAL = "EXPONENTIAL"
    WILDER = "WILDER"
    DOUBLE_EXPONENTIAL = "DOUBLE_EXPONENTIAL"

    def __str__(self) -> str:
        return self.value


def validate_period(period: int) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(period, bool) or not isinstance(period, int):
        raise InvalidConfiguration(f"period must be an int, got {period!r}")
    if period <= 0:
        raise InvalidConfiguration("period must be > 0")
    return period


class MovingAverage(abc.ABC):
    """
    Smooths a scalar stream into a single running value.

    Subclasses implement `_update(value)` and `_reset()`; the base class
    tracks the input count and the initialization flag.
    """

    ma_type: MovingAverageType

    def __init__(self, period: int):
        self.period = validate_period(period)
        self.count: int = 0
        self._value: float = 0.0
        self._has_inputs: bool = False
        self._is_initialized: bool = False

    @property
    def value(self) -> float:
        """Current smoothed value, 0.0 before any input."""
        return self._value

    def update_raw(self, value: float) -> None:
        """Fold one observation into the running average."""
        self._update(float(value))
        self.count += 1

        if not self._is_initialized:
            self._has_inputs = True
            if self.count >= self.period:
                self._is_initialized = True

    def has_inputs(self) -> bool:
        return self._has_inputs

    def is_initialized(self) -> bool:
        return self._is_initialized

    def reset(self) -> None:
        self._reset()
        self.count = 0
        self._value = 0.0
        self._has_inputs = False
        self._is_initialized = False

    @abc.abstractmethod
    def _update(self, value: float) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def _reset(self) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.period})"
