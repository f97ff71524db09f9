"""Methods computed over a fixed window of past values."""

from __future__ import annotations

from collections.abc import Iterable

from tacalc.core import PERIOD_MAX, Window, WrongMethodParametersError


class Derivative:
    """Average change per step over the last ``length`` values."""

    __slots__ = ("_divider", "_window")

    def __init__(self, length: int = 1, value: float = 0.0) -> None:
        if not 1 <= length <= PERIOD_MAX:
            raise WrongMethodParametersError(f"length must be in [1; {PERIOD_MAX}], got {length}")
        self._divider = 1.0 / length
        self._window = Window(length, value)

    def next(self, value: float) -> float:
        """Consume ``value`` and return the derivative."""
        prev_value = self._window.push(value)
        return (value - prev_value) * self._divider


Differential = Derivative


class Conv:
    """Convolution moving average with the given weights; the last weight applies to the newest value."""

    __slots__ = ("_weights", "_window", "_wsum_invert")

    def __init__(self, weights: Iterable[float], value: float) -> None:
        weights = tuple(weights)
        if not 1 <= len(weights) <= PERIOD_MAX:
            raise WrongMethodParametersError(
                f"weights count must be in [1; {PERIOD_MAX}], got {len(weights)}"
            )
        total = sum(weights)
        self._wsum_invert = 1.0 / total if total else float("inf")
        self._weights = weights
        self._window = Window(len(weights), value)

    def next(self, value: float) -> float:
        """Consume ``value`` and return the weighted average."""
        self._window.push(value)
        return self.peek()

    def peek(self) -> float:
        """Return the weighted average of the current window."""
        total = sum(v * w for v, w in zip(self._window, reversed(self._weights)))
        return total * self._wsum_invert