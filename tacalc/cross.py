"""Detection of one series crossing another."""

from __future__ import annotations

from tacalc.core import Action


class CrossAbove:
    """Signals a full buy when ``value`` crosses ``base`` upwards."""

    __slots__ = ("_last_delta",)

    def __init__(self, value: float = 0.0, base: float = 0.0) -> None:
        self._last_delta = value - base

    def binary(self, value1: float, value2: float) -> bool:
        """Return True when ``value1`` has just crossed ``value2`` upwards."""
        last_delta = self._last_delta
        current_delta = value1 - value2
        self._last_delta = current_delta
        return last_delta < 0.0 and current_delta >= 0.0

    def next(self, value: float, base: float) -> Action:
        return Action(int(self.binary(value, base)))


class CrossUnder:
    """Signals a full buy when ``value`` crosses ``base`` downwards."""

    __slots__ = ("_last_delta",)

    def __init__(self, value: float = 0.0, base: float = 0.0) -> None:
        self._last_delta = value - base

    def binary(self, value1: float, value2: float) -> bool:
        """Return True when ``value1`` has just crossed ``value2`` downwards."""
        last_delta = self._last_delta
        current_delta = value1 - value2
        self._last_delta = current_delta
        return last_delta > 0.0 and current_delta <= 0.0

    def next(self, value: float, base: float) -> Action:
        return Action(int(self.binary(value, base)))


class Cross:
    """Buy when ``value`` crosses ``base`` upwards, sell when downwards."""

    __slots__ = ("_up", "_down")

    def __init__(self, value: float = 0.0, base: float = 0.0) -> None:
        self._up = CrossAbove(value, base)
        self._down = CrossUnder(value, base)

    def next(self, value: float, base: float) -> Action:
        up = self._up.binary(value, base)
        down = self._down.binary(value, base)
        return Action(int(up) - int(down))