"""Accumulation/distribution index."""

from __future__ import annotations

from tacalc.core import PERIOD_MAX, Candle, Window, WrongMethodParametersError


class ADI:
    """Accumulation/distribution index over the last ``length`` candles.

    The index adds up ``clv * volume`` for every candle. With ``length == 0``
    it never forgets a candle; otherwise only the last ``length`` candles count.
    """

    __slots__ = ("_cmf_sum", "_window")

    def __init__(self, length: int, candle: Candle) -> None:
        if not 0 <= length <= PERIOD_MAX:
            raise WrongMethodParametersError(f"length must be in [0; {PERIOD_MAX}], got {length}")
        if length > 0:
            clvv = candle.clv() * candle.volume
            self._cmf_sum = clvv * length
            self._window = Window(length, clvv)
        else:
            self._cmf_sum = 0.0
            self._window = Window.empty()

    def next(self, candle: Candle) -> float:
        """Consume ``candle`` and return the index."""
        clvv = candle.clv() * candle.volume
        self._cmf_sum += clvv
        if not self._window.is_empty():
            self._cmf_sum -= self._window.push(clvv)
        return self.peek()

    def peek(self) -> float:
        """Return the last computed index."""
        return self._cmf_sum