"""Conversions of candle series: Heikin Ashi and timeframe collapsing."""

from __future__ import annotations

from tacalc.core import Candle, WrongMethodParametersError


class HeikinAshi:
    """Turns ordinary candles into Heikin Ashi candles."""

    __slots__ = ("_next_open",)

    def __init__(self, candle: Candle) -> None:
        # Starting from ohlc4 keeps the output stable for a constant input.
        self._next_open = candle.ohlc4()

    def next(self, candle: Candle) -> Candle:
        """Consume ``candle`` and return its Heikin Ashi counterpart."""
        open_ = self._next_open
        close = candle.ohlc4()
        self._next_open = (open_ + close) * 0.5
        return Candle(
            open=open_,
            high=max(candle.high, open_),
            low=min(candle.low, open_),
            close=close,
            volume=candle.volume,
        )


class CollapseTimeframe:
    """Joins every ``period`` consecutive candles into one."""

    __slots__ = ("_current", "_index", "_period")

    def __init__(self, period: int, candle: Candle | None = None) -> None:
        if period <= 0:
            raise WrongMethodParametersError(f"period must be positive, got {period}")
        self._current: Candle | None = None
        self._index = 0
        self._period = period

    def next(self, candle: Candle) -> Candle | None:
        """Consume ``candle``; return the joined candle once ``period`` have arrived."""
        self._current = candle if self._current is None else self._current + candle
        self._index += 1
        if self._index == self._period:
            self._index = 0
            joined, self._current = self._current, None
            return joined
        return None