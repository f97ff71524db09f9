"""Parabolic stop and reverse indicator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from tacalc.core import Action, Candle, IndicatorConfig, IndicatorInstance, IndicatorResult


@dataclass
class ParabolicSAR(IndicatorConfig):
    """Parabolic SAR configuration.

    Produces two values, the SAR and the trend (-1.0 or 1.0), and one signal:
    full buy when the trend turns up, full sell when it turns down.
    """

    NAME: ClassVar[str] = "ParabolicSAR"

    af_step: float = 0.02
    af_max: float = 0.2

    def validate(self) -> bool:
        return self.af_step < self.af_max

    def init(self, candle: Candle) -> ParabolicSARInstance:
        """Validate the configuration and start an instance at ``candle``."""
        return super().init(candle)

    def size(self) -> tuple[int, int]:
        return (2, 1)

    def _instantiate(self, candle: Candle) -> ParabolicSARInstance:
        return ParabolicSARInstance(self, candle)


ParabolicStopAndReverse = ParabolicSAR


class ParabolicSARInstance(IndicatorInstance):
    """A running parabolic SAR."""

    def __init__(self, config: ParabolicSAR, candle: Candle) -> None:
        super().__init__(config)
        self._af_step = config.af_step
        self._af_max = config.af_max
        self._trend = 1
        self._trend_inc = 1
        self._low = candle.low
        self._high = candle.high
        self._sar = candle.low
        self._prev_high = candle.high
        self._prev_low = candle.low
        self._prev_trend = 0

    def next(self, candle: Candle) -> IndicatorResult:
        if self._trend > 0:
            if self._high < candle.high:
                self._high = candle.high
                self._trend_inc += 1
            if candle.low < self._sar:
                self._trend = -self._trend
                self._low = candle.low
                self._trend_inc = 1
                self._sar = self._high
        elif self._trend < 0:
            if self._low > candle.low:
                self._low = candle.low
                self._trend_inc += 1
            if candle.high > self._sar:
                self._trend = -self._trend
                self._high = candle.high
                self._trend_inc = 1
                self._sar = self._low

        trend = self._trend
        sar = self._sar

        af = min(self._af_max, self._af_step * self._trend_inc)

        if self._trend > 0:
            self._sar = af * (self._high - self._sar) + self._sar
            self._sar = min(self._sar, candle.low, self._prev_low)
        elif self._trend < 0:
            self._sar = af * (self._low - self._sar) + self._sar
            self._sar = max(self._sar, candle.high, self._prev_high)

        self._prev_high = candle.high
        self._prev_low = candle.low

        signal = trend if self._prev_trend != trend else 0
        self._prev_trend = trend

        return IndicatorResult(values=(sar, float(trend)), signals=(Action(signal),))