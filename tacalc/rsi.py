"""Relative strength index indicator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from tacalc.averages import MA, MAKind
from tacalc.core import Action, Candle, IndicatorConfig, IndicatorInstance, IndicatorResult, Source
from tacalc.cross import Cross


@dataclass
class RelativeStrengthIndex(IndicatorConfig):
    """Relative strength index configuration.

    Produces one value in [0, 1] and two signals. The first fires when the
    value enters an over-zone (sell for the upper one, buy for the lower one),
    the second when it leaves an over-zone.
    """

    NAME: ClassVar[str] = "RelativeStrengthIndex"

    ma: MA = field(default_factory=lambda: MA(MAKind.EMA, 14))
    zone: float = 0.3
    source: Source = Source.CLOSE

    def validate(self) -> bool:
        return self.ma.period > 2 and 0.0 < self.zone <= 0.5

    def init(self, candle: Candle) -> RelativeStrengthIndexInstance:
        """Validate the configuration and start an instance at ``candle``."""
        return super().init(candle)

    def size(self) -> tuple[int, int]:
        return (1, 2)

    def _instantiate(self, candle: Candle) -> RelativeStrengthIndexInstance:
        return RelativeStrengthIndexInstance(self, candle)


RSI = RelativeStrengthIndex


class RelativeStrengthIndexInstance(IndicatorInstance):
    """A running relative strength index."""

    def __init__(self, config: RelativeStrengthIndex, candle: Candle) -> None:
        super().__init__(config)
        self._source = config.source
        self._zone = config.zone
        self._previous_input = candle.source(config.source)
        self._posma = config.ma.init(0.0)
        self._negma = config.ma.init(0.0)
        self._cross_upper = Cross(0.5, 1.0 - config.zone)
        self._cross_lower = Cross(0.5, config.zone)

    def next(self, candle: Candle) -> IndicatorResult:
        src = candle.source(self._source)
        change = src - self._previous_input
        self._previous_input = src

        pos = self._posma.next(max(change, 0.0))
        neg = -self._negma.next(min(change, 0.0))

        value = pos / (pos + neg) if pos != 0.0 or neg != 0.0 else 0.5

        oversold = self._cross_lower.next(value, self._zone).analog()
        overbought = self._cross_upper.next(value, 1.0 - self._zone).analog()

        signal1 = int(oversold < 0) - int(overbought > 0)
        signal2 = int(oversold > 0) - int(overbought < 0)

        return IndicatorResult(values=(value,), signals=(Action(signal1), Action(signal2)))