"""Moving average convergence/divergence indicator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from tacalc.averages import MA, MAKind
from tacalc.core import Candle, IndicatorConfig, IndicatorInstance, IndicatorResult, Source
from tacalc.cross import Cross


@dataclass
class MACD(IndicatorConfig):
    """MACD configuration.

    Produces two values, the MACD line and its signal line, and two signals:
    the MACD crossing the signal line, and the MACD crossing zero.
    """

    NAME: ClassVar[str] = "MACD"

    ma1: MA = field(default_factory=lambda: MA(MAKind.EMA, 12))
    ma2: MA = field(default_factory=lambda: MA(MAKind.EMA, 26))
    signal: MA = field(default_factory=lambda: MA(MAKind.EMA, 9))
    source: Source = Source.CLOSE

    def validate(self) -> bool:
        return (
            self.ma1.period < self.ma2.period
            and self.ma1.period > 1
            and self.signal.period > 1
        )

    def init(self, candle: Candle) -> MACDInstance:
        """Validate the configuration and start an instance at ``candle``."""
        return super().init(candle)

    def size(self) -> tuple[int, int]:
        return (2, 2)

    def _instantiate(self, candle: Candle) -> MACDInstance:
        return MACDInstance(self, candle)


MovingAverageConvergenceDivergence = MACD


class MACDInstance(IndicatorInstance):
    """A running MACD."""

    def __init__(self, config: MACD, candle: Candle) -> None:
        super().__init__(config)
        self._source = config.source
        src = candle.source(config.source)
        self._ma1 = config.ma1.init(src)
        self._ma2 = config.ma2.init(src)
        self._ma3 = config.signal.init(0.0)
        self._cross1 = Cross()
        self._cross2 = Cross()

    def next(self, candle: Candle) -> IndicatorResult:
        src = candle.source(self._source)
        macd = self._ma1.next(src) - self._ma2.next(src)
        sigline = self._ma3.next(macd)
        signal1 = self._cross1.next(macd, sigline)
        signal2 = self._cross2.next(macd, 0.0)
        return IndicatorResult(values=(macd, sigline), signals=(signal1, signal2))