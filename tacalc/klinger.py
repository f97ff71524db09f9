"""Klinger volume oscillator indicator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from tacalc.averages import MA, MAKind
from tacalc.core import Candle, IndicatorConfig, IndicatorInstance, IndicatorResult
from tacalc.cross import Cross


def _sign(value: float) -> float:
    if value > 0.0:
        return 1.0
    if value < 0.0:
        return -1.0
    return 0.0


@dataclass
class KlingerVolumeOscillator(IndicatorConfig):
    """Klinger volume oscillator configuration.

    Produces two values, the oscillator and its signal line, and two signals:
    the oscillator crossing zero, and the oscillator crossing the signal line.
    """

    NAME: ClassVar[str] = "KlingerVolumeOscillator"

    ma1: MA = field(default_factory=lambda: MA(MAKind.EMA, 34))
    ma2: MA = field(default_factory=lambda: MA(MAKind.EMA, 55))
    signal: MA = field(default_factory=lambda: MA(MAKind.EMA, 13))

    def validate(self) -> bool:
        return (
            self.ma1.is_similar_to(self.ma2)
            and self.ma1.period > 1
            and self.signal.period > 1
            and self.ma1.period < self.ma2.period
        )

    def init(self, candle: Candle) -> KlingerVolumeOscillatorInstance:
        """Validate the configuration and start an instance at ``candle``."""
        return super().init(candle)

    def size(self) -> tuple[int, int]:
        return (2, 2)

    def _instantiate(self, candle: Candle) -> KlingerVolumeOscillatorInstance:
        return KlingerVolumeOscillatorInstance(self, candle)


class KlingerVolumeOscillatorInstance(IndicatorInstance):
    """A running Klinger volume oscillator."""

    def __init__(self, config: KlingerVolumeOscillator, candle: Candle) -> None:
        super().__init__(config)
        self._ma1 = config.ma1.init(0.0)
        self._ma2 = config.ma2.init(0.0)
        self._ma3 = config.signal.init(0.0)
        self._cross1 = Cross()
        self._cross2 = Cross()
        self._last_tp = candle.tp()

    def next(self, candle: Candle) -> IndicatorResult:
        tp = candle.tp()
        direction = _sign(tp - self._last_tp)
        self._last_tp = tp

        vol = direction * candle.volume

        ko = self._ma1.next(vol) - self._ma2.next(vol)
        ma3 = self._ma3.next(ko)

        s1 = self._cross1.next(ko, 0.0)
        s2 = self._cross2.next(ko, ma3)

        return IndicatorResult(values=(ko, ma3), signals=(s1, s2))