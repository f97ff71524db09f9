"""Money flow index indicator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from tacalc.core import (
    Action,
    Candle,
    IndicatorConfig,
    IndicatorInstance,
    IndicatorResult,
    Window,
)
from tacalc.cross import Cross


def _money_flow(candle: Candle, previous: Candle) -> tuple[float, float]:
    """Return the positive and negative money flow of ``candle`` against ``previous``."""
    tp1 = candle.tp()
    tp2 = previous.tp()
    positive = candle.volume if tp1 > tp2 else 0.0
    negative = candle.volume if tp1 < tp2 else 0.0
    return positive, negative


@dataclass
class MoneyFlowIndex(IndicatorConfig):
    """Money flow index configuration.

    Produces three values: the upper bound, the index in [0, 1] and the lower
    bound. The first signal fires when the index enters a zone (buy for the
    lower zone, sell for the upper one), the second when it leaves a zone.
    """

    NAME: ClassVar[str] = "MoneyFlowIndex"

    period: int = 14
    zone: float = 0.2

    def validate(self) -> bool:
        return 0.0 <= self.zone <= 0.5

    def init(self, candle: Candle) -> MoneyFlowIndexInstance:
        """Validate the configuration and start an instance at ``candle``."""
        return super().init(candle)

    def size(self) -> tuple[int, int]:
        return (3, 2)

    def _instantiate(self, candle: Candle) -> MoneyFlowIndexInstance:
        return MoneyFlowIndexInstance(self, candle)


class MoneyFlowIndexInstance(IndicatorInstance):
    """A running money flow index."""

    def __init__(self, config: MoneyFlowIndex, candle: Candle) -> None:
        super().__init__(config)
        self._zone = config.zone
        self._window = Window(config.period, candle)
        self._prev_candle = candle
        self._last_prev_candle = candle
        self._pmf = 0.0
        self._nmf = 0.0
        self._cross_lower = Cross()
        self._cross_upper = Cross()

    def next(self, candle: Candle) -> IndicatorResult:
        pos, neg = _money_flow(candle, self._prev_candle)
        last_candle = self._window.push(candle)
        left_pos, left_neg = _money_flow(last_candle, self._last_prev_candle)

        self._last_prev_candle = last_candle
        self._prev_candle = candle

        self._pmf += pos - left_pos
        self._nmf += neg - left_neg

        mfr = 1.0 if self._nmf == 0.0 else self._pmf / self._nmf
        value = 1.0 - 1.0 / (1.0 + mfr)

        upper = 1.0 - self._zone
        lower = self._zone

        cross_upper = self._cross_upper.next(value, upper).analog()
        cross_lower = self._cross_lower.next(value, lower).analog()

        enters_zone = int(cross_lower < 0) - int(cross_upper > 0)
        leaves_zone = int(cross_lower > 0) - int(cross_upper < 0)

        return IndicatorResult(
            values=(upper, value, lower),
            signals=(Action(enters_zone), Action(leaves_zone)),
        )