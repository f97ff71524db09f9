"""Exponential moving averages and a selector that builds them by name."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from tacalc.core import PERIOD_MAX, WrongMethodParametersError


def _check_length(length: int) -> int:
    if not 1 <= length <= PERIOD_MAX:
        raise WrongMethodParametersError(f"length must be in [1; {PERIOD_MAX}], got {length}")
    return length


class EMA:
    """Exponential moving average of a given length."""

    __slots__ = ("_alpha", "_value")

    def __init__(self, length: int, value: float) -> None:
        _check_length(length)
        self._alpha = 2.0 / (length + 1)
        self._value = value

    def next(self, value: float) -> float:
        """Consume ``value`` and return the new average."""
        self._value = (value - self._value) * self._alpha + self._value
        return self._value

    def peek(self) -> float:
        """Return the last computed average."""
        return self._value


class DMA:
    """EMA applied to an EMA."""

    __slots__ = ("_ema", "_dma")

    def __init__(self, length: int, value: float) -> None:
        self._ema = EMA(length, value)
        self._dma = EMA(length, value)

    def next(self, value: float) -> float:
        return self._dma.next(self._ema.next(value))

    def peek(self) -> float:
        return self._dma.peek()


class TMA:
    """EMA applied three times in a row."""

    __slots__ = ("_dma", "_tma")

    def __init__(self, length: int, value: float) -> None:
        self._dma = DMA(length, value)
        self._tma = EMA(length, value)

    def next(self, value: float) -> float:
        return self._tma.next(self._dma.next(value))

    def peek(self) -> float:
        return self._tma.peek()


class DEMA:
    """Double exponential moving average: ``2 * EMA - EMA(EMA)``."""

    __slots__ = ("_ema", "_dma")

    def __init__(self, length: int, value: float) -> None:
        self._ema = EMA(length, value)
        self._dma = EMA(length, value)

    def next(self, value: float) -> float:
        self._dma.next(self._ema.next(value))
        return self.peek()

    def peek(self) -> float:
        return self._ema.peek() * 2.0 - self._dma.peek()


class TEMA:
    """Triple exponential moving average: ``3 * (EMA - DMA) + TMA``."""

    __slots__ = ("_ema", "_dma", "_tma")

    def __init__(self, length: int, value: float) -> None:
        self._ema = EMA(length, value)
        self._dma = EMA(length, value)
        self._tma = EMA(length, value)

    def next(self, value: float) -> float:
        e_ma = self._ema.next(value)
        d_ma = self._dma.next(e_ma)
        self._tma.next(d_ma)
        return self.peek()

    def peek(self) -> float:
        return (self._ema.peek() - self._dma.peek()) * 3.0 + self._tma.peek()


class MAKind(str, enum.Enum):
    """The kinds of moving average an :class:`MA` can build."""

    EMA = "ema"
    DMA = "dma"
    TMA = "tma"
    DEMA = "dema"
    TEMA = "tema"


_BUILDERS: dict[MAKind, type] = {
    MAKind.EMA: EMA,
    MAKind.DMA: DMA,
    MAKind.TMA: TMA,
    MAKind.DEMA: DEMA,
    MAKind.TEMA: TEMA,
}


@dataclass(frozen=True)
class MA:
    """A moving average kind together with its period, e.g. ``ema-12``."""

    kind: MAKind
    period: int

    @classmethod
    def parse(cls, text: str) -> MA:
        """Parse ``<kind>-<period>``, ignoring case and surrounding spaces."""
        name, sep, number = text.strip().lower().partition("-")
        if not sep:
            raise ValueError(f"moving average must look like 'ema-12', got {text!r}")
        try:
            kind = MAKind(name.strip())
        except ValueError:
            raise ValueError(f"unknown moving average {name!r}") from None
        period = int(number.strip())
        if not 0 <= period <= PERIOD_MAX:
            raise ValueError(f"period out of range: {number!r}")
        return cls(kind, period)

    def init(self, value: float) -> EMA | DMA | TMA | DEMA | TEMA:
        """Build the moving average, starting from ``value``."""
        return _BUILDERS[self.kind](self.period, value)

    def is_similar_to(self, other: MA) -> bool:
        """Return True when both describe the same kind of average."""
        return self.kind is other.kind

    def __str__(self) -> str:
        return f"{self.kind.value}-{self.period}"