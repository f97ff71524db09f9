"""Core types shared by every method and indicator: errors, candles, signals, windows."""

from __future__ import annotations

import dataclasses
import enum
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar

PERIOD_MAX = 255
"""Largest period length a configuration accepts."""


class YataError(Exception):
    """Base class for all errors raised by this package."""


class WrongConfigError(YataError):
    """An indicator configuration failed validation."""


class WrongMethodParametersError(YataError):
    """A method was created with parameters it cannot work with."""


class ParameterParseError(YataError):
    """A configuration parameter name or value could not be understood."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"cannot set parameter {name!r} to {value!r}")
        self.name = name
        self.value = value


class Source(str, enum.Enum):
    """Which value of a candle an indicator reads."""

    CLOSE = "close"
    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    VOLUME = "volume"
    HL2 = "hl2"
    TP = "tp"
    OHLC4 = "ohlc4"

    @classmethod
    def parse(cls, text: str) -> Source:
        """Return the source named by ``text``, ignoring case."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ValueError(f"unknown source {text!r}") from None


class Action(enum.IntEnum):
    """A trading signal: full sell, nothing, or full buy."""

    SELL_ALL = -1
    NONE = 0
    BUY_ALL = 1

    def analog(self) -> int:
        """Return the signal as -1, 0 or 1."""
        return int(self)

    def is_some(self) -> bool:
        """Return True when the signal is not empty."""
        return self is not Action.NONE


@dataclass(frozen=True)
class Candle:
    """One bar of a price series."""

    open: float
    high: float
    low: float
    close: float
    volume: float

    def tp(self) -> float:
        """Typical price: the mean of high, low and close."""
        return (self.high + self.low + self.close) / 3.0

    def hl2(self) -> float:
        """The mean of high and low."""
        return (self.high + self.low) * 0.5

    def ohlc4(self) -> float:
        """The mean of open, high, low and close."""
        return (self.open + self.high + self.low + self.close) * 0.25

    def clv(self) -> float:
        """Close location value in [-1, 1]; 0 when the bar has no range."""
        if self.high == self.low:
            return 0.0
        return (2.0 * self.close - self.low - self.high) / (self.high - self.low)

    def tr_close(self, prev_close: float) -> float:
        """True range of this bar given the previous close."""
        return max(self.high, prev_close) - min(self.low, prev_close)

    def source(self, source: Source) -> float:
        """Return the value selected by ``source``."""
        match source:
            case Source.CLOSE:
                return self.close
            case Source.OPEN:
                return self.open
            case Source.HIGH:
                return self.high
            case Source.LOW:
                return self.low
            case Source.VOLUME:
                return self.volume
            case Source.HL2:
                return self.hl2()
            case Source.TP:
                return self.tp()
            case Source.OHLC4:
                return self.ohlc4()
        raise ValueError(f"unknown source {source!r}")

    def __add__(self, other: Candle) -> Candle:
        """Merge a later candle into this one, as when joining timeframes."""
        if not isinstance(other, Candle):
            return NotImplemented
        return Candle(
            open=self.open,
            high=max(self.high, other.high),
            low=min(self.low, other.low),
            close=other.close,
            volume=self.volume + other.volume,
        )


class Window:
    """Fixed-size buffer of the most recent values; index 0 is the newest."""

    __slots__ = ("_items",)

    def __init__(self, size: int, value: Any) -> None:
        if size < 0:
            raise ValueError("window size must not be negative")
        self._items: deque[Any] = deque((value for _ in range(size)), maxlen=size)

    @classmethod
    def empty(cls) -> Window:
        """Return a window that holds nothing."""
        return cls(0, None)

    def push(self, value: Any) -> Any:
        """Add ``value`` and return the value that fell out of the window.

        An empty window returns ``value`` itself.
        """
        if not self._items.maxlen:
            return value
        oldest = self._items[-1]
        self._items.appendleft(value)
        return oldest

    def is_empty(self) -> bool:
        """Return True when the window has no room for values."""
        return not self._items

    def __getitem__(self, index: int) -> Any:
        if index < 0 or index >= len(self._items):
            raise IndexError("window index out of range")
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Window({list(self._items)!r})"


@dataclass(frozen=True)
class IndicatorResult:
    """Values and signals produced by one step of an indicator."""

    values: tuple[float, ...] = ()
    signals: tuple[Action, ...] = ()


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a boolean: {text!r}")


def _parse_period(text: str) -> int:
    number = int(text)
    if not 0 <= number <= PERIOD_MAX:
        raise ValueError(f"period out of range: {text!r}")
    return number


class IndicatorConfig(ABC):
    """Base for indicator configurations; subclasses are dataclasses."""

    NAME: ClassVar[str] = ""

    @abstractmethod
    def validate(self) -> bool:
        """Return True when the configuration can be used."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Return the number of values and of signals each step produces."""

    @abstractmethod
    def _instantiate(self, candle: Candle) -> IndicatorInstance:
        """Build a running instance from a valid configuration."""

    def init(self, candle: Candle) -> IndicatorInstance:
        """Validate the configuration and start an instance at ``candle``."""
        if not self.validate():
            raise WrongConfigError(f"invalid configuration for {self.NAME or type(self).__name__}")
        return self._instantiate(candle)

    def set(self, name: str, value: str) -> None:
        """Set parameter ``name`` from its text form."""
        names = {field.name for field in dataclasses.fields(self)} if dataclasses.is_dataclass(self) else set()
        if name not in names:
            raise ParameterParseError(name, value)
        current = getattr(self, name)
        try:
            if isinstance(current, bool):
                parsed: Any = _parse_bool(value)
            elif isinstance(current, int) and not isinstance(current, enum.Enum):
                parsed = _parse_period(value)
            elif isinstance(current, float):
                parsed = float(value)
            else:
                parsed = type(current).parse(value)
        except (ValueError, TypeError, AttributeError, YataError):
            raise ParameterParseError(name, value) from None
        setattr(self, name, parsed)


class IndicatorInstance(ABC):
    """A running indicator that consumes candles one at a time."""

    def __init__(self, config: IndicatorConfig) -> None:
        self._config = config

    @property
    def config(self) -> IndicatorConfig:
        """The configuration this instance was started from."""
        return self._config

    @abstractmethod
    def next(self, candle: Candle) -> IndicatorResult:
        """Consume one candle and return the result for it."""

    def over(self, candles: Iterable[Candle]) -> list[IndicatorResult]:
        """Feed every candle in turn and return all results."""
        return [self.next(candle) for candle in candles]