# tacalc

Streaming technical analysis for price time series. Every method and
indicator keeps its own state and is fed one value or one candle at a time,
so it works the same on a historical series and on a live feed. The package
is pure Python and has no dependencies.

## Installation

```
pip install tacalc
```

## Building blocks

`tacalc.core` holds the shared pieces:

- `Candle`: a frozen open/high/low/close/volume bar with derived prices:
  `tp()` (mean of high, low, close), `hl2()`, `ohlc4()`, `clv()` (close
  location value, `0.0` for a bar with no range), `tr_close(prev_close)`
  (true range) and `source(source)`. Adding two candles merges them into one
  bar: the first open, the highest high, the lowest low, the last close and
  the summed volume.
- `Source`: which price of a candle an indicator reads: `CLOSE`, `OPEN`,
  `HIGH`, `LOW`, `VOLUME`, `HL2`, `TP`, `OHLC4`. `Source.parse("hl2")`
  reads one from text, ignoring case.
- `Action`: a signal, one of `SELL_ALL` (-1), `NONE` (0) and `BUY_ALL` (1);
  `analog()` returns the number and `is_some()` tells whether there is a
  signal at all.
- `Window`: a fixed-size sliding window. `push(value)` adds a value and
  returns the one that fell out; index `0` is the newest value.
- `IndicatorConfig` / `IndicatorInstance` / `IndicatorResult`: the common
  shape of every indicator. A result holds a tuple of `values` and a tuple
  of `signals`.
- Errors: `YataError` and its subclasses `WrongConfigError`,
  `WrongMethodParametersError` and `ParameterParseError`.

## Methods

Methods are created with their parameters and a starting value, then fed one
input per step with `next`:

- `tacalc.averages`: the exponential family `EMA`, `DMA` (EMA of an EMA),
  `TMA` (three EMAs in a row), `DEMA` and `TEMA`, each with `next` and
  `peek`. `MA` names one of them together with a period, can be parsed from
  text such as `"ema-12"` or `"tema-5"`, and builds it with `init(value)`.
- `tacalc.windowed`: `Derivative` (average change per step over a window,
  also available as `Differential`) and the convolution average `Conv`,
  whose last weight applies to the newest value.
- `tacalc.cross`: `Cross` (buy on an upward cross, sell on a downward one),
  `CrossAbove` and `CrossUnder` (each gives `BUY_ALL` when its cross
  happens). Their `next(value, base)` takes the two series values.
- `tacalc.adi`: the accumulation/distribution index `ADI`; with length `0`
  it accumulates over the whole series, otherwise over the last `length`
  candles.
- `tacalc.transform`: `HeikinAshi`, which turns candles into Heikin Ashi
  candles, and `CollapseTimeframe`, which merges every `period` candles into
  one and returns `None` in between.

```python
from tacalc.averages import EMA

ema = EMA(3, 3.0)
ema.next(3.0)
ema.next(6.0)
assert ema.next(9.0) == 6.75
assert ema.next(12.0) == 9.375
```

A method given parameters it cannot work with (a length of zero or above
255, an empty list of weights) raises `WrongMethodParametersError`:

```python
from tacalc.core import WrongMethodParametersError
from tacalc.averages import EMA

try:
    EMA(0, 1.0)
except WrongMethodParametersError:
    ...
```

## Indicators

An indicator is a dataclass configuration; `init(candle)` checks it with
`validate()` and returns an instance that is fed candles with `next`, or with
`over` for a whole series. `size()` gives the number of values and signals
each step produces.

- `tacalc.macd.MACD` (also `MovingAverageConvergenceDivergence`): MACD line
  and signal line; signals for crossing the signal line and crossing zero.
- `tacalc.rsi.RelativeStrengthIndex` (also `RSI`): a value in `[0, 1]`;
  signals for entering and for leaving an over-zone.
- `tacalc.money_flow_index.MoneyFlowIndex`: upper bound, index and lower
  bound; signals for entering and for leaving a zone.
- `tacalc.klinger.KlingerVolumeOscillator`: oscillator and signal line;
  signals for crossing zero and crossing the signal line.
- `tacalc.parabolic_sar.ParabolicSAR` (also `ParabolicStopAndReverse`): the
  SAR and the trend; a signal when the trend turns.

```python
from tacalc.core import Candle
from tacalc.macd import MACD

candles = [
    Candle(open=10.0, high=11.0, low=9.5, close=10.5, volume=1000.0),
    Candle(open=10.5, high=12.0, low=10.0, close=11.8, volume=1500.0),
    Candle(open=11.8, high=12.2, low=11.0, close=11.1, volume=900.0),
]

macd = MACD().init(candles[0])
for result in macd.over(candles):
    print(result.values, result.signals)
```

Configuration fields can be changed in place, or by name and text through
`set`. An unknown name or an unparsable value raises `ParameterParseError`,
and `init` raises `WrongConfigError` when the configuration does not
validate.

```python
from tacalc.rsi import RelativeStrengthIndex

rsi = RelativeStrengthIndex()
rsi.set("ma", "dema-10")
rsi.set("zone", "0.25")
```

## What is not included

- The moving averages are the exponential family only (`ema`, `dma`, `tma`,
  `dema`, `tema`); there is no simple, weighted or median moving average,
  and `MA.parse` rejects any other name.
- The indicators are the five listed above; there is no registry to look an
  indicator up by name.
- It is a library only: there is no command-line tool, no data loading and
  no charting.

## Running the tests

```
pip install -e ".[test]"
pytest
```