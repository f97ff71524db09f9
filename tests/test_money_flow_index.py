import random

import pytest

from tacalc.core import Action, Candle, ParameterParseError, WrongConfigError
from tacalc.money_flow_index import MoneyFlowIndex, MoneyFlowIndexInstance


def flat(price, volume=10.0):
    return Candle(price, price, price, price, volume)


def random_candles(count, seed=7):
    rng = random.Random(seed)
    price = 100.0
    result = []
    for _ in range(count):
        price = max(1.0, price + rng.uniform(-3.0, 3.0))
        high = price + rng.uniform(0.0, 2.0)
        low = price - rng.uniform(0.0, 2.0)
        result.append(Candle(price, high, low, rng.uniform(low, high), rng.uniform(1.0, 100.0)))
    return result


def test_defaults_and_size():
    config = MoneyFlowIndex()
    assert config.period == 14
    assert config.zone == 0.2
    assert config.size() == (3, 2)


def test_constant_series_is_balanced():
    instance = MoneyFlowIndex().init(flat(50.0))
    for result in instance.over([flat(50.0)] * 20):
        assert result.values[1] == pytest.approx(0.5)
        assert result.signals == (Action.NONE, Action.NONE)


def test_bounds_are_symmetric():
    config = MoneyFlowIndex(zone=0.3)
    instance = config.init(flat(10.0))
    for result in instance.over(random_candles(50)):
        upper, _, lower = result.values
        assert lower == config.zone
        assert upper + lower == pytest.approx(1.0)


def test_value_stays_in_unit_range():
    candles = random_candles(200)
    instance = MoneyFlowIndex().init(candles[0])
    for result in instance.over(candles):
        assert 0.0 <= result.values[1] <= 1.0 + 1e-9
        assert len(result.values) == 3
        assert len(result.signals) == 2


def test_falling_series_enters_lower_zone_with_buy():
    prices = [100.0 - i for i in range(30)]
    instance = MoneyFlowIndex(period=5).init(flat(prices[0]))
    results = instance.over([flat(p) for p in prices])
    assert results[-1].values[1] == pytest.approx(0.0)
    enters = [r.signals[0] for r in results]
    assert Action.BUY_ALL in enters
    assert Action.SELL_ALL not in enters


def test_instance_keeps_config():
    config = MoneyFlowIndex(period=3)
    instance = config.init(flat(1.0))
    assert isinstance(instance, MoneyFlowIndexInstance)
    assert instance.config is config


@pytest.mark.parametrize("zone", [-0.1, 0.6])
def test_invalid_zone_is_rejected(zone):
    assert not MoneyFlowIndex(zone=zone).validate()
    with pytest.raises(WrongConfigError):
        MoneyFlowIndex(zone=zone).init(flat(1.0))


def test_set_parameters():
    config = MoneyFlowIndex()
    config.set("period", "21")
    config.set("zone", "0.25")
    assert config.period == 21
    assert config.zone == 0.25
    with pytest.raises(ParameterParseError):
        config.set("zone", "abc")
    with pytest.raises(ParameterParseError):
        config.set("unknown", "1")