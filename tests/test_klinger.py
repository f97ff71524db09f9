import pytest

from tacalc.averages import MA, MAKind
from tacalc.core import Action, Candle, ParameterParseError, WrongConfigError
from tacalc.klinger import KlingerVolumeOscillator, KlingerVolumeOscillatorInstance


def flat(price, volume=100.0):
    return Candle(price, price, price, price, volume)


def test_defaults():
    config = KlingerVolumeOscillator()
    assert config.ma1 == MA(MAKind.EMA, 34)
    assert config.ma2 == MA(MAKind.EMA, 55)
    assert config.signal == MA(MAKind.EMA, 13)
    assert config.size() == (2, 2)


def test_constant_series_gives_zero():
    instance = KlingerVolumeOscillator().init(flat(20.0))
    for result in instance.over([flat(20.0)] * 25):
        assert result.values == (0.0, 0.0)
        assert result.signals == (Action.NONE, Action.NONE)


def test_volume_scales_oscillator():
    prices = [10.0 + i for i in range(20)]
    small = KlingerVolumeOscillator().init(flat(prices[0], 1.0))
    big = KlingerVolumeOscillator().init(flat(prices[0], 1.0))
    for p in prices:
        a = small.next(flat(p, 1.0))
        b = big.next(flat(p, 10.0))
        assert b.values[0] == pytest.approx(a.values[0] * 10.0)


def test_instance_type_and_config():
    config = KlingerVolumeOscillator()
    instance = config.init(flat(1.0))
    assert isinstance(instance, KlingerVolumeOscillatorInstance)
    assert instance.config is config


@pytest.mark.parametrize(
    "config",
    [
        KlingerVolumeOscillator(ma1=MA(MAKind.DMA, 34)),
        KlingerVolumeOscillator(ma1=MA(MAKind.EMA, 55), ma2=MA(MAKind.EMA, 34)),
        KlingerVolumeOscillator(ma1=MA(MAKind.EMA, 1)),
        KlingerVolumeOscillator(signal=MA(MAKind.EMA, 1)),
    ],
)
def test_invalid_config(config):
    assert not config.validate()
    with pytest.raises(WrongConfigError):
        config.init(flat(1.0))


def test_set_parameters():
    config = KlingerVolumeOscillator()
    config.set("signal", "dema-7")
    assert config.signal == MA(MAKind.DEMA, 7)
    with pytest.raises(ParameterParseError):
        config.set("ma1", "ema")
    with pytest.raises(ParameterParseError):
        config.set("source", "close")