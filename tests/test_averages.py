import random

import pytest

from tacalc.averages import DEMA, DMA, EMA, MA, TEMA, TMA, MAKind
from tacalc.core import WrongMethodParametersError

KINDS = [MAKind.EMA, MAKind.DMA, MAKind.TMA, MAKind.DEMA, MAKind.TEMA]


def closes(count=300, seed=7):
    rng = random.Random(seed)
    price = 100.0
    out = []
    for _ in range(count):
        price = max(1.0, price + rng.uniform(-3.0, 3.0))
        out.append(price)
    return out


@pytest.mark.parametrize("kind", KINDS)
@pytest.mark.parametrize("length", [1, 2, 5, 17, 100, 254])
def test_const_input_gives_const_output(kind, length):
    value = (length + 56.0) / 16.3251
    method = MA(kind, length).init(value)
    first = method.next(value)
    assert first == pytest.approx(value)
    for _ in range(50):
        assert method.next(value) == pytest.approx(first)


@pytest.mark.parametrize("kind", KINDS)
def test_length_one_follows_input(kind):
    src = closes(100)
    method = MA(kind, 1).init(src[0])
    for x in src:
        assert method.next(x) == pytest.approx(x)


def test_zero_length_is_rejected():
    with pytest.raises(WrongMethodParametersError):
        EMA(0, 1.0)
    with pytest.raises(WrongMethodParametersError):
        DMA(0, 1.0)
    with pytest.raises(WrongMethodParametersError):
        TMA(0, 1.0)
    with pytest.raises(WrongMethodParametersError):
        DEMA(0, 1.0)
    with pytest.raises(WrongMethodParametersError):
        TEMA(0, 1.0)


def test_ema_example():
    ema = EMA(3, 3.0)
    ema.next(3.0)
    ema.next(6.0)
    assert ema.next(9.0) == 6.75
    assert ema.next(12.0) == 9.375
    assert ema.peek() == 9.375


def test_dema_example():
    dema = DEMA(3, 1.0)
    dema.next(1.0)
    dema.next(2.0)
    assert dema.next(3.0) == 2.75
    assert dema.next(4.0) == 3.8125


def test_tema_example():
    tema = TEMA(3, 1.0)
    tema.next(1.0)
    tema.next(2.0)
    assert tema.next(3.0) == 2.9375
    assert tema.next(4.0) == 4.0


@pytest.mark.parametrize("length", [2, 9, 30])
def test_ema_stays_within_seen_range(length):
    src = closes()
    ema = EMA(length, src[0])
    for i, x in enumerate(src):
        value = ema.next(x)
        assert min(src[: i + 1]) - 1e-9 <= value <= max(src[: i + 1]) + 1e-9


@pytest.mark.parametrize("length", [2, 9, 30])
def test_dma_is_ema_of_ema(length):
    src = closes()
    dma = DMA(length, src[0])
    first, second = EMA(length, src[0]), EMA(length, src[0])
    for x in src:
        assert dma.next(x) == pytest.approx(second.next(first.next(x)))
    assert dma.peek() == pytest.approx(second.peek())


@pytest.mark.parametrize("length", [2, 9, 30])
def test_tma_is_ema_of_dma(length):
    src = closes()
    tma = TMA(length, src[0])
    dma, ema = DMA(length, src[0]), EMA(length, src[0])
    for x in src:
        assert tma.next(x) == pytest.approx(ema.next(dma.next(x)))


@pytest.mark.parametrize("length", [2, 9, 30])
def test_dema_combines_ema_and_dma(length):
    src = closes()
    dema = DEMA(length, src[0])
    ema, dma = EMA(length, src[0]), DMA(length, src[0])
    for x in src:
        expected = 2.0 * ema.next(x) - dma.next(x)
        assert dema.next(x) == pytest.approx(expected)


@pytest.mark.parametrize("length", [2, 9, 30])
def test_tema_combines_ema_dma_tma(length):
    src = closes()
    tema = TEMA(length, src[0])
    ema, dma, tma = EMA(length, src[0]), DMA(length, src[0]), TMA(length, src[0])
    for x in src:
        expected = 3.0 * ema.next(x) - 3.0 * dma.next(x) + tma.next(x)
        assert tema.next(x) == pytest.approx(expected)


def test_ma_parse():
    assert MA.parse("ema-12") == MA(MAKind.EMA, 12)
    assert MA.parse(" TEMA-5 ") == MA(MAKind.TEMA, 5)
    assert str(MA.parse("dema-3")) == "dema-3"


@pytest.mark.parametrize("text", ["ema", "ema-x", "nope-4", "ema-300", "ema--1"])
def test_ma_parse_errors(text):
    with pytest.raises(ValueError):
        MA.parse(text)


def test_ma_init_builds_matching_method():
    built = MA(MAKind.EMA, 3).init(3.0)
    built.next(3.0)
    built.next(6.0)
    assert built.next(9.0) == 6.75


def test_ma_init_zero_period_fails():
    with pytest.raises(WrongMethodParametersError):
        MA(MAKind.DMA, 0).init(1.0)


def test_ma_is_similar_to():
    assert MA(MAKind.EMA, 3).is_similar_to(MA(MAKind.EMA, 30))
    assert not MA(MAKind.EMA, 3).is_similar_to(MA(MAKind.TEMA, 3))