# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
import copy
import pickle

import numpy as np
import pytest

from biquad.dsp.errors import BiquadError, InvalidFrequencyLiteral, NegativeFrequencyError
from biquad.dsp.frequency import Frequency, dt, hz, khz, mhz


def test_frequency():
    f1 = hz(10)
    f2 = khz(10)
    f3 = mhz(10)
    f4 = dt(10)

    assert f1 == Frequency.from_hz(10.0)
    assert f2 == Frequency.from_hz(10000.0)
    assert f3 == Frequency.from_hz(10000000.0)
    assert f4 == Frequency.from_hz(0.1)

    assert f1 < f2
    assert f3 > f2
    assert f1 <= f1
    assert f3 >= f2
    assert f1 == f1
    assert f1 != f2


@pytest.mark.parametrize("value", [0, 0.5, 10, 44100, 48000.0, 1e6])
def test_from_hz(value):
    f = Frequency.from_hz(value)
    assert f.hz == np.float32(value)
    assert isinstance(f.hz, np.float32)
    assert float(f) == float(np.float32(value))


@pytest.mark.parametrize("value", [-1e-3, -1, -48000])
def test_from_hz_negative(value):
    with pytest.raises(NegativeFrequencyError):
        Frequency.from_hz(value)


def test_frequency_constructor_checked():
    assert Frequency(10) == hz(10)
    with pytest.raises(NegativeFrequencyError):
        Frequency(-10)
    with pytest.raises(NegativeFrequencyError):
        Frequency(-1e-3)


@pytest.mark.parametrize("value", [1e39, 1e300, float("inf"), float("nan")])
def test_from_hz_not_finite(value):
    with pytest.raises(NegativeFrequencyError):
        Frequency.from_hz(value)
    with pytest.raises(NegativeFrequencyError):
        Frequency(value)


def test_frequency_literal_too_large():
    with pytest.raises(InvalidFrequencyLiteral):
        mhz(1e33)
    with pytest.raises(InvalidFrequencyLiteral):
        khz(1e36)
    with pytest.raises(InvalidFrequencyLiteral):
        hz(1e39)
    assert np.isfinite(mhz(1e32).hz)


def test_design_errors_are_value_errors():
    with pytest.raises(ValueError):
        Frequency.from_hz(-1)
    with pytest.raises(BiquadError):
        Frequency.from_dt(-1)


@pytest.mark.parametrize("helper", [hz, khz, mhz, dt])
def test_frequency_literal_negative(helper):
    with pytest.raises(InvalidFrequencyLiteral):
        helper(-10.0)


def test_frequency_literal_is_not_a_design_error():
    # a bad literal is a bug, so it must not be caught with design errors
    assert not issubclass(InvalidFrequencyLiteral, BiquadError)
    try:
        hz(-1)
    except BiquadError:
        pytest.fail("InvalidFrequencyLiteral caught as a BiquadError")
    except InvalidFrequencyLiteral:
        pass


def test_hertz_from_dt():
    assert Frequency.from_dt(1.0) == Frequency.from_hz(1.0)
    assert Frequency.from_dt(1 / 48000) == Frequency.from_hz(np.float32(1) / np.float32(1 / 48000))


@pytest.mark.parametrize("period", [0, 0.0, -1.0])
def test_from_dt_not_positive(period):
    with pytest.raises(NegativeFrequencyError):
        Frequency.from_dt(period)
    with pytest.raises(InvalidFrequencyLiteral):
        dt(period)


def test_from_dt_overflow():
    # 1/period is not representable as a float32
    with pytest.raises(NegativeFrequencyError):
        Frequency.from_dt(1e-45)


def test_dt_property():
    assert khz(1).dt == np.float32(1e-3)
    assert hz(0).dt == np.inf


def test_unit_scaling():
    assert khz(1.5) == hz(1500)
    assert mhz(1) == khz(1000)
    assert khz(0) == hz(0)


def test_frequency_immutable():
    f = hz(10)
    with pytest.raises(AttributeError):
        f.hz = 20
    with pytest.raises(AttributeError):
        f._hz = np.float32(20)
    assert f == hz(10)


def test_frequency_copy_and_hash():
    f = khz(48)
    assert copy.copy(f) == f
    assert copy.deepcopy(f) == f
    assert pickle.loads(pickle.dumps(f)) == f
    assert len({hz(1000), khz(1), hz(1000.0)}) == 1


def test_frequency_compare_other_types():
    f = hz(10)
    assert f != 10
    assert not (f == 10.0)
    with pytest.raises(TypeError):
        f < 20
    with pytest.raises(TypeError):
        f >= 5.0


@pytest.mark.parametrize("value", ["10", [10], 1 + 2j, None])
def test_frequency_bad_type(value):
    with pytest.raises(TypeError):
        Frequency.from_hz(value)


def test_sorting():
    freqs = [mhz(1), hz(20), khz(10), hz(0)]
    assert sorted(freqs) == [hz(0), hz(20), khz(10), mhz(1)]
    assert max(freqs) == mhz(1)
