# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
import warnings

import numpy as np
import pytest
import scipy.signal as spsig

import biquad.dsp.signal_gen as gen
from biquad.dsp.coefficients import Q_BUTTERWORTH, Coefficients, Type
from biquad.dsp.forms import Biquad, DirectForm1, DirectForm2Transposed
from biquad.dsp.frequency import hz, khz

FORMS = [DirectForm1, DirectForm2Transposed]

FILTERS = [
    (Type.LOW_PASS, 1000, Q_BUTTERWORTH, 0),
    (Type.HIGH_PASS, 100, 2, 0),
    (Type.BAND_PASS, 2000, 1, 0),
    (Type.NOTCH, 5000, 5, 0),
    (Type.ALL_PASS, 500, 0.5, 0),
    (Type.LOW_SHELF, 200, 1, 6),
    (Type.HIGH_SHELF, 8000, Q_BUTTERWORTH, -6),
    (Type.PEAKING_EQ, 1000, 2, 12),
]


def run_filter(filt: Biquad, signal) -> np.ndarray:
    output = np.zeros(len(signal), dtype=np.float32)
    for n in range(len(signal)):
        output[n] = filt.run(signal[n])
    return output


def make_coeffs(filter_spec, fs=48000):
    filter_type, f0, q, gain_db = filter_spec
    return Coefficients.from_params(filter_type, hz(fs), hz(f0), q, gain_db)


@pytest.mark.parametrize("form", FORMS)
@pytest.mark.parametrize("filter_spec", FILTERS)
@pytest.mark.parametrize("length", [1, 9, 1000])
def test_biquad_zeros(form, filter_spec, length):
    filt = form(make_coeffs(filter_spec))
    output = run_filter(filt, np.zeros(length, dtype=np.float32))

    assert np.all(output == 0)
    assert all(s == 0 for s in filt.state)


@pytest.mark.parametrize("filter_spec", FILTERS)
def test_forms_match(filter_spec):
    fs = 48000
    coeffs = make_coeffs(filter_spec, fs)
    signal = gen.log_chirp(fs, 0.05, 0.5)

    output_df1 = run_filter(DirectForm1(coeffs), signal)
    output_df2t = run_filter(DirectForm2Transposed(coeffs), signal)

    np.testing.assert_allclose(output_df1, output_df2t, atol=5e-4)


@pytest.mark.parametrize("form", FORMS)
@pytest.mark.parametrize("filter_spec", FILTERS)
def test_against_lfilter(form, filter_spec):
    fs = 48000
    coeffs = make_coeffs(filter_spec, fs)
    signal = gen.white_noise(2000, 0.5, seed=1)

    b = [float(coeffs.b0), float(coeffs.b1), float(coeffs.b2)]
    a = [1.0, float(coeffs.a1), float(coeffs.a2)]
    ref = spsig.lfilter(b, a, signal.astype(np.float64))

    output = run_filter(form(coeffs), signal)
    np.testing.assert_allclose(output, ref, atol=5e-4)


def test_direct_form_1_impulse():
    coeffs = make_coeffs(FILTERS[0])
    output = run_filter(DirectForm1(coeffs), gen.impulse(3))

    y0 = coeffs.b0
    y1 = coeffs.b1 - coeffs.a1 * y0
    y2 = coeffs.b2 - coeffs.a1 * y1 - coeffs.a2 * y0
    np.testing.assert_allclose(output, [y0, y1, y2], rtol=1e-6)


@pytest.mark.parametrize("form", FORMS)
def test_bypass(form):
    filt = form(Coefficients(1.0, 0.0, 0.0, 0.0, 0.0))
    signal = gen.log_chirp(48000, 0.01, 1.0)

    np.testing.assert_array_equal(run_filter(filt, signal), signal)


@pytest.mark.parametrize("form", FORMS)
def test_step_settles_to_dc_gain(form):
    coeffs = Coefficients.from_params(Type.LOW_SHELF, khz(48), hz(500), Q_BUTTERWORTH, 6.0)
    output = run_filter(form(coeffs), gen.step(4800))

    dc_gain = (coeffs.b0 + coeffs.b1 + coeffs.b2) / (1 + coeffs.a1 + coeffs.a2)
    assert output[-1] == pytest.approx(dc_gain, rel=1e-3)
    assert dc_gain == pytest.approx(10 ** (6 / 20), rel=1e-3)


def test_direct_form_1_update_keeps_state():
    old = Coefficients.from_params(Type.LOW_PASS, khz(48), khz(1), Q_BUTTERWORTH)
    new = Coefficients.from_params(Type.HIGH_PASS, khz(48), khz(5), 2.0)

    filt = DirectForm1(old)
    y0 = filt.run(1.0)
    state = filt.state

    filt.update_coefficients(new)
    assert filt.coeffs == new
    assert filt.state == state

    # x1 and y1 are from before the update, weighted by the new coefficients
    y1 = filt.run(0.0)
    assert y1 == new.b1 * np.float32(1.0) - new.a1 * y0
    assert y1 != 0
    assert y1 != DirectForm1(new).run(0.0)


def test_direct_form_2_transposed_update_keeps_state():
    old = Coefficients.from_params(Type.LOW_PASS, khz(48), khz(1), Q_BUTTERWORTH)
    new = Coefficients.from_params(Type.HIGH_PASS, khz(48), khz(5), 2.0)

    filt = DirectForm2Transposed(old)
    y0 = filt.run(1.0)
    s1 = old.b1 * np.float32(1.0) - old.a1 * y0
    assert filt.state[0] == s1

    filt.update_coefficients(new)
    assert filt.state[0] == s1

    # with no input, the output is the state from before the update
    assert filt.run(0.0) == s1
    assert s1 != 0


@pytest.mark.parametrize("form", FORMS)
def test_retune_matches_piecewise_lfilter(form):
    fs = 48000
    old = make_coeffs(FILTERS[0], fs)
    new = make_coeffs(FILTERS[-1], fs)
    signal = gen.sin(fs, 0.02, 440, 0.5)
    half = len(signal) // 2

    filt = form(old)
    first = run_filter(filt, signal[:half])
    filt.update_coefficients(new)
    second = run_filter(filt, signal[half:])

    # the first half is unaffected by the later retune
    ref_first = run_filter(form(old), signal[:half])
    np.testing.assert_array_equal(first, ref_first)

    # and the retuned filter does not start from a cleared history
    fresh = run_filter(form(new), signal[half:])
    assert np.max(np.abs(second - fresh)) > 1e-3


@pytest.mark.parametrize("form", FORMS)
@pytest.mark.parametrize("value", [np.nan, np.inf, -np.inf])
def test_non_finite_propagates(form, value):
    filt = form(make_coeffs(FILTERS[0]))
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        y = filt.run(value)
        filt.run(0.0)
        filt.run(0.0)

    assert not np.isfinite(y)


@pytest.mark.parametrize("form", FORMS)
def test_run_returns_float32(form):
    filt = form(make_coeffs(FILTERS[0]))
    assert isinstance(filt.run(0.25), np.float32)
    assert isinstance(filt.run(np.float64(0.25)), np.float32)


@pytest.mark.parametrize("form", FORMS)
def test_common_interface(form):
    coeffs = make_coeffs(FILTERS[0])
    filt = form(coeffs)

    assert isinstance(filt, Biquad)
    assert filt.coeffs is coeffs
    assert repr(filt).startswith(form.__name__)

    f, h = filt.freq_response(khz(48))
    f_ref, h_ref = coeffs.freq_response(48000)
    np.testing.assert_array_equal(f, f_ref)
    np.testing.assert_array_equal(h, h_ref)

    with pytest.raises(TypeError):
        form([1.0, 0.0, 0.0, 0.0, 0.0])
    with pytest.raises(TypeError):
        filt.update_coefficients([1.0, 0.0, 0.0, 0.0, 0.0])


def test_generic_biquad():
    filt = Biquad(Coefficients(1.0, 0.0, 0.0, 0.0, 0.0))
    with pytest.raises(NotImplementedError):
        filt.run(1.0)
    with pytest.raises(NotImplementedError):
        filt.state


def test_instances_do_not_share_state():
    coeffs = make_coeffs(FILTERS[0])
    filt1 = DirectForm1(coeffs)
    filt2 = DirectForm1(coeffs)

    filt1.run(1.0)
    assert all(s == 0 for s in filt2.state)
    assert filt2.run(0.0) == 0
