# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""
Second order IIR (biquad) filters.

Design coefficients from a filter type, sample rate, frequency and Q, and
run them one sample at a time with a direct form 1 or direct form 2
transposed filter::

    from biquad import Coefficients, DirectForm1, Q_BUTTERWORTH, Type, hz, khz

    coeffs = Coefficients.from_params(Type.LOW_PASS, khz(1), hz(10), Q_BUTTERWORTH)
    filt = DirectForm1(coeffs)
    y = filt.run(1.0)
"""

from importlib import metadata as _metadata

from biquad.dsp.coefficients import Q_BUTTERWORTH, Coefficients, Type
from biquad.dsp.errors import (
    BiquadError,
    InvalidFrequencyLiteral,
    NegativeFrequencyError,
    NegativeQError,
    OutsideNyquistError,
    StabilityWarning,
)
from biquad.dsp.forms import Biquad, DirectForm1, DirectForm2Transposed
from biquad.dsp.frequency import Frequency, dt, hz, khz, mhz

__version__ = _metadata.version("biquad")

__all__ = [
    "Biquad",
    "BiquadError",
    "Coefficients",
    "DirectForm1",
    "DirectForm2Transposed",
    "Frequency",
    "InvalidFrequencyLiteral",
    "NegativeFrequencyError",
    "NegativeQError",
    "OutsideNyquistError",
    "Q_BUTTERWORTH",
    "StabilityWarning",
    "Type",
    "dt",
    "hz",
    "khz",
    "mhz",
]
