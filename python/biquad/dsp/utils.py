# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""Utility functions used by the biquad filters."""

import numpy as np

FLT_MIN = np.finfo(np.float32).tiny


def db(input):
    """Convert an amplitude to decibels (20*log10(abs(x)))."""
    out = 20 * np.log10(np.abs(input) + FLT_MIN)
    return out


def to_float32(val) -> np.float32:
    """Convert a scalar to single precision.

    Raises
    ------
    TypeError
        If val is not a real scalar, e.g. a string, list or complex
        number.
    """
    if isinstance(val, (bool, np.bool_)) or not isinstance(
        val, (int, float, np.integer, np.floating)
    ):
        raise TypeError("expected a real number, got %s" % type(val).__name__)
    # out of range values become inf, callers decide whether that is valid
    with np.errstate(over="ignore"):
        return np.float32(val)
