# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""Test signal generators for exercising biquad filters."""

import numpy as np
import scipy.signal as spsig

# All signals are returned as float32 arrays, the precision the filters
# run at.


def sin(fs: float, length: float, freq: float, amplitude: float) -> np.ndarray:
    """
    Generate a sinusoidal signal.

    Parameters
    ----------
    fs : float
        The sampling frequency in Hz.
    length : float
        The duration of the signal in seconds.
    freq : float
        The frequency of the sinusoid in Hz.
    amplitude : float
        The amplitude of the sinusoid.

    Returns
    -------
    np.ndarray
        The generated sinusoidal signal.
    """
    t = np.arange(int(fs * length)) / fs
    signal = amplitude * np.sin(2 * np.pi * freq * t)

    return signal.astype(np.float32)


def log_chirp(
    fs: float,
    length: float,
    amplitude: float,
    start: float = 20,
    stop: float = 20000,
) -> np.ndarray:
    """
    Generate a logarithmic chirp signal.

    Parameters
    ----------
    fs : float
        The sample rate of the signal.
    length : float
        The duration of the signal in seconds.
    amplitude : float
        The amplitude of the signal.
    start : float, optional
        The starting frequency of the chirp signal in Hz. Default is
        20 Hz.
    stop : float, optional
        The ending frequency of the chirp signal in Hz. Default is
        20000 Hz. This should be below fs/2.

    Returns
    -------
    np.ndarray
        The generated logarithmic chirp signal.
    """
    t = np.arange(int(fs * length)) / fs
    signal = amplitude * spsig.chirp(t, start, length, stop, "log", phi=-90)

    return signal.astype(np.float32)


def white_noise(length: int, amplitude: float, seed: int = 0) -> np.ndarray:
    """Generate ``length`` samples of uniform white noise, repeatable for a given seed."""
    rng = np.random.default_rng(seed)
    signal = amplitude * rng.uniform(-1, 1, length)

    return signal.astype(np.float32)


def impulse(length: int, amplitude: float = 1.0) -> np.ndarray:
    """Generate a unit impulse of ``length`` samples."""
    signal = np.zeros(length, dtype=np.float32)
    if length > 0:
        signal[0] = amplitude
    return signal


def step(length: int, amplitude: float = 1.0) -> np.ndarray:
    """Generate a step of ``length`` samples, starting at the first sample."""
    return np.full(length, amplitude, dtype=np.float32)
