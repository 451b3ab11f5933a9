# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""
Biquad filter coefficient design.

The filter designs are the bilinear transform designs from the Audio EQ
Cookbook (R. Bristow-Johnson). All the maths is done in single
precision, matching the precision used to run the filters.

Coefficients are normalised by a0, so the transfer function is:
`H(z) = (b0 + b1*z^-1 + b2*z^-2) / (1 + a1*z^-1 + a2*z^-2)`
"""

import enum
import warnings

import numpy as np
import numpy.typing as npt
import scipy.signal as spsig

from biquad.dsp import utils as utils
from biquad.dsp.errors import NegativeQError, OutsideNyquistError, StabilityWarning
from biquad.dsp.frequency import Frequency

# Q factor for a maximally flat 2nd order low or high pass
Q_BUTTERWORTH = np.float32(1 / np.sqrt(2))

TWO_PI = np.float32(2.0 * np.pi)


class Type(enum.Enum):
    """The type of filter to design.

    The shelf and peaking filters also take a gain in dB, see
    :py:attr:`has_gain`.
    """

    LOW_PASS = "lowpass"
    HIGH_PASS = "highpass"
    BAND_PASS = "bandpass"
    NOTCH = "notch"
    ALL_PASS = "allpass"
    LOW_SHELF = "lowshelf"
    HIGH_SHELF = "highshelf"
    PEAKING_EQ = "peaking"

    @property
    def has_gain(self) -> bool:
        """True if the filter design uses ``gain_db``."""
        return self in (Type.LOW_SHELF, Type.HIGH_SHELF, Type.PEAKING_EQ)


class Coefficients:
    """
    A set of normalised biquad coefficients.

    The coefficients are normally made by :py:meth:`from_params`, but can
    be created directly. Directly created coefficients are not checked,
    except for a :py:class:`~biquad.dsp.errors.StabilityWarning` if the
    poles are not inside the unit circle.

    Parameters
    ----------
    b0, b1, b2 : float
        Numerator (feed forward) coefficients.
    a1, a2 : float
        Denominator (feedback) coefficients, a0 is 1.

    Attributes
    ----------
    b0, b1, b2, a1, a2 : numpy.float32
        The coefficients, rounded to float32.
    """

    __slots__ = ("b0", "b1", "b2", "a1", "a2")

    def __init__(self, b0, b1, b2, a1, a2):
        for name, value in zip(self.__slots__, (b0, b1, b2, a1, a2)):
            object.__setattr__(self, name, utils.to_float32(value))

        if not self.is_stable():
            warnings.warn(
                "Poles lie on or outside the unit circle, the filter is unstable",
                StabilityWarning,
                stacklevel=2,
            )

    @classmethod
    def from_params(
        cls, filter_type: Type, fs: Frequency, f0: Frequency, q: float, gain_db: float = 0.0
    ) -> "Coefficients":
        """
        Design a biquad filter.

        Parameters
        ----------
        filter_type : Type
            The type of filter.
        fs : Frequency
            The sample rate.
        f0 : Frequency
            The cutoff or centre frequency of the filter.
        q : float
            The Q factor of the filter, use :py:data:`Q_BUTTERWORTH` for a
            maximally flat low or high pass.
        gain_db : float, optional
            The gain in dB of shelf and peaking filters, ignored by the
            other filter types. Default is 0 dB.

        Returns
        -------
        Coefficients
            The filter coefficients, normalised so that ``a0 = 1``.

        Raises
        ------
        OutsideNyquistError
            If f0 is not below fs/2. This is usually caused by passing
            fs and f0 in the wrong order.
        NegativeQError
            If q is zero or negative.
        """
        filter_type = Type(filter_type)
        if not isinstance(fs, Frequency) or not isinstance(f0, Frequency):
            raise TypeError("fs and f0 must be Frequency objects")

        if f0.hz >= fs.hz / np.float32(2):
            raise OutsideNyquistError(
                "filter frequency (%s Hz) must be less than fs/2 (%s Hz)" % (f0.hz, fs.hz / 2)
            )

        q = utils.to_float32(q)
        if q <= 0:
            raise NegativeQError("q must be greater than 0 (%s)" % q)

        # extreme q or gain values give non-finite taps, which are reported
        # by the StabilityWarning from Coefficients
        design = _DESIGNS[filter_type]
        with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
            if filter_type.has_gain:
                return design(fs.hz, f0.hz, q, gain_db)
            return design(fs.hz, f0.hz, q)

    def as_list(self) -> list[np.float32]:
        """Return the coefficients as ``[b0, b1, b2, a1, a2]``."""
        return [self.b0, self.b1, self.b2, self.a1, self.a2]

    def poles(self) -> npt.NDArray[np.complex128]:
        """Return the poles of the filter."""
        return np.roots([1.0, float(self.a1), float(self.a2)])

    def is_stable(self) -> bool:
        """Return True if all the poles are inside the unit circle."""
        if not (np.isfinite(self.a1) and np.isfinite(self.a2)):
            return False
        return bool(np.all(np.abs(self.poles()) < 1))

    def freq_response(
        self, fs, nfft: int = 1024
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.complex128]]:
        """
        Calculate the frequency response of the filter.

        Parameters
        ----------
        fs : Frequency | float
            The sample rate the filter runs at.
        nfft : int
            The number of points to compute in the frequency response,
            by default 1024.

        Returns
        -------
        tuple[npt.NDArray[np.float64], npt.NDArray[np.complex128]]
            A tuple containing the frequency vector and the complex
            frequency response.
        """
        b = [float(self.b0), float(self.b1), float(self.b2)]
        a = [1.0, float(self.a1), float(self.a2)]
        f, h = spsig.freqz(b, a, worN=nfft, fs=float(fs))

        return f, h

    def __setattr__(self, name, value):
        raise AttributeError("Coefficients are immutable, create a new set instead")

    def __reduce__(self):
        return (Coefficients, tuple(float(c) for c in self.as_list()))

    def __eq__(self, other):
        if isinstance(other, Coefficients):
            return self.as_list() == other.as_list()
        return NotImplemented

    def __hash__(self):
        return hash(tuple(float(c) for c in self.as_list()))

    def __repr__(self):
        return "Coefficients(b0=%r, b1=%r, b2=%r, a1=%r, a2=%r)" % tuple(
            float(c) for c in self.as_list()
        )


def _normalise_biquad(b0, b1, b2, a0, a1, a2) -> Coefficients:
    """Divide the coefficients by a0."""
    return Coefficients(b0 / a0, b1 / a0, b2 / a0, a1 / a0, a2 / a0)


def _w0_alpha(fs, filter_freq, q_factor):
    fs = utils.to_float32(fs)
    filter_freq = utils.to_float32(filter_freq)
    q_factor = utils.to_float32(q_factor)

    w0 = TWO_PI * filter_freq / fs
    alpha = np.sin(w0) / (np.float32(2.0) * q_factor)
    return w0, alpha


def _shelf_gain(gain_db):
    return np.float32(10.0) ** (utils.to_float32(gain_db) / np.float32(40.0))


def make_biquad_lowpass(fs: float, filter_freq: float, q_factor: float) -> Coefficients:
    """Create coefficients for a lowpass biquad filter.

    Parameters
    ----------
    fs : float
        The sample rate in Hz.
    filter_freq : float
        The cutoff frequency of the filter in Hz.
    q_factor : float
        The Q factor of the filter.

    Returns
    -------
    Coefficients
        The coefficients of the biquad filter, normalised by a0 such
        that ``a0 = 1``.
    """
    w0, alpha = _w0_alpha(fs, filter_freq, q_factor)
    cos_w0 = np.cos(w0)

    b0 = (1 - cos_w0) / 2
    b1 = 1 - cos_w0
    b2 = (1 - cos_w0) / 2
    a0 = 1 + alpha
    a1 = -2 * cos_w0
    a2 = 1 - alpha

    return _normalise_biquad(b0, b1, b2, a0, a1, a2)


def make_biquad_highpass(fs: float, filter_freq: float, q_factor: float) -> Coefficients:
    """Create coefficients for a highpass biquad filter.

    Parameters
    ----------
    fs : float
        The sample rate in Hz.
    filter_freq : float
        The cutoff frequency of the filter in Hz.
    q_factor : float
        The Q factor of the filter.

    Returns
    -------
    Coefficients
        The coefficients of the biquad filter, normalised by a0 such
        that ``a0 = 1``.
    """
    w0, alpha = _w0_alpha(fs, filter_freq, q_factor)
    cos_w0 = np.cos(w0)

    b0 = (1 + cos_w0) / 2
    b1 = -(1 + cos_w0)
    b2 = (1 + cos_w0) / 2
    a0 = 1 + alpha
    a1 = -2 * cos_w0
    a2 = 1 - alpha

    return _normalise_biquad(b0, b1, b2, a0, a1, a2)


# Constant 0 dB peak gain
def make_biquad_bandpass(fs: float, filter_freq: float, q_factor: float) -> Coefficients:
    """Create coefficients for a bandpass biquad filter.

    The gain at the centre frequency is 0 dB.

    Parameters
    ----------
    fs : float
        The sample rate in Hz.
    filter_freq : float
        The centre frequency of the filter in Hz.
    q_factor : float
        The Q factor of the filter.

    Returns
    -------
    Coefficients
        The coefficients of the biquad filter, normalised by a0 such
        that ``a0 = 1``.
    """
    w0, alpha = _w0_alpha(fs, filter_freq, q_factor)
    cos_w0 = np.cos(w0)

    b0 = alpha
    b1 = np.float32(0.0)
    b2 = -alpha
    a0 = 1 + alpha
    a1 = -2 * cos_w0
    a2 = 1 - alpha

    return _normalise_biquad(b0, b1, b2, a0, a1, a2)


def make_biquad_notch(fs: float, filter_freq: float, q_factor: float) -> Coefficients:
    """Create coefficients for a notch biquad filter.

    Parameters
    ----------
    fs : float
        The sample rate in Hz.
    filter_freq : float
        The centre frequency of the notch in Hz.
    q_factor : float
        The Q factor of the filter.

    Returns
    -------
    Coefficients
        The coefficients of the biquad filter, normalised by a0 such
        that ``a0 = 1``.
    """
    w0, alpha = _w0_alpha(fs, filter_freq, q_factor)
    cos_w0 = np.cos(w0)

    b0 = np.float32(1.0)
    b1 = -2 * cos_w0
    b2 = np.float32(1.0)
    a0 = 1 + alpha
    a1 = -2 * cos_w0
    a2 = 1 - alpha

    return _normalise_biquad(b0, b1, b2, a0, a1, a2)


def make_biquad_allpass(fs: float, filter_freq: float, q_factor: float) -> Coefficients:
    """Create coefficients for an allpass biquad filter.

    Parameters
    ----------
    fs : float
        The sample rate in Hz.
    filter_freq : float
        The centre frequency of the filter in Hz, where the phase shift
        is 180 degrees.
    q_factor : float
        The Q factor of the filter.

    Returns
    -------
    Coefficients
        The coefficients of the biquad filter, normalised by a0 such
        that ``a0 = 1``.
    """
    w0, alpha = _w0_alpha(fs, filter_freq, q_factor)
    cos_w0 = np.cos(w0)

    b0 = 1 - alpha
    b1 = -2 * cos_w0
    b2 = 1 + alpha
    a0 = 1 + alpha
    a1 = -2 * cos_w0
    a2 = 1 - alpha

    return _normalise_biquad(b0, b1, b2, a0, a1, a2)


def make_biquad_peaking(
    fs: float, filter_freq: float, q_factor: float, gain_db: float
) -> Coefficients:
    """Create coefficients for a peaking biquad filter.

    Parameters
    ----------
    fs : float
        The sample rate in Hz.
    filter_freq : float
        The centre frequency of the filter in Hz.
    q_factor : float
        The Q factor of the filter.
    gain_db : float
        The gain in dB at the centre frequency.

    Returns
    -------
    Coefficients
        The coefficients of the biquad filter, normalised by a0 such
        that ``a0 = 1``.
    """
    w0, alpha = _w0_alpha(fs, filter_freq, q_factor)
    A = _shelf_gain(gain_db)
    cos_w0 = np.cos(w0)

    b0 = 1 + alpha * A
    b1 = -2 * cos_w0
    b2 = 1 - alpha * A
    a0 = 1 + alpha / A
    a1 = -2 * cos_w0
    a2 = 1 - alpha / A

    return _normalise_biquad(b0, b1, b2, a0, a1, a2)


def make_biquad_lowshelf(
    fs: float, filter_freq: float, q_factor: float, gain_db: float
) -> Coefficients:
    """Create coefficients for a lowshelf biquad filter.

    The Q factor is defined in a similar way to standard low pass, i.e.
    > 0.707 will yield peakiness (where the shelf response does not
    monotonically change). The level change at filter_freq is gain_db/2.

    Parameters
    ----------
    fs : float
        The sample rate in Hz.
    filter_freq : float
        The corner frequency of the shelf in Hz.
    q_factor : float
        The Q factor of the filter.
    gain_db : float
        The gain in dB of the shelf.

    Returns
    -------
    Coefficients
        The coefficients of the biquad filter, normalised by a0 such
        that ``a0 = 1``.
    """
    w0, alpha = _w0_alpha(fs, filter_freq, q_factor)
    A = _shelf_gain(gain_db)
    cos_w0 = np.cos(w0)
    sqrt_A_alpha = 2 * np.sqrt(A) * alpha

    b0 = A * ((A + 1) - (A - 1) * cos_w0 + sqrt_A_alpha)
    b1 = 2 * A * ((A - 1) - (A + 1) * cos_w0)
    b2 = A * ((A + 1) - (A - 1) * cos_w0 - sqrt_A_alpha)
    a0 = (A + 1) + (A - 1) * cos_w0 + sqrt_A_alpha
    a1 = -2 * ((A - 1) + (A + 1) * cos_w0)
    a2 = (A + 1) + (A - 1) * cos_w0 - sqrt_A_alpha

    return _normalise_biquad(b0, b1, b2, a0, a1, a2)


def make_biquad_highshelf(
    fs: float, filter_freq: float, q_factor: float, gain_db: float
) -> Coefficients:
    """Create coefficients for a highshelf biquad filter.

    The Q factor is defined in a similar way to standard high pass, i.e.
    > 0.707 will yield peakiness. The level change at filter_freq is
    gain_db/2.

    Parameters
    ----------
    fs : float
        The sample rate in Hz.
    filter_freq : float
        The corner frequency of the shelf in Hz.
    q_factor : float
        The Q factor of the filter.
    gain_db : float
        The gain in dB of the shelf.

    Returns
    -------
    Coefficients
        The coefficients of the biquad filter, normalised by a0 such
        that ``a0 = 1``.
    """
    w0, alpha = _w0_alpha(fs, filter_freq, q_factor)
    A = _shelf_gain(gain_db)
    cos_w0 = np.cos(w0)
    sqrt_A_alpha = 2 * np.sqrt(A) * alpha

    b0 = A * ((A + 1) + (A - 1) * cos_w0 + sqrt_A_alpha)
    b1 = -2 * A * ((A - 1) + (A + 1) * cos_w0)
    b2 = A * ((A + 1) + (A - 1) * cos_w0 - sqrt_A_alpha)
    a0 = (A + 1) - (A - 1) * cos_w0 + sqrt_A_alpha
    a1 = 2 * ((A - 1) - (A + 1) * cos_w0)
    a2 = (A + 1) - (A - 1) * cos_w0 - sqrt_A_alpha

    return _normalise_biquad(b0, b1, b2, a0, a1, a2)


_DESIGNS = {
    Type.LOW_PASS: make_biquad_lowpass,
    Type.HIGH_PASS: make_biquad_highpass,
    Type.BAND_PASS: make_biquad_bandpass,
    Type.NOTCH: make_biquad_notch,
    Type.ALL_PASS: make_biquad_allpass,
    Type.LOW_SHELF: make_biquad_lowshelf,
    Type.HIGH_SHELF: make_biquad_highshelf,
    Type.PEAKING_EQ: make_biquad_peaking,
}
