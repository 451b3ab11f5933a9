# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""
Frequency values used to design biquad filters.

A :py:class:`Frequency` is a non-negative single precision magnitude in
Hz. There are two ways to make one:

* ``Frequency.from_hz`` and ``Frequency.from_dt`` check their input and
  raise :py:class:`~biquad.dsp.errors.NegativeFrequencyError`, for values
  that come from outside the program (a config file, a user).
* ``hz``, ``khz``, ``mhz`` and ``dt`` are shorthand for values written
  in the code, e.g. ``khz(48)``. An invalid value here is a bug, so they
  raise :py:class:`~biquad.dsp.errors.InvalidFrequencyLiteral` instead.
"""

import numpy as np

from biquad.dsp import utils as utils
from biquad.dsp.errors import InvalidFrequencyLiteral, NegativeFrequencyError


class Frequency:
    """
    An immutable frequency in Hz, stored as a float32.

    Frequencies compare and order by their magnitude in Hz.

    Parameters
    ----------
    hz : float
        The magnitude in Hz, which must not be negative.

    Attributes
    ----------
    hz : numpy.float32
        The magnitude in Hz.
    """

    __slots__ = ("_hz",)

    def __init__(self, hz):
        hz = utils.to_float32(hz)
        if hz < 0:
            raise NegativeFrequencyError("frequency must not be negative (%s Hz)" % hz)
        if not np.isfinite(hz):
            raise NegativeFrequencyError("frequency is not a finite float32 (%s Hz)" % hz)
        object.__setattr__(self, "_hz", hz)

    @classmethod
    def from_hz(cls, value) -> "Frequency":
        """Create a frequency from a value in Hz.

        Parameters
        ----------
        value : float
            The frequency in Hz.

        Returns
        -------
        Frequency
            The new frequency.

        Raises
        ------
        NegativeFrequencyError
            If value is negative, or is not finite once stored as a float32.
        """
        return cls(value)

    @classmethod
    def from_dt(cls, period) -> "Frequency":
        """Create a frequency from a sample period in seconds.

        Parameters
        ----------
        period : float
            The sample period in seconds, i.e. 1/fs.

        Returns
        -------
        Frequency
            A frequency of ``1/period`` Hz.

        Raises
        ------
        NegativeFrequencyError
            If period is negative or zero, or so small that ``1/period``
            is not representable as a float32.
        """
        period = utils.to_float32(period)
        if period <= 0:
            raise NegativeFrequencyError("sample period must be positive (%s s)" % period)

        with np.errstate(over="ignore"):
            value = np.float32(1.0) / period
        if np.isinf(value):
            raise NegativeFrequencyError("sample period %s s is too small" % period)
        return cls.from_hz(value)

    @property
    def hz(self) -> np.float32:
        return self._hz

    @property
    def dt(self) -> np.float32:
        """The period of the frequency in seconds, ``inf`` for 0 Hz."""
        with np.errstate(divide="ignore"):
            return np.float32(1.0) / self._hz

    def __setattr__(self, name, value):
        raise AttributeError("Frequency is immutable")

    def __delattr__(self, name):
        raise AttributeError("Frequency is immutable")

    def __reduce__(self):
        return (Frequency, (float(self._hz),))

    def __float__(self):
        return float(self._hz)

    def __str__(self):
        return "%s Hz" % self._hz

    def __repr__(self):
        return "Frequency(%r)" % float(self._hz)

    def __hash__(self):
        return hash(float(self._hz))

    def __eq__(self, other):
        if isinstance(other, Frequency):
            return bool(self._hz == other._hz)
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, Frequency):
            return bool(self._hz != other._hz)
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, Frequency):
            return bool(self._hz > other._hz)
        else:
            raise TypeError("Frequency can only be compared against Frequency")

    def __lt__(self, other):
        if isinstance(other, Frequency):
            return bool(self._hz < other._hz)
        else:
            raise TypeError("Frequency can only be compared against Frequency")

    def __ge__(self, other):
        if isinstance(other, Frequency):
            return bool(self._hz >= other._hz)
        else:
            raise TypeError("Frequency can only be compared against Frequency")

    def __le__(self, other):
        if isinstance(other, Frequency):
            return bool(self._hz <= other._hz)
        else:
            raise TypeError("Frequency can only be compared against Frequency")


def _literal(value, scale) -> Frequency:
    try:
        with np.errstate(over="ignore"):
            value = utils.to_float32(value) * np.float32(scale)
        return Frequency.from_hz(value)
    except NegativeFrequencyError as e:
        raise InvalidFrequencyLiteral(str(e)) from e


def hz(value) -> Frequency:
    """Return a frequency of ``value`` Hz."""
    return _literal(value, 1)


def khz(value) -> Frequency:
    """Return a frequency of ``value`` kHz."""
    return _literal(value, 1e3)


def mhz(value) -> Frequency:
    """Return a frequency of ``value`` MHz."""
    return _literal(value, 1e6)


def dt(value) -> Frequency:
    """Return the frequency of a sample period of ``value`` seconds."""
    try:
        return Frequency.from_dt(value)
    except NegativeFrequencyError as e:
        raise InvalidFrequencyLiteral(str(e)) from e
