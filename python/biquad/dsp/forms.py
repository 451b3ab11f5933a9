# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""
Biquad filter realizations.

Two structures are provided, both running one float32 sample at a time:

* :py:class:`DirectForm1` keeps the last two inputs and outputs. As the
  states are the signal itself, changing the coefficients adds minimal
  artifacts, so it is the better choice for filters that are retuned
  while running.
* :py:class:`DirectForm2Transposed` keeps two mixed states. It uses
  fewer operations per sample and has better numerical behaviour, but
  retuning causes larger transients, so it is best for static filters.

To clear the filter history, create a new instance.
"""

import numpy as np
import numpy.typing as npt
from docstring_inheritance import NumpyDocstringInheritanceInitMeta

from biquad.dsp.coefficients import Coefficients


class Biquad(metaclass=NumpyDocstringInheritanceInitMeta):
    """
    Generic biquad, all realizations should inherit from this class and
    implement its methods.

    By using the metaclass NumpyDocstringInheritanceInitMeta, parameter
    and attribute documentation can be inherited by the child classes.

    Parameters
    ----------
    coeffs : Coefficients
        The filter coefficients, usually from
        :py:meth:`Coefficients.from_params`.

    Attributes
    ----------
    coeffs : Coefficients
        The coefficients currently applied to the signal.
    """

    def __init__(self, coeffs: Coefficients):
        if not isinstance(coeffs, Coefficients):
            raise TypeError("coeffs must be a Coefficients object")
        self._coeffs = coeffs

    @property
    def coeffs(self) -> Coefficients:
        return self._coeffs

    @property
    def state(self) -> tuple[np.float32, ...]:
        """The saved filter states."""
        raise NotImplementedError

    def run(self, sample: float) -> np.float32:
        """
        Filter a single sample.

        Non-finite values propagate through the filter as normal
        floating point values.

        Parameters
        ----------
        sample : float
            The input sample.

        Returns
        -------
        numpy.float32
            The filtered sample.
        """
        raise NotImplementedError

    def update_coefficients(self, new_coeffs: Coefficients):
        """
        Replace the filter coefficients.

        The filter states are kept, so the next call to :py:meth:`run`
        continues from the existing history using the new coefficients.

        Parameters
        ----------
        new_coeffs : Coefficients
            The new coefficients.
        """
        if not isinstance(new_coeffs, Coefficients):
            raise TypeError("new_coeffs must be a Coefficients object")
        self._coeffs = new_coeffs

    def freq_response(
        self, fs, nfft: int = 1024
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.complex128]]:
        """
        Calculate the frequency response of the current coefficients.

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
        return self._coeffs.freq_response(fs, nfft)

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self._coeffs)


class DirectForm1(Biquad):
    """
    A direct form 1 biquad filter:
    `y[n] = b0*x[n] + b1*x[n-1] + b2*x[n-2] - a1*y[n-1] - a2*y[n-2]`

    The states are the previous two inputs and outputs.
    """

    def __init__(self, coeffs: Coefficients):
        super().__init__(coeffs)

        self._x1 = np.float32(0.0)
        self._x2 = np.float32(0.0)
        self._y1 = np.float32(0.0)
        self._y2 = np.float32(0.0)

    @property
    def state(self) -> tuple[np.float32, ...]:
        """The saved states ``(x1, x2, y1, y2)``."""
        return (self._x1, self._x2, self._y1, self._y2)

    def run(self, sample: float) -> np.float32:
        c = self._coeffs
        x = np.float32(sample)

        with np.errstate(over="ignore", invalid="ignore"):
            y = c.b0 * x + c.b1 * self._x1 + c.b2 * self._x2 - c.a1 * self._y1 - c.a2 * self._y2

        self._x2 = self._x1
        self._x1 = x
        self._y2 = self._y1
        self._y1 = y

        return y


class DirectForm2Transposed(Biquad):
    """
    A direct form 2 transposed biquad filter:
    `y[n] = b0*x[n] + s1[n-1]`
    `s1[n] = b1*x[n] - a1*y[n] + s2[n-1]`
    `s2[n] = b2*x[n] - a2*y[n]`

    The two states mix the input and output history, so changing the
    coefficients while running causes larger transients than
    :py:class:`DirectForm1`.
    """

    def __init__(self, coeffs: Coefficients):
        super().__init__(coeffs)

        self._s1 = np.float32(0.0)
        self._s2 = np.float32(0.0)

    @property
    def state(self) -> tuple[np.float32, ...]:
        """The saved states ``(s1, s2)``."""
        return (self._s1, self._s2)

    def run(self, sample: float) -> np.float32:
        c = self._coeffs
        x = np.float32(sample)

        with np.errstate(over="ignore", invalid="ignore"):
            y = self._s1 + c.b0 * x
            self._s1 = self._s2 + c.b1 * x - c.a1 * y
            self._s2 = c.b2 * x - c.a2 * y

        return y
