# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""Errors and warnings raised when designing biquad filters."""


class BiquadError(ValueError):
    """Base class for invalid biquad design parameters."""

    pass


class OutsideNyquistError(BiquadError):
    """The filter frequency is not below half the sample rate.

    This is also raised when the sample rate and filter frequency are
    passed in the wrong order.
    """

    pass


class NegativeQError(BiquadError):
    """The Q factor is zero or negative."""

    pass


class NegativeFrequencyError(BiquadError):
    """A frequency was created from a negative magnitude or period."""

    pass


class InvalidFrequencyLiteral(RuntimeError):
    """A unit helper such as ``hz`` or ``khz`` was given an invalid value.

    The helpers are meant for values known to be valid when the code is
    written, so this is not a :py:class:`BiquadError` and should not be
    caught as one.
    """

    pass


class StabilityWarning(UserWarning):
    """A warning for coefficients with poles on or outside the unit circle."""

    pass
