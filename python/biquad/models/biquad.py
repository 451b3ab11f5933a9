# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""Models for configuring a biquad filter."""

from typing import Literal

from pydantic import BaseModel, Field

from biquad.dsp.coefficients import Coefficients
from biquad.dsp.forms import Biquad, DirectForm1, DirectForm2Transposed
from biquad.dsp.frequency import Frequency
from biquad.models.fields import BIQUAD_TYPES, biquad_lowpass

FORMS = {
    "df1": DirectForm1,
    "df2t": DirectForm2Transposed,
}


class BiquadParameters(BaseModel, extra="ignore"):
    """Parameters for a biquad filter.

    Attributes
    ----------
    fs : float
        The sample rate in Hz.
    filter_type : biquad.models.fields.BIQUAD_TYPES
        The type of biquad filter to use and its parameters.
    form : {"df1", "df2t"}
        The filter structure, direct form 1 or direct form 2 transposed.
        Use direct form 1 if the filter will be retuned while running.
    """

    fs: float = Field(default=48000, gt=0, description="Sample rate in Hz.")
    filter_type: BIQUAD_TYPES = Field(
        default_factory=biquad_lowpass,
        description="Type of biquad filter to implement and its parameters.",
    )
    form: Literal["df1", "df2t"] = Field(default="df1", description="Filter structure.")

    def coefficients(self) -> Coefficients:
        """Design the filter coefficients."""
        return self.filter_type.coefficients(Frequency.from_hz(self.fs))


def make_biquad(params: BiquadParameters) -> Biquad:
    """
    Create a biquad filter from its parameters.

    Parameters
    ----------
    params : BiquadParameters
        The filter configuration.

    Returns
    -------
    Biquad
        A :py:class:`DirectForm1` or :py:class:`DirectForm2Transposed`
        instance with zeroed states.

    Raises
    ------
    OutsideNyquistError
        If the filter frequency is not below fs/2.
    """
    return FORMS[params.form](params.coefficients())
