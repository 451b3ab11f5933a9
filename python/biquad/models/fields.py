# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""Pydantic models of the different biquad types."""

from functools import partial
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from biquad.dsp.coefficients import Coefficients, Type
from biquad.dsp.frequency import Frequency

DEFAULT_Q = partial(Field, default=0.707, gt=0, description="Q factor of the filter.")
DEFAULT_FILTER_FREQ = partial(
    Field, default=1000, ge=0, description="Frequency of the filter in Hz."
)
DEFAULT_GAIN_DB = partial(
    Field, default=0.0, ge=-48, le=48, description="Gain of the filter in dB."
)


class FilterParameters(BaseModel, extra="ignore"):
    """The pydantic model shared by all biquad filter types."""

    type: str
    filter_freq: float = DEFAULT_FILTER_FREQ()
    q_factor: float = DEFAULT_Q()

    def coefficients(self, fs: Frequency) -> Coefficients:
        """Design the coefficients for these parameters at sample rate fs.

        Raises
        ------
        OutsideNyquistError
            If filter_freq is not below fs/2.
        """
        return Coefficients.from_params(
            Type(self.type),
            fs,
            Frequency.from_hz(self.filter_freq),
            self.q_factor,
            getattr(self, "gain_db", 0.0),
        )


class biquad_allpass(FilterParameters):
    """Parameters for a biquad configured to allpass."""

    type: Literal["allpass"] = "allpass"


class biquad_bandpass(FilterParameters):
    """Parameters for a biquad configured to bandpass."""

    type: Literal["bandpass"] = "bandpass"


class biquad_highpass(FilterParameters):
    """Parameters for a biquad configured to highpass."""

    type: Literal["highpass"] = "highpass"


class biquad_highshelf(FilterParameters):
    """Parameters for a biquad configured to highshelf."""

    type: Literal["highshelf"] = "highshelf"
    gain_db: float = DEFAULT_GAIN_DB()


class biquad_lowpass(FilterParameters):
    """Parameters for a biquad configured to lowpass."""

    type: Literal["lowpass"] = "lowpass"


class biquad_lowshelf(FilterParameters):
    """Parameters for a biquad configured to lowshelf."""

    type: Literal["lowshelf"] = "lowshelf"
    gain_db: float = DEFAULT_GAIN_DB()


class biquad_notch(FilterParameters):
    """Parameters for a biquad configured to notch."""

    type: Literal["notch"] = "notch"


class biquad_peaking(FilterParameters):
    """Parameters for a biquad configured to peaking."""

    type: Literal["peaking"] = "peaking"
    gain_db: float = DEFAULT_GAIN_DB()


BIQUAD_TYPES = Annotated[
    Union[
        biquad_allpass,
        biquad_bandpass,
        biquad_highpass,
        biquad_highshelf,
        biquad_lowpass,
        biquad_lowshelf,
        biquad_notch,
        biquad_peaking,
    ],
    Field(discriminator="type"),
]
