"""Biquad (second-order IIR) coefficient design."""

from ._biquad_coefficients import BiquadCoefficients, biquad_coefficients
from ._constants import (
    Q_BUTTERWORTH,
    Q_BUTTERWORTH_F32,
    Q_BUTTERWORTH_F64,
)
from ._exceptions import (
    FilterDesignError,
    NegativeQualityFactorError,
    NyquistViolationError,
)
from ._filter_type import (
    AllPass,
    BandPass,
    FilterType,
    HighPass,
    HighShelf,
    LowPass,
    LowShelf,
    Notch,
    PeakingEQ,
    SinglePoleLowPass,
    SinglePoleLowPassApprox,
)
from ._hertz import Hertz

__all__ = [
    # Design functions
    "biquad_coefficients",
    "BiquadCoefficients",
    # Filter types
    "FilterType",
    "SinglePoleLowPassApprox",
    "SinglePoleLowPass",
    "LowPass",
    "HighPass",
    "BandPass",
    "Notch",
    "AllPass",
    "LowShelf",
    "HighShelf",
    "PeakingEQ",
    # Frequencies
    "Hertz",
    # Constants
    "Q_BUTTERWORTH",
    "Q_BUTTERWORTH_F32",
    "Q_BUTTERWORTH_F64",
    # Exceptions
    "FilterDesignError",
    "NegativeQualityFactorError",
    "NyquistViolationError",
]
