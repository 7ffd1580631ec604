"""Biquad filter response types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FilterType:
    """Base class of the biquad filter response types.

    The set of responses is closed: ``SinglePoleLowPassApprox``,
    ``SinglePoleLowPass``, ``LowPass``, ``HighPass``, ``BandPass``, ``Notch``,
    ``AllPass``, ``LowShelf``, ``HighShelf`` and ``PeakingEQ``. The shelf and
    peaking responses carry the gain, in decibels, that the filter provides.

    Single pole low pass filters are cheaper to retune, as every other type
    requires evaluations of sin and cos.
    """


@dataclass(frozen=True)
class SinglePoleLowPassApprox(FilterType):
    """First-order low pass, approximated without transcendental calls."""


@dataclass(frozen=True)
class SinglePoleLowPass(FilterType):
    """First-order low pass from the bilinear transform."""


@dataclass(frozen=True)
class LowPass(FilterType):
    """Second-order low pass."""


@dataclass(frozen=True)
class HighPass(FilterType):
    """Second-order high pass."""


@dataclass(frozen=True)
class BandPass(FilterType):
    """Band pass with constant skirt gain (peak gain = Q)."""


@dataclass(frozen=True)
class Notch(FilterType):
    """Band reject with a zero at the center frequency."""


@dataclass(frozen=True)
class AllPass(FilterType):
    """Unit-magnitude response with a phase shift around the center."""


@dataclass(frozen=True)
class LowShelf(FilterType):
    """Low shelf.

    Parameters
    ----------
    gain_db : float
        Shelf gain in decibels. Positive boosts, negative cuts.
    """

    gain_db: float


@dataclass(frozen=True)
class HighShelf(FilterType):
    """High shelf.

    Parameters
    ----------
    gain_db : float
        Shelf gain in decibels. Positive boosts, negative cuts.
    """

    gain_db: float


@dataclass(frozen=True)
class PeakingEQ(FilterType):
    """Peaking equalizer.

    Parameters
    ----------
    gain_db : float
        Gain at the center frequency in decibels.
    """

    gain_db: float
