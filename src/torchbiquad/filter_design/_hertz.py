"""Frequency value in Hertz."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Hertz:
    """A non-negative frequency in Hertz.

    Parameters
    ----------
    hz : float
        Frequency magnitude in Hertz. Must be non-negative and not NaN.

    Raises
    ------
    ValueError
        If ``hz`` is negative or NaN.

    Examples
    --------
    >>> from torchbiquad.filter_design import Hertz
    >>> Hertz(440.0).hz
    440.0
    >>> Hertz.from_kilohertz(48.0).hz
    48000.0
    >>> Hertz.from_period(0.001).hz
    1000.0
    """

    hz: float

    def __post_init__(self) -> None:
        value = float(self.hz)
        if math.isnan(value) or value < 0.0:
            raise ValueError(f"Frequency must be non-negative, got {self.hz}")
        object.__setattr__(self, "hz", value)

    def __float__(self) -> float:
        return self.hz

    @classmethod
    def from_kilohertz(cls, khz: float) -> Hertz:
        return cls(float(khz) * 1e3)

    @classmethod
    def from_megahertz(cls, mhz: float) -> Hertz:
        return cls(float(mhz) * 1e6)

    @classmethod
    def from_period(cls, seconds: float) -> Hertz:
        """Frequency whose period is ``seconds``."""
        if not seconds > 0.0:
            raise ValueError(f"Period must be positive, got {seconds}")
        return cls(1.0 / float(seconds))
