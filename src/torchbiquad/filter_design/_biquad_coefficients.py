"""Second-order IIR (biquad) coefficient design."""

from __future__ import annotations

import math
from typing import Callable, NamedTuple, Optional, Union

import torch
from torch import Tensor

from ._constants import SUPPORTED_DTYPES
from ._exceptions import (
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


class BiquadCoefficients(NamedTuple):
    """Normalized coefficients of a biquad section.

    The coefficients form the Z-domain transfer function::

                b0 + b1 * z^-1 + b2 * z^-2
        H(z) =  --------------------------
                 1 + a1 * z^-1 + a2 * z^-2

    Parameters
    ----------
    a1, a2 : Tensor
        Denominator (feedback) coefficients. 0-d tensors.
    b0, b1, b2 : Tensor
        Numerator (feedforward) coefficients. 0-d tensors.
    """

    a1: Tensor
    a2: Tensor
    b0: Tensor
    b1: Tensor
    b2: Tensor

    @property
    def dtype(self) -> torch.dtype:
        return self.a1.dtype

    def ba(self) -> tuple[Tensor, Tensor]:
        """Numerator and denominator, each of shape (3,), with a[0] = 1."""
        b = torch.stack([self.b0, self.b1, self.b2])
        a = torch.stack([torch.ones_like(self.a1), self.a1, self.a2])
        return b, a

    def sos(self) -> Tensor:
        """Single second-order section ``[[b0, b1, b2, 1, a1, a2]]``."""
        b, a = self.ba()
        return torch.cat([b, a]).unsqueeze(0)


# Raw (b0, b1, b2, a0, a1, a2) before normalization by a0
_Raw = tuple[Tensor, Tensor, Tensor, Tensor, Tensor, Tensor]


def _cookbook_terms(omega: Tensor, q: Tensor) -> tuple[Tensor, Tensor, Tensor]:
    omega_s = torch.sin(omega)
    omega_c = torch.cos(omega)
    alpha = omega_s / (2.0 * q)
    return omega_s, omega_c, alpha


def _linear_gain(gain_db: float, like: Tensor) -> Tensor:
    gain = torch.as_tensor(gain_db, dtype=like.dtype, device=like.device)
    return torch.pow(10.0, gain / 40.0)


def _single_pole_low_pass_approx(
    filter_type: FilterType, omega: Tensor, q: Tensor
) -> _Raw:
    alpha = omega / (omega + 1.0)
    zero = torch.zeros_like(omega)
    one = torch.ones_like(omega)
    return alpha, zero, zero, one, alpha - 1.0, zero


def _single_pole_low_pass(
    filter_type: FilterType, omega: Tensor, q: Tensor
) -> _Raw:
    omega_t = torch.tan(omega / 2.0)
    zero = torch.zeros_like(omega)
    return omega_t, omega_t, zero, 1.0 + omega_t, omega_t - 1.0, zero


def _low_pass(filter_type: FilterType, omega: Tensor, q: Tensor) -> _Raw:
    _, omega_c, alpha = _cookbook_terms(omega, q)

    b0 = (1.0 - omega_c) * 0.5
    b1 = 1.0 - omega_c
    b2 = (1.0 - omega_c) * 0.5
    a0 = 1.0 + alpha
    a1 = -2.0 * omega_c
    a2 = 1.0 - alpha
    return b0, b1, b2, a0, a1, a2


def _high_pass(filter_type: FilterType, omega: Tensor, q: Tensor) -> _Raw:
    _, omega_c, alpha = _cookbook_terms(omega, q)

    b0 = (1.0 + omega_c) * 0.5
    b1 = -(1.0 + omega_c)
    b2 = (1.0 + omega_c) * 0.5
    a0 = 1.0 + alpha
    a1 = -2.0 * omega_c
    a2 = 1.0 - alpha
    return b0, b1, b2, a0, a1, a2


def _band_pass(filter_type: FilterType, omega: Tensor, q: Tensor) -> _Raw:
    omega_s, omega_c, alpha = _cookbook_terms(omega, q)

    b0 = omega_s / 2.0
    b1 = torch.zeros_like(omega)
    b2 = -(omega_s / 2.0)
    a0 = 1.0 + alpha
    a1 = -2.0 * omega_c
    a2 = 1.0 - alpha
    return b0, b1, b2, a0, a1, a2


def _notch(filter_type: FilterType, omega: Tensor, q: Tensor) -> _Raw:
    _, omega_c, alpha = _cookbook_terms(omega, q)

    b0 = torch.ones_like(omega)
    b1 = -2.0 * omega_c
    b2 = torch.ones_like(omega)
    a0 = 1.0 + alpha
    a1 = -2.0 * omega_c
    a2 = 1.0 - alpha
    return b0, b1, b2, a0, a1, a2


def _all_pass(filter_type: FilterType, omega: Tensor, q: Tensor) -> _Raw:
    _, omega_c, alpha = _cookbook_terms(omega, q)

    b0 = 1.0 - alpha
    b1 = -2.0 * omega_c
    b2 = 1.0 + alpha
    a0 = 1.0 + alpha
    a1 = -2.0 * omega_c
    a2 = 1.0 - alpha
    return b0, b1, b2, a0, a1, a2


def _low_shelf(filter_type: LowShelf, omega: Tensor, q: Tensor) -> _Raw:
    a = _linear_gain(filter_type.gain_db, omega)
    _, omega_c, alpha = _cookbook_terms(omega, q)
    shelf = 2.0 * alpha * torch.sqrt(a)

    b0 = a * ((a + 1.0) - (a - 1.0) * omega_c + shelf)
    b1 = 2.0 * a * ((a - 1.0) - (a + 1.0) * omega_c)
    b2 = a * ((a + 1.0) - (a - 1.0) * omega_c - shelf)
    a0 = (a + 1.0) + (a - 1.0) * omega_c + shelf
    a1 = -2.0 * ((a - 1.0) + (a + 1.0) * omega_c)
    a2 = (a + 1.0) + (a - 1.0) * omega_c - shelf
    return b0, b1, b2, a0, a1, a2


def _high_shelf(filter_type: HighShelf, omega: Tensor, q: Tensor) -> _Raw:
    a = _linear_gain(filter_type.gain_db, omega)
    _, omega_c, alpha = _cookbook_terms(omega, q)
    shelf = 2.0 * alpha * torch.sqrt(a)

    b0 = a * ((a + 1.0) + (a - 1.0) * omega_c + shelf)
    b1 = -2.0 * a * ((a - 1.0) + (a + 1.0) * omega_c)
    b2 = a * ((a + 1.0) + (a - 1.0) * omega_c - shelf)
    a0 = (a + 1.0) - (a - 1.0) * omega_c + shelf
    a1 = 2.0 * ((a - 1.0) - (a + 1.0) * omega_c)
    a2 = (a + 1.0) - (a - 1.0) * omega_c - shelf
    return b0, b1, b2, a0, a1, a2


def _peaking_eq(filter_type: PeakingEQ, omega: Tensor, q: Tensor) -> _Raw:
    a = _linear_gain(filter_type.gain_db, omega)
    _, omega_c, alpha = _cookbook_terms(omega, q)

    b0 = 1.0 + alpha * a
    b1 = -2.0 * omega_c
    b2 = 1.0 - alpha * a
    a0 = 1.0 + alpha / a
    a1 = -2.0 * omega_c
    a2 = 1.0 - alpha / a
    return b0, b1, b2, a0, a1, a2


_FORMULAS: dict[type, Callable[..., _Raw]] = {
    SinglePoleLowPassApprox: _single_pole_low_pass_approx,
    SinglePoleLowPass: _single_pole_low_pass,
    LowPass: _low_pass,
    HighPass: _high_pass,
    BandPass: _band_pass,
    Notch: _notch,
    AllPass: _all_pass,
    LowShelf: _low_shelf,
    HighShelf: _high_shelf,
    PeakingEQ: _peaking_eq,
}


def _as_hertz(frequency: Union[Hertz, float]) -> Hertz:
    if isinstance(frequency, Hertz):
        return frequency
    return Hertz(frequency)


def biquad_coefficients(
    filter_type: FilterType,
    sampling_frequency: Union[Hertz, float],
    cutoff_frequency: Union[Hertz, float],
    quality_factor: Union[Tensor, float],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> BiquadCoefficients:
    """
    Design the normalized coefficients of a biquad filter section.

    Second-order responses follow the Audio EQ Cookbook (R. Bristow-Johnson).
    The first-order low pass responses follow the discrete-time realization
    of an RC low pass filter.

    Parameters
    ----------
    filter_type : FilterType
        The response to design, e.g. ``LowPass()`` or ``PeakingEQ(6.0)``.
    sampling_frequency : Hertz or float
        Sampling frequency of the digital system, in Hz.
    cutoff_frequency : Hertz or float
        Cutoff (or center) frequency, in Hz. Must not exceed half the
        sampling frequency.
    quality_factor : float or Tensor
        Quality factor Q. Must not be negative. A 0-d tensor must already
        have the requested ``dtype``. Ignored by the single pole responses
        apart from validation.
    dtype : torch.dtype, optional
        Precision the formulas are evaluated at, ``torch.float32`` or
        ``torch.float64``. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    BiquadCoefficients
        ``(a1, a2, b0, b1, b2)`` as 0-d tensors, normalized so that a0 = 1.

    Raises
    ------
    NyquistViolationError
        If ``2 * cutoff_frequency > sampling_frequency``.
    NegativeQualityFactorError
        If ``quality_factor < 0``.
    TypeError
        If ``filter_type`` is not a known ``FilterType``, or if
        ``quality_factor`` is a tensor of a different dtype.
    ValueError
        If ``dtype`` is not float32 or float64.

    Notes
    -----
    The normalized angular frequency is

        w0 = 2*pi*cutoff_frequency/sampling_frequency

    and, for the second-order responses, alpha = sin(w0)/(2*Q). The shelf and
    peaking responses additionally use A = 10^(gain_db/40).

    Boundary values that pass validation are not rejected. Q = 0 makes alpha
    infinite, so the second-order responses return non-finite coefficients;
    avoiding it is up to the caller. A cutoff of 0 Hz returns the finite
    degenerate design at DC.

    Examples
    --------
    >>> import torch
    >>> from torchbiquad.filter_design import (
    ...     Q_BUTTERWORTH, LowPass, biquad_coefficients,
    ... )
    >>> coeffs = biquad_coefficients(
    ...     LowPass(), 1000.0, 100.0, Q_BUTTERWORTH, dtype=torch.float64
    ... )
    >>> b, a = coeffs.ba()
    >>> b.shape, a.shape
    (torch.Size([3]), torch.Size([3]))
    """
    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    if dtype not in SUPPORTED_DTYPES:
        raise ValueError(
            f"dtype must be torch.float32 or torch.float64, got {dtype}"
        )

    formula = _FORMULAS.get(type(filter_type))
    if formula is None:
        raise TypeError(
            f"filter_type must be a FilterType variant, got {filter_type!r}"
        )

    if isinstance(quality_factor, Tensor):
        if quality_factor.dtype != dtype:
            raise TypeError(
                f"quality_factor has dtype {quality_factor.dtype}, "
                f"expected {dtype}"
            )
        q = quality_factor.to(device)
    else:
        q = torch.tensor(float(quality_factor), dtype=dtype, device=device)

    fs = torch.tensor(
        _as_hertz(sampling_frequency).hz, dtype=dtype, device=device
    )
    f0 = torch.tensor(
        _as_hertz(cutoff_frequency).hz, dtype=dtype, device=device
    )

    # Validate inputs
    if bool(2.0 * f0 > fs):
        raise NyquistViolationError(
            f"cutoff_frequency must not exceed Nyquist ({fs.item() / 2.0}), "
            f"got {f0.item()}"
        )
    if bool(q < 0):
        raise NegativeQualityFactorError(
            f"quality_factor must be non-negative, got {q.item()}"
        )

    # Compute normalized angular frequency
    omega = 2.0 * math.pi * f0 / fs

    b0, b1, b2, a0, a1, a2 = formula(filter_type, omega, q)

    return BiquadCoefficients(
        a1=a1 / a0,
        a2=a2 / a0,
        b0=b0 / a0,
        b1=b1 / a0,
        b2=b2 / a0,
    )
