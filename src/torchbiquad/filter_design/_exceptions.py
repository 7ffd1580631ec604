"""Exceptions for filter design module."""


class FilterDesignError(Exception):
    """Base exception for filter design errors."""

    pass


class NyquistViolationError(FilterDesignError):
    """Raised when the cutoff frequency exceeds the Nyquist frequency.

    This occurs when:
    - 2 * cutoff_frequency > sampling_frequency

    A cutoff exactly at the Nyquist frequency is accepted.
    """

    pass


class NegativeQualityFactorError(FilterDesignError):
    """Raised when the quality factor Q is negative.

    Q is a ratio of center frequency to bandwidth and has no meaning below
    zero. Q = 0 is accepted and yields a degenerate design.
    """

    pass
