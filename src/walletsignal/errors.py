"""Exception types raised by the signal analysis engine.

All errors derive from :class:`ValueError` so callers that already guard
numeric helpers with ``except ValueError`` keep working.
"""

from __future__ import annotations


class SignalProcessingError(ValueError):
    """Base class for every failure reported by :mod:`walletsignal`."""


class ValidationError(SignalProcessingError):
    """Malformed input or parameters (empty signal, bad window, bad cutoff...)."""


class InsufficientDataError(SignalProcessingError):
    """The signal is too short to fill a single analysis window."""


class InvalidFilterCoefficientsError(SignalProcessingError):
    """Filter coefficients cannot be applied (e.g. ``a[0] == 0``)."""


__all__ = [
    "SignalProcessingError",
    "ValidationError",
    "InsufficientDataError",
    "InvalidFilterCoefficientsError",
]
