"""Analytic signal and amplitude envelope."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike
from scipy import signal as sps

from ..core.validation import DEFAULT_MAX_SIGNAL_LENGTH, as_signal


def analytic_signal(
    signal: ArrayLike,
    *,
    max_length: int | None = DEFAULT_MAX_SIGNAL_LENGTH,
) -> np.ndarray:
    """
    Complex analytic signal ``x + i * hilbert(x)`` via scipy.signal.hilbert.

    The transform runs on the signal at its own length; no zero-padding is
    applied, so the envelope stays exact for lengths that are not powers of two.
    """
    x = as_signal(signal, max_length=max_length)
    return sps.hilbert(x)


def envelope(
    signal: ArrayLike,
    *,
    max_length: int | None = DEFAULT_MAX_SIGNAL_LENGTH,
) -> np.ndarray:
    """Instantaneous amplitude ``|analytic_signal(signal)|``."""
    return np.abs(analytic_signal(signal, max_length=max_length))


__all__ = ["analytic_signal", "envelope"]
