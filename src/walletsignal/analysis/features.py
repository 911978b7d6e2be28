"""Feature extraction helpers."""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import ArrayLike

from ..core.validation import as_signal


Number = Union[float, np.floating]


def rms(signal: ArrayLike) -> Number:
    """
    Compute root-mean-square (RMS) value of a 1-D signal.

    Parameters
    ----------
    signal:
        1-D array-like of samples.

    Returns
    -------
    float
        RMS value of the signal.
    """
    arr = as_signal(signal)
    return float(np.sqrt(np.mean(np.square(arr))))


def peak_to_peak(signal: ArrayLike) -> Number:
    """Peak-to-peak amplitude (max - min) of a 1-D signal."""
    arr = as_signal(signal)
    return float(np.max(arr) - np.min(arr))


def band_amplitude(magnitudes: ArrayLike, frequencies: ArrayLike, target: float) -> Number:
    """Magnitude of the bin whose frequency is closest to ``target``."""
    mags = np.asarray(magnitudes, dtype=float)
    freqs = np.asarray(frequencies, dtype=float)
    idx = int(np.argmin(np.abs(freqs - float(target))))
    return float(mags[idx])


def spectral_energy(signal: ArrayLike) -> Number:
    """Time-domain energy ``sum(x**2)``; equals ``sum(|X|**2) / N`` for its FFT."""
    arr = as_signal(signal)
    return float(np.sum(np.square(arr)))
