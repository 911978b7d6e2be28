"""Radix-2 FFT helpers."""

from __future__ import annotations

import logging
import math
from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike

from ..core.models import FourierTransform
from ..core.validation import DEFAULT_MAX_SIGNAL_LENGTH, as_signal, require_int, require_positive
from ..errors import ValidationError


logger = logging.getLogger(__name__)


def next_power_of_two(n: int) -> int:
    """Smallest power of two ``>= n`` (``2 ** ceil(log2(n))``)."""
    n = require_int("n", n, minimum=1)
    return 1 << (n - 1).bit_length()


def _is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def _fft_recursive(x: np.ndarray) -> np.ndarray:
    """Decimation-in-time Cooley-Tukey on a complex array of power-of-two length."""
    n = x.size
    if n == 1:
        return x.copy()

    even = _fft_recursive(x[0::2])
    odd = _fft_recursive(x[1::2])

    theta = -2.0 * math.pi * np.arange(n // 2, dtype=float) / n
    twiddled = (np.cos(theta) + 1j * np.sin(theta)) * odd

    return np.concatenate((even + twiddled, even - twiddled))


def _transform(x: np.ndarray) -> np.ndarray:
    # NaN/Inf samples propagate through the butterflies without warnings.
    with np.errstate(invalid="ignore", over="ignore"):
        return _fft_recursive(x)


def fft(signal: ArrayLike, *, max_length: int | None = DEFAULT_MAX_SIGNAL_LENGTH) -> FourierTransform:
    """
    Discrete Fourier transform of a real signal.

    The signal is zero-padded to ``next_power_of_two(len(signal))`` and
    transformed with the recursive radix-2 decimation-in-time algorithm.

    Parameters
    ----------
    signal:
        1-D array-like of real samples (length >= 1).
    max_length:
        Reject signals longer than this many samples.

    Returns
    -------
    FourierTransform
        ``(real, imag)`` arrays of the padded length.
    """
    arr = as_signal(signal, max_length=max_length)
    n_padded = next_power_of_two(arr.size)

    padded = np.zeros(n_padded, dtype=complex)
    padded[: arr.size] = arr
    logger.debug("fft: %d samples padded to %d", arr.size, n_padded)

    spectrum = _transform(padded)
    return FourierTransform(real=spectrum.real.copy(), imag=spectrum.imag.copy())


def inverse_fft(real: ArrayLike, imag: ArrayLike) -> FourierTransform:
    """
    Inverse transform of a power-of-two length spectrum.

    Uses ``ifft(X) = conj(fft(conj(X))) / N`` so the forward recursion is reused.
    """
    re = np.asarray(real, dtype=float)
    im = np.asarray(imag, dtype=float)
    if re.ndim != 1 or re.shape != im.shape:
        raise ValidationError(
            f"real and imag must be 1-D arrays of equal length, got {re.shape} and {im.shape}"
        )
    if not _is_power_of_two(re.size):
        raise ValidationError(f"spectrum length must be a power of two, got {re.size}")

    forward = _transform(np.conj(re + 1j * im))
    out = np.conj(forward) / re.size
    return FourierTransform(real=out.real.copy(), imag=out.imag.copy())


def compute_fft(
    signal: ArrayLike,
    sample_rate_hz: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    One-sided frequency bins (Hz) and magnitudes of the padded radix-2 FFT.

    Parameters
    ----------
    signal:
        1-D array-like input signal.
    sample_rate_hz:
        Sampling rate in Hz. Must be > 0.

    Returns
    -------
    freqs : np.ndarray
        Bins ``k * sample_rate_hz / N`` for ``k = 0 .. N/2`` where ``N`` is the padded length.
    magnitude : np.ndarray
        Magnitude of the same bins.
    """
    fs = require_positive("sample_rate_hz", sample_rate_hz)
    result = fft(signal)
    n_padded = result.padded_length
    n_bins = n_padded // 2 + 1
    freqs = np.arange(n_bins, dtype=float) * fs / n_padded
    return freqs, result.magnitudes()[:n_bins]


__all__ = ["next_power_of_two", "fft", "inverse_fft", "compute_fft"]
