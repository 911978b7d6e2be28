"""Power spectral density estimation with Welch's method.

The signal is cut into overlapping segments of ``window_size`` samples; each
segment is Hann-windowed and transformed, and the per-bin magnitudes are
averaged. Only the sub-Nyquist half (``window_size // 2`` bins) is returned,
indexed by the normalized frequency ``i / window_size`` in cycles per sample.
Callers multiply by their sample rate to obtain Hz.

Phases are taken from a single FFT of the complete, unwindowed signal rather
than from the segments.
"""

from __future__ import annotations

import logging
from typing import List

import numpy as np
from numpy.typing import ArrayLike

from ..core.models import FrequencyDomain
from ..core.validation import DEFAULT_MAX_SIGNAL_LENGTH, as_signal, require_int
from ..errors import InsufficientDataError, ValidationError
from .fft import fft
from .windows import hann_window


logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = 256
DEFAULT_OVERLAP = 128


def _validate_window(window_size: int, overlap: int) -> tuple[int, int]:
    window_size = require_int("window_size", window_size, minimum=2)
    overlap = require_int("overlap", overlap, minimum=0)
    if overlap >= window_size:
        raise ValidationError(
            f"overlap must be < window_size ({window_size}), got {overlap}"
        )
    return window_size, overlap


def segment_offsets(length: int, window_size: int, overlap: int) -> List[int]:
    """
    Start offsets of the Welch segments.

    Offsets advance by ``window_size - overlap`` and are emitted while
    ``offset < length - window_size``, so a signal exactly one window long
    yields no segment.
    """
    window_size, overlap = _validate_window(window_size, overlap)
    step = window_size - overlap
    return list(range(0, max(0, int(length) - window_size), step))


def power_spectral_density(
    signal: ArrayLike,
    window_size: int = DEFAULT_WINDOW_SIZE,
    overlap: int = DEFAULT_OVERLAP,
    *,
    max_length: int | None = DEFAULT_MAX_SIGNAL_LENGTH,
) -> FrequencyDomain:
    """
    Estimate the magnitude spectrum of ``signal`` with Welch's method.

    Parameters
    ----------
    signal:
        1-D array-like of real samples.
    window_size:
        Samples per segment (>= 2).
    overlap:
        Samples shared by consecutive segments (0 <= overlap < window_size).
    max_length:
        Reject signals longer than this many samples.

    Returns
    -------
    FrequencyDomain
        Averaged magnitudes, full-signal phases and the dominant frequency.

    Raises
    ------
    ValidationError
        Malformed window parameters or signal.
    InsufficientDataError
        The signal does not fill a single segment.
    """
    window_size, overlap = _validate_window(window_size, overlap)
    x = as_signal(signal, max_length=max_length)

    offsets = segment_offsets(x.size, window_size, overlap)
    if not offsets:
        raise InsufficientDataError(
            f"signal of {x.size} samples is too short for window_size={window_size}"
        )

    window = hann_window(window_size)
    total = None
    for start in offsets:
        segment = x[start : start + window_size] * window
        magnitudes = fft(segment, max_length=None).magnitudes()
        total = magnitudes if total is None else total + magnitudes
    averaged = total / len(offsets)

    n_bins = window_size // 2
    magnitudes = averaged[:n_bins].copy()
    frequencies = np.arange(n_bins, dtype=float) / window_size
    phases = fft(x, max_length=None).phases()[:n_bins]

    # argmax keeps the first of equal maxima; the DC bin takes part.
    dominant_idx = int(np.argmax(magnitudes))

    logger.debug(
        "psd: %d samples, window=%d, overlap=%d, segments=%d, dominant bin=%d",
        x.size,
        window_size,
        overlap,
        len(offsets),
        dominant_idx,
    )

    return FrequencyDomain(
        frequencies=frequencies,
        magnitudes=magnitudes,
        phases=phases,
        dominant_frequency=float(frequencies[dominant_idx]),
        power_spectrum=magnitudes.copy(),
        segment_count=len(offsets),
    )


__all__ = [
    "DEFAULT_WINDOW_SIZE",
    "DEFAULT_OVERLAP",
    "segment_offsets",
    "power_spectral_density",
]
