"""Value objects returned by the signal analysis engine.

The dataclasses hold NumPy arrays, so they compare and hash by identity;
compare fields with ``np.array_equal`` instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np


class FourierTransform(NamedTuple):
    """Real and imaginary parts of a radix-2 FFT (length is a power of two)."""

    real: np.ndarray
    imag: np.ndarray

    @property
    def padded_length(self) -> int:
        return int(self.real.size)

    def magnitudes(self) -> np.ndarray:
        """Per-bin magnitude ``sqrt(real**2 + imag**2)``."""
        return np.sqrt(self.real * self.real + self.imag * self.imag)

    def phases(self) -> np.ndarray:
        """Per-bin phase in radians, ``atan2(imag, real)``."""
        return np.arctan2(self.imag, self.real)

    def as_complex(self) -> np.ndarray:
        return self.real + 1j * self.imag


@dataclass(frozen=True, eq=False)
class FrequencyDomain:
    """
    Welch power spectrum of a signal.

    Attributes
    ----------
    frequencies:
        Normalized bin frequencies in cycles per sample (``i / window_size``),
        ascending, length ``window_size // 2``.
    magnitudes:
        Segment-averaged magnitudes for the same bins.
    phases:
        Phases (radians) of the unwindowed, unsegmented full-signal FFT.
    dominant_frequency:
        Frequency of the largest magnitude bin (DC included).
    power_spectrum:
        Copy of ``magnitudes``.
    segment_count:
        Number of Welch segments that were averaged.
    """

    frequencies: np.ndarray
    magnitudes: np.ndarray
    phases: np.ndarray
    dominant_frequency: float
    power_spectrum: np.ndarray
    segment_count: int = 0

    def frequencies_hz(self, sample_rate_hz: float) -> np.ndarray:
        """Rescale the normalized bins to Hz for a given sample rate."""
        return self.frequencies * float(sample_rate_hz)

    def dominant_frequency_hz(self, sample_rate_hz: float) -> float:
        return float(self.dominant_frequency) * float(sample_rate_hz)


@dataclass(frozen=True, eq=False)
class FilterCoefficients:
    """Feed-forward (``b``) and feed-back (``a``) taps of an IIR filter."""

    b: np.ndarray
    a: np.ndarray

    @property
    def order(self) -> int:
        return max(len(self.b), len(self.a)) - 1


@dataclass(frozen=True, eq=False)
class FilterResult:
    """Output of a Butterworth filtering pass."""

    filtered: np.ndarray
    frequency: float
    attenuation: float
    filter_type: str = "lowpass"
    coefficients: FilterCoefficients | None = None


__all__ = [
    "FourierTransform",
    "FrequencyDomain",
    "FilterCoefficients",
    "FilterResult",
]
