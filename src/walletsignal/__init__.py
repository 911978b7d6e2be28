"""Frequency-domain signal analysis for wallet activity time series.

Callers hand in plain numeric sequences (gas prices, activity counts, volumes)
and get back spectra and filtered series:

- :mod:`walletsignal.analysis`: radix-2 FFT, Hann window, Welch PSD,
  Butterworth design/application, Hilbert envelope, time-domain features
- :mod:`walletsignal.config`: YAML-backed engine defaults
- :mod:`walletsignal.engine`: :class:`SignalProcessingEngine` facade
"""

from .core.models import FilterCoefficients, FilterResult, FourierTransform, FrequencyDomain
from .engine import SignalProcessingEngine
from .errors import (
    InsufficientDataError,
    InvalidFilterCoefficientsError,
    SignalProcessingError,
    ValidationError,
)

__all__ = [
    "FilterCoefficients",
    "FilterResult",
    "FourierTransform",
    "FrequencyDomain",
    "InsufficientDataError",
    "InvalidFilterCoefficientsError",
    "SignalProcessingEngine",
    "SignalProcessingError",
    "ValidationError",
]
