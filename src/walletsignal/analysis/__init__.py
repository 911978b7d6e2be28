"""Signal analysis routines (FFT, windowing, Welch PSD, filtering, envelopes).

Every module here is a set of pure functions over 1-D NumPy arrays. Nothing is
cached between calls, so the helpers can be shared freely across threads.
"""

from .fft import compute_fft, fft, inverse_fft, next_power_of_two
from .filters import (
    apply_filter,
    butterworth_attenuation,
    butterworth_highpass,
    butterworth_lowpass,
    design_butterworth,
    detrend,
)
from .hilbert import analytic_signal, envelope
from .psd import power_spectral_density, segment_offsets
from .windows import apply_hann_window, hann_window

__all__ = [
    "analytic_signal",
    "apply_filter",
    "apply_hann_window",
    "butterworth_attenuation",
    "butterworth_highpass",
    "butterworth_lowpass",
    "compute_fft",
    "design_butterworth",
    "detrend",
    "envelope",
    "fft",
    "hann_window",
    "inverse_fft",
    "next_power_of_two",
    "power_spectral_density",
    "segment_offsets",
]
