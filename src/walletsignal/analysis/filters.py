"""Filtering helpers."""

from __future__ import annotations

import logging
import math
from typing import Literal

import numpy as np
from numpy.typing import ArrayLike
from scipy import signal as sps

from ..core.models import FilterCoefficients, FilterResult
from ..core.validation import DEFAULT_MAX_SIGNAL_LENGTH, as_signal, require_int, require_positive
from ..errors import InvalidFilterCoefficientsError, ValidationError


logger = logging.getLogger(__name__)

FilterType = Literal["lowpass", "highpass"]

FILTER_TYPES = ("lowpass", "highpass")
DEFAULT_ORDER = 4


def butterworth_attenuation(order: int) -> float:
    """Reported stop-band attenuation in dB: ``20 * order * log10(2)``."""
    order = require_int("order", order, minimum=1)
    return 20.0 * order * math.log10(2.0)


def design_butterworth(
    cutoff_hz: float,
    sample_rate_hz: float,
    order: int = DEFAULT_ORDER,
    filter_type: FilterType = "lowpass",
) -> FilterCoefficients:
    """
    Second-order Butterworth section via the bilinear transform.

    Parameters
    ----------
    cutoff_hz:
        Cutoff frequency in Hz (0 < cutoff_hz < sample_rate_hz / 2).
    sample_rate_hz:
        Sampling rate in Hz. Must be > 0.
    order:
        Nominal filter order (>= 1). Only the reported attenuation depends on
        it; the returned section is always second order.
    filter_type:
        ``"lowpass"`` or ``"highpass"``.

    Returns
    -------
    FilterCoefficients
        Three ``b`` and three ``a`` taps with ``a[0] == 1``.
    """
    fs = require_positive("sample_rate_hz", sample_rate_hz)
    cutoff = require_positive("cutoff_hz", cutoff_hz)
    require_int("order", order, minimum=1)
    if filter_type not in FILTER_TYPES:
        raise ValidationError(f"filter_type must be one of {FILTER_TYPES}, got {filter_type!r}")

    nyquist = 0.5 * fs
    if cutoff >= nyquist:
        raise ValidationError(
            f"cutoff_hz must be < Nyquist ({nyquist:.3f} Hz), got {cutoff_hz}"
        )

    # Pre-warped analog cutoff.
    k = math.tan(math.pi * cutoff / fs)
    k2 = k * k
    norm = 1.0 / (1.0 + math.sqrt(2.0) * k + k2)

    a = np.array([1.0, 2.0 * (k2 - 1.0) * norm, (1.0 - math.sqrt(2.0) * k + k2) * norm])
    if filter_type == "lowpass":
        b = np.array([k2 * norm, 2.0 * k2 * norm, k2 * norm])
    else:
        b = np.array([norm, -2.0 * norm, norm])

    logger.debug(
        "butterworth %s: cutoff=%g Hz, fs=%g Hz, order=%d, b=%s, a=%s",
        filter_type,
        cutoff,
        fs,
        order,
        b,
        a,
    )
    return FilterCoefficients(b=b, a=a)


def apply_filter(
    data: ArrayLike,
    coefficients: FilterCoefficients,
    *,
    max_length: int | None = DEFAULT_MAX_SIGNAL_LENGTH,
) -> np.ndarray:
    """
    Run the direct-form IIR recurrence over ``data``.

    ``y[i] = (sum_j b[j] x[i-j] - sum_{j>=1} a[j] y[i-j]) / a[0]`` with all
    samples before the start taken as zero, so the first outputs show the
    filter's ring-up transient.

    Raises
    ------
    InvalidFilterCoefficientsError
        If ``a[0] == 0`` or either tap array is empty.
    """
    b = np.atleast_1d(np.asarray(coefficients.b, dtype=float))
    a = np.atleast_1d(np.asarray(coefficients.a, dtype=float))
    if b.ndim != 1 or a.ndim != 1 or b.size == 0 or a.size == 0:
        raise InvalidFilterCoefficientsError(
            f"b and a must be non-empty 1-D sequences, got shapes {b.shape} and {a.shape}"
        )
    if a[0] == 0.0:
        raise InvalidFilterCoefficientsError("a[0] must be non-zero")

    x = as_signal(data, max_length=max_length)
    return sps.lfilter(b, a, x)


def _butterworth(
    data: ArrayLike,
    cutoff_hz: float,
    sample_rate_hz: float,
    order: int,
    filter_type: FilterType,
) -> FilterResult:
    coefficients = design_butterworth(cutoff_hz, sample_rate_hz, order, filter_type)
    filtered = apply_filter(data, coefficients)
    return FilterResult(
        filtered=filtered,
        frequency=float(cutoff_hz),
        attenuation=butterworth_attenuation(order),
        filter_type=filter_type,
        coefficients=coefficients,
    )


def butterworth_lowpass(
    data: ArrayLike,
    cutoff_hz: float,
    order: int = DEFAULT_ORDER,
    sample_rate_hz: float = 1.0,
) -> FilterResult:
    """
    Apply a causal Butterworth low-pass section.

    Parameters
    ----------
    data:
        1-D input samples.
    cutoff_hz:
        Cutoff frequency in Hz (0 < cutoff_hz < sample_rate_hz / 2).
    order:
        Nominal filter order (default: 4); sets the reported attenuation.
    sample_rate_hz:
        Sampling rate in Hz (default: 1.0, i.e. cutoff in cycles per sample).

    Returns
    -------
    FilterResult
        Filtered samples with the same length as ``data``.
    """
    return _butterworth(data, cutoff_hz, sample_rate_hz, order, "lowpass")


def butterworth_highpass(
    data: ArrayLike,
    cutoff_hz: float,
    order: int = DEFAULT_ORDER,
    sample_rate_hz: float = 1.0,
) -> FilterResult:
    """High-pass counterpart of :func:`butterworth_lowpass`."""
    return _butterworth(data, cutoff_hz, sample_rate_hz, order, "highpass")


def detrend(data: ArrayLike, *, type: str = "linear") -> np.ndarray:
    """
    Remove a trend from data using scipy.signal.detrend.

    ``type="constant"`` subtracts the mean, which keeps the DC bin from
    dominating a subsequent spectrum estimate.
    """
    if type not in ("linear", "constant"):
        raise ValidationError(f"type must be 'linear' or 'constant', got {type!r}")
    x = as_signal(data)
    return sps.detrend(x, type=type)


__all__ = [
    "DEFAULT_ORDER",
    "FILTER_TYPES",
    "FilterType",
    "butterworth_attenuation",
    "design_butterworth",
    "apply_filter",
    "butterworth_lowpass",
    "butterworth_highpass",
    "detrend",
]
