"""Facade consumed by upstream analytics modules (periodicity, trend smoothing)."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from .analysis.fft import fft
from .analysis.filters import FilterType, apply_filter, butterworth_attenuation, design_butterworth
from .analysis.hilbert import envelope
from .analysis.psd import power_spectral_density
from .config import EngineConfig
from .core.models import FilterResult, FourierTransform, FrequencyDomain


logger = logging.getLogger(__name__)


class SignalProcessingEngine:
    """
    Stateless entry point bundling the FFT, Welch PSD and Butterworth filter.

    The only state held is an immutable :class:`EngineConfig` supplying
    defaults; every call is a pure function of its arguments, so one engine can
    be shared between threads.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self._config = (config or EngineConfig()).sanitized()

    @property
    def config(self) -> EngineConfig:
        return self._config

    def transform(self, signal: ArrayLike) -> FourierTransform:
        """Zero-pad ``signal`` to a power of two and return its FFT."""
        return fft(signal, max_length=self._config.max_signal_length)

    def estimate_spectrum(
        self,
        signal: ArrayLike,
        window_size: Optional[int] = None,
        overlap: Optional[int] = None,
    ) -> FrequencyDomain:
        """Welch magnitude spectrum; omitted parameters come from the config."""
        if window_size is None:
            window_size = self._config.window_size
        if overlap is None:
            overlap = self._config.overlap
        return power_spectral_density(
            signal,
            window_size,
            overlap,
            max_length=self._config.max_signal_length,
        )

    def filter(
        self,
        signal: ArrayLike,
        cutoff_hz: float,
        *,
        sample_rate_hz: Optional[float] = None,
        order: Optional[int] = None,
        filter_type: FilterType = "lowpass",
    ) -> FilterResult:
        """
        Design a Butterworth section and run it over ``signal``.

        Parameters
        ----------
        signal:
            1-D input samples.
        cutoff_hz:
            Cutoff frequency, in the same unit as ``sample_rate_hz``.
        sample_rate_hz:
            Defaults to ``config.sample_rate_hz``.
        order:
            Nominal order, defaults to ``config.filter_order``. It only changes
            the reported attenuation.
        filter_type:
            ``"lowpass"`` or ``"highpass"``.
        """
        if sample_rate_hz is None:
            sample_rate_hz = self._config.sample_rate_hz
        if order is None:
            order = self._config.filter_order

        coefficients = design_butterworth(cutoff_hz, sample_rate_hz, order, filter_type)
        filtered = apply_filter(signal, coefficients, max_length=self._config.max_signal_length)
        logger.debug(
            "filter: %s cutoff=%g fs=%g order=%s over %d samples",
            filter_type,
            cutoff_hz,
            sample_rate_hz,
            order,
            filtered.size,
        )
        return FilterResult(
            filtered=filtered,
            frequency=float(cutoff_hz),
            attenuation=butterworth_attenuation(order),
            filter_type=filter_type,
            coefficients=coefficients,
        )

    def lowpass(self, signal: ArrayLike, cutoff_hz: float, **kwargs) -> FilterResult:
        return self.filter(signal, cutoff_hz, filter_type="lowpass", **kwargs)

    def highpass(self, signal: ArrayLike, cutoff_hz: float, **kwargs) -> FilterResult:
        return self.filter(signal, cutoff_hz, filter_type="highpass", **kwargs)

    def envelope(self, signal: ArrayLike) -> np.ndarray:
        """Amplitude envelope from the analytic signal."""
        return envelope(signal, max_length=self._config.max_signal_length)


__all__ = ["SignalProcessingEngine"]
