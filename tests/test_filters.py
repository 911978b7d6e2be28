from __future__ import annotations

import math

import numpy as np
import pytest
from scipy import signal as sps

from walletsignal.analysis.features import band_amplitude, rms
from walletsignal.analysis.filters import (
    apply_filter,
    butterworth_attenuation,
    butterworth_highpass,
    butterworth_lowpass,
    design_butterworth,
    detrend,
)
from walletsignal.analysis.psd import power_spectral_density
from walletsignal.core.models import FilterCoefficients
from walletsignal.errors import InvalidFilterCoefficientsError, ValidationError


def _direct_form(x, b, a):
    y = []
    for i in range(len(x)):
        acc = 0.0
        for j in range(len(b)):
            if i - j >= 0:
                acc += b[j] * x[i - j]
        for j in range(1, len(a)):
            if i - j >= 0:
                acc -= a[j] * y[i - j]
        y.append(acc / a[0])
    return np.array(y)


def _two_tone(n: int = 2048, fs: float = 200.0) -> np.ndarray:
    t = np.arange(n) / fs
    return np.sin(2.0 * np.pi * 1.0 * t) + np.sin(2.0 * np.pi * 50.0 * t)


def test_lowpass_coefficients_follow_bilinear_formula() -> None:
    coeffs = design_butterworth(5.0, 200.0, 4, "lowpass")

    k = math.tan(math.pi * 5.0 / 200.0)
    norm = 1.0 / (1.0 + math.sqrt(2.0) * k + k * k)
    assert np.allclose(coeffs.b, [k * k * norm, 2 * k * k * norm, k * k * norm])
    assert np.allclose(coeffs.a, [1.0, 2 * (k * k - 1) * norm, (1 - math.sqrt(2.0) * k + k * k) * norm])
    assert coeffs.order == 2


@pytest.mark.parametrize("filter_type", ["lowpass", "highpass"])
def test_coefficients_match_scipy_second_order_butterworth(filter_type: str) -> None:
    coeffs = design_butterworth(12.0, 100.0, 2, filter_type)
    b, a = sps.butter(2, 12.0 / 50.0, btype=filter_type)
    assert np.allclose(coeffs.b, b, atol=1e-10)
    assert np.allclose(coeffs.a, a, atol=1e-10)


def test_lowpass_has_unit_dc_gain_and_highpass_blocks_dc() -> None:
    low = design_butterworth(5.0, 200.0)
    high = design_butterworth(5.0, 200.0, filter_type="highpass")
    assert np.sum(low.b) / np.sum(low.a) == pytest.approx(1.0)
    assert np.sum(high.b) == pytest.approx(0.0, abs=1e-12)
    assert np.array_equal(low.a, high.a)


def test_order_changes_attenuation_but_not_output() -> None:
    x = _two_tone(512)

    r4 = butterworth_lowpass(x, 5.0, order=4, sample_rate_hz=200.0)
    r8 = butterworth_lowpass(x, 5.0, order=8, sample_rate_hz=200.0)

    assert np.array_equal(r4.filtered, r8.filtered)
    assert r4.attenuation == pytest.approx(20 * 4 * math.log10(2))
    assert r8.attenuation == pytest.approx(20 * 8 * math.log10(2))
    assert r4.frequency == 5.0


def test_butterworth_attenuation_scales_with_order() -> None:
    assert butterworth_attenuation(1) == pytest.approx(6.0206, abs=1e-4)
    with pytest.raises(ValidationError):
        butterworth_attenuation(0)


def test_apply_filter_matches_direct_form_recurrence() -> None:
    x = np.random.default_rng(8).normal(size=64)
    b = [0.5, -0.2, 0.1]
    a = [2.0, 0.3, -0.1]

    y = apply_filter(x, FilterCoefficients(b=np.array(b), a=np.array(a)))

    assert y.shape == x.shape
    assert np.allclose(y, _direct_form(x, b, a), atol=1e-12)


def test_apply_filter_keeps_ring_up_transient() -> None:
    coeffs = design_butterworth(5.0, 200.0)
    step = np.ones(50)

    y = apply_filter(step, coeffs)

    assert y[0] == pytest.approx(coeffs.b[0])
    assert y[0] < 0.01
    assert y[-1] == pytest.approx(1.0, abs=0.05)


@pytest.mark.parametrize("a", [[0.0, 0.5], []])
def test_apply_filter_rejects_invalid_feedback(a) -> None:
    coeffs = FilterCoefficients(b=np.array([1.0]), a=np.array(a))
    with pytest.raises(InvalidFilterCoefficientsError):
        apply_filter([1.0, 2.0, 3.0], coeffs)


def test_lowpass_suppresses_high_frequency_tone() -> None:
    fs = 200.0
    x = _two_tone(2048, fs)

    result = butterworth_lowpass(x, 5.0, sample_rate_hz=fs)
    settled_in = x[200:]
    settled_out = result.filtered[200:]

    spec_in = power_spectral_density(settled_in)
    spec_out = power_spectral_density(settled_out)
    hf_in = band_amplitude(spec_in.magnitudes, spec_in.frequencies, 50.0 / fs)
    hf_out = band_amplitude(spec_out.magnitudes, spec_out.frequencies, 50.0 / fs)
    lf_in = band_amplitude(spec_in.magnitudes, spec_in.frequencies, 1.0 / fs)
    lf_out = band_amplitude(spec_out.magnitudes, spec_out.frequencies, 1.0 / fs)

    assert result.filtered.shape == x.shape
    assert hf_out < 0.1 * hf_in
    assert lf_out > 0.5 * lf_in


def test_highpass_keeps_high_frequency_tone() -> None:
    fs = 200.0
    x = _two_tone(2048, fs)

    result = butterworth_highpass(x, 20.0, sample_rate_hz=fs)

    assert result.filter_type == "highpass"
    assert rms(result.filtered[400:]) == pytest.approx(1.0 / math.sqrt(2.0), abs=0.05)


def test_lowpass_defaults_to_unit_sample_rate() -> None:
    result = butterworth_lowpass([1, 2, 3, 4, 5, 4, 3, 2, 1, 2, 3, 4, 5], 0.3, order=2)
    assert result.filtered.shape == (13,)
    with pytest.raises(ValidationError):
        butterworth_lowpass([1.0, 2.0], 0.5)


@pytest.mark.parametrize(
    ("cutoff", "fs", "order", "filter_type"),
    [
        (0.0, 100.0, 4, "lowpass"),
        (-1.0, 100.0, 4, "lowpass"),
        (10.0, 0.0, 4, "lowpass"),
        (60.0, 100.0, 4, "lowpass"),
        (10.0, 100.0, 0, "lowpass"),
        (10.0, 100.0, 2.5, "lowpass"),
        (10.0, 100.0, math.inf, "lowpass"),
        (10.0, 100.0, math.nan, "lowpass"),
        (10.0, 100.0, 4, "bandpass"),
    ],
)
def test_design_rejects_bad_parameters(cutoff, fs, order, filter_type) -> None:
    with pytest.raises(ValidationError):
        design_butterworth(cutoff, fs, order, filter_type)


def test_detrend_removes_mean_and_line() -> None:
    t = np.arange(20, dtype=float)
    assert np.allclose(detrend(t + 5.0, type="constant"), t - t.mean())
    assert np.allclose(detrend(3.0 * t + 1.0), 0.0, atol=1e-10)
    with pytest.raises(ValidationError):
        detrend(t, type="quadratic")


def test_filter_values_compare_by_identity_and_are_hashable() -> None:
    result = butterworth_lowpass(_two_tone(64), 5.0, sample_rate_hz=200.0)
    again = butterworth_lowpass(_two_tone(64), 5.0, sample_rate_hz=200.0)

    assert (result == again) is False
    assert (result.coefficients == again.coefficients) is False
    assert len({result, again, result.coefficients}) == 3
