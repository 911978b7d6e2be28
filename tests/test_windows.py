from __future__ import annotations

import numpy as np
import pytest

from walletsignal.analysis.windows import apply_hann_window, hann_window
from walletsignal.errors import ValidationError


def test_hann_single_sample_is_identity() -> None:
    assert hann_window(1).tolist() == [1.0]
    assert apply_hann_window([5.0]).tolist() == [5.0]


def test_hann_two_samples_is_zero() -> None:
    assert np.allclose(hann_window(2), [0.0, 0.0])


@pytest.mark.parametrize("n", [3, 8, 64, 257])
def test_hann_endpoints_vanish(n: int) -> None:
    w = hann_window(n)
    assert w[0] == pytest.approx(0.0, abs=1e-12)
    assert w[-1] == pytest.approx(0.0, abs=1e-12)
    assert np.allclose(w, w[::-1])
    assert np.allclose(w, np.hanning(n))


def test_apply_hann_window_multiplies_samples() -> None:
    x = np.arange(1.0, 6.0)
    assert np.allclose(apply_hann_window(x), x * np.hanning(5))


def test_hann_window_rejects_zero_length() -> None:
    with pytest.raises(ValidationError):
        hann_window(0)
