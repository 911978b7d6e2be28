"""Tapering windows applied before spectral estimation."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from ..core.validation import as_signal, require_int


def hann_window(n: int) -> np.ndarray:
    """
    Return the symmetric Hann window of length ``n``.

    ``w[i] = 0.5 - 0.5 * cos(2*pi*i / (n - 1))``. A single-sample window is the
    identity (``[1.0]``) since ``n - 1 == 0`` leaves the formula undefined.
    """
    return np.hanning(require_int("n", n, minimum=1))


def apply_hann_window(signal: ArrayLike) -> np.ndarray:
    """Multiply ``signal`` sample-wise by a Hann window of the same length."""
    arr = as_signal(signal, max_length=None)
    return arr * hann_window(arr.size)


__all__ = ["hann_window", "apply_hann_window"]
