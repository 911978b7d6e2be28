"""Input coercion shared by the analysis modules."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from ..errors import ValidationError


# 2**20 samples keeps the radix-2 recursion at most 20 levels deep.
DEFAULT_MAX_SIGNAL_LENGTH = 1 << 20


def as_signal(signal: ArrayLike, *, max_length: int | None = DEFAULT_MAX_SIGNAL_LENGTH) -> np.ndarray:
    """
    Convert ``signal`` to a 1-D float64 array without modifying the caller's data.

    Parameters
    ----------
    signal:
        Array-like of real samples.
    max_length:
        Upper bound on the number of samples; ``None`` disables the check.

    Raises
    ------
    ValidationError
        If the signal is empty, not 1-D, not numeric, or longer than ``max_length``.
    """
    try:
        arr = np.array(signal, dtype=float, copy=True)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"signal must be a sequence of real numbers: {exc}") from exc
    if arr.ndim != 1:
        raise ValidationError(f"signal must be 1-D, got shape {arr.shape}")
    if arr.size == 0:
        raise ValidationError("signal must contain at least one sample")
    if max_length is not None and arr.size > max_length:
        raise ValidationError(
            f"signal length {arr.size} exceeds the maximum of {max_length} samples"
        )
    return arr


def require_positive(name: str, value: float) -> float:
    """Return ``value`` as float, raising ValidationError unless it is > 0."""
    try:
        out = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{name} must be a number, got {value!r}") from exc
    if not out > 0.0:
        raise ValidationError(f"{name} must be > 0, got {value}")
    return out


def require_int(name: str, value: int, *, minimum: int) -> int:
    """Return ``value`` as int, raising ValidationError below ``minimum`` or on non-integers."""
    try:
        out = int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValidationError(f"{name} must be an integer, got {value!r}") from exc
    if isinstance(value, bool) or out != value:
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if out < minimum:
        raise ValidationError(f"{name} must be >= {minimum}, got {out}")
    return out


__all__ = ["DEFAULT_MAX_SIGNAL_LENGTH", "as_signal", "require_positive", "require_int"]
