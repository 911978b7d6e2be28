"""Value objects and input validation shared by the analysis modules."""

from .models import FilterCoefficients, FilterResult, FourierTransform, FrequencyDomain
from .validation import DEFAULT_MAX_SIGNAL_LENGTH, as_signal

__all__ = [
    "DEFAULT_MAX_SIGNAL_LENGTH",
    "FilterCoefficients",
    "FilterResult",
    "FourierTransform",
    "FrequencyDomain",
    "as_signal",
]
