"""Runtime configuration for the signal analysis engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Mapping

import yaml

from ..core.validation import DEFAULT_MAX_SIGNAL_LENGTH, require_int, require_positive
from ..errors import ValidationError


CONFIG_ENV_VAR = "WALLETSIGNAL_CONFIG"


@dataclass(slots=True)
class EngineConfig:
    """
    Default parameters used when a caller does not pass them explicitly.

    The defaults follow the engine's historical behaviour: 256-sample Welch
    segments with 50 % overlap, a nominal 4th-order Butterworth filter, and a
    unit sample rate (frequencies in cycles per sample).
    """

    window_size: int = 256
    overlap: int = 128
    filter_order: int = 4
    sample_rate_hz: float = 1.0
    max_signal_length: int = DEFAULT_MAX_SIGNAL_LENGTH

    def sanitized(self) -> EngineConfig:
        """Return a copy with derived limits applied."""
        window = max(2, int(self.window_size))
        overlap = min(max(0, int(self.overlap)), window - 1)
        return EngineConfig(
            window_size=window,
            overlap=overlap,
            filter_order=max(1, int(self.filter_order)),
            sample_rate_hz=max(1e-9, float(self.sample_rate_hz)),
            max_signal_length=max(1, int(self.max_signal_length)),
        )


def _coerce_int(name: str, value: Any) -> int:
    return require_int(name, value, minimum=0)


# Keys accepted in the YAML file and how each value is coerced.
_FIELD_PARSERS: Dict[str, Callable[[str, Any], Any]] = {
    "window_size": _coerce_int,
    "overlap": _coerce_int,
    "filter_order": _coerce_int,
    "sample_rate_hz": require_positive,
    "max_signal_length": _coerce_int,
}

def _engine_block(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge root keys with an optional ``engine:`` block (the block wins)."""
    merged = {k: v for k, v in data.items() if k != "engine"}
    block = data.get("engine")
    if block is None:
        return merged
    if not isinstance(block, Mapping):
        raise ValidationError(f"'engine' must be a mapping, got {type(block).__name__}")
    merged.update(block)
    return merged


def config_from_mapping(data: Mapping[str, Any] | None) -> EngineConfig:
    """
    Build :class:`EngineConfig` from ``data``.

    Unknown keys are ignored; known keys with values of the wrong type raise
    :class:`ValidationError` naming the key. The result is sanitized.
    """
    if not data:
        return EngineConfig()
    payload: Dict[str, Any] = {}
    for key, value in _engine_block(data).items():
        name = str(key)
        parser = _FIELD_PARSERS.get(name)
        if parser is None or value is None:
            continue
        payload[name] = parser(name, value)
    return EngineConfig(**payload).sanitized()


def load_config(path: str | Path | None = None) -> EngineConfig:
    """
    Load configuration from ``path``.

    When ``path`` is None the ``WALLETSIGNAL_CONFIG`` environment variable is
    consulted. Missing files fall back to default :class:`EngineConfig`.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return EngineConfig()
        path = Path(env_path).expanduser()
    cfg_path = Path(path)
    if not cfg_path.exists():
        return EngineConfig()
    try:
        with cfg_path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise ValidationError(f"Invalid YAML in {cfg_path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


__all__ = ["CONFIG_ENV_VAR", "EngineConfig", "config_from_mapping", "load_config"]
