"""Configuration objects and helpers for the signal analysis engine.

Defaults can be tuned from a YAML file such as::

    engine:
      window_size: 128
      overlap: 64
      filter_order: 4
      sample_rate_hz: 1.0

The path is passed to :func:`load_config` or read from ``WALLETSIGNAL_CONFIG``.
"""

from .runtime import CONFIG_ENV_VAR, EngineConfig, config_from_mapping, load_config

__all__ = ["CONFIG_ENV_VAR", "EngineConfig", "config_from_mapping", "load_config"]
