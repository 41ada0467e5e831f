"""Configuration utilities for bridgefee."""

from .loader import ConfigError, FeeConfig, load_config

__all__ = ["ConfigError", "FeeConfig", "load_config"]
