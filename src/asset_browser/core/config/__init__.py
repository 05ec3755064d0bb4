"""
Configuration management for the Asset Browser.

Provides a clean public API for all configuration components.
"""

from .base import ENV_PREFIX, Environment
from .main import Config
from .runtime import (
    BrowserConfig,
    ClassificationConfig,
    MonitoringConfig,
    SourcesConfig,
)

__all__ = [
    "Config",
    "Environment",
    "ENV_PREFIX",
    "BrowserConfig",
    "ClassificationConfig",
    "MonitoringConfig",
    "SourcesConfig",
]
