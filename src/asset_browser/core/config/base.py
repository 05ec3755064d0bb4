"""
Base configuration infrastructure for the Asset Browser.

Contains shared constants and the Environment enum.
"""

from enum import Enum

# Environment variable prefix for overrides (AB_SECTION__FIELD)
ENV_PREFIX = "AB_"


class Environment(Enum):
    """Environment types for configuration."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"
