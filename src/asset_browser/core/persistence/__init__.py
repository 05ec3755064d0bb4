"""
Persistence utilities for the Asset Browser.

Provides centralized JSON reading for the source database loaders.
"""

from .json_manager import JSONRepository

__all__ = [
    "JSONRepository",
]
