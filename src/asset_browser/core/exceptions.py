"""
Exception hierarchy for the Asset Browser catalog.

Provides structured error handling with specific error types for the loading,
classification and configuration layers.
"""

from typing import Any, Dict, Optional


class AssetBrowserError(Exception):
    """Base exception for all Asset Browser errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        component: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.component = component

    def __str__(self) -> str:
        """String representation of the error."""
        base_msg = f"[{self.component or 'AssetBrowser'}] {self.message}"
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "component": self.component,
            "details": self.details,
        }


class ConfigurationError(AssetBrowserError):
    """Exception raised when configuration is invalid or missing."""

    pass


class DataIntegrityError(AssetBrowserError):
    """Exception raised when loaded catalog data violates a catalog invariant."""

    pass


class SourceLoadError(AssetBrowserError):
    """Exception raised when a source database cannot be read."""

    def __init__(self, source: str, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot load {source} database at {path}: {reason}",
            error_code="SOURCE_LOAD_ERROR",
            details={"source": source, "path": path, "reason": reason},
            **kwargs,
        )


# Specific error types for common failure modes


class ClassificationError(DataIntegrityError):
    """Exception raised when a record fits none of the catalog views."""

    def __init__(self, record_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"No catalog view accepts records of type {record_type}",
            error_code="CLASSIFICATION_ERROR",
            details={"record_type": record_type},
            **kwargs,
        )
