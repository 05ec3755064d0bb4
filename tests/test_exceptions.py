"""
Tests for custom exceptions.
"""

from asset_browser.core.exceptions import (
    AssetBrowserError,
    ClassificationError,
    ConfigurationError,
    DataIntegrityError,
    SourceLoadError,
)


class TestExceptions:
    """Test custom exception classes."""

    def test_asset_browser_error(self) -> None:
        """Test AssetBrowserError."""
        error = AssetBrowserError("Catalog failed")
        assert str(error) == "[AssetBrowser] Catalog failed"

    def test_asset_browser_error_with_component(self) -> None:
        """Test AssetBrowserError with component."""
        error = AssetBrowserError("Test error", component="TestComponent")
        assert str(error) == "[TestComponent] Test error"

    def test_asset_browser_error_with_error_code(self) -> None:
        """Test AssetBrowserError with error code."""
        error = AssetBrowserError("Test error", error_code="ERR001")
        assert str(error) == "[ERR001] [AssetBrowser] Test error"

    def test_asset_browser_error_to_dict(self) -> None:
        """Test AssetBrowserError to_dict method."""
        error = AssetBrowserError(
            "Test error", error_code="ERR001", component="TestComponent"
        )
        error_dict = error.to_dict()

        assert error_dict["error_type"] == "AssetBrowserError"
        assert error_dict["message"] == "Test error"
        assert error_dict["error_code"] == "ERR001"
        assert error_dict["component"] == "TestComponent"
        assert error_dict["details"] == {}

    def test_configuration_error(self) -> None:
        """Test ConfigurationError."""
        error = ConfigurationError("Config invalid")
        assert str(error) == "[AssetBrowser] Config invalid"

    def test_source_load_error(self) -> None:
        """Test SourceLoadError carries source and path."""
        error = SourceLoadError("avatar_tool", "/tmp/ItemsData.json", "not found")
        assert error.error_code == "SOURCE_LOAD_ERROR"
        assert error.details["source"] == "avatar_tool"
        assert error.details["path"] == "/tmp/ItemsData.json"
        assert "not found" in str(error)

    def test_classification_error(self) -> None:
        """Test ClassificationError."""
        error = ClassificationError("MysteryItem", component="Classifier")
        assert str(error).startswith("[CLASSIFICATION_ERROR] [Classifier]")
        assert error.details["record_type"] == "MysteryItem"

    def test_exception_inheritance(self) -> None:
        """Test exception inheritance hierarchy."""
        assert issubclass(ConfigurationError, AssetBrowserError)
        assert issubclass(DataIntegrityError, AssetBrowserError)
        assert issubclass(ClassificationError, DataIntegrityError)
        assert issubclass(SourceLoadError, AssetBrowserError)

    def test_exception_with_cause(self) -> None:
        """Test exceptions with cause."""
        try:
            try:
                raise ValueError("Original error")
            except ValueError as e:
                raise ConfigurationError("Wrapped error") from e
        except ConfigurationError as wrapped:
            assert isinstance(wrapped.__cause__, ValueError)
