"""
Tests for configuration management.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from asset_browser.core.config import Config, Environment
from asset_browser.core.exceptions import ConfigurationError


class TestConfig:
    """Test configuration management."""

    def test_config_default_initialization(self) -> None:
        """Test default config initialization."""
        config = Config()
        assert config.environment == Environment.DEVELOPMENT
        assert config.browser.page_size == 10
        assert config.browser.default_sort == "created_date_desc"
        assert config.browser.default_view == "avatars"
        assert config.sources.avatar_tool_dir is None
        assert config.classification.category_overrides == {}

    def test_testing_environment_enables_debug(self) -> None:
        """Test environment-specific defaults."""
        config = Config(environment=Environment.TESTING)
        assert config.debug is True
        assert config.monitoring.log_level == "DEBUG"

    def test_production_enables_structured_logging(self) -> None:
        config = Config(environment=Environment.PRODUCTION)
        assert config.monitoring.structured_logging is True

    def test_from_file(self, tmp_path: Path) -> None:
        """Test loading configuration from YAML."""
        config_file = tmp_path / "asset_browser.yaml"
        config_file.write_text(
            "environment: development\n"
            "sources:\n"
            "  avatar_tool_dir: /data/AvatarExplorer/Datas\n"
            "browser:\n"
            "  page_size: 25\n"
            "  default_sort: title_asc\n"
            "  default_view: items\n"
            "classification:\n"
            "  category_overrides:\n"
            "    ワールド素材: items\n",
            encoding="utf-8",
        )

        config = Config.from_file(config_file)

        assert config.sources.avatar_tool_dir == Path("/data/AvatarExplorer/Datas")
        assert config.sources.curated_dir is None
        assert config.browser.page_size == 25
        assert config.browser.default_sort == "title_asc"
        assert config.classification.category_overrides == {"ワールド素材": "items"}

    def test_from_file_unknown_key(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("browser:\n  rows: 3\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            Config.from_file(config_file)

    def test_from_file_missing_or_malformed(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            Config.from_file(tmp_path / "missing.yaml")

        config_file = tmp_path / "broken.yaml"
        config_file.write_text("browser: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            Config.from_file(config_file)

    def test_from_file_not_a_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- browser\n- sources\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_file(config_file)
        assert exc_info.value.details["path"] == str(config_file)

    def test_from_file_not_utf8(self, tmp_path: Path) -> None:
        config_file = tmp_path / "latin1.yaml"
        config_file.write_bytes(b"debug: \xff\n")

        with pytest.raises(ConfigurationError):
            Config.from_file(config_file)

    def test_from_file_empty(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("# nothing yet\n", encoding="utf-8")
        assert Config.from_file(config_file).browser.page_size == Config().browser.page_size

    @patch.dict(
        os.environ,
        {
            "AB_SOURCES__AVATAR_TOOL_DIR": "/custom/ae",
            "AB_SOURCES__CURATED_DIR": "/custom/ka",
            "AB_BROWSER__PAGE_SIZE": "5",
            "AB_BROWSER__DEFAULT_SORT": "author_desc",
            "AB_MONITORING__LOG_LEVEL": "warning",
        },
    )
    def test_config_environment_overrides(self) -> None:
        """Test configuration environment variable overrides."""
        config = Config.from_env()
        assert config.sources.avatar_tool_dir == Path("/custom/ae")
        assert config.sources.curated_dir == Path("/custom/ka")
        assert config.browser.page_size == 5
        assert config.browser.default_sort == "author_desc"
        assert config.monitoring.log_level == "warning"

    @patch.dict(os.environ, {"AB_BROWSER__PAGE_SIZE": "many"})
    def test_env_non_integer(self) -> None:
        with pytest.raises(ConfigurationError):
            Config.from_env()

    @pytest.mark.parametrize(
        "section, value",
        [
            ("page_size", 0),
            ("default_sort", "by_color"),
            ("default_view", "textures"),
        ],
    )
    def test_invalid_browser_values(self, section: str, value: object) -> None:
        """Test validation of browser settings."""
        from asset_browser.core.config import BrowserConfig

        with pytest.raises(ConfigurationError):
            Config(browser=BrowserConfig(**{section: value}))

    def test_invalid_override_view(self) -> None:
        from asset_browser.core.config import ClassificationConfig

        with pytest.raises(ConfigurationError):
            Config(
                classification=ClassificationConfig(
                    category_overrides={"Tops": "hats"}
                )
            )

    def test_invalid_log_level(self) -> None:
        from asset_browser.core.config import MonitoringConfig

        with pytest.raises(ConfigurationError):
            Config(monitoring=MonitoringConfig(log_level="LOUD"))

    def test_to_dict(self) -> None:
        config = Config()
        data = config.to_dict()
        assert data["environment"] == "development"
        assert data["browser"]["page_size"] == 10
        assert data["sources"]["avatar_tool_dir"] is None
