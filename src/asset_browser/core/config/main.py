"""
Main configuration class for the Asset Browser.

Contains the Config class that aggregates all configuration sections and
knows how to build itself from a YAML file or from AB_* environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..exceptions import ConfigurationError
from .base import ENV_PREFIX, Environment
from .runtime import (
    BrowserConfig,
    ClassificationConfig,
    MonitoringConfig,
    SourcesConfig,
)
from .yaml_loader import YAMLConfigLoader

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Main configuration class for the Asset Browser."""

    # Environment
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    sources: SourcesConfig = field(default_factory=SourcesConfig)
    browser: BrowserConfig = field(default_factory=BrowserConfig)
    classification: ClassificationConfig = field(default_factory=ClassificationConfig)
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)

    def __post_init__(self) -> None:
        """Apply environment-specific defaults and validate."""
        if self.environment == Environment.TESTING:
            self.debug = True
            self.monitoring.log_level = "DEBUG"
        elif self.environment == Environment.PRODUCTION:
            self.debug = False
            self.monitoring.structured_logging = True

        self.validate()

    def validate(self) -> None:
        """Check values that the catalog can't recover from at query time."""
        # Imported here: the catalog package depends on core, not the reverse
        from ...catalog.models.enums import CatalogView, SortMethod

        if self.browser.page_size < 1:
            raise ConfigurationError(
                f"page_size must be >= 1, got {self.browser.page_size}",
                component="Config",
            )

        try:
            SortMethod.from_name(self.browser.default_sort)
            CatalogView.from_name(self.browser.default_view)
            for view_name in self.classification.category_overrides.values():
                CatalogView.from_name(view_name)
        except ValueError as e:
            raise ConfigurationError(str(e), component="Config") from e

        if not isinstance(logging.getLevelName(self.monitoring.log_level.upper()), int):
            raise ConfigurationError(
                f"Unknown log level: {self.monitoring.log_level}", component="Config"
            )

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "Config":
        """Load configuration from YAML file."""
        config_path = Path(config_path)
        try:
            data = YAMLConfigLoader.load_yaml(config_path)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Cannot read configuration file {config_path}: {e}", component="Config"
            ) from e

        try:
            environment = Environment(data.get("environment", "development"))
            sources_data = data.get("sources", {}) or {}
            browser_data = data.get("browser", {}) or {}
            classification_data = data.get("classification", {}) or {}
            monitoring_data = data.get("monitoring", {}) or {}

            config = cls(
                environment=environment,
                debug=bool(data.get("debug", False)),
                sources=SourcesConfig(**sources_data),
                browser=BrowserConfig(**browser_data),
                classification=ClassificationConfig(**classification_data),
                monitoring=MonitoringConfig(**monitoring_data),
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid configuration in {config_path}: {e}", component="Config"
            ) from e

        logger.info(f"Loaded configuration from {config_path}")
        return config

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""

        def getenv_bool(name: str, default: bool) -> bool:
            v = os.getenv(ENV_PREFIX + name)
            return default if v is None else v.lower() in {"1", "true", "yes", "on"}

        def getenv_int(name: str, default: int) -> int:
            v = os.getenv(ENV_PREFIX + name)
            if v is None:
                return default
            try:
                return int(v)
            except ValueError as e:
                raise ConfigurationError(
                    f"{ENV_PREFIX}{name} must be an integer, got {v!r}",
                    component="Config",
                ) from e

        def getenv_str(name: str, default: str) -> str:
            return os.getenv(ENV_PREFIX + name, default)

        def getenv_path(name: str) -> Optional[Path]:
            v = os.getenv(ENV_PREFIX + name)
            return Path(v) if v else None

        try:
            env = Environment(getenv_str("ENV", "development"))
        except ValueError as e:
            raise ConfigurationError(str(e), component="Config") from e

        sources = SourcesConfig(
            avatar_tool_dir=getenv_path("SOURCES__AVATAR_TOOL_DIR"),
            curated_dir=getenv_path("SOURCES__CURATED_DIR"),
        )

        browser = BrowserConfig(
            page_size=getenv_int("BROWSER__PAGE_SIZE", 10),
            default_sort=getenv_str("BROWSER__DEFAULT_SORT", "created_date_desc"),
            default_view=getenv_str("BROWSER__DEFAULT_VIEW", "avatars"),
        )

        monitoring = MonitoringConfig(
            log_level=getenv_str("MONITORING__LOG_LEVEL", "INFO"),
            structured_logging=getenv_bool("MONITORING__STRUCTURED_LOGGING", False),
        )

        return cls(
            environment=env,
            debug=getenv_bool("DEBUG", False),
            sources=sources,
            browser=browser,
            monitoring=monitoring,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view of the configuration (for `config show`-style output)."""
        return {
            "environment": self.environment.value,
            "debug": self.debug,
            "sources": {
                "avatar_tool_dir": (
                    str(self.sources.avatar_tool_dir)
                    if self.sources.avatar_tool_dir
                    else None
                ),
                "curated_dir": (
                    str(self.sources.curated_dir) if self.sources.curated_dir else None
                ),
            },
            "browser": {
                "page_size": self.browser.page_size,
                "default_sort": self.browser.default_sort,
                "default_view": self.browser.default_view,
            },
            "classification": {
                "category_overrides": dict(self.classification.category_overrides)
            },
            "monitoring": {
                "log_level": self.monitoring.log_level,
                "structured_logging": self.monitoring.structured_logging,
            },
        }
