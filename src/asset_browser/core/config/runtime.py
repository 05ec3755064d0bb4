"""
Runtime configuration for the Asset Browser.

Contains source, browsing, classification and monitoring configuration classes.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional


@dataclass
class SourcesConfig:
    """Locations of the two source tools' data directories."""

    # Directory holding AvatarExplorer's ItemsData.json
    avatar_tool_dir: Optional[Path] = None
    # KonoAsset app-data directory (the one containing metadata/)
    curated_dir: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.avatar_tool_dir is not None:
            self.avatar_tool_dir = Path(self.avatar_tool_dir)
        if self.curated_dir is not None:
            self.curated_dir = Path(self.curated_dir)


@dataclass
class BrowserConfig:
    """Default browsing behavior."""

    page_size: int = 10
    default_sort: str = "created_date_desc"
    default_view: str = "avatars"


@dataclass
class ClassificationConfig:
    """Catalog classification tuning."""

    # AvatarTool category name -> catalog view name
    category_overrides: Dict[str, str] = field(default_factory=dict)


@dataclass
class MonitoringConfig:
    """Logging configuration."""

    log_level: str = "INFO"
    structured_logging: bool = False
