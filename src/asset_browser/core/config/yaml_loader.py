"""
YAML reading for configuration files.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class YAMLConfigLoader:
    """Reads a configuration document and checks its top-level shape."""

    @staticmethod
    def load_yaml(path: Path) -> Dict[str, Any]:
        """
        Read a YAML configuration file.

        Args:
            path: Path to the YAML file

        Returns:
            The top-level mapping; an empty or comment-only file gives ``{}``

        Raises:
            FileNotFoundError: If the file doesn't exist
            yaml.YAMLError: If the document cannot be parsed
            ConfigurationError: If the document is not a mapping
        """
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            logger.warning(f"Configuration file {path} has no settings")
            return {}

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping, "
                f"got {type(data).__name__}",
                details={"path": str(path)},
                component="Config",
            )

        logger.debug(f"Read {len(data)} configuration sections from {path}")
        return data
