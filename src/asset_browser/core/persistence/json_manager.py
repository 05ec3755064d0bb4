"""
Centralized JSON reading utilities.

Source databases are only ever read; this module gives every loader the same
error handling and logging when it opens a JSON store.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class JSONRepository:
    """Centralized JSON reading with consistent error handling."""

    @staticmethod
    def read_json(path: Path) -> Any:
        """
        Read and parse a JSON document.

        Args:
            path: Path to JSON file

        Returns:
            The parsed document (any JSON value)

        Raises:
            FileNotFoundError: If the file doesn't exist
            UnicodeDecodeError: If the file isn't UTF-8 text
            json.JSONDecodeError: If the file isn't valid JSON
        """
        if not path.exists():
            raise FileNotFoundError(f"JSON file not found: {path}")

        try:
            # utf-8-sig tolerates the BOM some Windows tools write
            with open(path, "r", encoding="utf-8-sig") as f:
                data = json.load(f)

            logger.debug(f"Successfully loaded JSON from {path}")
            return data

        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Failed to parse JSON file {path}: {e}")
            raise

    @staticmethod
    def load_json(path: Path, default: Optional[Any] = None) -> Any:
        """
        Load JSON data from file, returning ``default`` when it is missing or invalid.

        Args:
            path: Path to JSON file
            default: Value to return if file doesn't exist or fails to load

        Returns:
            Parsed JSON data or default value
        """
        if not path.exists():
            logger.debug(f"JSON file does not exist: {path}")
            return default

        try:
            data = JSONRepository.read_json(path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Unable to load JSON file {path}, using default: {e}")
            return default

        if data is None:
            logger.warning(f"JSON file is empty: {path}")
            return default

        return data
