"""
Loader for the AvatarExplorer database (``ItemsData.json``).
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError as PydanticValidationError

from ...core.exceptions import SourceLoadError
from ...core.persistence import JSONRepository
from ..models import AvatarToolRecordSet
from .report import LoadReport
from .source_models import AvatarExplorerEntry

logger = logging.getLogger(__name__)

ITEMS_DATA_FILENAME = "ItemsData.json"
SOURCE_NAME = "avatar_tool"


def load_avatar_tool_database(
    directory: Union[str, Path], report: Optional[LoadReport] = None
) -> AvatarToolRecordSet:
    """
    Read every record of an AvatarExplorer database directory.

    Args:
        directory: Directory holding ``ItemsData.json``
        report: Optional report that receives loaded/skipped counts

    Returns:
        The records in file order; invalid entries are left out

    Raises:
        SourceLoadError: If the file is missing, unreadable or not a JSON array
    """
    path = Path(directory) / ITEMS_DATA_FILENAME
    source_report = (report or LoadReport()).source(SOURCE_NAME)

    if not path.is_file():
        raise SourceLoadError(SOURCE_NAME, str(path), "ItemsData.json not found")

    try:
        raw = JSONRepository.read_json(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SourceLoadError(SOURCE_NAME, str(path), str(e))

    if not isinstance(raw, list):
        raise SourceLoadError(
            SOURCE_NAME, str(path), f"expected a JSON array, got {type(raw).__name__}"
        )

    records = []
    for index, entry in enumerate(raw):
        try:
            records.append(AvatarExplorerEntry.model_validate(entry).to_record())
        except PydanticValidationError as e:
            source_report.skipped += 1
            source_report.errors.append(f"entry {index}: {e.error_count()} error(s)")
            logger.warning(
                f"Skipping invalid AvatarExplorer entry {index} in {path}: {e}"
            )

    source_report.available = True
    source_report.loaded += len(records)
    logger.info(
        f"Loaded {len(records)} AvatarExplorer records from {path} "
        f"({source_report.skipped} skipped)"
    )
    return AvatarToolRecordSet.of(records)
