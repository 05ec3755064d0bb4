"""
Loader for the KonoAsset database (``metadata/*.json``).

Each of the three stores is optional; a missing or unreadable store gives an
absent list rather than failing the whole load.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Type, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ...core.exceptions import SourceLoadError
from ...core.persistence import JSONRepository
from ..models import CuratedRecordSet
from .report import LoadReport
from .source_models import (
    KonoAssetAvatarEntry,
    KonoAssetWearableEntry,
    KonoAssetWorldObjectEntry,
)

logger = logging.getLogger(__name__)

METADATA_DIRNAME = "metadata"
AVATARS_FILENAME = "avatars.json"
WEARABLES_FILENAME = "avatarWearables.json"
WORLD_OBJECTS_FILENAME = "worldObjects.json"

SOURCE_PREFIX = "curated"


def _load_store(
    path: Path, model: Type[BaseModel], report: LoadReport, name: str
) -> Optional[List[Any]]:
    """Validate every entry of one ``{"version", "data"}`` store."""
    source_report = report.source(f"{SOURCE_PREFIX}.{name}")

    document = JSONRepository.load_json(path)
    if document is None:
        if path.exists():
            source_report.errors.append("unreadable or empty store")
        logger.info(f"KonoAsset store not available: {path}")
        return None

    if not isinstance(document, dict) or not isinstance(document.get("data"), list):
        source_report.errors.append("missing 'data' array")
        logger.warning(f"Ignoring KonoAsset store without a 'data' array: {path}")
        return None

    records = []
    for index, entry in enumerate(document["data"]):
        try:
            records.append(model.model_validate(entry).to_record())
        except PydanticValidationError as e:
            source_report.skipped += 1
            source_report.errors.append(f"entry {index}: {e.error_count()} error(s)")
            logger.warning(f"Skipping invalid KonoAsset entry {index} in {path}: {e}")

    source_report.available = True
    source_report.loaded += len(records)
    logger.debug(
        f"Loaded {len(records)} records from {path} "
        f"(version {document.get('version')})"
    )
    return records


def load_curated_database(
    directory: Union[str, Path], report: Optional[LoadReport] = None
) -> CuratedRecordSet:
    """
    Read the avatar, wearable and world-object stores of a KonoAsset directory.

    Args:
        directory: KonoAsset data directory (the one containing ``metadata/``)
        report: Optional report that receives per-store counts

    Returns:
        A record set whose lists are None for stores that could not be read

    Raises:
        SourceLoadError: If the ``metadata`` directory is missing
    """
    metadata_dir = Path(directory) / METADATA_DIRNAME
    if not metadata_dir.is_dir():
        raise SourceLoadError(
            SOURCE_PREFIX, str(metadata_dir), "metadata directory not found"
        )

    report = report if report is not None else LoadReport()
    record_set = CuratedRecordSet.of(
        avatars=_load_store(
            metadata_dir / AVATARS_FILENAME, KonoAssetAvatarEntry, report, "avatars"
        ),
        wearables=_load_store(
            metadata_dir / WEARABLES_FILENAME,
            KonoAssetWearableEntry,
            report,
            "wearables",
        ),
        world_objects=_load_store(
            metadata_dir / WORLD_OBJECTS_FILENAME,
            KonoAssetWorldObjectEntry,
            report,
            "world_objects",
        ),
    )

    logger.info(f"Loaded {len(record_set)} KonoAsset records from {metadata_dir}")
    return record_set
