"""
Catalog classification.

Splits the records of a load into the three catalog views. Every record lands
in exactly one view; a record type no rule covers is a data integrity error,
never silently dropped.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Type

from ...core.exceptions import ClassificationError
from ..models import (
    AssetRecord,
    AvatarToolItem,
    CatalogView,
    CuratedAvatarItem,
    CuratedWearableItem,
    CuratedWorldObjectItem,
)

logger = logging.getLogger(__name__)

# KonoAsset keeps one file per kind, so the kind decides the view
_CURATED_VIEWS: Dict[Type, CatalogView] = {
    CuratedAvatarItem: CatalogView.AVATARS,
    CuratedWearableItem: CatalogView.ITEMS,
    CuratedWorldObjectItem: CatalogView.WORLD_OBJECTS,
}


@dataclass(frozen=True)
class CatalogPartition:
    """The three disjoint views of one record set, in input order."""

    avatars: Tuple[AssetRecord, ...] = ()
    items: Tuple[AssetRecord, ...] = ()
    world_objects: Tuple[AssetRecord, ...] = ()

    def for_view(self, view: CatalogView) -> Tuple[AssetRecord, ...]:
        if view == CatalogView.AVATARS:
            return self.avatars
        if view == CatalogView.ITEMS:
            return self.items
        return self.world_objects

    def counts(self) -> Dict[CatalogView, int]:
        return {view: len(self.for_view(view)) for view in CatalogView}

    def __len__(self) -> int:
        return len(self.avatars) + len(self.items) + len(self.world_objects)


class Classifier:
    """Assigns each record to one catalog view."""

    def __init__(
        self, category_overrides: Optional[Mapping[str, CatalogView]] = None
    ) -> None:
        # AvatarExplorer category name -> view, set by the user per category
        self.category_overrides: Dict[str, CatalogView] = {
            category: CatalogView.from_name(view)
            for category, view in (category_overrides or {}).items()
        }

    def view_of(self, record: AssetRecord) -> CatalogView:
        """The view a single record belongs to.

        Raises:
            ClassificationError: if the record's type has no classification rule
        """
        if type(record) is AvatarToolItem:
            return self._classify_avatar_tool_item(record)

        view = _CURATED_VIEWS.get(type(record))
        if view is None:
            raise ClassificationError(type(record).__name__, component="Classifier")
        return view

    def _classify_avatar_tool_item(self, item: AvatarToolItem) -> CatalogView:
        override = self.category_overrides.get(item.category_name)
        if override is not None:
            return override
        if item.is_avatar:
            return CatalogView.AVATARS
        if item.is_world_related:
            return CatalogView.WORLD_OBJECTS
        return CatalogView.ITEMS

    def classify(self, records: Iterable[AssetRecord]) -> CatalogPartition:
        """Partition records into avatars, items and world objects."""
        buckets: Dict[CatalogView, List[AssetRecord]] = {
            view: [] for view in CatalogView
        }
        for record in records:
            buckets[self.view_of(record)].append(record)

        partition = CatalogPartition(
            avatars=tuple(buckets[CatalogView.AVATARS]),
            items=tuple(buckets[CatalogView.ITEMS]),
            world_objects=tuple(buckets[CatalogView.WORLD_OBJECTS]),
        )
        logger.debug(
            f"Classified {len(partition)} records: "
            f"{len(partition.avatars)} avatars, {len(partition.items)} items, "
            f"{len(partition.world_objects)} world objects"
        )
        return partition
