"""
Catalog data model.

Provides the record types of both source tools and the enums shared by the
catalog components.
"""

from .dates import parse_created_date
from .enums import AvatarToolType, CatalogView, RecordSource, SortMethod
from .records import (
    AssetRecord,
    AvatarToolItem,
    CuratedAvatarItem,
    CuratedWearableItem,
    CuratedWorldObjectItem,
    Description,
    is_world_category,
    path_display_name,
)
from .record_sets import AvatarToolRecordSet, CuratedRecordSet

__all__ = [
    # Enums
    "AvatarToolType",
    "CatalogView",
    "RecordSource",
    "SortMethod",
    # Records
    "AssetRecord",
    "AvatarToolItem",
    "CuratedAvatarItem",
    "CuratedWearableItem",
    "CuratedWorldObjectItem",
    "Description",
    # Record sets
    "AvatarToolRecordSet",
    "CuratedRecordSet",
    # Helpers
    "is_world_category",
    "parse_created_date",
    "path_display_name",
]
