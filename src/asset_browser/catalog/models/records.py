"""
Catalog record types.

One record is one asset from either source tool. The four record classes form
a closed set; each implements the same read-only projections (``title``,
``author``, ``category_name``, ``created_at_epoch_millis``, ``memo``,
``tags``) so that classification, search and sorting never need to know which
tool a record came from.
"""

from dataclasses import dataclass, field
from pathlib import PureWindowsPath
from typing import Mapping, Optional, Tuple, Union

from .dates import parse_created_date
from .enums import OTHER_CATEGORY_LABEL, AvatarToolType, RecordSource

# Substrings that mark a category as world-related (matched case-insensitively)
WORLD_CATEGORY_MARKERS = ("ワールド", "world")


def is_world_category(category: Optional[str]) -> bool:
    """True when the category text mentions a world, anywhere in the string."""
    if not category:
        return False
    lowered = category.casefold()
    return any(marker.casefold() in lowered for marker in WORLD_CATEGORY_MARKERS)


def path_display_name(path: str) -> str:
    """Last segment of a stored path; both ``/`` and ``\\`` separate segments."""
    return PureWindowsPath(path.rstrip("/\\")).name if path else ""


@dataclass(frozen=True)
class AvatarToolItem:
    """An entry of AvatarExplorer's ItemsData.json."""

    title: str = ""
    author_name: str = ""
    item_memo: str = ""
    # Folder of the item; also the key other items use to reference it
    item_path: str = ""
    image_path: str = ""
    material_path: str = ""
    supported_avatar_paths: Tuple[str, ...] = ()
    booth_id: int = -1
    item_type: AvatarToolType = AvatarToolType.UNKNOWN
    custom_category: str = ""
    author_id: str = ""
    thumbnail_url: str = ""
    # Raw, locale-dependent creation date as stored by the tool
    created_date: str = ""
    created_at_millis: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "created_at_millis", parse_created_date(self.created_date)
        )

    source = RecordSource.AVATAR_TOOL

    @property
    def record_id(self) -> str:
        return self.item_path

    @property
    def author(self) -> str:
        return self.author_name or ""

    @property
    def category_name(self) -> str:
        if self.item_type == AvatarToolType.CUSTOM and self.custom_category:
            return self.custom_category
        return self.item_type.label

    @property
    def created_at_epoch_millis(self) -> int:
        return self.created_at_millis

    @property
    def has_valid_created_date(self) -> bool:
        """False when the stored date was missing or could not be read."""
        return self.created_at_millis != 0

    @property
    def memo(self) -> str:
        return self.item_memo or ""

    @property
    def tags(self) -> Tuple[str, ...]:
        return ()

    @property
    def image(self) -> str:
        return self.image_path

    @property
    def external_id(self) -> Optional[int]:
        return self.booth_id if self.booth_id > 0 else None

    @property
    def supported_avatar_refs(self) -> Tuple[str, ...]:
        return self.supported_avatar_paths

    @property
    def is_avatar(self) -> bool:
        return self.item_type == AvatarToolType.AVATAR

    @property
    def is_world_related(self) -> bool:
        return is_world_category(self.custom_category)

    def supported_avatar_names(self, lookup: Mapping[str, str]) -> Tuple[str, ...]:
        """Display names of the supported avatars.

        Paths are resolved through ``lookup`` (path -> title); unknown paths
        fall back to their last path segment.
        """
        return tuple(
            lookup.get(path) or path_display_name(path)
            for path in self.supported_avatar_paths
        )


@dataclass(frozen=True)
class Description:
    """Metadata block shared by every KonoAsset item kind."""

    name: str = ""
    creator: str = ""
    image_filename: str = ""
    tags: Tuple[str, ...] = ()
    memo: Optional[str] = None
    booth_item_id: Optional[int] = None
    dependencies: Tuple[str, ...] = ()
    created_at: int = 0
    published_at: Optional[int] = None


@dataclass(frozen=True)
class _CuratedItem:
    id: str = ""
    description: Description = field(default_factory=Description)

    source = RecordSource.CURATED

    @property
    def record_id(self) -> str:
        return self.id

    @property
    def title(self) -> str:
        return self.description.name or ""

    @property
    def author(self) -> str:
        return self.description.creator or ""

    @property
    def category_name(self) -> str:
        return ""

    @property
    def created_at_epoch_millis(self) -> int:
        return self.description.created_at or 0

    @property
    def memo(self) -> str:
        return self.description.memo or ""

    @property
    def tags(self) -> Tuple[str, ...]:
        return self.description.tags

    @property
    def image(self) -> str:
        return self.description.image_filename

    @property
    def external_id(self) -> Optional[int]:
        return self.description.booth_item_id

    @property
    def supported_avatar_refs(self) -> Tuple[str, ...]:
        return ()

    def supported_avatar_names(self, lookup: Mapping[str, str]) -> Tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class CuratedAvatarItem(_CuratedItem):
    """An avatar from KonoAsset's avatars.json."""


@dataclass(frozen=True)
class CuratedWearableItem(_CuratedItem):
    """A wearable from KonoAsset's avatarWearables.json."""

    category: str = ""
    # Avatar names as entered in KonoAsset, not references
    supported_avatars: Tuple[str, ...] = ()

    @property
    def category_name(self) -> str:
        return self.category or ""

    @property
    def supported_avatar_refs(self) -> Tuple[str, ...]:
        return self.supported_avatars

    def supported_avatar_names(self, lookup: Mapping[str, str]) -> Tuple[str, ...]:
        return self.supported_avatars


@dataclass(frozen=True)
class CuratedWorldObjectItem(_CuratedItem):
    """A world object from KonoAsset's worldObjects.json."""

    category: str = ""

    @property
    def category_name(self) -> str:
        return self.category or ""


AssetRecord = Union[
    AvatarToolItem, CuratedAvatarItem, CuratedWearableItem, CuratedWorldObjectItem
]

__all__ = [
    "AssetRecord",
    "AvatarToolItem",
    "CuratedAvatarItem",
    "CuratedWearableItem",
    "CuratedWorldObjectItem",
    "Description",
    "OTHER_CATEGORY_LABEL",
    "WORLD_CATEGORY_MARKERS",
    "is_world_category",
    "path_display_name",
]
