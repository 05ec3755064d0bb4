"""
Catalog enums and enumeration types.

Contains the AvatarExplorer type codes, the three catalog views and the
supported sort methods.
"""

from enum import Enum
from typing import Union


class AvatarToolType(Enum):
    """AvatarExplorer item type codes (stored as strings in ItemsData.json)."""

    AVATAR = 0
    CLOTHING = 1
    TEXTURE = 2
    GIMMICK = 3
    ACCESSORY = 4
    WORLD = 5
    AVATAR_GIMMICK = 6
    AVATAR_ACCESSORY = 7
    AVATAR_CLOTHING = 8
    CUSTOM = 9
    UNKNOWN = -1

    @classmethod
    def from_code(cls, code: Union[str, int, None]) -> "AvatarToolType":
        """Parse a raw type code; anything unrecognized is UNKNOWN."""
        try:
            return cls(int(str(code).strip()))
        except (TypeError, ValueError):
            return cls.UNKNOWN

    @property
    def label(self) -> str:
        """Display label the source tool shows for this type."""
        return _TYPE_LABELS.get(self, OTHER_CATEGORY_LABEL)


OTHER_CATEGORY_LABEL = "その他"

_TYPE_LABELS = {
    AvatarToolType.AVATAR: "アバター",
    AvatarToolType.CLOTHING: "衣装",
    AvatarToolType.TEXTURE: "テクスチャ",
    AvatarToolType.GIMMICK: "ギミック",
    AvatarToolType.ACCESSORY: "アクセサリー",
    AvatarToolType.WORLD: "ワールド",
    AvatarToolType.AVATAR_GIMMICK: "アバターギミック",
    AvatarToolType.AVATAR_ACCESSORY: "アバターアクセサリー",
    AvatarToolType.AVATAR_CLOTHING: "アバター衣装",
}


class RecordSource(Enum):
    """Which tool a record was read from."""

    AVATAR_TOOL = "avatar_tool"
    CURATED = "curated"


class CatalogView(Enum):
    """The three disjoint catalog partitions shown to the user."""

    AVATARS = "avatars"
    ITEMS = "items"
    WORLD_OBJECTS = "world_objects"

    @classmethod
    def from_name(cls, name: Union[str, "CatalogView"]) -> "CatalogView":
        """Accept a view, its value or its name ("world-objects" works too)."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "_")
        for view in cls:
            if view.value == key:
                return view
        raise ValueError(f"Unknown catalog view: {name!r}")


class SortMethod(Enum):
    """Supported orderings."""

    CREATED_DATE_DESC = "created_date_desc"
    CREATED_DATE_ASC = "created_date_asc"
    TITLE_ASC = "title_asc"
    TITLE_DESC = "title_desc"
    AUTHOR_ASC = "author_asc"
    AUTHOR_DESC = "author_desc"

    @classmethod
    def from_name(cls, name: Union[str, "SortMethod"]) -> "SortMethod":
        """Accept a method, its value or its name ("title-asc" works too)."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "_")
        for method in cls:
            if method.value == key:
                return method
        raise ValueError(f"Unknown sort method: {name!r}")

    @property
    def descending(self) -> bool:
        return self.value.endswith("_desc")
