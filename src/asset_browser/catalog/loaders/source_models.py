"""
On-disk schemas of the two source databases.

These pydantic models validate one raw JSON entry at a time; an entry that
fails validation is skipped by the loader instead of aborting the load.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import (
    AvatarToolItem,
    AvatarToolType,
    CuratedAvatarItem,
    CuratedWearableItem,
    CuratedWorldObjectItem,
    Description,
)


def _text(value: Any) -> Any:
    """Nulls become empty strings and numbers become text; pydantic checks the rest."""
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _text_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return [v for v in value if v is not None]
    return value


# AvatarExplorer (ItemsData.json)


class AvatarExplorerEntry(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str = Field(..., alias="Title")
    author_name: str = Field("", alias="AuthorName")
    item_memo: str = Field("", alias="ItemMemo")
    item_path: str = Field("", alias="ItemPath")
    image_path: str = Field("", alias="ImagePath")
    material_path: str = Field("", alias="MaterialPath")
    supported_avatar: List[str] = Field(default_factory=list, alias="SupportedAvatar")
    booth_id: int = Field(-1, alias="BoothId")
    type: str = Field("", alias="Type")
    custom_category: str = Field("", alias="CustomCategory")
    author_id: str = Field("", alias="AuthorId")
    thumbnail_url: str = Field("", alias="ThumbnailUrl")
    created_date: str = Field("", alias="CreatedDate")

    @field_validator(
        "title",
        "author_name",
        "item_memo",
        "item_path",
        "image_path",
        "material_path",
        "type",
        "custom_category",
        "author_id",
        "thumbnail_url",
        "created_date",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        return _text(v)

    @field_validator("supported_avatar", mode="before")
    @classmethod
    def _coerce_list(cls, v: Any) -> Any:
        return _text_list(v)

    @field_validator("booth_id", mode="before")
    @classmethod
    def _coerce_booth_id(cls, v: Any) -> Any:
        return -1 if v in (None, "") else v

    def to_record(self) -> AvatarToolItem:
        return AvatarToolItem(
            title=self.title,
            author_name=self.author_name,
            item_memo=self.item_memo,
            item_path=self.item_path,
            image_path=self.image_path,
            material_path=self.material_path,
            supported_avatar_paths=tuple(self.supported_avatar),
            booth_id=self.booth_id,
            item_type=AvatarToolType.from_code(self.type),
            custom_category=self.custom_category,
            author_id=self.author_id,
            thumbnail_url=self.thumbnail_url,
            created_date=self.created_date,
        )


# KonoAsset (metadata/*.json)


class KonoAssetDescription(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str
    creator: str = ""
    image_filename: str = Field("", alias="imageFilename")
    tags: List[str] = Field(default_factory=list)
    memo: Optional[str] = None
    booth_item_id: Optional[int] = Field(None, alias="boothItemId")
    dependencies: List[str] = Field(default_factory=list)
    created_at: int = Field(0, alias="createdAt")
    published_at: Optional[int] = Field(None, alias="publishedAt")

    @field_validator("creator", "image_filename", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        return _text(v)

    @field_validator("tags", "dependencies", mode="before")
    @classmethod
    def _coerce_list(cls, v: Any) -> Any:
        return _text_list(v)

    @field_validator("created_at", mode="before")
    @classmethod
    def _coerce_created_at(cls, v: Any) -> Any:
        return 0 if v is None else v

    def to_description(self) -> Description:
        return Description(
            name=self.name,
            creator=self.creator,
            image_filename=self.image_filename,
            tags=tuple(self.tags),
            memo=self.memo,
            booth_item_id=self.booth_item_id,
            dependencies=tuple(self.dependencies),
            created_at=self.created_at,
            published_at=self.published_at,
        )


class KonoAssetAvatarEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    description: KonoAssetDescription

    def to_record(self) -> CuratedAvatarItem:
        return CuratedAvatarItem(
            id=self.id, description=self.description.to_description()
        )


class KonoAssetWearableEntry(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    description: KonoAssetDescription
    category: str = ""
    supported_avatars: List[str] = Field(default_factory=list, alias="supportedAvatars")

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        return _text(v)

    @field_validator("supported_avatars", mode="before")
    @classmethod
    def _coerce_list(cls, v: Any) -> Any:
        return _text_list(v)

    def to_record(self) -> CuratedWearableItem:
        return CuratedWearableItem(
            id=self.id,
            description=self.description.to_description(),
            category=self.category,
            supported_avatars=tuple(self.supported_avatars),
        )


class KonoAssetWorldObjectEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    description: KonoAssetDescription
    category: str = ""

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        return _text(v)

    def to_record(self) -> CuratedWorldObjectItem:
        return CuratedWorldObjectItem(
            id=self.id,
            description=self.description.to_description(),
            category=self.category,
        )
