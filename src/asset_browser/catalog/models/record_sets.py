"""
Record sets handed to the catalog by the loaders.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from .records import (
    AssetRecord,
    AvatarToolItem,
    CuratedAvatarItem,
    CuratedWearableItem,
    CuratedWorldObjectItem,
)


@dataclass(frozen=True)
class AvatarToolRecordSet:
    """Ordered AvatarExplorer records of one load."""

    items: Tuple[AvatarToolItem, ...] = ()

    @classmethod
    def of(cls, items: Iterable[AvatarToolItem]) -> "AvatarToolRecordSet":
        return cls(items=tuple(items))

    def __iter__(self) -> Iterator[AvatarToolItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class CuratedRecordSet:
    """KonoAsset records of one load; each list may be independently absent."""

    avatars: Optional[Tuple[CuratedAvatarItem, ...]] = None
    wearables: Optional[Tuple[CuratedWearableItem, ...]] = None
    world_objects: Optional[Tuple[CuratedWorldObjectItem, ...]] = None

    @classmethod
    def of(
        cls,
        avatars: Optional[Iterable[CuratedAvatarItem]] = None,
        wearables: Optional[Iterable[CuratedWearableItem]] = None,
        world_objects: Optional[Iterable[CuratedWorldObjectItem]] = None,
    ) -> "CuratedRecordSet":
        return cls(
            avatars=tuple(avatars) if avatars is not None else None,
            wearables=tuple(wearables) if wearables is not None else None,
            world_objects=tuple(world_objects) if world_objects is not None else None,
        )

    @property
    def is_empty(self) -> bool:
        return (
            self.avatars is None
            and self.wearables is None
            and self.world_objects is None
        )

    def all_records(self) -> Tuple[AssetRecord, ...]:
        """Avatars, then wearables, then world objects."""
        records: Tuple[AssetRecord, ...] = ()
        for part in (self.avatars, self.wearables, self.world_objects):
            if part:
                records += part
        return records

    def __len__(self) -> int:
        return len(self.all_records())


__all__ = ["AvatarToolRecordSet", "CuratedRecordSet"]
