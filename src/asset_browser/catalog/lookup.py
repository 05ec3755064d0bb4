"""
Avatar cross-reference lookup.

AvatarExplorer items reference the avatars they support by the avatar's item
path. The lookup turns those paths into display titles; it is built once per
catalog load and is read-only afterwards.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterable, Iterator

from .models import AvatarToolItem, path_display_name

logger = logging.getLogger(__name__)


class AvatarLookup(Mapping):
    """Immutable ``item path -> title`` map with a last-segment fallback."""

    def __init__(self, titles_by_path: Dict[str, str]) -> None:
        self._titles = MappingProxyType(dict(titles_by_path))

    @classmethod
    def build(cls, items: Iterable[AvatarToolItem]) -> "AvatarLookup":
        """Index every AvatarExplorer item of a load by its item path.

        All items are indexed, not only avatars: the source tool resolves
        references against the whole database. The first item wins when two
        share a path.
        """
        titles: Dict[str, str] = {}
        duplicates = 0
        for item in items:
            if not item.item_path:
                continue
            if item.item_path in titles:
                duplicates += 1
                continue
            titles[item.item_path] = item.title

        if duplicates:
            logger.warning(
                f"{duplicates} AvatarExplorer items share an item path; "
                "kept the first of each"
            )
        return cls(titles)

    @classmethod
    def empty(cls) -> "AvatarLookup":
        return cls({})

    def __getitem__(self, path: str) -> str:
        return self._titles[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._titles)

    def __len__(self) -> int:
        return len(self._titles)

    def resolve(self, path: str) -> str:
        """Display name for an avatar path, never failing."""
        title = self._titles.get(path)
        if title:
            return title
        return path_display_name(path)
