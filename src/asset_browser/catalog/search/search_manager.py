"""
Search operations for catalog browsing.

Handles basic (any-field) and advanced (per-field) keyword search. Matching is
a case-insensitive substring test; there is no scoring.
"""

import logging
from typing import Iterable, List, Mapping, Optional, Sequence

from ..models import AssetRecord, CatalogView
from .criteria import SearchCriteria

logger = logging.getLogger(__name__)


def _contains(haystack: Optional[str], keyword: str) -> bool:
    return bool(haystack) and keyword.casefold() in haystack.casefold()


def _all_in(value: str, keywords: Sequence[str]) -> bool:
    """Every keyword occurs in the value; an empty value never matches."""
    if not value:
        return False
    return all(_contains(value, keyword) for keyword in keywords)


def _all_in_any(values: Sequence[str], keywords: Sequence[str]) -> bool:
    """Every keyword occurs in at least one value; no values never matches."""
    if not values:
        return False
    return all(
        any(_contains(value, keyword) for value in values) for keyword in keywords
    )


class SearchService:
    """Evaluates search criteria against catalog records."""

    def __init__(self, avatar_lookup: Optional[Mapping[str, str]] = None) -> None:
        # Path -> title table of the current load
        self.avatar_lookup: Mapping[str, str] = avatar_lookup or {}

    def matches(
        self,
        record: AssetRecord,
        criteria: Optional[SearchCriteria],
        active_view: CatalogView,
    ) -> bool:
        """Check if a record satisfies both the basic and advanced query."""
        if criteria is None:
            return True

        # Basic query
        keywords = criteria.keywords()
        if keywords and not self._matches_basic(record, keywords, active_view):
            return False

        # Advanced query
        if criteria.show_advanced and not self._matches_advanced(record, criteria):
            return False

        return True

    def filter(
        self,
        records: Iterable[AssetRecord],
        criteria: Optional[SearchCriteria],
        active_view: CatalogView,
    ) -> List[AssetRecord]:
        """Records that match, in input order."""
        records = list(records)
        if criteria is None or criteria.is_empty:
            return records

        matched = [r for r in records if self.matches(r, criteria, active_view)]
        logger.debug(
            f"Search in {active_view.value}: {len(matched)} of {len(records)} match"
        )
        return matched

    def _matches_basic(
        self, record: AssetRecord, keywords: Sequence[str], active_view: CatalogView
    ) -> bool:
        """Every keyword must hit at least one searchable field."""
        for keyword in keywords:
            if not self._keyword_hits_any_field(record, keyword, active_view):
                return False
        return True

    def _keyword_hits_any_field(
        self, record: AssetRecord, keyword: str, active_view: CatalogView
    ) -> bool:
        if _contains(record.title, keyword) or _contains(record.author, keyword):
            return True

        # Avatars have no user-facing category
        if active_view != CatalogView.AVATARS and _contains(
            record.category_name, keyword
        ):
            return True

        # Only items list the avatars they support
        if active_view == CatalogView.ITEMS and any(
            _contains(name, keyword)
            for name in record.supported_avatar_names(self.avatar_lookup)
        ):
            return True

        if any(_contains(tag, keyword) for tag in record.tags):
            return True

        return _contains(record.memo, keyword)

    def _matches_advanced(self, record: AssetRecord, criteria: SearchCriteria) -> bool:
        """Each filled-in field must contain all of its own keywords."""
        for field_name, keywords in criteria.active_advanced_fields().items():
            if not self._field_matches(record, field_name, keywords):
                return False
        return True

    def _field_matches(
        self, record: AssetRecord, field_name: str, keywords: Sequence[str]
    ) -> bool:
        if field_name == "title":
            return _all_in(record.title, keywords)
        if field_name == "author":
            return _all_in(record.author, keywords)
        if field_name == "category":
            return _all_in(record.category_name, keywords)
        if field_name == "supported_avatars":
            names = record.supported_avatar_names(self.avatar_lookup)
            return _all_in_any(names, keywords)
        if field_name == "tags":
            return _all_in_any(record.tags, keywords)
        if field_name == "memo":
            return _all_in(record.memo, keywords)

        raise ValueError(f"Unknown advanced search field: {field_name}")
