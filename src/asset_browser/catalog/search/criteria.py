"""
Search criteria for catalog queries.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Tuple

# Fields of the advanced search, in display order
ADVANCED_FIELDS: Tuple[str, ...] = (
    "title",
    "author",
    "category",
    "supported_avatars",
    "tags",
    "memo",
)


def split_keywords(text: str) -> List[str]:
    """Split on any whitespace, full-width spaces included; drop empty tokens."""
    return (text or "").split()


@dataclass(frozen=True)
class SearchCriteria:
    """A basic free-text query plus optional per-field advanced terms.

    The advanced terms only apply while ``show_advanced`` is set, so the user
    can hide the advanced panel without losing what was typed into it.
    """

    query: str = ""
    show_advanced: bool = False
    title: str = ""
    author: str = ""
    category: str = ""
    supported_avatars: str = ""
    tags: str = ""
    memo: str = ""

    @classmethod
    def advanced(cls, query: str = "", **terms: str) -> "SearchCriteria":
        """Criteria with the advanced layer switched on."""
        unknown = set(terms) - set(ADVANCED_FIELDS)
        if unknown:
            raise ValueError(f"Unknown advanced search fields: {sorted(unknown)}")
        return cls(query=query, show_advanced=True, **terms)

    def keywords(self) -> List[str]:
        """Keywords of the basic query."""
        return split_keywords(self.query)

    def field_keywords(self, field_name: str) -> List[str]:
        """Keywords of one advanced field."""
        if field_name not in ADVANCED_FIELDS:
            raise ValueError(f"Unknown advanced search field: {field_name}")
        return split_keywords(getattr(self, field_name))

    def active_advanced_fields(self) -> Dict[str, List[str]]:
        """Advanced fields that constrain the result, with their keywords."""
        if not self.show_advanced:
            return {}
        active = {}
        for name in ADVANCED_FIELDS:
            words = self.field_keywords(name)
            if words:
                active[name] = words
        return active

    @property
    def is_empty(self) -> bool:
        """True when the criteria can't exclude any record."""
        return not self.keywords() and not self.active_advanced_fields()

    def updated(self, **changes: Any) -> "SearchCriteria":
        """Copy with some fields changed."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
