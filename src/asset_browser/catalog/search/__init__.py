"""
Search operations for catalog browsing.

Provides basic and advanced keyword search over catalog records.
"""

from .criteria import ADVANCED_FIELDS, SearchCriteria, split_keywords
from .search_manager import SearchService

__all__ = ["ADVANCED_FIELDS", "SearchCriteria", "SearchService", "split_keywords"]
