"""
Unified catalog of AvatarExplorer and KonoAsset assets.

Provides view classification, keyword search, sorting and pagination over the
records of both tools.
"""

from .browser_session import BrowserSession
from .catalog_service import CatalogService, CatalogSnapshot, CatalogState, ViewPage
from .classification import CatalogPartition, Classifier
from .lookup import AvatarLookup
from .search import SearchCriteria, SearchService
from .sorting import sort_records

__all__ = [
    "AvatarLookup",
    "BrowserSession",
    "CatalogPartition",
    "CatalogService",
    "CatalogSnapshot",
    "CatalogState",
    "Classifier",
    "SearchCriteria",
    "SearchService",
    "ViewPage",
    "sort_records",
]
