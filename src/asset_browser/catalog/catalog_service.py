"""
Catalog service for browsing both asset databases.

Holds the loaded records as one immutable snapshot and answers view queries
(classify, search, sort, paginate) against it.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from ..core.exceptions import ClassificationError
from ..core.logging import (
    ProcessingTimer,
    generate_request_id,
    get_logger,
    set_request_context,
)
from .classification import CatalogPartition, Classifier
from .loaders import LoadReport, load_avatar_tool_database, load_curated_database
from .lookup import AvatarLookup
from .models import (
    AssetRecord,
    AvatarToolItem,
    AvatarToolRecordSet,
    CatalogView,
    CuratedRecordSet,
    SortMethod,
)
from .pagination import DEFAULT_PAGE_SIZE, normalize_page_size, paginate, total_pages
from .search import SearchCriteria, SearchService
from .sorting import sort_records

structured_logger = get_logger(__name__)


class CatalogState(Enum):
    EMPTY = "empty"
    LOADED = "loaded"


@dataclass(frozen=True)
class CatalogSnapshot:
    """Everything one load produced. Never mutated after construction."""

    avatar_tool_records: Tuple[AvatarToolItem, ...] = ()
    curated_records: Tuple[AssetRecord, ...] = ()
    lookup: AvatarLookup = field(default_factory=AvatarLookup.empty)
    state: CatalogState = CatalogState.EMPTY
    catalog_id: Optional[str] = None
    report: Optional[LoadReport] = None

    def all_records(self) -> Tuple[AssetRecord, ...]:
        """AvatarExplorer records first, then KonoAsset records."""
        return self.avatar_tool_records + self.curated_records


_EMPTY_SNAPSHOT = CatalogSnapshot()


@dataclass(frozen=True)
class ViewPage:
    """One page of a view query."""

    view: CatalogView
    records: Tuple[AssetRecord, ...]
    total_count: int
    total_pages: int
    page_index: int
    page_size: int

    @property
    def is_empty(self) -> bool:
        return not self.records


class CatalogService:
    """Catalog of AvatarExplorer and KonoAsset records."""

    def __init__(self, classifier: Optional[Classifier] = None) -> None:
        self.classifier = classifier or Classifier()
        self._snapshot: CatalogSnapshot = _EMPTY_SNAPSHOT

    @classmethod
    def from_config(cls, config) -> "CatalogService":
        """Build a service using the classification settings of a Config."""
        return cls(Classifier(config.classification.category_overrides))

    # Lifecycle

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self._snapshot

    @property
    def state(self) -> CatalogState:
        return self._snapshot.state

    @property
    def is_loaded(self) -> bool:
        return self._snapshot.state == CatalogState.LOADED

    def load(
        self,
        avatar_tool: Optional[AvatarToolRecordSet] = None,
        curated: Optional[CuratedRecordSet] = None,
        report: Optional[LoadReport] = None,
    ) -> CatalogSnapshot:
        """
        Replace the catalog contents with the given record sets.

        Either source may be absent; with both absent the catalog becomes
        empty. The new snapshot is fully built and classified before it
        replaces the current one, so a failed load leaves the catalog as it
        was.

        Raises:
            ClassificationError: if a record has no classification rule
        """
        if avatar_tool is None and (curated is None or curated.is_empty):
            self.clear()
            return self._snapshot

        avatar_tool_records = tuple(avatar_tool) if avatar_tool is not None else ()
        curated_records = curated.all_records() if curated is not None else ()
        catalog_id = generate_request_id()
        set_request_context(catalog_id=catalog_id)

        with ProcessingTimer(structured_logger, "catalog_load", "CatalogService"):
            snapshot = CatalogSnapshot(
                avatar_tool_records=avatar_tool_records,
                curated_records=curated_records,
                lookup=AvatarLookup.build(avatar_tool_records),
                state=CatalogState.LOADED,
                catalog_id=catalog_id,
                report=report,
            )
            # Fails before the swap if any record is unclassifiable
            try:
                self.classifier.classify(snapshot.all_records())
            except ClassificationError as e:
                structured_logger.error(
                    "Catalog load rejected", error_code=e.error_code, **e.details
                )
                raise

        self._snapshot = snapshot
        structured_logger.log_catalog_load(
            avatar_tool_count=len(avatar_tool_records),
            curated_count=len(curated_records),
        )
        if report is not None and report.total_skipped:
            structured_logger.warning(
                "Catalog loaded with skipped entries", skipped=report.total_skipped
            )
        return snapshot

    def load_from_directories(
        self,
        avatar_tool_dir: Optional[Union[str, Path]] = None,
        curated_dir: Optional[Union[str, Path]] = None,
    ) -> LoadReport:
        """Read the source databases from disk and load them.

        Raises:
            SourceLoadError: if a given directory is not a valid database
        """
        report = LoadReport()
        avatar_tool = (
            load_avatar_tool_database(avatar_tool_dir, report)
            if avatar_tool_dir is not None
            else None
        )
        curated = (
            load_curated_database(curated_dir, report)
            if curated_dir is not None
            else None
        )
        self.load(avatar_tool, curated, report)
        return report

    def load_from_config(self, config) -> LoadReport:
        return self.load_from_directories(
            config.sources.avatar_tool_dir, config.sources.curated_dir
        )

    def clear(self) -> None:
        """Drop both sources."""
        if self._snapshot.state != CatalogState.EMPTY:
            structured_logger.info("Catalog cleared")
        self._snapshot = _EMPTY_SNAPSHOT

    def all_records(self) -> Tuple[AssetRecord, ...]:
        return self._snapshot.all_records()

    # Queries

    def get_view(
        self,
        view: Union[CatalogView, str],
        criteria: Optional[SearchCriteria] = None,
        sort_method: Union[SortMethod, str] = SortMethod.CREATED_DATE_DESC,
        page_index: int = 0,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> ViewPage:
        """
        One page of a view after filtering and sorting.

        Args:
            view: Which catalog view to query
            criteria: Search criteria; None matches every record
            sort_method: Ordering applied before paging
            page_index: 0-based page; out-of-range pages are empty
            page_size: Records per page; values below 1 are treated as 1

        Returns:
            ViewPage with the page's records and the view's totals
        """
        view = CatalogView.from_name(view)
        sort_method = SortMethod.from_name(sort_method)
        page_size = normalize_page_size(page_size)
        set_request_context(request_id=generate_request_id())
        # Read the reference once; a concurrent reload cannot mix snapshots
        snapshot = self._snapshot

        matched = self._filtered(snapshot, view, criteria)
        ordered = sort_records(matched, sort_method)
        page = paginate(ordered, page_index, page_size)

        structured_logger.debug(
            "View query",
            view=view.value,
            page_index=page_index,
            returned=len(page),
            total=len(ordered),
        )
        return ViewPage(
            view=view,
            records=tuple(page),
            total_count=len(ordered),
            total_pages=total_pages(len(ordered), page_size),
            page_index=page_index,
            page_size=page_size,
        )

    def view_counts(
        self, criteria: Optional[SearchCriteria] = None
    ) -> Dict[CatalogView, int]:
        """Number of matching records in each view."""
        snapshot = self._snapshot
        return {
            view: len(self._filtered(snapshot, view, criteria)) for view in CatalogView
        }

    def resolve_avatar_name(self, path: str) -> str:
        """Display name of the avatar at ``path``, or its last path segment."""
        return self._snapshot.lookup.resolve(path)

    def supported_avatar_names(self, record: AssetRecord) -> Tuple[str, ...]:
        return tuple(record.supported_avatar_names(self._snapshot.lookup))

    def _filtered(
        self,
        snapshot: CatalogSnapshot,
        view: CatalogView,
        criteria: Optional[SearchCriteria],
    ) -> List[AssetRecord]:
        partition: CatalogPartition = self.classifier.classify(snapshot.all_records())
        search = SearchService(snapshot.lookup)
        return search.filter(partition.for_view(view), criteria, view)
