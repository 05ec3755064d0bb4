"""
Interactive browsing state over a CatalogService.

Tracks the active view, the search criteria typed into each view's tab, the
sort method and the current page. Any change that alters the result set
returns the session to the first page.
"""

import logging
from typing import Dict, Optional, Union

from .catalog_service import CatalogService, ViewPage
from .models import CatalogView, SortMethod
from .pagination import DEFAULT_PAGE_SIZE, PaginationState
from .search import SearchCriteria

logger = logging.getLogger(__name__)


class BrowserSession:
    """Browsing state of one user."""

    def __init__(
        self,
        catalog: CatalogService,
        view: Union[CatalogView, str] = CatalogView.AVATARS,
        sort_method: Union[SortMethod, str] = SortMethod.CREATED_DATE_DESC,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.catalog = catalog
        self._view = CatalogView.from_name(view)
        self._sort_method = SortMethod.from_name(sort_method)
        self.pagination = PaginationState(page_size=page_size)
        # Criteria are kept per view so switching tabs restores what was typed
        self._criteria: Dict[CatalogView, SearchCriteria] = {
            v: SearchCriteria() for v in CatalogView
        }

    @classmethod
    def from_config(cls, catalog: CatalogService, config) -> "BrowserSession":
        return cls(
            catalog,
            view=config.browser.default_view,
            sort_method=config.browser.default_sort,
            page_size=config.browser.page_size,
        )

    @property
    def view(self) -> CatalogView:
        return self._view

    @property
    def sort_method(self) -> SortMethod:
        return self._sort_method

    @property
    def criteria(self) -> SearchCriteria:
        return self._criteria[self._view]

    @property
    def page_index(self) -> int:
        return self.pagination.current_page

    @property
    def page_size(self) -> int:
        return self.pagination.page_size

    def criteria_for(self, view: Union[CatalogView, str]) -> SearchCriteria:
        return self._criteria[CatalogView.from_name(view)]

    # State changes

    def set_view(self, view: Union[CatalogView, str]) -> None:
        view = CatalogView.from_name(view)
        if view != self._view:
            self._view = view
            self.pagination.reset()

    def set_criteria(self, criteria: Optional[SearchCriteria]) -> None:
        """Replace the criteria of the active view."""
        self._criteria[self._view] = criteria or SearchCriteria()
        self.pagination.reset()

    def update_criteria(self, **changes) -> SearchCriteria:
        """Change some fields of the active view's criteria."""
        self.set_criteria(self.criteria.updated(**changes))
        return self.criteria

    def clear_criteria(self) -> None:
        self.set_criteria(SearchCriteria())

    def set_sort_method(self, sort_method: Union[SortMethod, str]) -> None:
        self._sort_method = SortMethod.from_name(sort_method)
        self.pagination.reset()

    def set_page_size(self, page_size: int) -> None:
        self.pagination.set_page_size(page_size)

    # Navigation

    def current_page(self) -> ViewPage:
        """Query the catalog for the page the session is on."""
        return self.catalog.get_view(
            self._view,
            self.criteria,
            self._sort_method,
            self.pagination.current_page,
            self.pagination.page_size,
        )

    def refresh(self) -> ViewPage:
        """Re-run the current query, e.g. after a reload.

        A reload can shrink the result; the page is clamped to the last one.
        """
        page = self.current_page()
        if self.pagination.current_page >= page.total_pages:
            self.pagination.go_to(page.total_pages - 1, page.total_pages)
            page = self.current_page()
        return page

    def next_page(self) -> bool:
        total = self.current_page().total_pages
        moved = self.pagination.next_page(total)
        if not moved:
            logger.debug(f"Already on the last page ({total})")
        return moved

    def previous_page(self) -> bool:
        return self.pagination.previous_page()

    def go_to_page(self, page_index: int) -> bool:
        """Jump to a 0-based page; False when out of range."""
        return self.pagination.go_to(page_index, self.current_page().total_pages)
