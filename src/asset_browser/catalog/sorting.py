"""
Catalog ordering.

All orderings are stable: records with equal keys keep their input order, so
repeated queries over an unchanged catalog page identically.
"""

from typing import Any, Callable, Dict, Iterable, List

from .models import AssetRecord, SortMethod


def _created_key(record: AssetRecord) -> int:
    return record.created_at_epoch_millis or 0


def _title_key(record: AssetRecord) -> str:
    return record.title or ""


def _author_key(record: AssetRecord) -> str:
    return record.author or ""


_SORT_KEYS: Dict[SortMethod, Callable[[AssetRecord], Any]] = {
    SortMethod.CREATED_DATE_ASC: _created_key,
    SortMethod.CREATED_DATE_DESC: _created_key,
    SortMethod.TITLE_ASC: _title_key,
    SortMethod.TITLE_DESC: _title_key,
    SortMethod.AUTHOR_ASC: _author_key,
    SortMethod.AUTHOR_DESC: _author_key,
}


def sort_records(
    records: Iterable[AssetRecord], method: SortMethod
) -> List[AssetRecord]:
    """Return a new list ordered by ``method``.

    Titles and authors compare case-sensitively, as stored. Records without a
    creation date sort as epoch 0.
    """
    method = SortMethod.from_name(method)
    # sorted() keeps equal elements in input order even with reverse=True
    return sorted(records, key=_SORT_KEYS[method], reverse=method.descending)
